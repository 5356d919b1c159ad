"""Small building blocks for systems work: bit helpers, simulated registers and boards, ring buffers, timers, caches, schedulers, synchronisation primitives and classic data structures."""

__version__ = "0.1.0"