"""32-bit bit manipulation helpers and a simulated memory-mapped register bank."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from enum import IntFlag
from typing import Iterator

MASK32 = 0xFFFFFFFF
WORD_BITS = 32

# Register map of the simulated device (byte offsets into the bank).
REG_STATUS_OFF = 0x00
REG_CTRL_OFF = 0x04

CTRL_ENABLE = 1 << 0
CTRL_IRQ_EN = 1 << 1
STATUS_READY = 1 << 0


def _check_bit(bit: int) -> None:
    if not 0 <= bit < WORD_BITS:
        raise ValueError(f"bit position {bit} outside 0..{WORD_BITS - 1}")


def _check_width(width: int) -> None:
    if not 0 <= width <= WORD_BITS:
        raise ValueError(f"width {width} outside 0..{WORD_BITS}")


def bin32(value: int) -> str:
    """Render the low 32 bits of ``value`` as a 32-character binary string."""
    return format(value & MASK32, "032b")


def set_bit(value: int, bit: int) -> int:
    """Return ``value`` with ``bit`` set."""
    _check_bit(bit)
    return (value | (1 << bit)) & MASK32


def clear_bit(value: int, bit: int) -> int:
    """Return ``value`` with ``bit`` cleared."""
    _check_bit(bit)
    return value & ~(1 << bit) & MASK32


def toggle_bit(value: int, bit: int) -> int:
    """Return ``value`` with ``bit`` inverted."""
    _check_bit(bit)
    return (value ^ (1 << bit)) & MASK32


def test_bit(value: int, bit: int) -> bool:
    """Tell whether ``bit`` is set in ``value``."""
    _check_bit(bit)
    return (value >> bit) & 1 == 1


def low_mask(width: int) -> int:
    """Mask with the lowest ``width`` bits set."""
    _check_width(width)
    return (1 << width) - 1


def lowest_set_bit(value: int) -> int:
    """Isolate the lowest set bit (``x & -x``); zero for zero."""
    value &= MASK32
    return value & (-value) & MASK32


def clear_lowest_set_bit(value: int) -> int:
    """Clear the lowest set bit (``x & (x - 1)``); zero stays zero."""
    value &= MASK32
    return value & (value - 1) & MASK32


def popcount(value: int) -> int:
    """Number of set bits in the low 32 bits of ``value``."""
    value &= MASK32
    count = 0
    while value:
        value &= value - 1
        count += 1
    return count


def parity(value: int) -> int:
    """1 when the number of set bits is odd, 0 when it is even."""
    return popcount(value) & 1


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers with the XOR trick and return them as ``(b, a)``."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} channel {value} outside 0..255")


def pack_argb(a: int, r: int, g: int, b: int) -> int:
    """Pack four 8-bit channels into one 32-bit ARGB word."""
    for name, channel in (("a", a), ("r", r), ("g", g), ("b", b)):
        _check_byte(name, channel)
    return (a << 24) | (r << 16) | (g << 8) | b


def unpack_argb(argb: int) -> tuple[int, int, int, int]:
    """Split a 32-bit ARGB word into its ``(a, r, g, b)`` channels."""
    argb &= MASK32
    return (argb >> 24) & 0xFF, (argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF


def _field_mask(shift: int, width: int) -> int:
    _check_width(width)
    if shift < 0 or shift + width > WORD_BITS:
        raise ValueError(f"field of width {width} at shift {shift} does not fit 32 bits")
    return low_mask(width) << shift


def write_field(reg: int, value: int, shift: int, width: int) -> int:
    """Return ``reg`` with the field ``[shift, shift+width)`` replaced by ``value``.

    The value is truncated to ``width`` bits; the other bits are kept.
    """
    mask = _field_mask(shift, width)
    return ((reg & ~mask) | ((value & low_mask(width)) << shift)) & MASK32


def read_field(reg: int, shift: int, width: int) -> int:
    """Extract the field ``[shift, shift+width)`` of ``reg``."""
    _field_mask(shift, width)
    return (reg >> shift) & low_mask(width)


class Permission(IntFlag):
    """Access-rights flags stored as bits of one word."""

    NONE = 0
    READ = 1 << 0
    WRITE = 1 << 1
    EXEC = 1 << 2


class RegisterBank:
    """A block of 32-bit registers addressed by 4-byte aligned byte offsets.

    Read-modify-write operations run inside a critical section, so they cannot
    interleave with other updates of the bank.
    """

    def __init__(self, count: int = 2) -> None:
        if count <= 0:
            raise ValueError("a register bank needs at least one register")
        self._regs = [0] * count
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._regs)

    def _index(self, offset: int) -> int:
        if offset % 4:
            raise ValueError(f"offset {offset:#x} is not 4-byte aligned")
        index = offset // 4
        if not 0 <= index < len(self._regs):
            raise IndexError(f"offset {offset:#x} outside the register bank")
        return index

    @contextmanager
    def critical_section(self) -> Iterator[None]:
        """Hold off every other access to the bank while the block runs."""
        with self._lock:
            yield

    def read(self, offset: int) -> int:
        """Read the register at ``offset``."""
        index = self._index(offset)
        with self._lock:
            return self._regs[index]

    def write(self, offset: int, value: int) -> None:
        """Write the low 32 bits of ``value`` to the register at ``offset``."""
        index = self._index(offset)
        with self._lock:
            self._regs[index] = value & MASK32

    def set_bits(self, offset: int, mask: int) -> None:
        """Set the bits of ``mask`` in the register (``reg |= mask``)."""
        with self._lock:
            self.write(offset, self.read(offset) | mask)

    def clear_bits(self, offset: int, mask: int) -> None:
        """Clear the bits of ``mask`` in the register (``reg &= ~mask``)."""
        with self._lock:
            self.write(offset, self.read(offset) & ~mask)

    def write_masked(self, offset: int, mask: int, value: int) -> None:
        """Change only the bits selected by ``mask`` to those of ``value``."""
        with self._lock:
            old = self.read(offset)
            self.write(offset, (old & ~mask) | (value & mask))


class MmioDevice:
    """A device with a STATUS and a CTRL register in a register bank."""

    def __init__(self, registers: RegisterBank | None = None) -> None:
        self.registers = registers if registers is not None else RegisterBank(2)
        # Both registers must be addressable.
        self.registers.read(REG_CTRL_OFF)

    def enable(self) -> None:
        """Turn the device and its interrupt on."""
        with self.registers.critical_section():
            self.registers.set_bits(REG_CTRL_OFF, CTRL_ENABLE | CTRL_IRQ_EN)

    def is_ready(self) -> bool:
        """Tell whether the device reports READY in its status register."""
        return bool(self.registers.read(REG_STATUS_OFF) & STATUS_READY)