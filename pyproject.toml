[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coredrills"
version = "0.1.0"
description = "Small, tested building blocks for systems work: bit tricks, ring buffers, timers, caches, schedulers and classic data structures."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bit-manipulation",
    "ring-buffer",
    "lru-cache",
    "fenwick-tree",
    "merkle-tree",
    "snowflake",
    "rate-limiter",
    "semaphore",
    "struct-layout",
    "embedded",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["coredrills"]

[tool.pytest.ini_options]
addopts = "-ra"
