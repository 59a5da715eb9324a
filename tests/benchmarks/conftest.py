"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible values. No random values.
Three shapes stress the two truncation policies:
- very wide flat objects (fan-out limit, work bound)
- wide-and-deep nested arrays (global node cap)
- very deep single-branch objects (depth cutoff)
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_wide_object(num_keys: int) -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"key_{i}": f"value_{i}" for i in range(num_keys)}


def generate_grid(width: int, depth: int) -> Any:
    """Generate ``depth`` levels of arrays, each holding ``width`` children."""
    value: Any = list(range(width))
    for _ in range(depth - 1):
        value = [value] * width
    return value


def generate_chain(levels: int) -> dict[str, Any]:
    """Generate {"n": {"n": ... {"n": 0}}} with ``levels`` objects."""
    value: Any = 0
    for _ in range(levels):
        value = {"n": value}
    return value


@pytest.fixture(scope="session")
def wide_object() -> dict[str, Any]:
    return generate_wide_object(200_000)


@pytest.fixture(scope="session")
def grid() -> Any:
    return generate_grid(width=50, depth=4)


@pytest.fixture(scope="session")
def chain() -> dict[str, Any]:
    return generate_chain(900)
