"""Uniform random numbers over inclusive ranges."""

from __future__ import annotations

import random


def range_float(start: float, end: float) -> float:
    """A uniformly distributed float between ``start`` and ``end``."""
    return random.uniform(start, end)


def range_int(start: int, end: int) -> int:
    """A uniformly distributed integer in ``start..end``, both inclusive."""
    return random.randint(start, end)