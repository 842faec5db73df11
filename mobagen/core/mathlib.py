"""Small numeric helpers shared by the engine."""

from __future__ import annotations

import math


def normalize(value: float, start: float, end: float) -> float:
    """Wrap ``value`` into the range [start, end).

    The range is treated as cyclic: going below ``start`` re-enters from
    ``end`` and going past ``end`` re-enters from ``start``.
    """
    width = end - start
    offset = value - start
    return (offset - math.floor(offset / width) * width) + start