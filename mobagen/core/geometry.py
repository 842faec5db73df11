"""Integer grid points and object transforms."""

from __future__ import annotations

from dataclasses import dataclass, field

from mobagen.core.vector2 import Vector2


@dataclass(frozen=True)
class Point2D:
    """An integer point on a grid."""

    x: int
    y: int


@dataclass
class Transform:
    """Position, scale and facing of an object.

    ``rotation`` is the vector the object's up side points along.
    """

    position: Vector2 = field(default_factory=Vector2.zero)
    scale: Vector2 = field(default_factory=Vector2.identity)
    rotation: Vector2 = field(default_factory=Vector2.zero)