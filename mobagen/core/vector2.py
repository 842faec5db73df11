"""Two- and three-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from mobagen.core.rng import range_float

_DEG2RAD = (math.pi * 2) / 360
_EPSILON = 1.0e-6


@dataclass(eq=False)
class Vector2:
    """A 2D vector in screen space, where negative y points up.

    Two vectors compare equal when their squared distance is below 1e-6.
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def up(cls) -> Vector2:
        return cls(0.0, -1.0)

    @classmethod
    def down(cls) -> Vector2:
        return cls(0.0, 1.0)

    @classmethod
    def left(cls) -> Vector2:
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls) -> Vector2:
        return cls(1.0, 0.0)

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def identity(cls) -> Vector2:
        return cls(1.0, 1.0)

    @classmethod
    def from_radian(cls, radian: float) -> Vector2:
        """The unit vector (cos, sin) of an angle in radians."""
        return cls(math.cos(radian), math.sin(radian))

    @classmethod
    def from_degree(cls, degree: float) -> Vector2:
        """The unit vector (cos, sin) of an angle in degrees."""
        return cls.from_radian(degree * (math.pi / 180.0))

    @classmethod
    def random(cls, start: float, end: float) -> Vector2:
        """A vector whose components are each drawn from start..end."""
        return cls(range_float(start, end), range_float(start, end))

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __pos__(self) -> Vector2:
        return Vector2(self.x, self.y)

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self - other).sqr_magnitude() < _EPSILON

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self - other).sqr_magnitude() >= _EPSILON

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("Out of Vector2 range")

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        else:
            raise IndexError("Out of Vector2 range")

    def __iter__(self):
        yield self.x
        yield self.y

    def rotate(self, degrees: float) -> Vector2:
        """This vector rotated by ``degrees`` (clockwise on screen)."""
        sin = math.sin(degrees * _DEG2RAD)
        cos = math.cos(degrees * _DEG2RAD)
        return Vector2(cos * self.x - sin * self.y, sin * self.x + cos * self.y)

    def rotate_towards(self, up: Vector2) -> Vector2:
        """Rotate by the angle that ``up`` makes with the up direction."""
        return self.rotate(up.angle_degree())

    def angle_radian(self) -> float:
        """Angle from the up direction, in radians."""
        return math.atan2(self.x, -self.y)

    def angle_degree(self) -> float:
        """Angle from the up direction, in degrees."""
        return self.angle_radian() * 180.0 / math.pi

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def normalized(self) -> Vector2:
        """A unit vector in the same direction, or a copy of a zero vector."""
        length = self.magnitude()
        if length > 0.0:
            return Vector2(self.x, self.y) / length
        return Vector2(self.x, self.y)

    @staticmethod
    def distance(a: Vector2, b: Vector2) -> float:
        return (a - b).magnitude()

    @staticmethod
    def squared_distance(a: Vector2, b: Vector2) -> float:
        return (a.x - b.x) * (a.x - b.x) + (a.y - b.y) * (a.y - b.y)


@dataclass
class Vector3:
    """A plain three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0