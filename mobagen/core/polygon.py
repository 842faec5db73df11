"""Outline shapes drawn as closed polylines."""

from __future__ import annotations

from collections.abc import Iterable

import pygame

from mobagen.core.colors import Color32
from mobagen.core.geometry import Transform
from mobagen.core.vector2 import Vector2


class Polygon:
    """A closed shape described by its points in local space."""

    def __init__(self, points: Iterable[Vector2] = ()) -> None:
        self.points: list[Vector2] = list(points)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(points={self.points!r})"

    def drawable_points(self, transform: Transform) -> list[Vector2]:
        """The points scaled, rotated and moved into place by ``transform``."""
        angle = transform.rotation.angle_degree()
        return [
            Vector2(transform.scale.x * p.x, transform.scale.y * p.y).rotate(angle)
            + transform.position
            for p in self.points
        ]

    def draw(self, surface: pygame.Surface, transform: Transform, color: Color32) -> None:
        """Draw the closed outline onto ``surface``."""
        points = self.drawable_points(transform)
        for start, end in zip(points, points[1:] + points[:1]):
            self.draw_line(surface, start, end, color)

    def draw_at(
        self,
        surface: pygame.Surface,
        position: Vector2,
        scale: Vector2,
        rotation: Vector2,
        color: Color32,
    ) -> None:
        """Draw the outline with a transform built from its parts."""
        self.draw(surface, Transform(position, scale, rotation), color)

    @staticmethod
    def draw_line(
        surface: pygame.Surface, start: Vector2, end: Vector2, color: Color32
    ) -> None:
        """Draw an opaque line between two points, truncated to pixels."""
        pygame.draw.line(
            surface,
            (color.r, color.g, color.b, 255),
            (int(start.x), int(start.y)),
            (int(end.x), int(end.y)),
        )


class Circle(Polygon):
    """A regular polygon with ``sample`` points on the unit circle."""

    def __init__(self, sample: int) -> None:
        super().__init__(Vector2.up().rotate(360.0 * i / sample) for i in range(sample))


class Square(Polygon):
    """A unit-radius square standing on one side."""

    def __init__(self) -> None:
        super().__init__(Vector2.up().rotate(angle) for angle in (45, 135, 225, 315))


class Hexagon(Polygon):
    """A unit-radius hexagon with a vertex pointing up."""

    def __init__(self) -> None:
        super().__init__(Vector2.up().rotate(angle) for angle in range(0, 360, 60))