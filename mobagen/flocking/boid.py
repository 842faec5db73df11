"""Moving particles and the boids that steer them by flocking rules."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pygame

from mobagen.core.colors import PURPLE, Color32
from mobagen.core.engine import Engine
from mobagen.core.gameobject import GameObject
from mobagen.core.polygon import Circle, Polygon
from mobagen.core.vector2 import Vector2
from mobagen.flocking.rules import FlockingRule


class Particle(GameObject):
    """A point mass with capped acceleration and speed, drawn as a small ship."""

    def __init__(
        self, engine: Engine, size: float = 4.0, color: Color32 | None = None
    ) -> None:
        super().__init__(engine)
        self.size = size
        self.color = color if color is not None else Color32.random_color(31, 255)
        self.has_constant_speed = False
        self.speed = 120.0
        self.max_acceleration = 10.0
        self.draw_acceleration = False
        self.acceleration = Vector2.zero()
        self.previous_acceleration = Vector2.zero()
        self._velocity = Vector2.zero()
        self.polygon = Polygon(
            [Vector2(0, -2), Vector2(1, 1), Vector2(0, 0), Vector2(-1, 1)]
        )
        self.transform.scale = Vector2(2, 2)

    @property
    def position(self) -> Vector2:
        return self.transform.position

    @position.setter
    def position(self, value: Vector2) -> None:
        self.transform.position = value

    @property
    def velocity(self) -> Vector2:
        return self._velocity

    @velocity.setter
    def velocity(self, value: Vector2) -> None:
        self.set_velocity(value)

    def set_velocity(self, velocity: Vector2) -> None:
        """Set the velocity and turn the particle to face along it."""
        self._velocity = velocity
        self.transform.rotation = velocity.normalized()

    def apply_force(self, force: Vector2) -> None:
        """Add ``force`` to the acceleration used on the next update."""
        self.acceleration = self.acceleration + force

    def update(self, delta_time: float) -> None:
        if self.acceleration.magnitude() > self.max_acceleration:
            self.acceleration = self.acceleration.normalized() * self.max_acceleration

        self.set_velocity(self._velocity + self.acceleration)
        self.previous_acceleration = self.acceleration
        self.acceleration = Vector2.zero()

        if self.has_constant_speed or self._velocity.magnitude() > self.speed:
            self.set_velocity(self._velocity.normalized() * self.speed)

        self.transform.position = self.transform.position + self._velocity * delta_time

    def on_draw(self, surface: pygame.Surface) -> None:
        self.polygon.draw(surface, self.transform, self.color)
        if self.draw_acceleration:
            start = self.position
            Polygon.draw_line(
                surface, start, start + self.previous_acceleration * 2.0, PURPLE
            )


class Boid(Particle):
    """A particle steered by the flocking rules of its world.

    ``world`` must expose the list of all boids as ``boids``.
    """

    def __init__(self, engine: Engine, world: Any) -> None:
        super().__init__(engine)
        self.world = world
        self.detection_radius = 100.0
        self.rules: list[FlockingRule] = []
        self.circle = Circle(12)
        self.draw_debug_radius = True
        self.draw_debug_rules = True
        self.circle_color = PURPLE

    def set_flocking_rules(self, rules: Iterable[FlockingRule]) -> None:
        """Replace this boid's rules with copies of ``rules``."""
        self.rules = [rule.clone() for rule in rules]

    def compute_neighborhood(self) -> list[Boid]:
        """Other boids within the detection radius."""
        limit = self.detection_radius * self.detection_radius
        position = self.position
        return [
            boid
            for boid in self.world.boids
            if boid is not self
            and Vector2.squared_distance(position, boid.position) <= limit
        ]

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        neighborhood = self.compute_neighborhood()
        for rule in self.rules:
            self.apply_force(rule.compute_weighted_force(neighborhood, self))

    def on_draw(self, surface: pygame.Surface) -> None:
        if self.draw_debug_radius:
            self.circle.draw_at(
                surface,
                self.position,
                Vector2(self.detection_radius, self.detection_radius),
                Vector2.zero(),
                self.circle_color,
            )
        if self.draw_debug_rules:
            for rule in self.rules:
                if rule.is_enabled:
                    rule.draw(self, surface)
        super().on_draw(surface)