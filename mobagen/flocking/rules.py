"""Steering rules that together make boids flock."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

import pygame

from mobagen.core.colors import CYAN, GRAY, MAGENTA, RED, WHITE, YELLOW, Color32
from mobagen.core.polygon import Polygon
from mobagen.core.vector2 import Vector2

if TYPE_CHECKING:
    from mobagen.flocking.boid import Boid

MouseState = tuple[Vector2, bool]
MouseReader = Callable[[], "MouseState | None"]


class FlockingRule(ABC):
    """A weighted steering force applied to a boid every frame.

    The last computed force is kept in ``force`` so that it can be drawn.
    """

    rule_name = ""
    explanation = ""
    base_weight_multiplier = 1.0

    def __init__(
        self, world: Any, debug_color: Color32, weight: float, is_enabled: bool = True
    ) -> None:
        self.world = world
        self.debug_color = debug_color
        self.weight = weight
        self.is_enabled = is_enabled
        self.force = Vector2()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(weight={self.weight!r}, "
            f"is_enabled={self.is_enabled!r})"
        )

    @abstractmethod
    def compute_force(self, neighborhood: Sequence[Boid], boid: Boid) -> Vector2:
        """The unweighted force this rule applies to ``boid``."""

    def compute_weighted_force(self, neighborhood: Sequence[Boid], boid: Boid) -> Vector2:
        """Compute, weight and remember the force; zero when disabled."""
        if self.is_enabled:
            self.force = self.compute_force(neighborhood, boid) * (
                self.base_weight_multiplier * self.weight
            )
        else:
            self.force = Vector2.zero()
        return self.force

    def clone(self) -> FlockingRule:
        """An independent copy of this rule with the same settings."""
        duplicate = copy.copy(self)
        duplicate.force = Vector2(self.force.x, self.force.y)
        return duplicate

    def draw(self, boid: Boid, surface: pygame.Surface) -> None:
        """Draw the last force as a line starting at the boid."""
        start = boid.position
        Polygon.draw_line(surface, start, start + self.force * 1.5, self.debug_color)


class AlignmentRule(FlockingRule):
    """Steer toward the average heading of local flockmates."""

    rule_name = "Alignment Rule"
    explanation = "Steer to move in the same direction that nearby boids."
    base_weight_multiplier = 1.0

    def __init__(self, world: Any, weight: float = 1.0, is_enabled: bool = True) -> None:
        super().__init__(world, YELLOW, weight, is_enabled)

    def compute_force(self, neighborhood: Sequence[Boid], boid: Boid) -> Vector2:
        if not neighborhood:
            return Vector2.zero()
        total = Vector2.zero()
        for other in neighborhood:
            total = total + other.velocity
        return (total / len(neighborhood)).normalized()


class CohesionRule(FlockingRule):
    """Steer toward the centre of mass of local flockmates."""

    rule_name = "Cohesion Rule"
    explanation = "Steer to move toward center of mass of nearby boids."
    base_weight_multiplier = 1.0

    def __init__(self, world: Any, weight: float = 1.0, is_enabled: bool = True) -> None:
        super().__init__(world, CYAN, weight, is_enabled)

    def compute_force(self, neighborhood: Sequence[Boid], boid: Boid) -> Vector2:
        if not neighborhood:
            return Vector2.zero()
        total = Vector2.zero()
        for other in neighborhood:
            total = total + other.position
        center = total / len(neighborhood)
        return (center - boid.position).normalized()


class SeparationRule(FlockingRule):
    """Steer away from flockmates that come closer than a desired distance."""

    rule_name = "Separation Rule"
    explanation = "Steer to avoid collision with nearby boids."
    base_weight_multiplier = 1.0

    def __init__(
        self,
        world: Any,
        desired_separation: float = 20.0,
        weight: float = 1.0,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, RED, weight, is_enabled)
        self.desired_minimal_distance = desired_separation

    def compute_force(self, neighborhood: Sequence[Boid], boid: Boid) -> Vector2:
        force = Vector2.zero()
        position = boid.position
        for other in neighborhood:
            offset = position - other.position
            distance = offset.magnitude()
            if 0.0 < distance < self.desired_minimal_distance:
                # Closer mates push harder: the push falls off with distance.
                force = force + offset / (distance * distance)
        return force.normalized()


def _read_pygame_mouse() -> MouseState | None:
    try:
        if not pygame.display.get_init() or not pygame.mouse.get_focused():
            return None
        x, y = pygame.mouse.get_pos()
        pressed = bool(pygame.mouse.get_pressed()[0])
    except pygame.error:
        return None
    return Vector2(float(x), float(y)), pressed


class MouseInfluenceRule(FlockingRule):
    """Steer toward, or away from, the mouse while its left button is held.

    ``mouse`` returns the pointer position and whether the left button is
    down, or ``None`` when the position is unknown.
    """

    rule_name = "Mouse Click Influence"
    explanation = "Steer toward or away the mouse when clicked."
    base_weight_multiplier = 0.1

    def __init__(
        self,
        world: Any,
        weight: float = 1.0,
        is_repulsive: bool = False,
        is_enabled: bool = True,
        mouse: MouseReader | None = None,
    ) -> None:
        super().__init__(world, MAGENTA, weight, is_enabled)
        self.is_repulsive = is_repulsive
        self.mouse: MouseReader = mouse if mouse is not None else _read_pygame_mouse

    def compute_force(self, neighborhood: Sequence[Boid], boid: Boid) -> Vector2:
        state = self.mouse()
        if state is None:
            return Vector2.zero()
        mouse_position, pressed = state
        if not pressed:
            return Vector2.zero()
        displacement = mouse_position - boid.position
        distance = displacement.magnitude()
        if distance == 0.0:
            return Vector2.zero()
        # Full strength inside the detection radius, fading as 1/distance beyond it.
        strength = min(1.0, boid.detection_radius / distance)
        force = displacement / distance * strength
        return -force if self.is_repulsive else force


class BoundedAreaRule(FlockingRule):
    """Push boids back when they come within a margin of the window's borders."""

    rule_name = "Bounded Windows"
    explanation = "Steer to avoid the window's borders."
    base_weight_multiplier = 1.0

    def __init__(
        self,
        world: Any,
        distance_from_border: int,
        weight: float = 1.0,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, RED.light(), weight, is_enabled)
        self.desired_distance = distance_from_border

    def _size(self) -> Vector2:
        return self.world.engine.window.size()

    def compute_force(self, neighborhood: Sequence[Boid], boid: Boid) -> Vector2:
        margin = float(self.desired_distance)
        if margin <= 0.0:
            return Vector2.zero()
        size = self._size()
        position = boid.position
        x = 0.0
        y = 0.0
        if position.x < margin:
            x += (margin - position.x) / margin
        elif position.x > size.x - margin:
            x -= (position.x - (size.x - margin)) / margin
        if position.y < margin:
            y += (margin - position.y) / margin
        elif position.y > size.y - margin:
            y -= (position.y - (size.y - margin)) / margin
        return Vector2(x, y)

    def draw(self, boid: Boid, surface: pygame.Surface) -> None:
        """Draw the force and the rectangle the boids are kept inside."""
        super().draw(boid, surface)
        size = self._size()
        d = float(self.desired_distance)
        corners = [
            Vector2(d, d),
            Vector2(size.x - d, d),
            Vector2(size.x - d, size.y - d),
            Vector2(d, size.y - d),
        ]
        for start, end in zip(corners, corners[1:] + corners[:1]):
            Polygon.draw_line(surface, start, end, GRAY)


class WindRule(FlockingRule):
    """A constant push in one direction, the angle given in radians."""

    rule_name = "Wind Force"
    explanation = "Apply a constant force to all boids."
    base_weight_multiplier = 0.5

    def __init__(
        self,
        world: Any,
        weight: float = 1.0,
        angle: float = 0.0,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, WHITE, weight, is_enabled)
        self.wind_angle = angle

    def compute_force(self, neighborhood: Sequence[Boid], boid: Boid) -> Vector2:
        return Vector2.from_radian(self.wind_angle)