"""The flocking simulation: a world of boids steered by shared rules."""

from __future__ import annotations

import argparse
import logging

from mobagen.core.colors import RED
from mobagen.core.engine import Engine
from mobagen.core.gameobject import GameObject
from mobagen.core.rng import range_float
from mobagen.core.vector2 import Vector2
from mobagen.flocking.boid import Boid, Particle
from mobagen.flocking.rules import (
    AlignmentRule,
    BoundedAreaRule,
    CohesionRule,
    FlockingRule,
    MouseInfluenceRule,
    SeparationRule,
    WindRule,
)

_log = logging.getLogger(__name__)

_ARROW_FORCE = 20.0


class World(GameObject):
    """Owns the boids and the rules they copy, and keeps them inside the window."""

    def __init__(self, engine: Engine) -> None:
        super().__init__(engine)
        self.nb_boids = 300

        self.has_constant_speed = False
        self.desired_speed = 120.0

        self.has_max_acceleration = False
        self.max_acceleration = 10.0

        self.detection_radius = 35.0

        self.show_radius = False
        self.show_rules = False
        self.show_acceleration = False

        self.boids_rules: list[FlockingRule] = []
        self.default_weights: list[float] = []
        self.boids: list[Boid] = []

    def _window_size(self) -> Vector2:
        if self.engine.window is None:
            raise RuntimeError("engine has no window")
        return self.engine.window.size()

    def initialize_rules(self) -> None:
        """Create the starting rules and remember their weights as defaults."""
        self.boids_rules = [
            SeparationRule(self, 25.0, 4.75),
            CohesionRule(self, 4.25),
            AlignmentRule(self, 2.9),
            MouseInfluenceRule(self, 2.0),
            BoundedAreaRule(self, 20, 8.0, False),
            WindRule(self, 1.0, 6.0, False),
        ]
        self.default_weights = [rule.weight for rule in self.boids_rules]

    def apply_flocking_rules_to_all_boids(self) -> None:
        """Give every boid fresh copies of the world's rules."""
        for boid in self.boids:
            boid.set_flocking_rules(self.boids_rules)

    def set_number_of_boids(self, number: int) -> None:
        """Add boids or remove them from the end until there are ``number``."""
        number = max(0, number)
        while len(self.boids) < number:
            self.boids.append(self.create_boid())
        while len(self.boids) > number:
            self.engine.destroy(self.boids.pop())

    def randomize_boid(self, boid: Boid) -> None:
        """Place ``boid`` anywhere in the window heading in a random direction."""
        size = self._window_size()
        boid.position = Vector2(range_float(0.0, size.x), range_float(0.0, size.y))
        boid.set_velocity(
            Vector2.up().rotate(range_float(0.0, 360.0)) * self.desired_speed
        )

    def warp_particle_if_out_of_bounds(self, particle: Particle) -> None:
        """Wrap a particle that left the window around to the opposite side."""
        position = particle.position
        size = self._window_size()
        x, y = position.x, position.y

        if x < 0:
            x += size.x
        elif x > size.x:
            x -= size.x

        if y < 0:
            y += size.y
        elif y > size.y:
            y -= size.y

        wrapped = Vector2(x, y)
        if wrapped != position:
            particle.position = wrapped

    def create_boid(self) -> Boid:
        """A new boid set up with the world's current settings and rules."""
        boid = Boid(self.engine, self)
        self.randomize_boid(boid)
        boid.set_flocking_rules(self.boids_rules)
        boid.detection_radius = self.detection_radius
        boid.speed = self.desired_speed
        boid.has_constant_speed = self.has_constant_speed
        if self.has_max_acceleration:
            boid.max_acceleration = self.max_acceleration
        boid.draw_acceleration = self.show_acceleration
        boid.draw_debug_radius = self.show_radius
        boid.draw_debug_rules = self.show_rules
        return boid

    def restore_default_weights(self) -> None:
        """Put every rule back to its starting weight and pass that on to the boids."""
        for rule, weight in zip(self.boids_rules, self.default_weights):
            rule.weight = weight
        self.apply_flocking_rules_to_all_boids()

    def update(self, delta_time: float) -> None:
        """Push the first boid with the arrow keys and wrap boids around the window."""
        arrow = self.engine.input_arrow()
        if arrow != Vector2.zero() and self.nb_boids > 0 and self.boids:
            first = self.boids[0]
            first.apply_force(arrow * _ARROW_FORCE)
            first.draw_debug_radius = True
            first.circle_color = RED

        for boid in self.boids:
            self.warp_particle_if_out_of_bounds(boid)

    def start(self) -> None:
        """Create the rules and the boids."""
        self.initialize_rules()
        self.set_number_of_boids(self.nb_boids)
        self.apply_flocking_rules_to_all_boids()


def main(argv: list[str] | None = None) -> int:
    """Open a window with a flock of boids."""
    parser = argparse.ArgumentParser(
        prog="flocking", description="Watch boids flock together."
    )
    parser.add_argument("--boids", type=int, default=300, help="number of boids")
    parser.add_argument(
        "--show-radius", action="store_true", help="draw each boid's detection radius"
    )
    parser.add_argument(
        "--show-rules", action="store_true", help="draw each rule's force"
    )
    args = parser.parse_args(argv)
    if args.boids < 0:
        parser.error("--boids must not be negative")
    logging.basicConfig(level=logging.INFO)

    with Engine() as engine:
        world = World(engine)
        world.nb_boids = args.boids
        world.show_radius = args.show_radius
        world.show_rules = args.show_rules
        _log.info("Starting engine")
        if engine.start("Flocking"):
            engine.run()
        engine.exit()
    _log.info("Engine exited")
    return 0