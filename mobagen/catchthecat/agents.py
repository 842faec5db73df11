"""The two players of the catch-the-cat game."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from mobagen.core.geometry import Point2D
from mobagen.core.rng import range_int

if TYPE_CHECKING:
    from mobagen.catchthecat.world import World


class Agent(ABC):
    """A player that picks a grid position for its next move."""

    @abstractmethod
    def move(self, world: World) -> Point2D:
        """Return the position this agent wants to play."""


class Cat(Agent):
    """Steps onto one of its six hexagonal neighbours at random."""

    def move(self, world: World) -> Point2D:
        position = world.cat()
        directions = (
            world.north_east,
            world.north_west,
            world.east,
            world.west,
            world.south_west,
            world.south_east,
        )
        return directions[range_int(0, len(directions) - 1)](position)


class Catcher(Agent):
    """Blocks a random free cell outside the cat's row and column."""

    def move(self, world: World) -> Point2D:
        half = world.side_size() // 2
        while True:
            candidate = Point2D(range_int(-half, half), range_int(-half, half))
            cat = world.cat()
            if (
                cat.x != candidate.x
                and cat.y != candidate.y
                and not world.content(candidate)
            ):
                return candidate