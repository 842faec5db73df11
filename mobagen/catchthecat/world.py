"""The hexagonal board of the catch-the-cat game and its command."""

from __future__ import annotations

import argparse
import logging
import math
import time

import pygame

from mobagen.catchthecat.agents import Agent, Cat, Catcher
from mobagen.core.colors import BLUE, GRAY, RED
from mobagen.core.engine import Engine
from mobagen.core.gameobject import GameObject
from mobagen.core.geometry import Point2D, Transform
from mobagen.core.polygon import Hexagon
from mobagen.core.rng import range_int
from mobagen.core.vector2 import Vector2

_log = logging.getLogger(__name__)

_BLOCKED_FRACTION = 0.05


class World(GameObject):
    """A square board of hexagonal cells centred on (0, 0).

    The top left cell is (-side/2, -side/2). The cat starts in the centre and
    wins by reaching the border; the catcher wins by surrounding it.
    """

    def __init__(
        self,
        engine: Engine,
        size: int = 11,
        cat: Agent | None = None,
        catcher: Agent | None = None,
    ) -> None:
        if size % 2 == 0:
            raise ValueError(f"side size must be odd, got {size}")
        super().__init__(engine)
        self._side_size = size
        self._cat_agent = cat if cat is not None else Cat()
        self._catcher_agent = catcher if catcher is not None else Catcher()
        self.time_between_ai_ticks = 1.0
        self.time_for_next_tick = 1.0
        self.move_duration = 0
        self.cells: list[bool] = []
        self.clear_world()

    @staticmethod
    def east(p: Point2D) -> Point2D:
        return Point2D(p.x + 1, p.y)

    @staticmethod
    def west(p: Point2D) -> Point2D:
        return Point2D(p.x - 1, p.y)

    @staticmethod
    def north_east(p: Point2D) -> Point2D:
        if p.y % 2:
            return Point2D(p.x + 1, p.y - 1)
        return Point2D(p.x, p.y - 1)

    @staticmethod
    def north_west(p: Point2D) -> Point2D:
        if p.y % 2:
            return Point2D(p.x, p.y - 1)
        return Point2D(p.x - 1, p.y - 1)

    @staticmethod
    def south_east(p: Point2D) -> Point2D:
        if p.y % 2:
            return Point2D(p.x, p.y + 1)
        return Point2D(p.x - 1, p.y + 1)

    @staticmethod
    def south_west(p: Point2D) -> Point2D:
        if p.y % 2:
            return Point2D(p.x + 1, p.y + 1)
        return Point2D(p.x, p.y + 1)

    @staticmethod
    def is_neighbor(p1: Point2D, p2: Point2D) -> bool:
        """Whether ``p2`` is one of the six cells around ``p1``."""
        return p2 in (
            World.north_east(p1),
            World.north_west(p1),
            World.east(p1),
            World.west(p1),
            World.south_east(p1),
            World.south_west(p1),
        )

    def clear_world(self) -> None:
        """Reset the board with a few random blocks and the cat in the centre."""
        count = self._side_size * self._side_size
        self.cells = [False] * count
        for _ in range(math.ceil(count * _BLOCKED_FRACTION)):
            self.cells[range_int(0, count - 1)] = True
        self._cat_position = Point2D(0, 0)
        self.cells[count // 2] = False
        self.is_simulating = False
        self.cat_turn = True
        self.time_for_next_tick = self.time_between_ai_ticks
        self.cat_won = False
        self.catcher_won = False

    def cat(self) -> Point2D:
        """The cat's current position."""
        return self._cat_position

    def side_size(self) -> int:
        """The number of cells along one side of the board."""
        return self._side_size

    def _index(self, p: Point2D) -> int:
        half = self._side_size // 2
        return (p.y + half) * self._side_size + p.x + half

    def content(self, p: Point2D) -> bool:
        """Whether the cell at ``p`` is blocked."""
        if not self.is_valid_position(p):
            raise IndexError(f"position {p} is outside the board")
        return self.cells[self._index(p)]

    def is_valid_position(self, p: Point2D) -> bool:
        """Whether ``p`` lies on the board."""
        half = self._side_size // 2
        return -half <= p.x <= half and -half <= p.y <= half

    def render_text(self) -> str:
        """The board as text: ``C`` for the cat, ``#`` blocked, ``.`` free."""
        side = self._side_size
        cat_index = self._index(self._cat_position)
        parts: list[str] = []
        for i, blocked in enumerate(self.cells, start=1):
            if i - 1 == cat_index:
                parts.append("C")
            else:
                parts.append("#" if blocked else ".")
            if (i + side) % (2 * side) == 0:
                parts.append("\n ")
            elif i % side == 0:
                parts.append("\n")
            else:
                parts.append(" ")
        return "".join(parts)

    def _cat_win_verification(self) -> bool:
        half = self._side_size // 2
        return abs(self._cat_position.x) == half or abs(self._cat_position.y) == half

    def _catcher_win_verification(self) -> bool:
        p = self._cat_position
        return all(
            self.content(direction(p))
            for direction in (
                self.north_east,
                self.north_west,
                self.east,
                self.west,
                self.south_east,
                self.south_west,
            )
        )

    def _cat_can_move_to(self, p: Point2D) -> bool:
        return self.is_neighbor(self._cat_position, p) and not self.content(p)

    def _catcher_can_move_to(self, p: Point2D) -> bool:
        half = self._side_size // 2
        return (
            p.x != self._cat_position.x
            and p.y != self._cat_position.y
            and abs(p.x) <= half
            and abs(p.y) <= half
        )

    def step(self) -> None:
        """Play one turn, or reset the board if the game is already over."""
        if self.cat_won or self.catcher_won:
            self.clear_world()
            return

        started = time.perf_counter_ns()
        if self.cat_turn:
            move = self._cat_agent.move(self)
            if self._cat_can_move_to(move):
                self._cat_position = move
                self.cat_won = self._cat_win_verification()
            else:
                self.is_simulating = False
                self.catcher_won = True
        else:
            move = self._catcher_agent.move(self)
            if self._catcher_can_move_to(move):
                self.cells[self._index(move)] = True
                self.catcher_won = self._catcher_win_verification()
            else:
                self.is_simulating = False
                self.cat_won = True
        self.move_duration = (time.perf_counter_ns() - started) // 1000
        self.cat_turn = not self.cat_turn

    def update(self, delta_time: float) -> None:
        """Count down to the next turn while the simulation runs."""
        if not self.is_simulating:
            return
        self.time_for_next_tick -= delta_time
        if self.time_for_next_tick < 0:
            self.step()
            self.time_for_next_tick = self.time_between_ai_ticks

    def on_draw(self, surface: pygame.Surface) -> None:
        """Draw every cell as a hexagon outline, the cat in red."""
        width, height = surface.get_size()
        side = self._side_size
        hexagon = Hexagon()
        transform = Transform()
        transform.scale = transform.scale * ((min(width, height) / side) / 2)
        scale = transform.scale
        row_start = width / 2 - side * scale.x
        transform.position = Vector2(row_start, height / 2 - (side - 1) * scale.y)
        cat_index = self._index(self._cat_position)
        for i, blocked in enumerate(self.cells, start=1):
            if i - 1 == cat_index:
                color = RED
            elif blocked:
                color = BLUE
            else:
                color = GRAY
            hexagon.draw(surface, transform, color)
            if i % (2 * side) == 0:
                transform.position = Vector2(row_start, transform.position.y + 2 * scale.y)
            elif i % side == 0:
                transform.position = Vector2(
                    row_start + scale.x, transform.position.y + 2 * scale.y
                )
            else:
                transform.position = Vector2(
                    transform.position.x + 2 * scale.x, transform.position.y
                )


def main(argv: list[str] | None = None) -> int:
    """Open a window and let the cat and the catcher play."""
    parser = argparse.ArgumentParser(
        prog="catchthecat", description="Watch a cat try to escape a hexagonal board."
    )
    parser.add_argument("--size", type=int, default=21, help="odd side size of the board")
    parser.add_argument(
        "--turn-duration", type=float, default=1.0, help="seconds between turns"
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    with Engine() as engine:
        try:
            world = World(engine, args.size)
        except ValueError as exc:
            parser.error(str(exc))
        world.time_between_ai_ticks = args.turn_duration
        world.time_for_next_tick = args.turn_duration
        world.is_simulating = True
        _log.info("Starting engine")
        if engine.start("Catch The Cat"):
            engine.run()
        engine.exit()
    _log.info("Engine exited")
    return 0