"""The main loop: input, update, interface and drawing of game objects."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TypeVar

import pygame

from mobagen.core.colors import Colorf
from mobagen.core.gameobject import GameObject
from mobagen.core.vector2 import Vector2
from mobagen.core.window import Window

_log = logging.getLogger(__name__)

T = TypeVar("T", bound=GameObject)

_ARROW_DIRECTIONS = {
    pygame.K_UP: Vector2.up,
    pygame.K_DOWN: Vector2.down,
    pygame.K_LEFT: Vector2.left,
    pygame.K_RIGHT: Vector2.right,
}


class Engine:
    """Owns the window and drives every registered game object.

    Usable as a context manager; leaving the block closes the window and
    drops all game objects.
    """

    def __init__(self) -> None:
        self.window: Window | None = None
        self.game_objects: list[GameObject] = []
        self.done = False
        self.clear_color = Colorf(0.0, 0.0, 0.0, 1.0)
        self._arrow_input = Vector2()
        self._pressed: set[int] = set()
        self._to_destroy: list[GameObject] = []

    def __enter__(self) -> Engine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self.window is not None:
            self.window.close()
            self.window = None
        self.game_objects.clear()
        self._to_destroy.clear()

    def start(self, title: str) -> bool:
        """Open the window and start every game object."""
        _log.info("Initializing window")
        self.window = Window(title)
        _log.info("Window initialized")
        for game_object in list(self.game_objects):
            game_object.start()
        return True

    def run(self) -> None:
        """Tick until the engine is told to stop."""
        clock = pygame.time.Clock()
        while not self.done:
            self.tick(clock.tick() / 1000.0)
        self.exit()

    def tick(self, delta_time: float) -> None:
        """Run one frame that advances the simulation by ``delta_time`` seconds."""
        if self.window is None:
            raise RuntimeError("engine has not been started")
        surface = self.window.surface
        color = self.clear_color
        surface.fill(
            (int(color.r * 255), int(color.g * 255), int(color.b * 255), int(color.a * 255))
        )

        self.process_input(pygame.event.get())

        for game_object in list(self.game_objects):
            game_object.update(delta_time)

        for game_object in list(self.game_objects):
            game_object.on_gui()

        for game_object in list(self.game_objects):
            game_object.on_draw(surface)

        if self._to_destroy:
            for game_object in self._to_destroy:
                if game_object in self.game_objects:
                    self.game_objects.remove(game_object)
            self._to_destroy.clear()

        pygame.display.flip()

    def exit(self) -> None:
        """Ask the main loop to stop."""
        _log.info("Exit called")
        self.done = True

    def process_input(self, events: Iterable[pygame.event.Event]) -> None:
        """Handle quit requests and track the arrow keys held down."""
        for event in events:
            if event.type == pygame.QUIT or event.type == pygame.WINDOWCLOSE:
                self.done = True
            elif event.type == pygame.KEYDOWN and event.key in _ARROW_DIRECTIONS:
                self._pressed.add(event.key)
            elif event.type == pygame.KEYUP and event.key in _ARROW_DIRECTIONS:
                self._pressed.discard(event.key)

        arrow = Vector2()
        for key in (pygame.K_UP, pygame.K_DOWN, pygame.K_LEFT, pygame.K_RIGHT):
            if key in self._pressed:
                arrow = arrow + _ARROW_DIRECTIONS[key]()
        self._arrow_input = arrow

    def input_arrow(self) -> Vector2:
        """The sum of the directions of the arrow keys currently held."""
        return Vector2(self._arrow_input.x, self._arrow_input.y)

    def find_objects_of_type(self, kind: type[T]) -> list[T]:
        """All registered game objects that are instances of ``kind``."""
        return [go for go in self.game_objects if isinstance(go, kind)]

    def destroy(self, game_object: GameObject) -> None:
        """Remove ``game_object`` at the end of the current frame."""
        self._to_destroy.append(game_object)