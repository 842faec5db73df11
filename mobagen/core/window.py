"""The application window and its drawing surface."""

from __future__ import annotations

import logging

import pygame

from mobagen.core.vector2 import Vector2

_log = logging.getLogger(__name__)

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720


class Window:
    """A resizable window with a surface to draw on.

    Usable as a context manager; leaving the block closes the window.
    """

    def __init__(self, title: str) -> None:
        try:
            pygame.init()
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(str(exc)) from exc
        _log.info("Display initialized")

        try:
            self.surface: pygame.Surface = pygame.display.set_mode(
                (DEFAULT_WIDTH, DEFAULT_HEIGHT), pygame.RESIZABLE
            )
        except pygame.error as exc:
            pygame.quit()
            raise RuntimeError(f"Error creating window: {exc}") from exc
        pygame.display.set_caption(title)
        self.title = title
        _log.info("Window created: %s", title)

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def size(self) -> Vector2:
        """The current drawable size in pixels."""
        width, height = self.surface.get_size()
        return Vector2(float(width), float(height))

    def close(self) -> None:
        """Destroy the window and shut the display down."""
        pygame.display.quit()
        pygame.quit()