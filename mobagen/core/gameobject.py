"""Base class for everything the engine updates and draws."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from mobagen.core.geometry import Transform

if TYPE_CHECKING:
    from mobagen.core.engine import Engine


class GameObject:
    """An object living in an engine.

    Creating one registers it with the engine straight away. Subclasses
    override the hooks they need; the defaults do nothing.
    """

    def __init__(self, engine: Engine) -> None:
        self.transform = Transform()
        self.engine = engine
        engine.game_objects.append(self)

    def start(self) -> None:
        """Called once when the engine starts."""

    def on_gui(self) -> None:
        """Called every frame to build interface elements."""

    def on_draw(self, surface: pygame.Surface) -> None:
        """Called every frame to draw onto ``surface``."""

    def update(self, delta_time: float) -> None:
        """Called every frame with the seconds elapsed since the last one."""