import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from mobagen.core.vector2 import Vector2
from mobagen.core.window import DEFAULT_HEIGHT, DEFAULT_WIDTH, Window


def test_default_size():
    with Window("Test") as window:
        assert window.size() == Vector2(DEFAULT_WIDTH, DEFAULT_HEIGHT)


def test_size_matches_surface():
    with Window("Test") as window:
        width, height = window.surface.get_size()
        assert window.size() == Vector2(width, height)


def test_title_is_set():
    with Window("Catch The Cat") as window:
        assert pygame.display.get_caption()[0] == "Catch The Cat"
        assert window.title == "Catch The Cat"


def test_close_shuts_display_down():
    window = Window("Test")
    size_before = window.size()
    assert size_before == Vector2(DEFAULT_WIDTH, DEFAULT_HEIGHT)
    assert pygame.display.get_init()
    window.close()
    assert not pygame.display.get_init()
    assert window.title == "Test"