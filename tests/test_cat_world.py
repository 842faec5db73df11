import random

import pygame
import pytest

from mobagen.catchthecat.agents import Agent
from mobagen.catchthecat.world import World
from mobagen.core.colors import GRAY, RED
from mobagen.core.engine import Engine
from mobagen.core.geometry import Point2D

DIRECTIONS = [
    World.east,
    World.west,
    World.north_east,
    World.north_west,
    World.south_east,
    World.south_west,
]


class _Scripted(Agent):
    def __init__(self, moves):
        self.moves = list(moves)

    def move(self, world):
        return self.moves.pop(0)


def _open_world(size=11, **agents):
    world = World(Engine(), size, **agents)
    world.cells = [False] * len(world.cells)
    return world


def test_even_size_rejected():
    with pytest.raises(ValueError):
        World(Engine(), 10)


def test_world_registers_with_engine():
    engine = Engine()
    world = World(engine, 7)
    assert engine.game_objects == [world]


def test_fresh_world_state():
    random.seed(5)
    world = World(Engine(), 11)
    assert world.side_size() == 11
    assert world.cat() == Point2D(0, 0)
    assert world.content(Point2D(0, 0)) is False
    assert len(world.cells) == 121
    assert sum(world.cells) <= 7
    assert world.cat_turn is True
    assert world.is_simulating is False
    assert not world.cat_won and not world.catcher_won


@pytest.mark.parametrize("p", [Point2D(0, 0), Point2D(2, 3), Point2D(-3, -2), Point2D(1, -1)])
def test_directions_are_distinct_neighbors(p):
    results = [d(p) for d in DIRECTIONS]
    assert len(set(results)) == 6
    assert all(World.is_neighbor(p, r) for r in results)
    assert not World.is_neighbor(p, p)


@pytest.mark.parametrize("p", [Point2D(0, 0), Point2D(2, 3), Point2D(-3, -2), Point2D(4, -5)])
def test_direction_round_trips(p):
    assert World.west(World.east(p)) == p
    assert World.south_east(World.north_east(p)) == p
    assert World.south_west(World.north_west(p)) == p
    assert World.north_east(World.south_east(p)) == p


def test_is_valid_position_bounds():
    world = World(Engine(), 5)
    assert world.is_valid_position(Point2D(2, -2))
    assert world.is_valid_position(Point2D(-2, 2))
    assert not world.is_valid_position(Point2D(3, 0))
    assert not world.is_valid_position(Point2D(0, -3))


def test_content_outside_board_raises():
    world = World(Engine(), 5)
    with pytest.raises(IndexError):
        world.content(Point2D(3, 0))


def test_render_text_layout():
    world = _open_world(5)
    text = world.render_text()
    assert text.count("C") == 1
    assert text.count("#") == 0
    assert text.endswith("\n ")
    lines = text.split("\n")
    assert len(lines) == 6
    assert all(len(line.split()) == 5 for line in lines[:5])
    assert lines[1].startswith(" ")
    assert lines[2].split()[2] == "C"


def test_render_text_shows_blocks():
    world = _open_world(5)
    world.cells[0] = True
    assert world.render_text().split("\n")[0].split()[0] == "#"


def test_cat_bad_move_gives_catcher_the_win():
    world = _open_world(5, cat=_Scripted([Point2D(2, 2)]))
    world.is_simulating = True
    world.step()
    assert world.catcher_won is True
    assert world.is_simulating is False
    assert world.cat() == Point2D(0, 0)
    assert world.cat_turn is False


def test_cat_reaching_border_wins_and_next_step_resets():
    world = _open_world(3, cat=_Scripted([Point2D(1, 0)]))
    world.step()
    assert world.cat() == Point2D(1, 0)
    assert world.cat_won is True
    world.step()
    assert world.cat_won is False
    assert world.cat() == Point2D(0, 0)
    assert world.cat_turn is True


def test_catcher_blocks_cell():
    world = _open_world(
        5, cat=_Scripted([Point2D(1, 0)]), catcher=_Scripted([Point2D(-1, -1)])
    )
    world.step()
    world.step()
    assert world.content(Point2D(-1, -1)) is True
    assert world.catcher_won is False
    assert world.cat_won is False
    assert world.cat_turn is True


def test_catcher_bad_move_gives_cat_the_win():
    world = _open_world(
        5, cat=_Scripted([Point2D(1, 0)]), catcher=_Scripted([Point2D(1, 2)])
    )
    world.is_simulating = True
    world.step()
    world.step()
    assert world.cat_won is True
    assert world.is_simulating is False
    assert world.content(Point2D(1, 2)) is False


def test_update_waits_for_timer():
    world = _open_world(5, cat=_Scripted([Point2D(1, 0)]))
    world.update(5.0)
    assert world.cat() == Point2D(0, 0)
    world.is_simulating = True
    world.update(0.5)
    assert world.cat() == Point2D(0, 0)
    world.update(0.6)
    assert world.cat() == Point2D(1, 0)
    assert world.time_for_next_tick == world.time_between_ai_ticks


def test_on_draw_paints_cat_and_cells():
    world = _open_world(3)
    surface = pygame.Surface((120, 120))
    world.on_draw(surface)
    colors = {
        tuple(surface.get_at((x, y)))[:3] for x in range(120) for y in range(120)
    }
    assert (RED.r, RED.g, RED.b) in colors
    assert (GRAY.r, GRAY.g, GRAY.b) in colors