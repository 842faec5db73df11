import random

import pytest

from mobagen.catchthecat.agents import Agent, Cat, Catcher
from mobagen.catchthecat.world import World
from mobagen.core.engine import Engine
from mobagen.core.geometry import Point2D


class _Scripted(Agent):
    def __init__(self, moves):
        self.moves = list(moves)

    def move(self, world):
        return self.moves.pop(0)


def _open_world(size=11, **agents):
    world = World(Engine(), size, **agents)
    world.cells = [False] * len(world.cells)
    return world


def test_agent_is_abstract():
    with pytest.raises(TypeError):
        Agent()


def test_cat_moves_to_a_neighbor():
    random.seed(1)
    world = _open_world()
    cat = Cat()
    for _ in range(50):
        move = cat.move(world)
        assert World.is_neighbor(world.cat(), move)


def test_cat_uses_all_six_directions():
    random.seed(2)
    world = _open_world()
    cat = Cat()
    moves = {cat.move(world) for _ in range(300)}
    expected = {
        World.north_east(world.cat()),
        World.north_west(world.cat()),
        World.east(world.cat()),
        World.west(world.cat()),
        World.south_east(world.cat()),
        World.south_west(world.cat()),
    }
    assert moves == expected


def test_catcher_picks_free_cell_off_cat_lines():
    random.seed(3)
    world = World(Engine(), 11)
    catcher = Catcher()
    for _ in range(50):
        p = catcher.move(world)
        assert world.is_valid_position(p)
        assert p.x != world.cat().x
        assert p.y != world.cat().y
        assert world.content(p) is False


def test_catcher_follows_moved_cat():
    random.seed(4)
    world = _open_world(5, cat=_Scripted([Point2D(1, 0)]))
    world.step()
    assert world.cat() == Point2D(1, 0)
    catcher = Catcher()
    for _ in range(30):
        p = catcher.move(world)
        assert p.x != 1 and p.y != 0
        assert world.is_valid_position(p)