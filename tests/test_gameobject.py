from mobagen.core.engine import Engine
from mobagen.core.gameobject import GameObject
from mobagen.core.vector2 import Vector2


def test_creating_registers_with_engine():
    engine = Engine()
    go = GameObject(engine)
    assert engine.game_objects == [go]
    assert go.engine is engine


def test_registration_keeps_creation_order():
    engine = Engine()
    first = GameObject(engine)
    second = GameObject(engine)
    assert engine.game_objects == [first, second]


def test_default_transform():
    go = GameObject(Engine())
    assert go.transform.position == Vector2.zero()
    assert go.transform.scale == Vector2.identity()


def test_each_object_has_its_own_transform():
    engine = Engine()
    a = GameObject(engine)
    b = GameObject(engine)
    a.transform.position = Vector2(5, 5)
    assert b.transform.position == Vector2.zero()


def test_default_update_leaves_transform_alone():
    go = GameObject(Engine())
    go.update(0.5)
    assert go.transform.position == Vector2.zero()