import pytest

from mobagen.core.mathlib import normalize


def test_value_inside_range_is_unchanged():
    assert normalize(45.0, 0.0, 360.0) == pytest.approx(45.0)


def test_start_maps_to_itself():
    assert normalize(-5.0, -5.0, 5.0) == pytest.approx(-5.0)


def test_end_wraps_to_start():
    assert normalize(360.0, 0.0, 360.0) == pytest.approx(0.0)


@pytest.mark.parametrize("value", [-1000.5, -361.0, -0.25, 0.0, 12.0, 359.9, 725.0])
def test_result_lies_in_range(value):
    result = normalize(value, 0.0, 360.0)
    assert 0.0 <= result < 360.0


@pytest.mark.parametrize("value", [-30.0, 10.0, 200.0])
def test_adding_a_full_width_does_not_change_result(value):
    base = normalize(value, -180.0, 180.0)
    assert normalize(value + 360.0, -180.0, 180.0) == pytest.approx(base)
    assert normalize(value - 720.0, -180.0, 180.0) == pytest.approx(base)


def test_zero_width_range_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(1.0, 2.0, 2.0)