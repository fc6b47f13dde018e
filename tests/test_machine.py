import dataclasses
import math

import pytest

from zeemanmachine.config import DEFAULT_ANCHOR, DEFAULT_POINTER
from zeemanmachine.model.geometry_primitives import Vector2
from zeemanmachine.model.machine import TWO_PI, Machine, normalize_angle


@pytest.mark.parametrize(
    "angle",
    [-100.0, -TWO_PI, -math.pi, -1e-20, 0.0, 1.0, math.pi, TWO_PI, 7.0, 1e6],
)
def test_normalize_angle_range_and_congruence(angle):
    wrapped = normalize_angle(angle)
    assert 0.0 <= wrapped < TWO_PI
    assert math.remainder(wrapped - angle, TWO_PI) == pytest.approx(0.0, abs=1e-9)


def test_normalize_angle_keeps_values_in_range():
    assert normalize_angle(1.25) == 1.25


def test_default_machine():
    m = Machine()
    assert m.anchor == DEFAULT_ANCHOR
    assert m.pointer == DEFAULT_POINTER
    assert m.theta == 0.0


def test_machine_is_immutable():
    m = Machine()
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.theta = 1.0


def test_with_helpers_return_new_values():
    m = Machine()
    moved = m.with_pointer(Vector2(1.0, 2.0)).with_theta(0.5)

    assert moved.pointer == Vector2(1.0, 2.0)
    assert moved.theta == 0.5
    assert moved.anchor == m.anchor
    assert m.theta == 0.0


def test_theta_must_be_finite():
    with pytest.raises(ValueError):
        Machine(theta=float("nan"))


def test_wheel_position():
    wheel = Machine(theta=math.pi / 2).wheel
    assert wheel.x == pytest.approx(0.0, abs=1e-12)
    assert wheel.y == pytest.approx(1.0)


def test_vector_distance_and_array():
    a, b = Vector2(1.0, 2.0), Vector2(4.0, 6.0)
    assert a.distance_to(b) == pytest.approx(5.0)
    assert b.distance_to(a) == a.distance_to(b)
    assert list(a.to_array()) == [1.0, 2.0]
