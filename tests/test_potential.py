import math

import numpy as np
import pytest

from zeemanmachine.model.geometry_primitives import Vector2
from zeemanmachine.model.machine import Machine
from zeemanmachine.model.potential import (
    PotentialEvaluator, d2_potential, d_potential, elastic_length, potential, potential_curve
)

# End points kept off the unit circle so no elastic ever has zero length
ANCHORS = [Vector2(-3.0, 0.0), Vector2(2.0, 1.0), Vector2(0.5, -0.3), Vector2(-1.2, 2.5)]
POINTERS = [Vector2(3.0, 0.0), Vector2(0.0, 0.0), Vector2(1.5, -1.0), Vector2(0.3, 0.2)]
THETAS = [0.1, 0.9, 1.7, 2.5, 3.3, 4.1, 4.9, 5.7]

H = 1e-5
TOL = 1e-4


def grid():
    for anchor in ANCHORS:
        for pointer in POINTERS:
            for theta in THETAS:
                yield Machine(anchor=anchor, pointer=pointer, theta=theta)


def test_elastic_length_and_potential_are_non_negative():
    for m in grid():
        assert elastic_length(m.anchor, m.theta) >= 0.0
        assert elastic_length(m.pointer, m.theta) >= 0.0
        assert potential(m) >= 0.0


def test_elastic_length_from_origin_is_one():
    for theta in THETAS:
        assert elastic_length(Vector2(0.0, 0.0), theta) == pytest.approx(1.0)


def test_potential_is_zero_at_rest_length():
    # both end points exactly one unit from the wheel at θ = 0
    m = Machine(anchor=Vector2(2.0, 0.0), pointer=Vector2(0.0, 0.0), theta=0.0)
    assert potential(m) == pytest.approx(0.0)


def test_d_potential_matches_finite_difference():
    for m in grid():
        fd = (potential(m.with_theta(m.theta + H)) - potential(m.with_theta(m.theta - H))) / (2 * H)
        assert d_potential(m) == pytest.approx(fd, abs=TOL)


def test_d2_potential_matches_finite_difference():
    for m in grid():
        fd = (d_potential(m.with_theta(m.theta + H)) - d_potential(m.with_theta(m.theta - H))) / (2 * H)
        assert d2_potential(m) == pytest.approx(fd, abs=TOL)


def test_single_anchor_equilibria():
    anchor, pointer = Vector2(-3.0, 0.0), Vector2(0.0, 0.0)
    top = Machine(anchor=anchor, pointer=pointer, theta=0.0)
    bottom = Machine(anchor=anchor, pointer=pointer, theta=math.pi)

    assert d_potential(top) == pytest.approx(0.0, abs=1e-12)
    assert d2_potential(top) < 0.0
    assert d_potential(bottom) == pytest.approx(0.0, abs=1e-12)
    assert d2_potential(bottom) > 0.0


def test_degenerate_elastic_contributes_nothing():
    # anchor sits exactly on the wheel position at θ = 0
    pointer = Vector2(1.5, -1.0)
    degenerate = Machine(anchor=Vector2(1.0, 0.0), pointer=pointer, theta=0.0)
    pointer_only = Machine(anchor=Vector2(0.0, 0.0), pointer=pointer, theta=0.0)

    assert math.isfinite(d_potential(degenerate))
    assert math.isfinite(d2_potential(degenerate))
    assert d_potential(degenerate) == pytest.approx(d_potential(pointer_only))
    assert d2_potential(degenerate) == pytest.approx(d2_potential(pointer_only))


def test_potential_curve_matches_scalar_potential():
    m = Machine(anchor=Vector2(-3.0, 0.0), pointer=Vector2(3.0, -1.5), theta=0.0)
    thetas, energies = potential_curve(m, samples=73)

    assert thetas.shape == energies.shape == (73,)
    assert thetas[0] == 0.0
    assert thetas[-1] == pytest.approx(2 * math.pi)
    expected = [potential(m.with_theta(float(t))) for t in thetas]
    np.testing.assert_allclose(energies, expected, rtol=1e-12)


def test_evaluator_binds_anchor_and_pointer():
    m = Machine(anchor=Vector2(2.0, 1.0), pointer=Vector2(0.3, 0.2), theta=0.0)
    evaluator = PotentialEvaluator(m.anchor, m.pointer)

    assert evaluator.at(1.7) == m.with_theta(1.7)
    assert evaluator.derivative(1.7) == pytest.approx(d_potential(m.with_theta(1.7)))
    assert evaluator.curvature(1.7) == pytest.approx(d2_potential(m.with_theta(1.7)))
