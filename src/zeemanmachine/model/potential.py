"""
Spring Potential
================
Elastic energy of the two-elastic system and its analytic derivatives with
respect to the disc angle θ.

Both elastics are ideal Hookean springs of natural length 1 and unit
stiffness, so for a spring of length l the energy is ½(l - 1)². For an end
point p and wheel position w = (cos θ, sin θ):

    l   = |w - p|
    l'  = g / l,            g  = p.x·sin θ - p.y·cos θ
    l'' = (g' - l'²) / l,   g' = p.x·cos θ + p.y·sin θ

An elastic whose length drops below `degenerate_length` (the end point sits
exactly on the wheel position) has no defined direction; it contributes
nothing to the derivatives.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING

import numpy as np

from zeemanmachine.config import DEFAULT_SETTINGS
from zeemanmachine.model.geometry_primitives import Vector2
from zeemanmachine.model.machine import Machine, TWO_PI

if TYPE_CHECKING:
    import numpy.typing as npt

DEGENERATE_LENGTH = DEFAULT_SETTINGS.degenerate_length


def elastic_length(end: Vector2, theta: float) -> float:
    """Distance between the wheel position at angle `theta` and `end`."""
    return Vector2.from_polar(1.0, theta).distance_to(end)


def _spring_slope(end: Vector2, theta: float, degenerate_length: float) -> float:
    """∂/∂θ of ½(l - 1)² for a single elastic."""
    length = elastic_length(end, theta)
    if length < degenerate_length:
        return 0.0
    dl = (end.x * math.sin(theta) - end.y * math.cos(theta)) / length
    return (length - 1.0) * dl


def _spring_curvature(end: Vector2, theta: float, degenerate_length: float) -> float:
    """∂²/∂θ² of ½(l - 1)² for a single elastic."""
    length = elastic_length(end, theta)
    if length < degenerate_length:
        return 0.0
    sin_t = math.sin(theta)
    cos_t = math.cos(theta)
    dl = (end.x * sin_t - end.y * cos_t) / length
    dg = end.x * cos_t + end.y * sin_t
    d2l = (dg - dl * dl) / length
    return dl * dl + (length - 1.0) * d2l


def potential(m: Machine) -> float:
    """
    Total elastic energy of the machine.

    Args:
        m: Machine state.

    Returns:
        ½[(l_a - 1)² + (l_b - 1)²], never negative.
    """
    la = elastic_length(m.anchor, m.theta)
    lb = elastic_length(m.pointer, m.theta)
    return 0.5 * ((la - 1.0) ** 2 + (lb - 1.0) ** 2)


def d_potential(m: Machine, degenerate_length: float = DEGENERATE_LENGTH) -> float:
    """
    First derivative of the potential with respect to θ.

    Args:
        m: Machine state.
        degenerate_length: Elastics shorter than this are ignored.

    Returns:
        ∂V/∂θ at m.theta.
    """
    return (
        _spring_slope(m.anchor, m.theta, degenerate_length)
        + _spring_slope(m.pointer, m.theta, degenerate_length)
    )


def d2_potential(m: Machine, degenerate_length: float = DEGENERATE_LENGTH) -> float:
    """
    Second derivative of the potential with respect to θ.

    Args:
        m: Machine state.
        degenerate_length: Elastics shorter than this are ignored.

    Returns:
        ∂²V/∂θ² at m.theta. Positive at a stable equilibrium.
    """
    return (
        _spring_curvature(m.anchor, m.theta, degenerate_length)
        + _spring_curvature(m.pointer, m.theta, degenerate_length)
    )


def potential_curve(
    m: Machine,
    samples: int = 361
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Sample the potential over one revolution for fixed anchor and pointer.

    Args:
        m: Machine state, its theta is ignored.
        samples: Number of angles in [0, 2π] (both ends included).

    Returns:
        Tuple (thetas, energies) of arrays with shape (samples,).
    """
    thetas = np.linspace(0.0, TWO_PI, samples)
    wx = np.cos(thetas)
    wy = np.sin(thetas)
    la = np.hypot(wx - m.anchor.x, wy - m.anchor.y)
    lb = np.hypot(wx - m.pointer.x, wy - m.pointer.y)
    return thetas, 0.5 * ((la - 1.0) ** 2 + (lb - 1.0) ** 2)


@dataclass(frozen=True)
class PotentialEvaluator:
    """
    The potential's derivatives as functions of θ alone, for a fixed anchor
    and pointer. Bound methods of this object are what the root tracker
    iterates on.
    """
    anchor: Vector2
    pointer: Vector2
    degenerate_length: float = DEGENERATE_LENGTH

    def at(self, theta: float) -> Machine:
        return Machine(anchor=self.anchor, pointer=self.pointer, theta=theta)

    def derivative(self, theta: float) -> float:
        return d_potential(self.at(theta), self.degenerate_length)

    def curvature(self, theta: float) -> float:
        return d2_potential(self.at(theta), self.degenerate_length)
