"""
Machine State
=============
The complete state of the catastrophe machine: where the two elastics are
attached and the angle of the disc.

The disc has unit radius and is centred at the origin; both elastics are
attached at the wheel position (cos θ, sin θ). The state is an immutable
value, every transition returns a new Machine.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
import math

from zeemanmachine.config import DEFAULT_ANCHOR, DEFAULT_POINTER, DEFAULT_THETA
from zeemanmachine.model.geometry_primitives import Vector2

TWO_PI = 2.0 * math.pi


def normalize_angle(angle_rad: float) -> float:
    """
    Map an angle into [0, 2π) using a floored modulo.

    Args:
        angle_rad: Any finite angle in radians.

    Returns:
        The equivalent angle in [0, 2π).
    """
    wrapped = angle_rad - math.floor(angle_rad / TWO_PI) * TWO_PI
    # tiny negative inputs round up to exactly 2π
    if wrapped >= TWO_PI:
        return 0.0
    return wrapped


@dataclass(frozen=True)
class Machine:
    """
    Anchor and pointer positions plus the disc angle.

    Attributes:
        anchor: Fixed attachment point of the first elastic.
        pointer: Free end of the second elastic, driven from outside.
        theta: Disc angle in radians.
    """
    anchor: Vector2 = field(default=DEFAULT_ANCHOR)
    pointer: Vector2 = field(default=DEFAULT_POINTER)
    theta: float = DEFAULT_THETA

    def __post_init__(self) -> None:
        if not math.isfinite(self.theta):
            raise ValueError(f"Disc angle must be finite, got {self.theta}.")

    @property
    def wheel(self) -> Vector2:
        """Point on the rim where both elastics are attached."""
        return Vector2.from_polar(1.0, self.theta)

    def with_pointer(self, pointer: Vector2) -> Machine:
        return replace(self, pointer=pointer)

    def with_theta(self, theta: float) -> Machine:
        return replace(self, theta=theta)
