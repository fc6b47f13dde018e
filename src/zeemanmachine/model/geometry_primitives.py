"""
Geometric Primitives for the machine model.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector2:
    """
    An immutable point (or displacement) in the model plane.
    """
    x: float
    y: float

    def distance_to(self, other: Vector2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])

    @classmethod
    def from_polar(cls, radius: float, angle_rad: float) -> Vector2:
        """Point at distance `radius` from the origin in direction `angle_rad`."""
        return cls(radius * math.cos(angle_rad), radius * math.sin(angle_rad))
