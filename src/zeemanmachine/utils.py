from __future__ import annotations

from dataclasses import dataclass
import math

from zeemanmachine.model.geometry_primitives import Vector2


def wrap_angle_difference(new: float, old: float) -> float:
    """Signed difference new - old wrapped into (-π, π]."""
    diff = math.remainder(new - old, 2.0 * math.pi)
    if diff == -math.pi:
        return math.pi
    return diff


@dataclass(frozen=True)
class ViewTransform:
    """
    Maps between screen pixels (y pointing down) and model coordinates
    (y pointing up, disc radius = 1).

    Attributes:
        scale: Pixels per model unit.
        offset_x: Screen x of the model origin.
        offset_y: Screen y of the model origin.
    """
    scale: float = 50.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    def __post_init__(self) -> None:
        if self.scale <= 0.0:
            raise ValueError(f"Scale must be positive, got {self.scale}.")

    def to_model(self, screen_x: float, screen_y: float) -> Vector2:
        return Vector2(
            (screen_x - self.offset_x) / self.scale,
            (self.offset_y - screen_y) / self.scale
        )

    def to_screen(self, point: Vector2) -> tuple[float, float]:
        return (
            self.offset_x + point.x * self.scale,
            self.offset_y - point.y * self.scale
        )
