"""
Pointer Sweep
=============
Drives the pointer along a straight line and records the disc angle after
every step. Used by the command-line interface and for studying where the
catastrophe jumps happen.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from zeemanmachine.config import DEFAULT_SETTINGS, SolverSettings
from zeemanmachine.model.geometry_primitives import Vector2
from zeemanmachine.model.machine import Machine
from zeemanmachine.solvers.updater import advance
from zeemanmachine.utils import wrap_angle_difference

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """Pointer positions of a sweep and the disc angle reached at each."""
    pointers: list[Vector2] = field(default_factory=list)
    thetas: list[float] = field(default_factory=list)

    def angle_steps(self) -> npt.NDArray[np.float64]:
        """Wrapped angle change between consecutive sweep positions."""
        return np.array([
            wrap_angle_difference(new, old)
            for old, new in zip(self.thetas[:-1], self.thetas[1:])
        ])

    def jumps(self, threshold: float = math.pi / 2) -> list[int]:
        """
        Indices of sweep positions reached by a jump larger than `threshold`.

        Args:
            threshold: Minimum absolute angle change counted as a jump.

        Returns:
            List of indices i such that thetas[i] differs from thetas[i - 1]
            by more than `threshold`.
        """
        steps = self.angle_steps()
        return [int(i) + 1 for i in np.flatnonzero(np.abs(steps) > threshold)]

    def plot(self, threshold: float = math.pi / 2) -> None:
        """
        Plot the disc angle against the sweep position.
        """
        import matplotlib.pyplot as plt

        positions = np.arange(len(self.thetas))
        thetas = np.degrees(np.asarray(self.thetas))

        plt.rcParams["figure.constrained_layout.use"] = True
        fig = plt.figure(figsize=(7, 5))

        plt.plot(positions, thetas, 'b.-', lw=1.5)
        for i in self.jumps(threshold):
            plt.axvline(i - 0.5, color='r', linestyle='--', lw=1)

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        start, end = self.pointers[0], self.pointers[-1]
        plt.title(f"Pointer sweep ({start.x:g}, {start.y:g}) → ({end.x:g}, {end.y:g})")
        plt.xlabel("Step")
        plt.ylabel("Disc angle θ (°)")

        plt.ylim(-5, 365)
        plt.show()


def sweep(
    machine: Machine,
    start: Vector2,
    end: Vector2,
    steps: int,
    settings: SolverSettings = DEFAULT_SETTINGS
) -> SweepResult:
    """
    Move the pointer from `start` to `end` in `steps` equal increments.

    Args:
        machine: Initial state, its theta seeds the first search.
        start: First pointer position.
        end: Last pointer position (included).
        steps: Number of increments, the sweep visits steps + 1 positions.
        settings: Solver tunables.

    Returns:
        The visited pointer positions and angles.
    """
    if steps < 1:
        raise ValueError(f"A sweep needs at least one step, got {steps}.")

    result = SweepResult()
    for px, py in np.linspace(start.to_array(), end.to_array(), steps + 1):
        pointer = Vector2(float(px), float(py))
        machine = advance(machine, pointer, settings)
        result.pointers.append(pointer)
        result.thetas.append(machine.theta)

    for i in result.jumps():
        p = result.pointers[i]
        logger.info(
            f"Catastrophe jump at pointer ({p.x:.3f}, {p.y:.3f}): "
            f"θ {result.thetas[i - 1]:.4f} → {result.thetas[i]:.4f}"
        )
    return result
