"""
Configuration & Defaults
========================
This module serves as the central registry for the machine defaults and the
numerical tunables of the solver.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (tolerance, sample count, ...)
   scattered throughout the solver code.
2. Testing: Settings are plain values, so tests can run the solver at
   different tolerances without patching module globals.

Exports:
    DEFAULT_ANCHOR (Vector2): Fixed attachment point of the first elastic.
    DEFAULT_POINTER (Vector2): Initial position of the free pointer.
    DEFAULT_THETA (float): Initial disc angle in radians.
    SolverSettings: Tunables of the root tracker.
    DEFAULT_SETTINGS (SolverSettings): The settings used when none are given.
"""
from __future__ import annotations

from dataclasses import dataclass

from zeemanmachine.model.geometry_primitives import Vector2


# Machine defaults (model space, disc radius = elastic rest length = 1)
DEFAULT_ANCHOR: Vector2 = Vector2(-3.0, 0.0)
DEFAULT_POINTER: Vector2 = Vector2(3.0, 0.0)
DEFAULT_THETA: float = 0.0


@dataclass(frozen=True)
class SolverSettings:
    """
    Numerical tunables of the bracket search and hybrid iteration.

    Attributes:
        tolerance: Convergence threshold on |dV/dθ|.
        samples: Number of candidate angles tried by the bracket search
            over one full revolution (both ends included).
        max_iterations: Cap on hybrid bisection/Newton steps.
        degenerate_length: Elastics shorter than this contribute no force.
    """
    tolerance: float = 0.001
    samples: int = 101
    max_iterations: int = 64
    degenerate_length: float = 1e-12

    def __post_init__(self) -> None:
        if self.tolerance <= 0.0:
            raise ValueError(f"Tolerance must be positive, got {self.tolerance}.")
        if self.samples < 2:
            raise ValueError(f"At least 2 bracket samples are required, got {self.samples}.")
        if self.max_iterations < 0:
            raise ValueError(f"Iteration cap cannot be negative, got {self.max_iterations}.")
        if self.degenerate_length < 0.0:
            raise ValueError(f"Degenerate length cannot be negative, got {self.degenerate_length}.")


DEFAULT_SETTINGS = SolverSettings()
