"""
Machine Updater
===============
Moves the disc to the minimum of the potential that is reachable down-hill
from its previous angle whenever the pointer moves.

If no such minimum is found the disc keeps its angle ("sticks"). This is the
visible precursor of a catastrophe jump: once the pointer has moved far
enough the bracket search lands on the remaining minimum.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

from zeemanmachine.config import DEFAULT_SETTINGS, SolverSettings
from zeemanmachine.model.geometry_primitives import Vector2
from zeemanmachine.model.machine import Machine
from zeemanmachine.model.potential import PotentialEvaluator, d2_potential
from zeemanmachine.solvers.root_tracker import BracketNotFound, Converged, SearchResult, find_min

logger = logging.getLogger(__name__)


def solve(
    machine: Machine,
    new_pointer: Vector2,
    settings: SolverSettings = DEFAULT_SETTINGS
) -> SearchResult:
    """Run the root tracker for `new_pointer`, starting at `machine.theta`."""
    evaluator = PotentialEvaluator(machine.anchor, new_pointer, settings.degenerate_length)
    return find_min(evaluator.derivative, evaluator.curvature, machine.theta, settings)


def _apply(
    machine: Machine,
    new_pointer: Vector2,
    result: SearchResult,
    settings: SolverSettings
) -> tuple[Machine, bool]:
    """
    Commit the outcome of a search to a new Machine value.

    Returns:
        The new machine and whether the disc took the angle the search found.
    """
    moved = machine.with_pointer(new_pointer)

    if isinstance(result, Converged):
        settled = moved.with_theta(result.theta)
        curvature = d2_potential(settled, settings.degenerate_length)
        if curvature >= 0.0:
            return settled, True
        logger.debug(
            f"Disc sticks at θ = {machine.theta:.4f}: "
            f"θ = {result.theta:.4f} is a maximum (d²V/dθ² = {curvature:.4f})."
        )
    elif isinstance(result, BracketNotFound):
        logger.debug(f"Disc sticks at θ = {machine.theta:.4f}: no bracket found.")
    else:
        logger.debug(
            f"Disc sticks at θ = {machine.theta:.4f}: "
            f"not converged after {result.iterations} iterations."
        )
    return moved, False


def advance(
    machine: Machine,
    new_pointer: Vector2,
    settings: SolverSettings = DEFAULT_SETTINGS
) -> Machine:
    """
    Return the machine after moving the pointer to `new_pointer`.

    Args:
        machine: Current state.
        new_pointer: New pointer position in model coordinates.
        settings: Solver tunables.

    Returns:
        A new Machine with the new pointer and, if the search converged on a
        point of non-negative curvature, the new normalized angle. Otherwise
        the angle is unchanged.
    """
    moved, _ = _apply(machine, new_pointer, solve(machine, new_pointer, settings), settings)
    return moved


@dataclass
class MachineUpdater:
    """
    Owner of the single machine slot of a running application.

    Every pointer event replaces the whole Machine value; `tracked` and
    `stuck` count how the updates went.
    """
    settings: SolverSettings = DEFAULT_SETTINGS
    machine: Machine = field(default_factory=Machine)
    tracked: int = 0
    stuck: int = 0

    def move_pointer(self, pointer: Vector2) -> Machine:
        result = solve(self.machine, pointer, self.settings)
        self.machine, settled = _apply(self.machine, pointer, result, self.settings)
        if settled:
            self.tracked += 1
        else:
            self.stuck += 1
        return self.machine

    def reset(self, machine: Machine | None = None) -> Machine:
        self.machine = machine if machine is not None else Machine()
        self.tracked = 0
        self.stuck = 0
        logger.info("Machine state has been reset.")
        return self.machine
