"""
Solver Engine
=============
Finds the disc angle that minimises the spring potential.

Note: This package should be pure Python/NumPy and should NOT import PySide6.
matplotlib is only imported when a sweep is plotted.
"""
from zeemanmachine.solvers.root_tracker import (
    BracketNotFound, Converged, Method, NotConverged, Phase, SearchState, find_min, init_min, iterate
)
from zeemanmachine.solvers.updater import MachineUpdater, advance
from zeemanmachine.solvers.sweep import SweepResult, sweep
