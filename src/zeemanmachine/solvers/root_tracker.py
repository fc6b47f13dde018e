"""
Root Tracker
============
Hybrid bisection/Newton search for a root of f = dV/dθ on a periodic domain,
reached by moving down-hill from a starting angle.

The search runs in two stages:

1. Bracket search (`init_min`): walk one full revolution in the down-hill
   direction and stop at the first pair of samples where f changes sign while
   f' is positive at both samples. This screens out brackets around an
   inflection point, and around a maximum the walk reaches after stepping
   over a well narrower than one sample.
2. Hybrid iteration (`iterate`): shrink the bracket with a down-hill-only
   Newton step when it stays strictly inside the bracket, and a regula falsi
   step otherwise, until |f| drops below the tolerance.

Expected failures are returned as values (`BracketNotFound`, `NotConverged`),
never raised.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Callable, Optional, Union

from zeemanmachine.config import DEFAULT_SETTINGS, SolverSettings
from zeemanmachine.model.machine import TWO_PI, normalize_angle

logger = logging.getLogger(__name__)

ScalarFunction = Callable[[float], float]


class Method(Enum):
    """How the most recent point of a search was produced."""
    GUESS = "guess"
    BISECT = "bisect"
    NEWTON = "newton"


def sign_of(value: float) -> float:
    """Return +1.0, -1.0 or 0.0 (also for -0.0)."""
    if value > 0.0:
        return 1.0
    if value < 0.0:
        return -1.0
    return 0.0


@dataclass(frozen=True)
class Phase:
    """A sample (argument, function value, derivative value)."""
    x: float
    y: float
    dy: float

    @classmethod
    def evaluate(cls, f: ScalarFunction, df: ScalarFunction, x: float) -> Phase:
        return cls(x, f(x), df(x))


@dataclass
class SearchState:
    """
    Working state of one root search.

    `low` and `high` straddle a sign change of f, `high` is always the most
    recently evaluated point. When the start is already a stable critical
    point both ends are the same phase.
    """
    f: ScalarFunction
    df: ScalarFunction
    low: Phase
    high: Phase
    method: Method = Method.GUESS
    history: list[Method] = field(default_factory=list)


@dataclass(frozen=True)
class BracketNotFound:
    """No down-hill root within one revolution of `start`."""
    start: float
    samples: int


@dataclass(frozen=True)
class Converged:
    """The iteration reached |f| < tolerance at `theta` (normalized)."""
    theta: float
    iterations: int
    methods: tuple[Method, ...] = ()


@dataclass(frozen=True)
class NotConverged:
    """The iteration cap was hit; `last` is the most recent phase."""
    last: Phase
    iterations: int
    methods: tuple[Method, ...] = ()


IterationResult = Union[Converged, NotConverged]
SearchResult = Union[Converged, NotConverged, BracketNotFound]


def init_min(
    f: ScalarFunction,
    df: ScalarFunction,
    start: float,
    settings: SolverSettings = DEFAULT_SETTINGS
) -> SearchState | BracketNotFound:
    """
    Find a bracket around the first root of `f` down-hill from `start`.

    Args:
        f: Function whose root is sought (the potential's slope).
        df: Derivative of `f` (the potential's curvature).
        start: Angle to start from, usually the previous solution.
        settings: Tolerance and number of samples over the revolution.

    Returns:
        A SearchState ready for `iterate`, or BracketNotFound.
    """
    origin = Phase.evaluate(f, df, start)

    # Already resting in a minimum (or on a flat potential)
    if abs(origin.y) < settings.tolerance and origin.dy >= 0.0:
        return SearchState(f, df, low=origin, high=origin)

    # Down-hill is against the slope; on an exact maximum pick a side
    direction = -sign_of(origin.y)
    if direction == 0.0:
        direction = 1.0

    step = TWO_PI / (settings.samples - 1)
    previous = origin
    for i in range(1, settings.samples):
        candidate = Phase.evaluate(f, df, start + direction * step * i)
        # Sign change of the slope with positive curvature at both ends: a minimum
        if previous.y * candidate.y < 0.0 and previous.dy > 0.0 and candidate.dy > 0.0:
            logger.debug(
                f"Bracket [{previous.x:.4f}, {candidate.x:.4f}] found after {i} samples."
            )
            return SearchState(f, df, low=previous, high=candidate)
        previous = candidate

    logger.debug(f"No bracket within one revolution of {start:.4f}.")
    return BracketNotFound(start=start, samples=settings.samples)


def _newton_candidate(high: Phase) -> Optional[float]:
    """Newton step from `high` that always moves towards a smaller |f|."""
    if high.dy == 0.0:
        return None
    return high.x - sign_of(high.y) * abs(high.y / high.dy)


def step(state: SearchState) -> None:
    """Perform one hybrid iteration on `state` in place."""
    low, high = state.low, state.high

    x = _newton_candidate(high)
    lower, upper = min(low.x, high.x), max(low.x, high.x)
    if x is not None and lower < x < upper:
        method = Method.NEWTON
    else:
        x = low.x - low.y * (high.x - low.x) / (high.y - low.y)
        method = Method.BISECT

    new = Phase.evaluate(state.f, state.df, x)
    if sign_of(new.y) != sign_of(low.y):
        state.high = new
    else:
        state.low, state.high = high, new

    state.method = method
    state.history.append(method)


def iterate(state: SearchState, settings: SolverSettings = DEFAULT_SETTINGS) -> IterationResult:
    """
    Shrink the bracket of `state` until |f(high)| < tolerance.

    Args:
        state: Output of `init_min`. Mutated.
        settings: Tolerance and iteration cap.

    Returns:
        Converged with the normalized angle, or NotConverged.
    """
    iterations = 0
    while abs(state.high.y) >= settings.tolerance:
        if iterations == settings.max_iterations:
            logger.debug(
                f"No convergence after {iterations} iterations, |f| = {abs(state.high.y):.2e}."
            )
            return NotConverged(state.high, iterations, tuple(state.history))
        step(state)
        iterations += 1

    return Converged(normalize_angle(state.high.x), iterations, tuple(state.history))


def find_min(
    f: ScalarFunction,
    df: ScalarFunction,
    start: float,
    settings: SolverSettings = DEFAULT_SETTINGS
) -> SearchResult:
    """Bracket search followed by the hybrid iteration."""
    state = init_min(f, df, start, settings)
    if isinstance(state, BracketNotFound):
        return state
    return iterate(state, settings)
