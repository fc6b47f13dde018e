import math
import os
from pathlib import Path
import subprocess
import sys

import numpy as np
import pytest

import zeemanmachine
from zeemanmachine.model.geometry_primitives import Vector2
from zeemanmachine.model.machine import Machine
from zeemanmachine.solvers.sweep import SweepResult, sweep

ANCHOR = Vector2(-3.0, 0.0)
LOWER = Vector2(3.0, -1.5)
UPPER = Vector2(3.0, 1.5)


@pytest.fixture
def machine():
    return Machine(anchor=ANCHOR, pointer=LOWER, theta=0.0)


def test_sweep_visits_every_position(machine):
    result = sweep(machine, LOWER, UPPER, steps=30)

    assert len(result.pointers) == len(result.thetas) == 31
    assert result.pointers[0] == LOWER
    assert result.pointers[-1].y == pytest.approx(UPPER.y)
    assert result.pointers[10].y == pytest.approx(-0.5)


def test_sweep_through_cusp_has_exactly_one_jump(machine):
    result = sweep(machine, LOWER, UPPER, steps=30)
    jumps = result.jumps()

    assert len(jumps) == 1
    (i,) = jumps
    assert result.pointers[i].y > 0.0

    steps = np.abs(result.angle_steps())
    assert steps[i - 1] > math.pi / 2
    # everywhere else the disc follows continuously
    assert np.all(np.delete(steps, i - 1) < 0.5)


def test_reverse_sweep_jumps_elsewhere(machine):
    up = sweep(machine, LOWER, UPPER, steps=30)
    top = Machine(anchor=ANCHOR, pointer=UPPER, theta=up.thetas[-1])
    down = sweep(top, UPPER, LOWER, steps=30)

    assert len(down.jumps()) == 1
    (i,) = down.jumps()
    # hysteresis: going down the jump happens below the x axis
    assert down.pointers[i].y < 0.0


def test_line_missing_the_cusp_has_no_jump():
    m = Machine(anchor=ANCHOR, pointer=Vector2(0.5, -1.5), theta=0.0)
    result = sweep(m, Vector2(0.5, -1.5), Vector2(0.5, 1.5), steps=30)

    assert result.jumps() == []


def test_jumps_use_wrapped_differences():
    result = SweepResult(
        pointers=[Vector2(0.0, float(k)) for k in range(3)],
        thetas=[6.2, 0.05, 3.2],
    )
    steps = result.angle_steps()

    # 6.2 -> 0.05 crosses zero but is a small step
    assert steps[0] == pytest.approx(0.05 + 2 * math.pi - 6.2)
    assert result.jumps() == [2]


def test_sweep_requires_a_step(machine):
    with pytest.raises(ValueError):
        sweep(machine, LOWER, UPPER, steps=0)


def test_importing_solvers_does_not_load_pyplot():
    src = Path(zeemanmachine.__file__).resolve().parent.parent
    code = "import sys, zeemanmachine.solvers; print('matplotlib.pyplot' in sys.modules)"
    env = {**os.environ, "PYTHONPATH": os.pathsep.join([str(src), os.environ.get("PYTHONPATH", "")])}
    out = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, env=env, check=True)

    assert out.stdout.strip() == "False"
