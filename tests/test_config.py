import dataclasses

import pytest

from zeemanmachine.config import DEFAULT_SETTINGS, SolverSettings


def test_default_settings():
    assert DEFAULT_SETTINGS.tolerance == 0.001
    assert DEFAULT_SETTINGS.samples == 101
    assert DEFAULT_SETTINGS.max_iterations == 64


def test_settings_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SETTINGS.samples = 3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tolerance": 0.0},
        {"tolerance": -1e-3},
        {"samples": 1},
        {"max_iterations": -1},
        {"degenerate_length": -1.0},
    ],
)
def test_invalid_settings_raise(kwargs):
    with pytest.raises(ValueError):
        SolverSettings(**kwargs)
