# tests/test_config.py
from dataclasses import FrozenInstanceError

import pytest

from mwrlib.config import DEFAULT_CONFIG, SolverConfig


def test_defaults():
    assert DEFAULT_CONFIG.precision == 1e-6
    assert DEFAULT_CONFIG.max_iterations == 100
    assert DEFAULT_CONFIG.max_bracket_points == 1000
    assert DEFAULT_CONFIG.secant_start == (0.5, 1.0)
    assert DEFAULT_CONFIG.root_tolerance == 1.0
    assert not DEFAULT_CONFIG.strict_bracket
    assert DEFAULT_CONFIG.day_count == "ACT/365F"


def test_config_is_frozen():
    with pytest.raises(FrozenInstanceError):
        DEFAULT_CONFIG.precision = 1e-3


@pytest.mark.parametrize(
    "kwargs",
    [
        {"precision": 0.0},
        {"max_iterations": 0},
        {"max_bracket_points": -1},
        {"root_tolerance": -1.0},
        {"secant_start": (1.0, 1.0)},
        {"secant_start": (0.5,)},
        {"day_count": "30/360"},
    ],
)
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        SolverConfig(**kwargs)
