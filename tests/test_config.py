"""Tests for filter configuration."""

import numpy as np
import pytest

import config
from config import FilterConfig
from errors import InvalidConfiguration


def test_defaults():
    cfg = FilterConfig()
    assert cfg.start_size == config.DEFAULT_START_SIZE
    assert cfg.num_tables == config.DEFAULT_NUM_TABLES


@pytest.mark.parametrize(
    "kwargs",
    [
        {"num_tables": 0},
        {"num_tables": -2},
        {"start_size": -1},
        {"start_size": 10.5},
        {"num_tables": "3"},
        {"num_tables": True},
    ],
)
def test_invalid_configuration(kwargs):
    with pytest.raises(InvalidConfiguration):
        FilterConfig(**kwargs)


def test_invalid_configuration_is_value_error():
    with pytest.raises(ValueError):
        FilterConfig(num_tables=0)


def test_zero_start_size_allowed():
    assert FilterConfig(start_size=0, num_tables=1).start_size == 0


def test_numpy_integers_normalised_to_int():
    cfg = FilterConfig(start_size=np.int64(100), num_tables=np.uint8(3))
    assert cfg.start_size == 100 and type(cfg.start_size) is int
    assert cfg.num_tables == 3 and type(cfg.num_tables) is int


def test_numpy_integers_still_range_checked():
    with pytest.raises(InvalidConfiguration):
        FilterConfig(num_tables=np.int64(0))
    with pytest.raises(InvalidConfiguration):
        FilterConfig(start_size=np.int64(-1))
