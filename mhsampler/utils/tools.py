"""
Script housing some helper functions
"""

# Imports
from numbers import Integral
from typing import Union

import numpy as np

from mhsampler.core.errors import InvalidConfiguration

RandomSource = Union[None, int, np.random.Generator]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """
    Turn a seed or generator into a numpy Generator.

    Inputs:
    ------
        rng: None for fresh OS entropy, an int seed, or an existing Generator
            (returned as is so that it can be shared).

    Raises:
    ------
        InvalidConfiguration: If the seed is a negative integer.

    Returns:
    -------
        generator: numpy.random.Generator
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, (bool, float)):
        raise TypeError(f"rng must be None, an int seed or a numpy Generator, got {type(rng).__name__}.")
    if isinstance(rng, Integral) and rng < 0:
        raise InvalidConfiguration(f"Seed must be non-negative, got {rng}.")
    return np.random.default_rng(rng)


def normpdf(x: float, mean: float = 0.0, stddev: float = 1.0) -> float:
    """Density of a univariate Normal distribution, computed through its log."""
    exponent = -0.5 * ((x - mean) / stddev) ** 2
    log_prob = -np.log(stddev * np.sqrt(2.0 * np.pi)) + exponent
    return float(np.exp(log_prob))


def is_valid_density(value: float, strictly_positive: bool = False) -> bool:
    """
    Check that a density value can take part in an acceptance ratio.

    Inputs:
    ------
        value: density value
        strictly_positive: if True, zero is rejected as well

    Returns:
    -------
        bool: True if value is finite and non-negative (positive if strictly_positive)
    """
    if value is None:
        return False
    value = float(value)
    if not np.isfinite(value):
        return False
    return value > 0.0 if strictly_positive else value >= 0.0
