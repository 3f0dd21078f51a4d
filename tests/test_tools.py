import numpy as np
import pytest
from scipy import stats

from mhsampler.core.errors import InvalidConfiguration
from mhsampler.utils.tools import is_valid_density, make_rng, normpdf


def test_make_rng_passes_generator_through():
    rng = np.random.default_rng(3)
    assert make_rng(rng) is rng


def test_make_rng_seed_is_reproducible():
    a = make_rng(123).random(5)
    b = make_rng(123).random(5)
    assert np.array_equal(a, b)


def test_make_rng_none_returns_generator():
    assert isinstance(make_rng(None), np.random.Generator)


def test_make_rng_rejects_float_seed():
    with pytest.raises(TypeError):
        make_rng(1.5)


@pytest.mark.parametrize("seed", [-1, np.int64(-7)])
def test_make_rng_rejects_negative_seed(seed):
    with pytest.raises(InvalidConfiguration):
        make_rng(seed)


@pytest.mark.parametrize("x, mean, stddev", [(0.0, 0.0, 1.0), (1.3, -2.0, 0.5), (25.0, 0.0, 10.0), (0.001, 0.0, 0.001)])
def test_normpdf_matches_scipy(x, mean, stddev):
    assert np.isclose(normpdf(x, mean, stddev), stats.norm.pdf(x, loc=mean, scale=stddev))


def test_normpdf_underflows_to_zero_far_in_tail():
    assert normpdf(1e6, 0.0, 1.0) == 0.0


@pytest.mark.parametrize("value, expected", [(1.0, True), (0.0, True), (-1e-12, False), (np.nan, False), (np.inf, False), (None, False)])
def test_is_valid_density(value, expected):
    assert is_valid_density(value) is expected


def test_is_valid_density_strictly_positive_rejects_zero():
    assert not is_valid_density(0.0, strictly_positive=True)
    assert is_valid_density(1e-300, strictly_positive=True)
