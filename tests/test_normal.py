import numpy as np
import pytest
from scipy import stats

from mhsampler.core.density import DensityProtocol
from mhsampler.core.errors import InvalidConfiguration
from mhsampler.densities.normal import Normal1dDensity


def test_normal_is_a_density():
    assert isinstance(Normal1dDensity(), DensityProtocol)


@pytest.mark.parametrize("x", [-30.0, -1.0, 0.0, 2.5, 17.0])
def test_probability_matches_scipy(x):
    density = Normal1dDensity(mean=1.0, stddev=10.0)
    assert np.isclose(density.probability(x), stats.norm.pdf(x, loc=1.0, scale=10.0))


def test_initial_state_is_mean_with_positive_density():
    density = Normal1dDensity(mean=-4.0, stddev=0.001)
    assert density.initial_state() == -4.0
    assert density.probability(density.initial_state()) > 0.0


def test_proposals_are_bounded_and_centered():
    density = Normal1dDensity(step_size=0.5, rng=0)
    steps = np.array([density.propose(2.0) - 2.0 for _ in range(10000)])

    assert np.all(np.abs(steps) <= 0.5)
    assert abs(steps.mean()) < 0.01


def test_proposals_reproducible_with_seed():
    a = Normal1dDensity(rng=9)
    b = Normal1dDensity(rng=9)
    assert [a.propose(0.0) for _ in range(5)] == [b.propose(0.0) for _ in range(5)]


@pytest.mark.parametrize("stddev", [0.0, -1.0])
def test_non_positive_stddev_rejected(stddev):
    with pytest.raises(InvalidConfiguration):
        Normal1dDensity(stddev=stddev)


def test_non_positive_step_size_rejected():
    with pytest.raises(InvalidConfiguration):
        Normal1dDensity(step_size=0.0)


def test_repr():
    assert repr(Normal1dDensity(0, 10)) == "Normal1dDensity(mean=0.000, stddev=10.000, step_size=1.000)"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"mean": np.inf},
        {"mean": np.nan},
        {"stddev": np.inf},
        {"stddev": np.nan},
        {"step_size": np.inf},
        {"step_size": np.nan},
    ],
)
def test_non_finite_parameters_rejected(kwargs):
    with pytest.raises(InvalidConfiguration):
        Normal1dDensity(**kwargs)


def test_subnormal_stddev_rejected():
    # density at the mean overflows, so the chain could not be seeded
    with np.errstate(over="ignore"):
        with pytest.raises(InvalidConfiguration):
            Normal1dDensity(stddev=1e-320)


def test_negative_seed_rejected():
    with pytest.raises(InvalidConfiguration):
        Normal1dDensity(rng=-1)
