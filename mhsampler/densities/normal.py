"""
One-dimensional Normal target density with a uniform random-walk proposal
"""

import numpy as np

from mhsampler.core.density import DensityProtocol
from mhsampler.core.errors import InvalidConfiguration
from mhsampler.utils.tools import RandomSource, is_valid_density, make_rng, normpdf


class Normal1dDensity(DensityProtocol):
    """
    Normal distribution N(mean, stddev^2) over the real line.

    The density is:
        p(x) = (1 / (stddev * sqrt(2 pi))) * exp(-0.5 * ((x - mean) / stddev)^2)

    Candidates are drawn as current + U(-step_size, step_size), which is
    symmetric, so the plain Metropolis ratio applies. The chain is seeded at
    the mean, where the density is highest.

    Parameters
    ----------
    mean : float
        Location of the distribution.
    stddev : float
        Standard deviation, must be positive.
    step_size : float
        Half-width of the uniform proposal, must be positive.
    rng : None, int or numpy.random.Generator
        Random source for the proposal.
    """

    def __init__(self, mean: float = 0.0, stddev: float = 1.0, step_size: float = 1.0, rng: RandomSource = None):
        if not np.isfinite(mean):
            raise InvalidConfiguration(f"Mean must be finite, got {mean}.")
        if not (np.isfinite(stddev) and stddev > 0):
            raise InvalidConfiguration(f"Standard deviation must be finite and positive, got {stddev}.")
        if not (np.isfinite(step_size) and step_size > 0):
            raise InvalidConfiguration(f"Step size must be finite and positive, got {step_size}.")
        self.mean = float(mean)
        self.stddev = float(stddev)
        self.step_size = float(step_size)
        self.rng = make_rng(rng)

        # overflows to inf for a subnormal stddev
        if not is_valid_density(self.probability(self.mean), strictly_positive=True):
            raise InvalidConfiguration(
                f"Density at the mean is not finite and positive for stddev={self.stddev}."
            )

    def probability(self, x: float) -> float:
        return normpdf(x, self.mean, self.stddev)

    def propose(self, current: float) -> float:
        return current + self.rng.uniform(-self.step_size, self.step_size)

    def initial_state(self) -> float:
        return self.mean

    def __repr__(self) -> str:
        return f"Normal1dDensity(mean={self.mean:.3f}, stddev={self.stddev:.3f}, step_size={self.step_size:.3f})"
