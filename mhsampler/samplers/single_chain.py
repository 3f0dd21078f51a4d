"""
Class file for a single chain Metropolis sampler.
"""

import logging
from numbers import Integral
from typing import Any, Optional

import numpy as np

from mhsampler.core.config import SamplerConfig, check_thinning
from mhsampler.core.density import DensityProtocol, validate_density
from mhsampler.core.errors import InvalidConfiguration
from mhsampler.kernels.metropolis import MetropolisKernel
from mhsampler.utils.tools import RandomSource, make_rng

logger = logging.getLogger(__name__)


class MetropolisSampler:
    """
    Single Markov chain driven by the Metropolis accept/reject rule.

    The chain is seeded with ``density.initial_state()`` and advanced one
    transition per reported sample, plus ``thinning`` unreported transitions
    before each one. The current chain value is private; it is only observable
    through ``next_sample()``.

    Attributes:
        density (DensityProtocol): The target distribution (not owned).
        kernel (MetropolisKernel): Transition kernel used for every step.
        n_steps (int): Transitions performed so far, thinning included.
        n_accepted (int): Accepted transitions so far.
    """

    def __init__(self, density: DensityProtocol, thinning: int = 0, rng: RandomSource = None):
        self._thinning = check_thinning(thinning)
        validate_density(density)

        self.density = density
        self.kernel = MetropolisKernel(density, make_rng(rng))
        self._current = density.initial_state()
        self._current_density: Optional[float] = None
        self.n_steps = 0
        self.n_accepted = 0

        logger.debug(
            "Initialised Metropolis sampler on %s with thinning=%d",
            type(density).__name__, self._thinning,
        )

    @classmethod
    def from_config(cls, density: DensityProtocol, config: SamplerConfig) -> "MetropolisSampler":
        """Build a sampler from a SamplerConfig."""
        return cls(density, thinning=config.thinning, rng=config.seed)

    @property
    def thinning(self) -> int:
        """Number of unreported transitions before each sample."""
        return self._thinning

    @property
    def acceptance_rate(self) -> float:
        """Fraction of transitions that were accepted (0.0 before any step)."""
        if self.n_steps == 0:
            return 0.0
        return self.n_accepted / self.n_steps

    def _step(self) -> None:
        if self._current_density is None:
            self._current_density = self.density.probability(self._current)

        state, state_density, accepted = self.kernel.step(self._current, self._current_density)
        self._current = state
        self._current_density = state_density
        self.n_steps += 1
        if accepted:
            self.n_accepted += 1

    def _advance_chain(self, steps: int) -> None:
        """Run `steps` transitions without reporting the intermediate values."""
        for _ in range(steps):
            self._step()

    def next_sample(self) -> Any:
        """
        Generate the next sample of the chain.

        Runs ``thinning`` discarded transitions (if any) followed by one
        reported transition.

        Returns:
        -------
            sample: The chain value after the reported transition, whether or
            not its proposal was accepted.
        """
        if self._thinning > 0:
            self._advance_chain(self._thinning)
        self._step()
        return self._current

    def draw(self, n_samples: int) -> np.ndarray:
        """
        Collect consecutive samples into an array.

        Parameters:
        ----------
            n_samples (int): Number of next_sample() calls.

        Returns:
        -------
            samples (np.ndarray): Array of shape (n_samples,) for scalar states.
        """
        if isinstance(n_samples, bool) or not isinstance(n_samples, Integral) or n_samples < 0:
            raise InvalidConfiguration(f"Number of samples must be a non-negative integer, got {n_samples!r}.")
        samples = np.asarray([self.next_sample() for _ in range(n_samples)])

        logger.debug("Drew %d samples (acceptance rate %.3f)", n_samples, self.acceptance_rate)
        return samples

    def __iter__(self) -> "MetropolisSampler":
        return self

    def __next__(self) -> Any:
        return self.next_sample()

    def __repr__(self) -> str:
        return (
            f"MetropolisSampler(density={type(self.density).__name__}, "
            f"thinning={self._thinning}, n_steps={self.n_steps})"
        )
