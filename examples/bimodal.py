"""
Example implementation of a user-defined density: an unnormalised mixture of
two Normals. Shows that the sampler only needs density ratios.
"""

import numpy as np
import matplotlib.pyplot as plt

from mhsampler import DensityProtocol, MetropolisSampler
from mhsampler.utils.tools import RandomSource, make_rng


class BimodalDensity(DensityProtocol):
    """
    Equal-weight mixture of N(-separation/2, 1) and N(separation/2, 1),
    without the normalising constant.
    """

    def __init__(self, separation: float = 4.0, step_size: float = 2.5, rng: RandomSource = 0):
        self.half = 0.5 * separation
        self.step_size = step_size
        self.rng = make_rng(rng)

    def probability(self, x: float) -> float:
        return float(np.exp(-0.5 * (x - self.half) ** 2) + np.exp(-0.5 * (x + self.half) ** 2))

    def propose(self, current: float) -> float:
        return current + self.rng.uniform(-self.step_size, self.step_size)

    def initial_state(self) -> float:
        return self.half


if __name__ == "__main__":
    sampler = MetropolisSampler(BimodalDensity(), thinning=5, rng=42)
    samples = sampler.draw(50000)
    print(f"Acceptance rate: {sampler.acceptance_rate:.3f}")
    print(f"Fraction in the left mode: {np.mean(samples < 0):.3f}")

    plt.hist(samples, bins=100, density=True)
    plt.title("Bimodal target")
    plt.show()
