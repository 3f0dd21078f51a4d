"""
Example: sampling a 1-d Normal distribution with the Metropolis sampler and
comparing the histogram of the chain with the analytic density.
"""

import os

import numpy as np
import matplotlib.pyplot as plt

from mhsampler import MetropolisSampler, Normal1dDensity
from mhsampler.utils.logging import MetropolisLogger
from mhsampler.utils.tools import normpdf

logger = MetropolisLogger.get_logger("mhsampler.examples")


def main(output_dir: str = "output", n_samples: int = 20000, thinning: int = 10):
    os.makedirs(output_dir, exist_ok=True)

    density = Normal1dDensity(mean=0.0, stddev=10.0, step_size=1.0, rng=1)
    sampler = MetropolisSampler(density, thinning=thinning, rng=2)

    samples = sampler.draw(n_samples)
    logger.info("Acceptance rate: %.3f", sampler.acceptance_rate)
    logger.info("Sample mean %.3f, sample std %.3f", samples.mean(), samples.std())

    grid = np.linspace(-40.0, 40.0, 400)
    pdf = [normpdf(x, density.mean, density.stddev) for x in grid]

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.hist(samples, bins=80, density=True, alpha=0.5, label="Metropolis samples")
    ax.plot(grid, pdf, "k-", lw=2, label="N(0, 10^2)")
    ax.set_xlabel("x")
    ax.set_ylabel("density")
    ax.legend()
    fig.savefig(os.path.join(output_dir, "simple_normal.png"), dpi=150, bbox_inches="tight")
    plt.close(fig)


if __name__ == "__main__":
    main()
