"""
mhsampler: Metropolis sampling of unnormalised densities

Example:
    >>> from mhsampler import MetropolisSampler, Normal1dDensity
    >>>
    >>> density = Normal1dDensity(mean=0.0, stddev=10.0, rng=1)
    >>> sampler = MetropolisSampler(density, thinning=100, rng=2)
    >>> samples = sampler.draw(1000)
"""

__version__ = "0.1.0"

from mhsampler.core.config import SamplerConfig
from mhsampler.core.density import DensityProtocol, validate_density
from mhsampler.core.errors import InvalidConfiguration, MetropolisError, UndefinedAcceptanceRatio
from mhsampler.densities.normal import Normal1dDensity
from mhsampler.kernels.metropolis import MetropolisKernel, acceptance_ratio
from mhsampler.samplers.single_chain import MetropolisSampler

__all__ = [
    "SamplerConfig",
    "DensityProtocol",
    "validate_density",
    "MetropolisError",
    "InvalidConfiguration",
    "UndefinedAcceptanceRatio",
    "Normal1dDensity",
    "MetropolisKernel",
    "acceptance_ratio",
    "MetropolisSampler",
]
