from mhsampler.samplers.single_chain import MetropolisSampler

__all__ = [
    "MetropolisSampler",
]
