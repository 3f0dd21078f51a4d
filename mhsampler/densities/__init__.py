from mhsampler.densities.normal import Normal1dDensity

__all__ = [
    "Normal1dDensity",
]
