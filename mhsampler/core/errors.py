"""
Exceptions raised by the Metropolis sampler
"""


class MetropolisError(Exception):
    """Base class for all sampler errors."""


class InvalidConfiguration(MetropolisError, ValueError):
    """
    Raised when a sampler or density is constructed with invalid parameters,
    e.g. a negative thinning interval.
    """


class UndefinedAcceptanceRatio(MetropolisError, ArithmeticError):
    """
    Raised when the acceptance ratio cannot be formed.

    This happens when the density of the current state is not a finite positive
    number, or when the density of a candidate is negative, NaN or infinite.
    """
