"""
Configuration for the Metropolis sampler.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Optional

from mhsampler.core.errors import InvalidConfiguration


def check_thinning(thinning: int) -> int:
    """
    Validate a thinning interval.

    Parameters:
    ----------
        thinning (int): Number of unreported transitions between samples.

    Returns:
    -------
        thinning (int): The interval as a plain int.

    Raises:
    ------
        InvalidConfiguration: If the interval is not an integer or is negative.
    """
    if isinstance(thinning, bool) or not isinstance(thinning, Integral):
        raise InvalidConfiguration(
            f"Thinning interval must be an integer, got {type(thinning).__name__}."
        )
    if thinning < 0:
        raise InvalidConfiguration(
            f"Thinning interval must be greater than or equal to 0, got {thinning}."
        )
    return int(thinning)


@dataclass(frozen=True)
class SamplerConfig:
    """
    Settings of a single Metropolis chain.

    Attributes:
        thinning (int):
            Number of transitions discarded before each reported sample.
            0 disables thinning. Default: 0.

        seed (Optional[int]):
            Seed of the random source used for the accept/reject test.
            None draws fresh entropy. Default: None.
    """

    thinning: int = 0
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        check_thinning(self.thinning)
        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, Integral):
                raise InvalidConfiguration(
                    f"Seed must be an integer or None, got {type(self.seed).__name__}."
                )
            if self.seed < 0:
                raise InvalidConfiguration(f"Seed must be non-negative, got {self.seed}.")
