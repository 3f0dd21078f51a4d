"""
Class file for the Metropolis kernel
"""

# Imports
import logging
from typing import Any, Tuple

import numpy as np

from mhsampler.core.density import DensityProtocol
from mhsampler.core.errors import UndefinedAcceptanceRatio
from mhsampler.utils.tools import is_valid_density

logger = logging.getLogger(__name__)


def acceptance_ratio(proposed_density: float, current_density: float) -> float:
    """
    Compute the Metropolis acceptance ratio p(proposed) / p(current).

    Parameters:
    ----------
        proposed_density (float): Density of the candidate, finite and >= 0.
        current_density (float): Density of the current state, finite and > 0.

    Returns:
    -------
        alpha (float): The (uncapped) density ratio.

    Raises:
    ------
        UndefinedAcceptanceRatio: If either density is outside its valid range.
    """
    if not is_valid_density(current_density, strictly_positive=True):
        raise UndefinedAcceptanceRatio(
            f"Density of the current state must be finite and positive, got {current_density!r}."
        )
    if not is_valid_density(proposed_density):
        raise UndefinedAcceptanceRatio(
            f"Density of the candidate must be finite and non-negative, got {proposed_density!r}."
        )
    return float(proposed_density) / float(current_density)


class MetropolisKernel:
    """
    Metropolis transition kernel with a symmetric proposal.

    The proposal is delegated to the density; the kernel only decides whether
    to move. Moves to equal or higher density are always accepted, moves to
    lower density are accepted with probability alpha.
    """

    def __init__(self, density: DensityProtocol, rng: np.random.Generator):
        self.density = density
        self.rng = rng

    def accept(self, alpha: float) -> bool:
        """Accept/reject decision; draws a uniform only when alpha < 1."""
        if alpha >= 1.0:
            return True
        return self.rng.random() < alpha

    def step(self, current: Any, current_density: float) -> Tuple[Any, float, bool]:
        """
        Perform one Metropolis transition.

        Parameters:
        ----------
            current: Current chain value.
            current_density (float): Cached density of current.

        Returns:
        -------
            state: The new chain value (candidate if accepted, current otherwise).
            density (float): Density of the returned state.
            accepted (bool): Whether the candidate was accepted.
        """
        candidate = self.density.propose(current)
        candidate_density = self.density.probability(candidate)

        try:
            alpha = acceptance_ratio(candidate_density, current_density)
        except UndefinedAcceptanceRatio:
            logger.error("Cannot form acceptance ratio at current=%r, candidate=%r", current, candidate)
            raise

        if self.accept(alpha):
            return candidate, float(candidate_density), True
        return current, current_density, False
