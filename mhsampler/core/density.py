"""
Density interface for Metropolis sampling.

This module provides the DensityProtocol that every target distribution must
implement. Densities are validated automatically when handed to a sampler.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


_REQUIRED_OPERATIONS = ("probability", "propose", "initial_state")


@runtime_checkable
class DensityProtocol(Protocol):
    """
    Protocol defining the target distribution and how to explore it.

    A density supplies three operations:

    **probability(x)**
        Non-negative density at ``x``. May be unnormalised, only ratios are
        used by the sampler.

    **propose(current)**
        A candidate next value, usually a small random perturbation of
        ``current``. The proposal must eventually be able to reach every
        region of non-zero density.

    **initial_state()**
        A value with strictly positive density, used to seed the chain.

    Examples:
        Class::

            class Uniform:
                def __init__(self, rng):
                    self.rng = rng

                def probability(self, x):
                    return 1.0 if 0.0 <= x <= 1.0 else 0.0

                def propose(self, current):
                    return current + self.rng.uniform(-0.1, 0.1)

                def initial_state(self):
                    return 0.5
    """

    def probability(self, x: Any) -> float:
        """Density at x (>= 0, may be unnormalised)."""
        ...

    def propose(self, current: Any) -> Any:
        """Candidate next value generated from current."""
        ...

    def initial_state(self) -> Any:
        """Seed value with strictly positive density."""
        ...


def validate_density(density: Any) -> None:
    """
    Validate that an object satisfies DensityProtocol.

    Called automatically by samplers at construction.

    Args:
        density: Object to validate.

    Raises:
        TypeError: If one of the required operations is missing or not callable.
    """
    missing = [
        name for name in _REQUIRED_OPERATIONS
        if not callable(getattr(density, name, None))
    ]
    if missing:
        raise TypeError(
            f"{type(density).__name__} does not implement the density interface; "
            f"missing callable(s): {', '.join(missing)}"
        )
