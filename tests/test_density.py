import numpy as np
import pytest

from mhsampler.core.density import DensityProtocol, validate_density


class UniformDensity:
    def __init__(self, rng):
        self.rng = rng

    def probability(self, x):
        return 1.0 if 0.0 <= x <= 1.0 else 0.0

    def propose(self, current):
        return current + self.rng.uniform(-0.1, 0.1)

    def initial_state(self):
        return 0.5


class NoProposal:
    def probability(self, x):
        return 1.0

    def initial_state(self):
        return 0.0


class NonCallableSeed:
    initial_state = 0.0

    def probability(self, x):
        return 1.0

    def propose(self, current):
        return current


def test_density_protocol_runtime_check():
    assert isinstance(UniformDensity(np.random.default_rng(0)), DensityProtocol)
    assert not isinstance(NoProposal(), DensityProtocol)


def test_validate_density_accepts_complete_density():
    validate_density(UniformDensity(np.random.default_rng(0)))


def test_validate_density_rejects_missing_operation():
    with pytest.raises(TypeError, match="propose"):
        validate_density(NoProposal())


def test_validate_density_rejects_non_callable_operation():
    with pytest.raises(TypeError, match="initial_state"):
        validate_density(NonCallableSeed())


def test_validate_density_lists_all_missing_operations():
    with pytest.raises(TypeError) as excinfo:
        validate_density(object())
    message = str(excinfo.value)
    for name in ("probability", "propose", "initial_state"):
        assert name in message
