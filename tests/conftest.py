import matplotlib

matplotlib.use("Agg")

import pytest

from qcd_lattice.random_source import RandomSource


class FixedUniformSource(RandomSource):
    """Gaussian draws from a seeded generator, uniform draws fixed to `value`."""

    def __init__(self, value, seed=0):
        super().__init__(seed)
        self.value = value
        self.uniform_calls = 0

    def uniform(self):
        self.uniform_calls += 1
        return self.value


@pytest.fixture
def random_source():
    return RandomSource(1234)


@pytest.fixture
def fixed_uniform():
    return FixedUniformSource
