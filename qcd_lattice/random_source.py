"""
random_source.py

Seedable source of the uniform and Gaussian draws used by the Monte Carlo.
Passing one RandomSource around (instead of calling np.random directly) makes every run
reproducible from its seed.
"""
import numpy as np


class RandomSource:

    def __init__(self, seed=None):
        self.seed = seed
        self.generator = np.random.default_rng(seed)

    def uniform(self):
        """One draw from [0, 1)."""
        return float(self.generator.random())

    def normal(self, scale=1.0, size=None):
        return self.generator.normal(0.0, scale, size=size)

    def integers(self, high, size=None):
        return self.generator.integers(0, high, size=size)


def as_random_source(random_source=None):
    """Accept a RandomSource, an integer seed or None."""
    if isinstance(random_source, RandomSource):
        return random_source
    return RandomSource(random_source)
