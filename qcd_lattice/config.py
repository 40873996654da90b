"""
config.py

Run parameters for the gauge-field Monte Carlo and their validation.
Invalid parameters are rejected before any lattice storage is allocated.
"""
import numbers
from dataclasses import dataclass
from typing import Optional

import numpy as np

# ---------------- Defaults ----------------
DIMENSIONS = 4             # spacetime dimensions (x, y, z, t)
lattice_size_L = 4         # sites per direction
coupling_beta = 5.7        # Wilson coupling, beta = 6/g^2
eps_initial = 0.05         # width of the Gaussian proposal noise
MC_sweeps = 10             # Monte Carlo sweeps reported to the user

UPDATE_STRATEGIES = ("local", "global")
START_CONFIGURATIONS = ("cold", "hot")


class ConfigurationError(ValueError):
    """Raised for run parameters the simulation cannot start with."""


def check_lattice_size(L):
    if isinstance(L, bool) or not isinstance(L, numbers.Integral):
        raise ConfigurationError(f"lattice size must be an integer, got {L!r}")
    if L <= 0:
        raise ConfigurationError(f"lattice size must be positive, got {L}")
    return int(L)


def check_sweeps(n_sweeps):
    if isinstance(n_sweeps, bool) or not isinstance(n_sweeps, numbers.Integral):
        raise ConfigurationError(f"number of sweeps must be an integer, got {n_sweeps!r}")
    if n_sweeps < 0:
        raise ConfigurationError(f"number of sweeps must be non-negative, got {n_sweeps}")
    return int(n_sweeps)


def check_strategy(strategy):
    if strategy not in UPDATE_STRATEGIES:
        raise ConfigurationError(
            f"unknown update strategy {strategy!r}, expected one of {UPDATE_STRATEGIES}")
    return strategy


@dataclass
class SimulationConfig:
    lattice_size: int = lattice_size_L
    beta: float = coupling_beta
    sweeps: int = MC_sweeps
    eps: float = eps_initial
    strategy: str = "local"
    reunitarize: bool = False
    start: str = "cold"
    seed: Optional[int] = None
    thermalization: int = 0
    tune: bool = False

    def validate(self):
        """Check every field; raises ConfigurationError on the first bad one."""
        check_lattice_size(self.lattice_size)
        check_sweeps(self.sweeps)
        check_sweeps(self.thermalization)
        check_strategy(self.strategy)
        if self.start not in START_CONFIGURATIONS:
            raise ConfigurationError(
                f"unknown start {self.start!r}, expected one of {START_CONFIGURATIONS}")
        if not self.eps > 0:
            raise ConfigurationError(f"proposal width eps must be positive, got {self.eps}")
        if not np.isfinite(self.beta):
            raise ConfigurationError(f"beta must be finite, got {self.beta}")
        return self
