"""
qcd_lattice

SU(3) lattice gauge theory on a periodic L^4 lattice: Wilson plaquette action and
Metropolis updates of the link variables.
"""
from qcd_lattice.action import local_action, plaquette_matrix, wilson_action
from qcd_lattice.config import ConfigurationError, SimulationConfig
from qcd_lattice.lattice import Lattice
from qcd_lattice.metropolis import MetropolisUpdater, UpdaterState, metropolis_accept
from qcd_lattice.random_source import RandomSource
from qcd_lattice.simulation import SimulationResult, run_simulation

__version__ = "0.1.0"
