"""
simulation.py

Runner tying the pieces together: validate the configuration, build the lattice (cold or hot
start), optionally tune the proposal width and thermalize, then run the reported sweeps.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from qcd_lattice.config import SimulationConfig, eps_initial
from qcd_lattice.diagnostics import report_sweep
from qcd_lattice.lattice import Lattice
from qcd_lattice.metropolis import MetropolisUpdater
from qcd_lattice.observables import average_plaquette, bootstrap_mean_std
from qcd_lattice.proposal import randomize_links
from qcd_lattice.random_source import as_random_source

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    final_action: float
    action_history: List[float] = field(default_factory=list)
    accepted: int = 0
    proposals: int = 0
    average_plaquette: float = 1.0
    plaquette_error: float = 0.0
    plaquette_samples: List[float] = field(default_factory=list)
    eps: float = eps_initial
    lattice: Optional[Lattice] = None

    @property
    def acceptance_rate(self):
        return self.accepted / self.proposals if self.proposals > 0 else 0.0


# ---------------- Tuner & Runner ----------------
def tune_step_size(lattice, beta, target=0.5, initial_eps=eps_initial, tries=10, test_sweeps=2,
                   thermalize_sweeps=1, strategy="local", reunitarize=False, random_source=None):
    """
    Adjust eps on a copy of `lattice` until the acceptance fraction is within 0.05 of
    `target` (or `tries` is exhausted). The lattice itself is not modified.
    """
    random_source = as_random_source(random_source)
    eps = initial_eps
    for attempt in range(tries):
        lattice_copy = lattice.copy()
        updater = MetropolisUpdater(lattice_copy, beta, eps=eps, strategy=strategy,
                                    reunitarize=reunitarize, random_source=random_source)
        # quick thermalize copy
        updater.run(thermalize_sweeps, reporter=None)
        accepted = proposed = 0
        for i in range(test_sweeps):
            a, p = updater.sweep()
            accepted += a; proposed += p
        fraction = accepted / proposed if proposed > 0 else 0.0
        logger.info("tuning attempt %d: eps=%.4f acceptance=%.3f", attempt + 1, eps, fraction)
        if abs(fraction - target) < 0.05:
            break
        eps *= 1.2 if fraction > target else 0.8
    return eps


def run_simulation(config=None, random_source=None, reporter=report_sweep):
    """
    Run the Monte Carlo described by `config` (a SimulationConfig).
    The configuration is validated before the lattice is allocated.
    """
    if config is None:
        config = SimulationConfig()
    config.validate()
    random_source = as_random_source(random_source if random_source is not None else config.seed)

    lattice = Lattice(config.lattice_size)
    if config.start == "hot":
        randomize_links(lattice, random_source)

    eps = config.eps
    if config.tune:
        eps = tune_step_size(lattice, config.beta, initial_eps=eps, strategy=config.strategy,
                             reunitarize=config.reunitarize, random_source=random_source)

    updater = MetropolisUpdater(lattice, config.beta, eps=eps, strategy=config.strategy,
                                reunitarize=config.reunitarize, random_source=random_source)
    if config.thermalization:
        updater.run(config.thermalization, reporter=None)
        logger.info("thermalized for %d sweeps, acceptance fraction %.3f",
                    config.thermalization, updater.acceptance_rate)
        updater.accepted = updater.proposals = 0

    # measure the average plaquette after every reported sweep
    plaquette_samples = []

    def measure_and_report(sweep, action):
        plaquette_samples.append(average_plaquette(lattice))
        if reporter is not None:
            reporter(sweep, action)

    action_history = updater.run(config.sweeps, reporter=measure_and_report)
    if plaquette_samples:
        plaquette_mean, plaquette_error = bootstrap_mean_std(plaquette_samples, random_source=random_source)
    else:
        plaquette_mean, plaquette_error = average_plaquette(lattice), 0.0
    return SimulationResult(final_action=updater.action,
                            action_history=action_history,
                            accepted=updater.accepted,
                            proposals=updater.proposals,
                            average_plaquette=float(plaquette_mean),
                            plaquette_error=float(plaquette_error),
                            plaquette_samples=plaquette_samples,
                            eps=eps,
                            lattice=lattice)
