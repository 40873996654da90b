"""
metropolis.py

Metropolis updates of the SU(3) links under the Wilson action.

One sweep proposes a new value for every link, in storage order. For each link:
  - save the old link, propose U' = R U (proposal.propose_link) and write it to the lattice,
  - compute dS = S_new - S, either from the full action ("global", recomputes every plaquette)
    or from the plaquettes touching the link only ("local"),
  - accept if dS <= 0, otherwise accept with probability exp(-dS); on rejection restore the
    old link and keep S.
Both strategies use the random source identically, so for one seed they make the same
accept/reject decisions.
"""
import enum
import logging

import numpy as np

from qcd_lattice.action import local_action, wilson_action
from qcd_lattice.config import check_strategy, check_sweeps, eps_initial
from qcd_lattice.diagnostics import report_sweep
from qcd_lattice.proposal import propose_link
from qcd_lattice.random_source import as_random_source

logger = logging.getLogger(__name__)


class UpdaterState(enum.Enum):
    IDLE = "idle"
    COMPUTING_BASELINE = "computing_baseline"
    PROPOSING_MOVE = "proposing_move"
    EVALUATING_TRIAL = "evaluating_trial"
    ACCEPTING = "accepting"
    REJECTING = "rejecting"
    SWEEP_COMPLETE = "sweep_complete"


# ---------------- Acceptance rule ----------------
def acceptance_probability(delta_S):
    """min(1, exp(-dS)); non-increasing in dS."""
    if delta_S <= 0:
        return 1.0
    return float(np.exp(-delta_S))


def metropolis_accept(delta_S, random_source):
    """Moves that do not raise the action are accepted without drawing a random number."""
    if delta_S <= 0:
        return True
    return random_source.uniform() < acceptance_probability(delta_S)


# ---------------- Updater ----------------
class MetropolisUpdater:
    """
    Owns the running action S of `lattice` and mutates the lattice in place.
    The baseline action is computed once here; afterwards it is only updated from dS.
    """

    def __init__(self, lattice, beta, eps=eps_initial, strategy="local", reunitarize=False,
                 random_source=None):
        self.lattice = lattice
        self.beta = beta
        self.eps = eps
        self.strategy = check_strategy(strategy)
        self.reunitarize = reunitarize
        self.random_source = as_random_source(random_source)
        self.accepted = 0
        self.proposals = 0
        self.sweeps_done = 0

        self.state = UpdaterState.COMPUTING_BASELINE
        self.action = wilson_action(lattice, beta)
        logger.debug("baseline action %.6f for %r at beta=%s", self.action, lattice, beta)
        self.state = UpdaterState.IDLE

    @property
    def acceptance_rate(self):
        return self.accepted / self.proposals if self.proposals > 0 else 0.0

    def update_link(self, x, mu):
        """Propose, evaluate and accept or reject a new value for link (mu, x)."""
        lattice = self.lattice
        self.state = UpdaterState.PROPOSING_MOVE
        U_old = lattice.get(*x, mu).copy()
        if self.strategy == "local":
            local_old = local_action(lattice, x, mu, self.beta)
        lattice.set(*x, mu, propose_link(U_old, self.random_source, self.eps, self.reunitarize))

        self.state = UpdaterState.EVALUATING_TRIAL
        if self.strategy == "global":
            action_new = wilson_action(lattice, self.beta)
            dS = action_new - self.action
        else:
            dS = local_action(lattice, x, mu, self.beta) - local_old
            action_new = self.action + dS

        self.proposals += 1
        if metropolis_accept(dS, self.random_source):
            self.state = UpdaterState.ACCEPTING
            self.action = action_new
            self.accepted += 1
            return True
        self.state = UpdaterState.REJECTING
        lattice.set(*x, mu, U_old)
        return False

    def sweep(self):
        """One pass over every link. Returns (accepted, proposals) for this sweep."""
        accepted = 0
        proposals = 0
        for x, mu in self.lattice.iter_links():
            accepted += self.update_link(x, mu)
            proposals += 1
        self.sweeps_done += 1
        self.state = UpdaterState.SWEEP_COMPLETE
        return accepted, proposals

    def run(self, n_sweeps, reporter=report_sweep):
        """
        Perform n_sweeps sweeps, calling reporter(sweep_number, action) after each one.
        Returns the action after every sweep.
        """
        n_sweeps = check_sweeps(n_sweeps)
        action_history = []
        for sweep in range(n_sweeps):
            self.sweep()
            action_history.append(self.action)
            if reporter is not None:
                reporter(sweep + 1, self.action)
        self.state = UpdaterState.IDLE
        return action_history
