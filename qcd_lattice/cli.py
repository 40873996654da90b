"""
cli.py

Command line front end:

    qcd-lattice -L 4 --beta 5.7 --sweeps 10

prints one line per sweep with the running Wilson action, then a short summary.
"""
import argparse
import logging

import matplotlib.pyplot as plt

from qcd_lattice import config as defaults
from qcd_lattice.config import ConfigurationError, SimulationConfig
from qcd_lattice.diagnostics import plot_action_history
from qcd_lattice.observables import unitarity_deviation
from qcd_lattice.simulation import run_simulation


def build_parser():
    ap = argparse.ArgumentParser(prog="qcd-lattice",
                                 description="SU(3) lattice gauge theory, Wilson action Metropolis Monte Carlo")
    ap.add_argument("-L", "--size", type=int, default=defaults.lattice_size_L, help="Lattice size L (sites per direction)")
    ap.add_argument("--beta", type=float, default=defaults.coupling_beta, help="Gauge coupling beta")
    ap.add_argument("--sweeps", type=int, default=defaults.MC_sweeps, help="Number of reported Monte Carlo sweeps")
    ap.add_argument("--eps", type=float, default=defaults.eps_initial, help="Width of the Gaussian proposal noise")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--update", default="local", choices=defaults.UPDATE_STRATEGIES,
                    help="Recompute only the plaquettes touching a link (local) or the whole action (global)")
    ap.add_argument("--reunitarize", action="store_true", help="Project every proposal back onto SU(3)")
    ap.add_argument("--start", default="cold", choices=defaults.START_CONFIGURATIONS)
    ap.add_argument("--thermalize", type=int, default=0, help="Unreported sweeps before the measured ones")
    ap.add_argument("--tune", action="store_true", help="Tune eps towards 50%% acceptance before running")
    ap.add_argument("--plot", action="store_true", help="Plot the action history")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    config = SimulationConfig(lattice_size=args.size, beta=args.beta, sweeps=args.sweeps, eps=args.eps,
                              strategy=args.update, reunitarize=args.reunitarize, start=args.start,
                              seed=args.seed, thermalization=args.thermalize, tune=args.tune)
    try:
        config.validate()
    except ConfigurationError as error:
        ap.error(str(error))

    print("=== SU(3) Lattice Gauge Theory Simulator ===")
    print(f"L = {config.lattice_size}, beta = {config.beta}, sweeps = {config.sweeps}, update = {config.strategy}")
    result = run_simulation(config)

    print(f"Final action = {result.final_action:.6f}")
    print(f"Acceptance fraction: {result.acceptance_rate:.3f} (eps = {result.eps:.4f})")
    print(f"Average plaquette = {result.average_plaquette:.6f} ± {result.plaquette_error:.6f}")
    unitarity, determinant = unitarity_deviation(result.lattice)
    print(f"Max deviation from SU(3): |U^dag U - 1| = {unitarity:.3e}, |det U - 1| = {determinant:.3e}")

    if args.plot and result.action_history:
        plot_action_history(result.action_history, beta=config.beta)
        plt.show()
    return 0
