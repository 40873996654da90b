"""
observables.py

Measurements on a lattice configuration: average plaquette, bootstrap errors and how far
the links have drifted from SU(3).
"""
import numpy as np
from numpy import linalg as LA

from qcd_lattice.action import real_trace_plaquette
from qcd_lattice.lattice import D
from qcd_lattice.random_source import as_random_source
from qcd_lattice.su3 import Nc, identity


def average_plaquette(lattice):
    total = 0.0
    for x in lattice.sites():
        for mu in range(D):
            for nu in range(mu + 1, D):
                total += real_trace_plaquette(lattice, x, mu, nu)
    count = lattice.n_sites * D * (D - 1) // 2
    # Normalize by 3: trace(1_3)=3
    return (total / count) / Nc


def bootstrap_mean_std(values, nboot=300, random_source=None):
    random_source = as_random_source(random_source)
    vals = np.asarray(values)
    N = len(vals)
    boots = np.zeros(nboot)
    for i in range(nboot):
        inds = random_source.integers(N, size=N)
        boots[i] = np.mean(vals[inds])
    return boots.mean(), boots.std(ddof=1)


def unitarity_deviation(lattice):
    """
    Largest deviation of any link from SU(3):
    returns (max |U^dagger U - 1|, max |det U - 1|), both 0 for an exact group element.
    """
    U = lattice.link_sites
    gram = np.conj(np.swapaxes(U, -1, -2)) @ U
    unitarity = float(np.max(np.abs(gram - identity())))
    determinant = float(np.max(np.abs(LA.det(U) - 1.0)))
    return unitarity, determinant
