"""
lattice.py

Storage for the SU(3) link variables of a periodic L^4 lattice.

All 4 * L^4 links live in one contiguous array `link_sites` of shape (4 * L^4, 3, 3).
A site (x, y, z, t) and a direction mu are flattened as

    index = (((t * L + z) * L + y) * L + x) * 4 + mu

after every coordinate is reduced modulo L, so any integer coordinate (negative included)
wraps around periodically. Direction mu moves along component mu of (x, y, z, t).
"""
import itertools

import numpy as np

from qcd_lattice.config import DIMENSIONS, check_lattice_size
from qcd_lattice.su3 import Nc, identity

D = DIMENSIONS


class Lattice:

    def __init__(self, L):
        self.L = check_lattice_size(L)
        # cold start: every link is the identity
        self.link_sites = np.empty((D * self.L ** D, Nc, Nc), dtype=np.complex128)
        self.link_sites[:] = identity()

    def __repr__(self):
        return f"Lattice(L={self.L})"

    @property
    def n_links(self):
        return len(self.link_sites)

    @property
    def n_sites(self):
        return self.L ** D

    # ---------------- Addressing ----------------
    def index(self, x, y, z, t, mu):
        if not 0 <= mu < D:
            raise ValueError(f"direction must be in 0..{D - 1}, got {mu}")
        L = self.L
        x, y, z, t = x % L, y % L, z % L, t % L
        return (((t * L + z) * L + y) * L + x) * D + mu

    def coordinates(self, index):
        """Inverse of index(): flat index -> ((x, y, z, t), mu)."""
        if not 0 <= index < self.n_links:
            raise IndexError(f"link index {index} out of range for {self!r}")
        L = self.L
        index, mu = divmod(index, D)
        index, x = divmod(index, L)
        index, y = divmod(index, L)
        t, z = divmod(index, L)
        return (x, y, z, t), mu

    def get(self, x, y, z, t, mu):
        """The link U_mu(x, y, z, t). Returned as a view into the lattice storage."""
        return self.link_sites[self.index(x, y, z, t, mu)]

    def set(self, x, y, z, t, mu, U):
        self.link_sites[self.index(x, y, z, t, mu)] = U

    def x_neighbor(self, x, mu, shift=1):
        x_new = list(x)
        x_new[mu] = (x_new[mu] + shift) % self.L
        return tuple(x_new)

    # ---------------- Traversal ----------------
    def sites(self):
        """Every site (x, y, z, t)."""
        return itertools.product(range(self.L), repeat=D)

    def iter_links(self):
        """Every (site, mu) in storage order; this is the fixed sweep order."""
        for index in range(self.n_links):
            yield self.coordinates(index)

    def copy(self):
        lattice_copy = Lattice(self.L)
        lattice_copy.link_sites[:] = self.link_sites
        return lattice_copy
