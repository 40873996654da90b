"""
su3.py

Small-matrix algebra for SU(3) link variables.
Links are plain 3x3 complex numpy arrays; these helpers keep the plaquette code readable.
"""
from functools import reduce

import numpy as np
from numpy import linalg as LA

Nc = 3                     # number of colours


def identity():
    return np.eye(Nc, dtype=np.complex128)


def dagger(U):
    """Conjugate transpose U^dagger."""
    return U.conj().T


def product(*matrices):
    """Ordered product M_1 M_2 ... M_n of one or more matrices."""
    return reduce(np.matmul, matrices)


def real_trace(U):
    return float(np.real(np.trace(U)))


def project_su3(M):
    """
    Project a (3x3) complex matrix M to SU(3) via SVD polar-type projection:
      U, s, Vh = svd(M); Uproj = U @ Vh; enforce det = 1 via global phase.
    """
    U, diagonal, V_hermitian = LA.svd(M)
    U_projection = U @ V_hermitian
    determinant = LA.det(U_projection)
    if determinant == 0 or np.isnan(determinant):
        # fallback: small perturbation then project
        U_projection = U_projection + 1e-12 * identity()
        determinant = LA.det(U_projection)
    phase = determinant ** (1.0 / Nc)
    return U_projection / phase
