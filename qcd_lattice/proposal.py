"""
proposal.py

Trial moves for a single link: U' = R U, where R is the identity plus complex Gaussian noise
of width eps. Without reunitarize the trial link may drift off SU(3); with it, U' is
projected back onto SU(3) by the SVD projection in su3.project_su3.
"""
from qcd_lattice.config import eps_initial
from qcd_lattice.su3 import Nc, identity, project_su3


def gaussian_perturbation(random_source, eps=eps_initial):
    """
    Return 1 + N, with real and imaginary parts of every entry of N drawn from N(0, eps).
    Larger eps means larger moves and a lower acceptance rate.
    """
    noise = random_source.normal(eps, size=(Nc, Nc, 2))
    return identity() + noise[..., 0] + 1j * noise[..., 1]


def propose_link(U, random_source, eps=eps_initial, reunitarize=False):
    R = gaussian_perturbation(random_source, eps)
    U_new = R @ U
    if reunitarize:
        U_new = project_su3(U_new)
    return U_new


def randomize_links(lattice, random_source, amplitude=0.2, hits=3):
    """Hot start: replace every link by a product of `hits` projected near-identity matrices."""
    for index in range(lattice.n_links):
        U = identity()
        for i in range(hits):
            U = project_su3(gaussian_perturbation(random_source, amplitude) @ U)
        lattice.link_sites[index] = U
