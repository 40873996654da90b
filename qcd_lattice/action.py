"""
action.py

Wilson plaquette action

    S = beta * sum_{x, mu<nu} (1 - Re Tr P_{mu,nu}(x) / 3),
    P_{mu,nu}(x) = U_mu(x) U_nu(x+mu) U_mu(x+nu)^dagger U_nu(x)^dagger,

either summed over the whole lattice or restricted to the plaquettes that contain one link.
"""
from qcd_lattice.lattice import D
from qcd_lattice.su3 import Nc, dagger, product, real_trace


# ---------------- Plaquette helpers ----------------
def plaquette_matrix(lattice, x, mu, nu):
    x_plus_mu = lattice.x_neighbor(x, mu, 1)
    x_plus_nu = lattice.x_neighbor(x, nu, 1)
    U_mu = lattice.get(*x, mu)
    U_nu_xmu = lattice.get(*x_plus_mu, nu)
    U_mu_xnu = lattice.get(*x_plus_nu, mu)
    U_nu = lattice.get(*x, nu)
    return product(U_mu, U_nu_xmu, dagger(U_mu_xnu), dagger(U_nu))


def real_trace_plaquette(lattice, x, mu, nu):
    return real_trace(plaquette_matrix(lattice, x, mu, nu))


def plaquette_action(lattice, x, mu, nu):
    """Contribution 1 - Re Tr P / 3 of a single plaquette (without beta)."""
    return 1.0 - real_trace_plaquette(lattice, x, mu, nu) / Nc


def wilson_action(lattice, beta):
    """Full Wilson action: all sites, all 6 planes mu < nu."""
    total = 0.0
    for x in lattice.sites():
        for mu in range(D):
            for nu in range(mu + 1, D):
                total += plaquette_action(lattice, x, mu, nu)
    return beta * total


# ---------------- Local action ----------------
def plaquettes_touching_link(lattice, x, mu):
    """
    Return the distinct plaquettes (x_plaq, mu, nu), mu < nu, that include the link (mu, x).
    For each nu != mu the link sits in the plaquette at x and in the one at x - e_nu.
    On an L=1 lattice both are the same plaquette; it is listed once.
    """
    p_list = []
    for nu in range(D):
        if nu == mu:
            continue
        plane = (min(mu, nu), max(mu, nu))
        for x_plaq in (x, lattice.x_neighbor(x, nu, -1)):
            key = (x_plaq,) + plane
            if key not in p_list:
                p_list.append(key)
    return p_list


def local_action(lattice, x, mu, beta):
    """
    Action of the plaquettes touching link (mu, x). Changing only that link changes the
    full action by exactly the change of this quantity.
    """
    total = 0.0
    for x_plaq, p_mu, p_nu in plaquettes_touching_link(lattice, x, mu):
        total += plaquette_action(lattice, x_plaq, p_mu, p_nu)
    return beta * total
