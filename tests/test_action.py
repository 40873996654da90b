import numpy as np
import pytest

from qcd_lattice.action import (local_action, plaquette_matrix, plaquettes_touching_link,
                                real_trace_plaquette, wilson_action)
from qcd_lattice.lattice import Lattice
from qcd_lattice.proposal import gaussian_perturbation, randomize_links
from qcd_lattice.su3 import dagger, identity, project_su3


@pytest.mark.parametrize("L", [1, 2, 3])
def test_cold_start_action_is_zero(L):
    lattice = Lattice(L)
    assert wilson_action(lattice, 5.7) == 0.0
    assert real_trace_plaquette(lattice, (0, 0, 0, 0), 0, 1) == 3.0


def test_plaquette_matrix_order():
    lattice = Lattice(2)
    A = project_su3(np.array([[1, 2j, 0], [0, 1, 1], [1j, 0, 1]]))
    B = project_su3(np.array([[0, 1, 1j], [1, 0, 0], [0, 2, 1]]))
    lattice.set(0, 0, 0, 0, 0, A)      # U_0(x)
    lattice.set(1, 0, 0, 0, 1, B)      # U_1(x + e_0)
    P = plaquette_matrix(lattice, (0, 0, 0, 0), 0, 1)
    np.testing.assert_allclose(P, A @ B, atol=1e-12)


def test_action_scales_with_beta(random_source):
    lattice = Lattice(2)
    randomize_links(lattice, random_source)
    assert wilson_action(lattice, 0.0) == 0.0
    np.testing.assert_allclose(wilson_action(lattice, 4.0), 2.0 * wilson_action(lattice, 2.0))
    assert wilson_action(lattice, 1.0) > 0.0


def test_gauge_invariance(random_source):
    lattice = Lattice(2)
    randomize_links(lattice, random_source, amplitude=0.5)
    before = wilson_action(lattice, 6.0)

    g = {x: project_su3(gaussian_perturbation(random_source, 0.8)) for x in lattice.sites()}
    transformed = lattice.copy()
    for x, mu in lattice.iter_links():
        U = lattice.get(*x, mu)
        transformed.set(*x, mu, g[x] @ U @ dagger(g[lattice.x_neighbor(x, mu, 1)]))
    np.testing.assert_allclose(wilson_action(transformed, 6.0), before, rtol=1e-10)


@pytest.mark.parametrize("L, expected", [(1, 3), (2, 6), (3, 6)])
def test_plaquettes_touching_link_are_distinct(L, expected):
    lattice = Lattice(L)
    p_list = plaquettes_touching_link(lattice, (0, 0, 0, 0), 2)
    assert len(p_list) == expected
    assert len(set(p_list)) == len(p_list)
    for x_plaq, mu, nu in p_list:
        assert mu < nu
        assert 2 in (mu, nu)


@pytest.mark.parametrize("L", [1, 2, 3])
def test_local_action_difference_matches_global(L, random_source):
    beta = 5.7
    lattice = Lattice(L)
    randomize_links(lattice, random_source)
    for x, mu in [((0, 0, 0, 0), 0), ((L - 1, 0, L - 1, 0), 3), ((0, L - 1, 0, 0), 1)]:
        global_old = wilson_action(lattice, beta)
        local_old = local_action(lattice, x, mu, beta)
        lattice.set(*x, mu, gaussian_perturbation(random_source, 0.3) @ lattice.get(*x, mu))
        global_delta = wilson_action(lattice, beta) - global_old
        local_delta = local_action(lattice, x, mu, beta) - local_old
        assert local_delta == pytest.approx(global_delta, abs=1e-9)


def test_local_action_of_cold_start_is_zero():
    assert local_action(Lattice(2), (1, 0, 1, 0), 1, 5.7) == 0.0


def test_non_unitary_links_can_lower_the_action():
    lattice = Lattice(1)
    lattice.set(0, 0, 0, 0, 0, 1.1 * identity())
    # the link appears together with its dagger in every L=1 plaquette
    assert wilson_action(lattice, 1.0) < 0.0
