import numpy as np
import pytest

from qcd_lattice.lattice import Lattice
from qcd_lattice.observables import average_plaquette, bootstrap_mean_std, unitarity_deviation
from qcd_lattice.proposal import randomize_links
from qcd_lattice.random_source import RandomSource
from qcd_lattice.su3 import identity


def test_average_plaquette_cold_start():
    assert average_plaquette(Lattice(2)) == pytest.approx(1.0)


def test_average_plaquette_hot_start_below_one(random_source):
    lattice = Lattice(2)
    randomize_links(lattice, random_source, amplitude=0.5)
    assert average_plaquette(lattice) < 1.0


def test_bootstrap_of_constant_values():
    mean, std = bootstrap_mean_std([0.25] * 20, nboot=50, random_source=RandomSource(0))
    assert mean == pytest.approx(0.25)
    assert std == pytest.approx(0.0)


def test_bootstrap_error_shrinks_with_more_samples():
    source = RandomSource(1)
    few = source.normal(size=10)
    many = source.normal(size=1000)
    mean_few, std_few = bootstrap_mean_std(few, random_source=RandomSource(2))
    mean_many, std_many = bootstrap_mean_std(many, random_source=RandomSource(2))
    assert std_many < std_few
    assert mean_many == pytest.approx(np.mean(many), abs=0.05)


def test_unitarity_deviation():
    lattice = Lattice(1)
    assert unitarity_deviation(lattice) == (0.0, 0.0)
    lattice.set(0, 0, 0, 0, 3, 1.1 * identity())
    unitarity, determinant = unitarity_deviation(lattice)
    assert unitarity == pytest.approx(0.21)
    assert determinant == pytest.approx(1.1 ** 3 - 1.0)
