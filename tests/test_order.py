import math

import pytest

from simobs.order import OrderObservable


class Particle:
    pass


class Molecule:
    def __init__(self, n):
        self.particles = {i: Particle() for i in range(n)}


def _armed(n=2, radius=1.0):
    mol = Molecule(n)
    obs = OrderObservable(mol, radius, 1, 0)
    obs.clear()
    obs.clear()
    return mol, obs


def _states(tmp_path):
    (tmp_path / "States").mkdir()


def test_zero_separation_is_fully_ordered():
    _, obs = _armed()
    real, imag = obs.order_parameter([0.0, 0.0, 0.0])
    assert real == pytest.approx(1.0)
    assert imag == pytest.approx(0.0)


def test_reversed_separation_gives_conjugate():
    _, obs = _armed()
    dr = [0.13, -0.4, 0.27]
    real, imag = obs.order_parameter(dr)
    rreal, rimag = obs.order_parameter([-x for x in dr])
    assert rreal == pytest.approx(real)
    assert rimag == pytest.approx(-imag)
    assert real * real + imag * imag <= 1.0 + 1e-12


def test_cutoff_from_radius():
    _, obs = _armed(radius=2.0)
    assert obs.cutoff == pytest.approx(2.0 * (1.0 + math.sqrt(2.0)))


def test_write_records_ordered_state(tmp_path):
    _states(tmp_path)
    mol, obs = _armed()
    a, b = mol.particles[0], mol.particles[1]
    obs.update(a, b, 1.0, [0.0, 0.0, 0.0])
    path = obs.write("order", 2.0, 3, tmp_path)
    assert path == tmp_path / "order_0.csv"
    assert path.read_text() == "2.0000000e+00, 1.0000000e+00, 1.0000000e+00\n"
    states = (tmp_path / "States" / "order_3.csv").read_text().splitlines()
    assert states == ["1.0000000e+00", "1.0000000e+00"]
    assert obs.instant() == pytest.approx(1.0)


def test_neighbour_gets_conjugate(tmp_path):
    _states(tmp_path)
    mol, obs = _armed()
    a, b = mol.particles[0], mol.particles[1]
    dr = [0.1, 0.2, 0.3]
    obs.update(a, b, 0.5, dr)
    real, imag = obs.order_parameter(dr)
    obs.write("order", 0.0, 1, tmp_path)
    lines = (tmp_path / "States" / "order_1.csv").read_text().splitlines()
    expected = f"{real * real + imag * imag:1.7e}"
    assert lines == [expected, expected]


def test_beyond_cutoff_not_recorded(tmp_path):
    _states(tmp_path)
    mol, obs = _armed()
    a, b = mol.particles[0], mol.particles[1]
    obs.update(a, b, 3.0, [0.0, 0.0, 0.0])
    obs.write("order", 0.0, 1, tmp_path)
    assert obs.instant() == 0.0


def test_unrecorded_step_ignores_updates(tmp_path):
    _states(tmp_path)
    mol = Molecule(2)
    obs = OrderObservable(mol, 1.0, 1, 0)
    obs.clear()
    obs.update(mol.particles[0], mol.particles[1], 0.5, [0.0, 0.0, 0.0])
    obs.write("order", 0.0, 1, tmp_path)
    assert obs.instant() == 0.0


def test_average_over_writes(tmp_path):
    _states(tmp_path)
    mol, obs = _armed()
    obs.update(mol.particles[0], mol.particles[1], 0.5, [0.0, 0.0, 0.0])
    obs.write("order", 1.0, 1, tmp_path)
    obs.clear()
    obs.write("order", 2.0, 1, tmp_path)
    assert obs.instant() == 0.0
    assert obs.average() == pytest.approx(0.5)
    assert len((tmp_path / "order_0.csv").read_text().splitlines()) == 2


def test_write_without_index_raises(tmp_path):
    _, obs = _armed()
    with pytest.raises(TypeError):
        obs.write("order", 0.0, directory=tmp_path)


def test_unknown_particle_raises():
    mol, obs = _armed()
    with pytest.raises(KeyError):
        obs.update(Particle(), mol.particles[0], 0.5, [0.0, 0.0, 0.0])