import math

import numpy as np
import pytest

from simobs.box import SystemPressure, SystemVolume, calculate_pressure


def test_pressure_3d_identity_box():
    s = np.eye(3)
    v = np.zeros((3, 3))
    k = np.diag([1.0, 2.0, 3.0])
    assert calculate_pressure(s, v, k) == pytest.approx(-2.0)


def test_pressure_2d_identity_box():
    s = np.eye(2)
    v = np.zeros((2, 2))
    k = np.diag([2.0, 4.0])
    assert calculate_pressure(s, v, k) == pytest.approx(-3.0)


def test_pressure_symmetric_in_virial_and_kinetic():
    rng = np.random.default_rng(0)
    s = np.diag([1.5, 2.0, 0.7])
    v = rng.normal(size=(3, 3))
    k = rng.normal(size=(3, 3))
    assert calculate_pressure(s, v, k) == pytest.approx(calculate_pressure(s, k, v))


def test_pressure_3d_scales_with_face_area():
    s = np.diag([1.0, 2.0, 3.0])
    v = np.diag([0.5, -1.0, 2.0])
    k = np.diag([1.0, 1.0, 1.0])
    assert calculate_pressure(2.0 * s, v, k) == pytest.approx(calculate_pressure(s, v, k) / 4.0)


def test_pressure_linear_in_tensors():
    s = np.diag([1.0, 2.0])
    v = np.diag([0.3, 0.9])
    k = np.diag([1.2, -0.4])
    assert calculate_pressure(s, 2 * v, 2 * k) == pytest.approx(2 * calculate_pressure(s, v, k))


def test_volume_records_determinant():
    box = np.diag([2.0, 3.0, 4.0])
    vol = SystemVolume(box, 10, 1, 0)
    vol.update()  # first step is never recorded
    vol.update()
    assert vol.instant() == pytest.approx(24.0)
    assert vol.average() == pytest.approx(24.0)


def test_volume_sees_in_place_box_changes():
    box = np.diag([2.0, 3.0, 4.0])
    vol = SystemVolume(box, 10, 1, 0)
    vol.update()
    vol.update()
    first = vol.instant()
    box[2, 2] = 1.0
    vol.update()
    assert vol.instant() == pytest.approx(math.prod(np.diag(box)))
    assert vol.average() == pytest.approx((first + vol.instant()) / 2)


def test_volume_reset_clears_average():
    box = np.diag([2.0, 2.0])
    vol = SystemVolume(box, 4, 1, 0)
    vol.update()
    vol.update()
    vol.reset(1, 0)
    assert vol.average() == 0.0
    box[0, 0] = 5.0
    vol.update()
    vol.update()
    assert vol.average() == pytest.approx(math.prod(np.diag(box)))


def test_pressure_observable_follows_tensors():
    s = np.eye(3)
    v = np.zeros((3, 3))
    k = np.diag([1.0, 2.0, 3.0])
    obs = SystemPressure(s, v, k, 1, 0)
    obs.update()
    assert obs.instant() == 0.0
    obs.update()
    assert obs.instant() == pytest.approx(calculate_pressure(s, v, k))
    k *= 2.0
    obs.update()
    assert obs.instant() == pytest.approx(calculate_pressure(s, v, k))
    assert obs.average() == pytest.approx(0.75 * obs.instant())