from dataclasses import dataclass

import pytest

from simobs.magnetisation import MagnetisationObservable


@dataclass
class Magnet:
    value: float = 0.0

    def magnetisation(self):
        return self.value


def test_first_step_not_recorded():
    obs = MagnetisationObservable(Magnet(0.3), -1.0, 1.0, 10, 1, 0)
    obs.update()
    hist = obs.distribution
    assert sum(hist.value(i) for i in range(hist.nbins())) == 0.0


def test_update_fills_matching_bin():
    obs = MagnetisationObservable(Magnet(0.35), -1.0, 1.0, 10, 1, 0)
    obs.update()
    obs.update()
    hist = obs.distribution
    assert hist.value(hist.find_index(0.35)) == 1.0
    assert sum(hist.value(i) for i in range(hist.nbins())) == 1.0


def test_weighted_update():
    obs = MagnetisationObservable(Magnet(-0.5), -1.0, 1.0, 4, 1, 0)
    obs.update(2.5)
    obs.update(2.5)
    hist = obs.distribution
    assert hist.value(hist.find_index(-0.5)) == pytest.approx(2.5)


def test_pdf_normalised():
    magnet = Magnet()
    obs = MagnetisationObservable(magnet, -1.0, 1.0, 8, 1, 0)
    for value in (-0.9, -0.2, 0.1, 0.1, 0.6, 0.95):
        magnet.value = value
        obs.update()
        obs.update()
    hist = obs.distribution
    total = sum(hist.pdf(i) * hist.bin_width(i) for i in range(hist.nbins()))
    assert total == pytest.approx(1.0)


def test_average_and_instant_raise():
    obs = MagnetisationObservable(Magnet(), -1.0, 1.0, 4, 1, 0)
    with pytest.raises(TypeError):
        obs.average()
    with pytest.raises(TypeError):
        obs.instant()


def test_write_lines(tmp_path):
    obs = MagnetisationObservable(Magnet(0.1), -1.0, 1.0, 5, 1, 0)
    obs.update()
    obs.update()
    path = obs.write("mag", 3, tmp_path)
    assert path == tmp_path / "mag_3.csv"
    lines = path.read_text().splitlines()
    assert len(lines) == 5
    hist = obs.distribution
    for i, line in enumerate(lines):
        center, count, _ = (float(x) for x in line.split(", "))
        assert center == pytest.approx(hist.bin_center(i))
        assert count == pytest.approx(hist.value(i))


def test_write_appends(tmp_path):
    obs = MagnetisationObservable(Magnet(0.1), -1.0, 1.0, 5, 1, 0)
    obs.update()
    obs.update()
    obs.write("mag", 0, tmp_path)
    path = obs.write("mag", 0, tmp_path)
    assert len(path.read_text().splitlines()) == 10