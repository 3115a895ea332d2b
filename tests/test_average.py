import statistics

import pytest

from simobs.average import AverageObservable


def test_fresh_observable_is_empty():
    obs = AverageObservable()
    assert obs.count() == 0
    assert obs.average() == 0.0
    assert obs.instant() == 0.0
    assert obs.variance() == 0.0


def test_average_and_variance_match_statistics():
    values = [1.5, -2.0, 3.25, 7.0, 0.5, 4.0]
    obs = AverageObservable()
    for v in values:
        obs.observe(v)
    assert obs.count() == len(values)
    assert obs.average() == pytest.approx(statistics.fmean(values))
    assert obs.variance() == pytest.approx(statistics.pvariance(values))


def test_instant_is_last_value():
    obs = AverageObservable()
    for v in (3.0, 9.0, -4.5):
        obs.observe(v)
    assert obs.instant() == -4.5


def test_constant_stream_has_no_variance():
    obs = AverageObservable()
    for _ in range(10):
        obs.observe(2.5)
    assert obs.average() == pytest.approx(2.5)
    assert obs.variance() == pytest.approx(0.0, abs=1e-12)


def test_clear_resets_everything():
    obs = AverageObservable()
    obs.observe(4.0)
    obs.observe(6.0)
    obs.clear()
    assert obs.count() == 0
    assert obs.average() == 0.0
    assert obs.instant() == 0.0
    obs.observe(10.0)
    assert obs.average() == pytest.approx(10.0)
    assert obs.count() == 1