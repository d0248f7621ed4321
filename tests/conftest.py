"""Shared fixtures for the handover simulation tests."""

import pytest

from fuzzy_handover.fuzzy import build_handover_fis
from fuzzy_handover.models import ScenarioSeries, ScenarioState
from fuzzy_handover.simulation import HandoverSimulator


@pytest.fixture(scope="session")
def fis():
    """The handover FIS with the default output resolution."""
    return build_handover_fis()


@pytest.fixture(scope="session")
def reference_result(fis):
    """Reference run: D=1000 m, 20 m/s, dt=0.1 s, Ptx=-30 dBm, n=3.5, sigma=2 dB, seed 1."""
    return HandoverSimulator(fis=fis).run()


@pytest.fixture
def make_series():
    """Build a ScenarioSeries from plain lists, one entry per step."""
    def _make(rss_serving, rss_target, urgency=None, dt=1.0):
        urgency = urgency if urgency is not None else [0.0] * len(rss_serving)
        series = ScenarioSeries()
        for k, (serving, target, u) in enumerate(zip(rss_serving, rss_target, urgency)):
            diff = target - serving
            series.append(ScenarioState(
                time=k * dt,
                position=10.0 * k,
                rss_serving=serving,
                rss_target=target,
                rss_difference=diff,
                rss_difference_clipped=max(-20.0, min(20.0, diff)),
                urgency=u,
            ))
        return series
    return _make
