"""
End-to-end tests of the two-cell handover simulation.

Reference scenario: D=1000 m, v=20 m/s (72 km/h), dt=0.1 s, Ptx=-30 dBm,
n=3.5, sigma=2 dB, seed 1.
"""

import numpy as np
import pytest

from fuzzy_handover.config import Config, DecisionParams, ScenarioParams
from fuzzy_handover.simulation import HandoverSimulator
from fuzzy_handover.utils import SimulationValidator


class TestReferenceScenario:

    def test_series_covers_horizon(self, reference_result):
        series = reference_result.series
        assert len(series) == 601
        assert series.times[-1] == pytest.approx(60.0)
        assert series.positions.min() == 0.0
        assert series.positions.max() == 1000.0

    def test_both_strategies_trigger(self, reference_result):
        assert reference_result.threshold.triggered
        assert reference_result.fuzzy.triggered

    def test_threshold_triggers_before_fuzzy(self, reference_result):
        threshold = reference_result.threshold
        fuzzy = reference_result.fuzzy
        assert threshold.trigger_time < fuzzy.trigger_time
        assert 18.0 <= threshold.trigger_time <= 26.0
        assert 23.0 <= fuzzy.trigger_time <= 33.0

    def test_trigger_is_first_crossing(self, reference_result):
        series = reference_result.series
        k = reference_result.fuzzy.trigger_index
        assert series.urgency[k] >= 0.6
        assert np.all(series.urgency[:k] < 0.6)

        k = reference_result.threshold.trigger_index
        assert series.rss_difference[k] >= 3.0
        assert np.all(series.rss_difference[:k] < 3.0)

    def test_trigger_instant_matches_series(self, reference_result):
        series = reference_result.series
        for decision in reference_result.decisions.values():
            state = series[decision.trigger_index]
            assert decision.trigger_time == state.time
            assert decision.trigger_position == state.position

    def test_drop_indicators(self, reference_result):
        # Beyond ~100 m from a station the mean RSS is below -100 dBm
        for decision in reference_result.decisions.values():
            assert decision.drop_before
            assert decision.drop_after

    def test_series_values_in_range(self, reference_result):
        series = reference_result.series
        assert np.all((series.urgency >= 0.0) & (series.urgency <= 1.0))
        clipped = series.rss_difference_clipped
        assert np.all((clipped >= -20.0) & (clipped <= 20.0))
        np.testing.assert_array_equal(clipped, np.clip(series.rss_difference, -20.0, 20.0))

    def test_urgency_follows_fis(self, reference_result, fis):
        state = reference_result.series[300]
        speed_kmh = reference_result.scenario.speed_kmh
        assert state.urgency == fis.evaluate([state.rss_difference_clipped, speed_kmh])

    def test_to_dict(self, reference_result):
        data = reference_result.to_dict()
        assert data["scenario"]["speed_kmh"] == pytest.approx(72.0)
        assert set(data["decisions"]) == {"threshold", "fuzzy"}
        assert len(data["series"]["urgency"]) == 601
        clipped = reference_result.series.rss_difference_clipped
        assert data["series"]["rss_difference_clipped"] == clipped.tolist()
        assert "series" not in reference_result.to_dict(include_series=False)


def test_same_seed_reproduces_series(fis):
    first = HandoverSimulator(fis=fis, scenario=ScenarioParams(seed=11)).run()
    second = HandoverSimulator(fis=fis, scenario=ScenarioParams(seed=11)).run()
    np.testing.assert_array_equal(first.series.rss_serving, second.series.rss_serving)
    np.testing.assert_array_equal(first.series.rss_target, second.series.rss_target)
    np.testing.assert_array_equal(first.series.urgency, second.series.urgency)
    assert first.decisions == second.decisions


def test_explicit_generator(fis):
    simulator = HandoverSimulator(fis=fis, scenario=ScenarioParams(seed=4))
    implicit = simulator.simulate()
    explicit = simulator.simulate(np.random.default_rng(4))
    np.testing.assert_array_equal(implicit.urgency, explicit.urgency)


def test_short_horizon_never_triggers(fis):
    # The user stays within 100 m of the serving station
    result = HandoverSimulator(fis=fis, scenario=ScenarioParams(duration_s=5.0)).run()
    assert len(result.series) == 51
    assert not result.threshold.triggered
    assert not result.fuzzy.triggered
    assert result.threshold.drop_after is False
    assert result.fuzzy.drop_after is False
    assert any("Horizon" in w for w in result.validation.warnings)


def test_invalid_urgency_threshold(fis):
    simulator = HandoverSimulator(fis=fis, decision=DecisionParams(urgency_threshold=1.5))
    with pytest.raises(ValueError, match="Urgency threshold"):
        simulator.run()


def test_from_config_uses_resolution():
    simulator = HandoverSimulator.from_config(Config(num_points=201))
    assert simulator.fis.num_points == 201
    assert simulator.scenario.speed_kmh == pytest.approx(72.0)


class TestSimulationValidator:

    def test_reference_parameters_are_clean(self, fis):
        result = SimulationValidator(fis).validate(ScenarioParams(), DecisionParams())
        assert result.is_valid
        assert result.warnings == []

    def test_speed_outside_domain_warns(self, fis):
        result = SimulationValidator(fis).validate(ScenarioParams(speed_ms=50.0), DecisionParams())
        assert result.is_valid
        assert any("clamped" in w for w in result.warnings)

    def test_single_input_system_rejected(self, fis):
        from fuzzy_handover.fuzzy import FuzzySystem, Rule

        single = FuzzySystem("single", fis.inputs[:1], fis.output, (Rule((1,), 1),))
        result = SimulationValidator(single).validate(ScenarioParams(), DecisionParams())
        assert not result.is_valid
        assert "2 inputs" in result.violations[0]
