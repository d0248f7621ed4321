"""Two-cell handover simulation comparing threshold and fuzzy strategies."""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from fuzzy_handover.config import Config, DecisionParams, ScenarioParams
from fuzzy_handover.fuzzy import FuzzySystem, build_handover_fis
from fuzzy_handover.models import DecisionResult, ScenarioSeries, ScenarioState, THRESHOLD, FUZZY
from fuzzy_handover.simulation.decision import fuzzy_decision, threshold_decision
from fuzzy_handover.simulation.propagation import PropagationModel, generate_radio_samples
from fuzzy_handover.utils.validators import SimulationValidator, ValidationResult

logger = logging.getLogger("handover.simulation")


@dataclass
class SimulationResult:
    """Results from one simulation run."""
    series: ScenarioSeries
    decisions: Dict[str, DecisionResult]
    scenario: ScenarioParams
    decision_params: DecisionParams
    validation: ValidationResult

    @property
    def threshold(self) -> DecisionResult:
        return self.decisions[THRESHOLD]

    @property
    def fuzzy(self) -> DecisionResult:
        return self.decisions[FUZZY]

    def to_dict(self, include_series: bool = True) -> Dict:
        """Convert to dictionary for JSON serialization."""
        data = {
            "scenario": {
                "speed_kmh": self.scenario.speed_kmh,
                "distance_m": self.scenario.distance_m,
                "dt_s": self.scenario.dt_s,
                "seed": self.scenario.seed,
                "num_steps": len(self.series),
            },
            "decisions": {name: d.to_dict() for name, d in self.decisions.items()},
            "warnings": self.validation.warnings,
        }
        if include_series:
            data["series"] = self.series.to_dict()
        return data


class HandoverSimulator:
    """
    Runs the scenario step by step and applies both handover strategies.

    At each step the RSS difference is clipped to the first FIS input's
    domain and evaluated together with the constant user speed. Decisions
    are taken once the whole series exists.
    """

    def __init__(
        self,
        fis: Optional[FuzzySystem] = None,
        scenario: Optional[ScenarioParams] = None,
        decision: Optional[DecisionParams] = None
    ):
        self.fis = fis or build_handover_fis()
        self.scenario = scenario or ScenarioParams()
        self.decision = decision or DecisionParams()

    @classmethod
    def from_config(cls, config: Config) -> "HandoverSimulator":
        return cls(
            fis=build_handover_fis(num_points=config.num_points),
            scenario=config.scenario,
            decision=config.decision
        )

    def run(self, rng: Optional[np.random.Generator] = None) -> SimulationResult:
        """
        Run the simulation.

        Args:
            rng: Generator for the shadowing noise. Seeded from the
                scenario parameters when omitted.

        Returns:
            SimulationResult with the full series and both decisions
        """
        validation = SimulationValidator(self.fis).validate(self.scenario, self.decision)
        for warning in validation.warnings:
            logger.warning(warning)
        if not validation.is_valid:
            raise ValueError("; ".join(validation.violations))

        logger.info(
            f"Simulating {self.scenario.num_steps} steps at "
            f"{self.scenario.speed_kmh:.1f} km/h (seed {self.scenario.seed})..."
        )
        series = self.simulate(rng)

        logger.info("Applying handover decision logic...")
        decisions = {
            THRESHOLD: threshold_decision(series, self.decision),
            FUZZY: fuzzy_decision(series, self.decision),
        }

        return SimulationResult(
            series=series,
            decisions=decisions,
            scenario=self.scenario,
            decision_params=self.decision,
            validation=validation
        )

    def simulate(self, rng: Optional[np.random.Generator] = None) -> ScenarioSeries:
        """Build the scenario series, evaluating the FIS at every step."""
        rss_variable = self.fis.inputs[0]
        speed_kmh = self.scenario.speed_kmh
        model = PropagationModel.from_params(self.scenario)

        series = ScenarioSeries()
        for sample in generate_radio_samples(self.scenario, rng, model):
            clipped = rss_variable.clamp(sample.rss_difference)
            urgency = self.fis.evaluate((clipped, speed_kmh))

            series.append(ScenarioState(
                time=sample.time,
                position=sample.position,
                rss_serving=sample.rss_serving,
                rss_target=sample.rss_target,
                rss_difference=sample.rss_difference,
                rss_difference_clipped=clipped,
                urgency=urgency
            ))

        return series
