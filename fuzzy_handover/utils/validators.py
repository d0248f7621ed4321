"""Simulation parameter validation utilities."""

from dataclasses import dataclass, field
from typing import Dict, List

from fuzzy_handover.config import DecisionParams, ScenarioParams
from fuzzy_handover.fuzzy import FuzzySystem


@dataclass
class ValidationResult:
    """Results of parameter validation."""
    is_valid: bool = True
    violations: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_violation(self, message: str) -> None:
        """Add a validation violation."""
        self.violations.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a validation warning (non-fatal)."""
        self.warnings.append(message)

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "is_valid": self.is_valid,
            "violations": self.violations,
            "warnings": self.warnings,
        }


class SimulationValidator:
    """
    Checks that a scenario can be driven through a fuzzy system.

    The system is fed ``[RSS difference, speed]`` at every step, so it
    needs exactly two inputs in that order.
    """

    def __init__(self, fis: FuzzySystem):
        self.fis = fis

    def validate(self, scenario: ScenarioParams, decision: DecisionParams) -> ValidationResult:
        """
        Validate scenario and decision parameters against the system.

        Args:
            scenario: Geometry, mobility and radio parameters
            decision: Strategy thresholds

        Returns:
            ValidationResult with violations (fatal) and warnings
        """
        result = ValidationResult()

        self._validate_inputs(scenario, result)
        self._validate_thresholds(decision, result)
        self._validate_horizon(scenario, result)

        return result

    def _validate_inputs(self, scenario: ScenarioParams, result: ValidationResult) -> None:
        if len(self.fis.inputs) != 2:
            result.add_violation(
                f"FIS '{self.fis.name}' must have 2 inputs (RSS difference, speed), "
                f"has {len(self.fis.inputs)}"
            )
            return

        low, high = self.fis.inputs[1].domain
        if not low <= scenario.speed_kmh <= high:
            # Clamped by the engine
            result.add_warning(
                f"Speed {scenario.speed_kmh:.1f} km/h is outside the "
                f"'{self.fis.inputs[1].name}' domain [{low:g}, {high:g}] and will be clamped"
            )

    def _validate_thresholds(self, decision: DecisionParams, result: ValidationResult) -> None:
        low, high = self.fis.output.domain
        if not low <= decision.urgency_threshold <= high:
            result.add_violation(
                f"Urgency threshold {decision.urgency_threshold} is outside the "
                f"'{self.fis.output.name}' domain [{low:g}, {high:g}]"
            )

    @staticmethod
    def _validate_horizon(scenario: ScenarioParams, result: ValidationResult) -> None:
        travel = scenario.station_gap_m / scenario.speed_ms
        if scenario.horizon_s < travel:
            result.add_warning(
                f"Horizon {scenario.horizon_s:.1f} s ends before the user reaches "
                f"the target station ({travel:.1f} s)"
            )
