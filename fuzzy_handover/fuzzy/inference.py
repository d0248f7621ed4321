"""Mamdani fuzzy inference system."""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from fuzzy_handover.fuzzy.defuzzify import DEFUZZIFICATION_METHODS, defuzzify
from fuzzy_handover.fuzzy.exceptions import FuzzyConfigurationError
from fuzzy_handover.fuzzy.rule import Combinator, Rule
from fuzzy_handover.fuzzy.variable import FuzzyVariable

logger = logging.getLogger("handover.fuzzy")

# Operators combining the antecedent degrees of one rule
AND_METHODS: Dict[str, Callable[[np.ndarray], float]] = {
    "min": np.min,
    "prod": np.prod,
}

OR_METHODS: Dict[str, Callable[[np.ndarray], float]] = {
    "max": np.max,
    "probor": lambda values: 1.0 - np.prod(1.0 - values),
}

# (firing strengths column, consequent curves) -> implied curves
IMPLICATION_METHODS: Dict[str, Callable[[np.ndarray, np.ndarray], np.ndarray]] = {
    "min": np.minimum,
    "prod": np.multiply,
}

# implied curves (rules x points) -> aggregated curve
AGGREGATION_METHODS: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "max": lambda curves: np.max(curves, axis=0),
    "sum": lambda curves: np.sum(curves, axis=0),
    "probor": lambda curves: 1.0 - np.prod(1.0 - curves, axis=0),
}


@dataclass(frozen=True)
class InferenceSettings:
    """Operator choices of a Mamdani system."""
    and_method: str = "min"
    or_method: str = "max"
    implication_method: str = "min"
    aggregation_method: str = "max"
    defuzzification_method: str = "centroid"

    def __post_init__(self):
        choices = (
            ("and_method", self.and_method, AND_METHODS),
            ("or_method", self.or_method, OR_METHODS),
            ("implication_method", self.implication_method, IMPLICATION_METHODS),
            ("aggregation_method", self.aggregation_method, AGGREGATION_METHODS),
            ("defuzzification_method", self.defuzzification_method, DEFUZZIFICATION_METHODS),
        )
        for setting, value, allowed in choices:
            if value not in allowed:
                raise FuzzyConfigurationError(
                    f"Unknown {setting} '{value}', expected one of {sorted(allowed)}"
                )

    def combine(self, combinator: Combinator, degrees: np.ndarray) -> float:
        if combinator is Combinator.AND:
            return float(AND_METHODS[self.and_method](degrees))
        return float(OR_METHODS[self.or_method](degrees))

    def implicate(self, strengths: np.ndarray, curves: np.ndarray) -> np.ndarray:
        return IMPLICATION_METHODS[self.implication_method](strengths[:, np.newaxis], curves)

    def aggregate(self, implied: np.ndarray) -> np.ndarray:
        return AGGREGATION_METHODS[self.aggregation_method](implied)


@dataclass(frozen=True)
class FuzzySystem:
    """
    Immutable Mamdani fuzzy inference system.

    The system is validated once on construction and then only read. The
    output domain is discretised into ``num_points`` uniform samples on
    which implication, aggregation and defuzzification are carried out.
    """
    name: str
    inputs: Tuple[FuzzyVariable, ...]
    output: Optional[FuzzyVariable]
    rules: Tuple[Rule, ...] = ()
    settings: InferenceSettings = field(default_factory=InferenceSettings)
    num_points: int = 1001

    # Computed fields
    _grid: np.ndarray = field(init=False, repr=False, compare=False)
    _output_curves: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "rules", tuple(self.rules))
        self._validate()

        object.__setattr__(self, "_grid", self.output.grid(self.num_points))
        object.__setattr__(self, "_output_curves", self.output.curves(self.num_points))

        logger.debug(
            f"Built FIS '{self.name}': {len(self.inputs)} inputs, "
            f"{len(self.rules)} rules, {self.num_points} output samples"
        )

    def _validate(self) -> None:
        if self.output is None:
            raise FuzzyConfigurationError(f"FIS '{self.name}' has no output variable")
        if not self.inputs:
            raise FuzzyConfigurationError(f"FIS '{self.name}' has no input variables")
        if self.num_points < 2:
            raise FuzzyConfigurationError(
                f"FIS '{self.name}': num_points must be at least 2, got {self.num_points}"
            )

        names = [v.name for v in self.inputs] + [self.output.name]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise FuzzyConfigurationError(
                f"FIS '{self.name}': duplicate variable names {duplicates}"
            )

        for variable in self.inputs + (self.output,):
            if not variable.memberships:
                raise FuzzyConfigurationError(
                    f"FIS '{self.name}': variable '{variable.name}' has no membership functions"
                )

        for number, rule in enumerate(self.rules, start=1):
            self._validate_rule(number, rule)

    def _validate_rule(self, number: int, rule: Rule) -> None:
        if len(rule.antecedents) != len(self.inputs):
            raise FuzzyConfigurationError(
                f"Rule {number}: expected {len(self.inputs)} antecedents, "
                f"got {len(rule.antecedents)}"
            )

        for variable, selector in zip(self.inputs, rule.antecedents):
            if selector is not None and selector > len(variable):
                raise FuzzyConfigurationError(
                    f"Rule {number}: input '{variable.name}' has {len(variable)} terms, "
                    f"got index {selector}"
                )

        if rule.consequent > len(self.output):
            raise FuzzyConfigurationError(
                f"Rule {number}: output '{self.output.name}' has {len(self.output)} terms, "
                f"got index {rule.consequent}"
            )

    @classmethod
    def from_rule_list(
        cls,
        name: str,
        inputs: Sequence[FuzzyVariable],
        output: FuzzyVariable,
        rule_list: Iterable[Sequence[float]],
        settings: Optional[InferenceSettings] = None,
        num_points: int = 1001
    ) -> FuzzySystem:
        """
        Build a system from MATLAB-style rule-list rows.

        Args:
            name: System name
            inputs: Input variables, in input-vector order
            output: The output variable
            rule_list: Rows of ``[in_1, ..., in_n, out, weight, connection]``
            settings: Inference operators (Mamdani min/max/centroid by default)
            num_points: Output discretisation

        Returns:
            The validated FuzzySystem.
        """
        rules = tuple(Rule.from_row(row, len(inputs)) for row in rule_list)
        return cls(
            name=name,
            inputs=tuple(inputs),
            output=output,
            rules=rules,
            settings=settings or InferenceSettings(),
            num_points=num_points
        )

    def input_variable(self, name: str) -> FuzzyVariable:
        for variable in self.inputs:
            if variable.name == name:
                return variable
        raise KeyError(f"FIS '{self.name}' has no input '{name}'")

    def firing_strengths(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Weighted firing strength of every rule for one input vector.

        Inputs outside a variable's domain are clamped to the domain.

        Args:
            inputs: One crisp value per input variable, in order

        Returns:
            Array with one strength per rule.
        """
        values = list(np.asarray(inputs, dtype=float).ravel())
        if len(values) != len(self.inputs):
            raise ValueError(
                f"FIS '{self.name}' expects {len(self.inputs)} inputs, got {len(values)}"
            )

        degrees = [variable.fuzzify(x) for variable, x in zip(self.inputs, values)]

        strengths = np.zeros(len(self.rules))
        for i, rule in enumerate(self.rules):
            terms = np.array([degrees[j][rule.antecedents[j] - 1] for j in rule.active_inputs])
            strengths[i] = self.settings.combine(rule.combinator, terms) * rule.weight
        return strengths

    def aggregate(self, strengths: np.ndarray) -> np.ndarray:
        """Implied consequents of all rules, aggregated over the output grid."""
        if not self.rules:
            return np.zeros(self.num_points)

        consequents = np.array([rule.consequent - 1 for rule in self.rules])
        implied = self.settings.implicate(strengths, self._output_curves[consequents])
        return self.settings.aggregate(implied)

    def evaluate(self, inputs: Sequence[float]) -> float:
        """
        Run Mamdani inference for one input vector.

        Args:
            inputs: One crisp value per input variable, in order

        Returns:
            Crisp output value. If no rule fires, the midpoint of the
            output domain.
        """
        mu = self.aggregate(self.firing_strengths(inputs))
        return defuzzify(self._grid, mu, self.settings.defuzzification_method)

    def evaluate_batch(self, rows: Iterable[Sequence[float]]) -> np.ndarray:
        """Evaluate an ordered sequence of input vectors."""
        return np.array([self.evaluate(row) for row in rows], dtype=float)

    def describe_rules(self) -> List[str]:
        """Rules in readable form, e.g. ``IF RSSdiff is Zero AND Speed is Low THEN Urgency is Medium``."""
        lines = []
        for rule in self.rules:
            joiner = f" {rule.combinator.name} "
            clauses = [
                f"{variable.name} is {variable.membership(selector).name}"
                for variable, selector in zip(self.inputs, rule.antecedents)
                if selector is not None
            ]
            consequent = self.output.membership(rule.consequent).name
            lines.append(
                f"IF {joiner.join(clauses)} THEN {self.output.name} is {consequent} ({rule.weight:g})"
            )
        return lines


def evaluate(fis: FuzzySystem, inputs) -> float | np.ndarray:
    """
    Evaluate a system on one input vector or on a batch of them.

    A 1-D input gives a float; a 2-D input (one row per sample) gives an
    array with one output per row.
    """
    values = np.asarray(inputs, dtype=float)
    if values.ndim == 2:
        return fis.evaluate_batch(values)
    return fis.evaluate(values)
