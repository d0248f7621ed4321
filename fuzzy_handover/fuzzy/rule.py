"""Fuzzy rule definitions."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from fuzzy_handover.fuzzy.exceptions import FuzzyConfigurationError


class Combinator(Enum):
    """How the active antecedents of a rule are combined."""
    AND = "and"
    OR = "or"

    @classmethod
    def from_code(cls, code: int) -> Combinator:
        """Map the MATLAB rule-list connection code (1 = AND, 2 = OR)."""
        if code == 1:
            return cls.AND
        if code == 2:
            return cls.OR
        raise FuzzyConfigurationError(f"Unknown rule connection code: {code}")


@dataclass(frozen=True)
class Rule:
    """
    A single IF-THEN rule.

    ``antecedents`` holds one selector per input variable: ``None`` leaves
    the variable unconstrained, otherwise it is the 1-based term index.
    ``consequent`` is the 1-based term index of the output variable.
    """
    antecedents: Tuple[Optional[int], ...]
    consequent: int
    weight: float = 1.0
    combinator: Combinator = Combinator.AND

    def __post_init__(self):
        if not 0.0 < self.weight <= 1.0:
            raise FuzzyConfigurationError(f"Rule weight must be in (0, 1], got {self.weight}")

        if not self.active_inputs:
            raise FuzzyConfigurationError(f"Rule {self} has no active antecedent")

        for selector in self.antecedents:
            if selector is not None and selector < 1:
                raise FuzzyConfigurationError(
                    f"Antecedent index must be >= 1 or None, got {selector}"
                )

        if self.consequent < 1:
            raise FuzzyConfigurationError(
                f"Consequent index must be >= 1, got {self.consequent}"
            )

    @classmethod
    def from_row(cls, row: Sequence[float], num_inputs: int) -> Rule:
        """
        Build a rule from a MATLAB-style rule-list row.

        The row is ``[in_1, ..., in_n, out, weight, connection]`` where an
        input index of 0 means "don't care" and connection is 1 for AND,
        2 for OR.

        Args:
            row: The rule-list row
            num_inputs: Number of input variables of the system

        Returns:
            The corresponding Rule.
        """
        if len(row) != num_inputs + 3:
            raise FuzzyConfigurationError(
                f"Rule row {list(row)} must have {num_inputs + 3} entries"
            )

        antecedents = tuple(int(i) if int(i) != 0 else None for i in row[:num_inputs])
        consequent, weight, connection = row[num_inputs:]
        return cls(
            antecedents=antecedents,
            consequent=int(consequent),
            weight=float(weight),
            combinator=Combinator.from_code(int(connection))
        )

    @property
    def active_inputs(self) -> Tuple[int, ...]:
        """Positions of the input variables this rule constrains."""
        return tuple(i for i, selector in enumerate(self.antecedents) if selector is not None)

    def to_row(self) -> Tuple[float, ...]:
        """Inverse of :meth:`from_row`."""
        connection = 1 if self.combinator is Combinator.AND else 2
        selectors = tuple(0 if s is None else s for s in self.antecedents)
        return selectors + (self.consequent, self.weight, connection)

