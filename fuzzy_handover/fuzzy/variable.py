"""Fuzzy (linguistic) variables."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np

from fuzzy_handover.fuzzy.exceptions import FuzzyConfigurationError
from fuzzy_handover.fuzzy.membership import MembershipFunction


@dataclass(frozen=True)
class FuzzyVariable:
    """
    A named variable over a bounded domain with an ordered set of terms.

    Terms are addressed by a 1-based index (the position in which they were
    added) or by name. Index 0 is never a valid term; rules use ``None`` to
    leave a variable unconstrained.
    """
    name: str
    domain: Tuple[float, float]
    memberships: Tuple[MembershipFunction, ...] = ()

    def __post_init__(self):
        low, high = self.domain
        if not low < high:
            raise FuzzyConfigurationError(
                f"Variable '{self.name}': domain must satisfy min < max, got {self.domain}"
            )

        names = [mf.name for mf in self.memberships]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise FuzzyConfigurationError(
                f"Variable '{self.name}': duplicate membership names {duplicates}"
            )

    @classmethod
    def create(
        cls,
        name: str,
        domain: Iterable[float],
        memberships: Iterable[MembershipFunction] = ()
    ) -> FuzzyVariable:
        low, high = domain
        return cls(name=name, domain=(float(low), float(high)), memberships=tuple(memberships))

    def with_membership(self, mf: MembershipFunction) -> FuzzyVariable:
        """Return a copy of this variable with one more term appended."""
        return FuzzyVariable(self.name, self.domain, self.memberships + (mf,))

    def __len__(self) -> int:
        return len(self.memberships)

    @property
    def term_names(self) -> List[str]:
        return [mf.name for mf in self.memberships]

    def membership(self, index: int) -> MembershipFunction:
        """Return the term at a 1-based index."""
        if not 1 <= index <= len(self.memberships):
            raise IndexError(
                f"Variable '{self.name}' has {len(self.memberships)} terms, got index {index}"
            )
        return self.memberships[index - 1]

    def index_of(self, term: str) -> int:
        """Return the 1-based index of a term by name."""
        for index, mf in enumerate(self.memberships, start=1):
            if mf.name == term:
                return index
        raise KeyError(f"Variable '{self.name}' has no term '{term}'")

    def clamp(self, value: float) -> float:
        low, high = self.domain
        return min(max(float(value), low), high)

    def fuzzify(self, value: float) -> np.ndarray:
        """
        Compute the degree of every term for a crisp value.

        The value is clamped to the domain first.

        Returns:
            Array of degrees, position i holding term index i + 1.
        """
        x = self.clamp(value)
        return np.array([mf(x) for mf in self.memberships], dtype=float)

    def grid(self, num_points: int) -> np.ndarray:
        """Uniform sample points covering the domain, both ends included."""
        return np.linspace(self.domain[0], self.domain[1], num_points)

    def curves(self, num_points: int) -> np.ndarray:
        """
        Sample every term over the domain.

        Returns:
            Array of shape (len(self), num_points).
        """
        xs = self.grid(num_points)
        if not self.memberships:
            return np.zeros((0, num_points))
        return np.vstack([mf(xs) for mf in self.memberships])
