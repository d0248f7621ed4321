"""Membership function implementations for linguistic terms."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np

from fuzzy_handover.fuzzy.exceptions import FuzzyConfigurationError

ArrayLike = Union[float, np.ndarray]

TRIANGULAR = "triangular"
TRAPEZOIDAL = "trapezoidal"

_PARAM_COUNTS = {
    TRIANGULAR: 3,
    TRAPEZOIDAL: 4,
}

# MATLAB-style aliases accepted by MembershipFunction.create
_SHAPE_ALIASES = {
    "trimf": TRIANGULAR,
    "tri": TRIANGULAR,
    TRIANGULAR: TRIANGULAR,
    "trapmf": TRAPEZOIDAL,
    "trap": TRAPEZOIDAL,
    TRAPEZOIDAL: TRAPEZOIDAL,
}


@dataclass(frozen=True)
class MembershipFunction:
    """
    Piecewise-linear membership function of a linguistic term.

    A triangular function is defined by three breakpoints (a, b, c) and a
    trapezoidal one by four (a, b, c, d). The degree is 0 outside the
    support, rises linearly to 1, stays at 1 on the plateau and falls
    linearly back to 0.
    """
    name: str
    shape: str
    params: Tuple[float, ...]

    def __post_init__(self):
        if self.shape not in _PARAM_COUNTS:
            raise FuzzyConfigurationError(
                f"Unknown membership shape '{self.shape}' for term '{self.name}'"
            )

        expected = _PARAM_COUNTS[self.shape]
        if len(self.params) != expected:
            raise FuzzyConfigurationError(
                f"Term '{self.name}': {self.shape} needs {expected} breakpoints, "
                f"got {len(self.params)}"
            )

        if any(left > right for left, right in zip(self.params, self.params[1:])):
            raise FuzzyConfigurationError(
                f"Term '{self.name}': breakpoints must be non-decreasing, "
                f"got {list(self.params)}"
            )

    @classmethod
    def create(cls, name: str, shape: str, params) -> MembershipFunction:
        """
        Create a membership function, accepting MATLAB shape names.

        Args:
            name: Linguistic term, e.g. "Negative"
            shape: "triangular"/"trimf" or "trapezoidal"/"trapmf"
            params: Breakpoints of the shape

        Returns:
            MembershipFunction with float breakpoints.
        """
        key = shape.lower()
        if key not in _SHAPE_ALIASES:
            raise FuzzyConfigurationError(f"Unknown membership shape '{shape}' for term '{name}'")
        return cls(name=name, shape=_SHAPE_ALIASES[key], params=tuple(float(p) for p in params))

    @classmethod
    def triangular(cls, name: str, a: float, b: float, c: float) -> MembershipFunction:
        return cls.create(name, TRIANGULAR, (a, b, c))

    @classmethod
    def trapezoidal(cls, name: str, a: float, b: float, c: float, d: float) -> MembershipFunction:
        return cls.create(name, TRAPEZOIDAL, (a, b, c, d))

    @property
    def corners(self) -> Tuple[float, float, float, float]:
        """Breakpoints as a trapezoid; a triangle has a single-point plateau."""
        if self.shape == TRIANGULAR:
            a, b, c = self.params
            return a, b, b, c
        return self.params

    @property
    def support(self) -> Tuple[float, float]:
        return self.params[0], self.params[-1]

    def __call__(self, x: ArrayLike) -> ArrayLike:
        return degree(x, self)


def trapezoid(x: ArrayLike, a: float, b: float, c: float, d: float) -> ArrayLike:
    """
    Degree of membership of x in the trapezoid [a, b, c, d].

    A zero-width ramp (a == b or c == d) is treated as a step, so the
    degree jumps straight to 1 at b (or drops to 0 right after c).

    Args:
        x: Scalar or numpy array of crisp values
        a, b, c, d: Non-decreasing breakpoints

    Returns:
        Degree in [0, 1], with the same shape as x.
    """
    values = np.asarray(x, dtype=float)

    if b > a:
        rise = np.clip((values - a) / (b - a), 0.0, 1.0)
    else:
        rise = (values >= b).astype(float)

    if d > c:
        fall = np.clip((d - values) / (d - c), 0.0, 1.0)
    else:
        fall = (values <= c).astype(float)

    result = np.minimum(rise, fall)
    if result.ndim == 0:
        return float(result)
    return result


def triangle(x: ArrayLike, a: float, b: float, c: float) -> ArrayLike:
    """Degree of membership of x in the triangle [a, b, c]."""
    return trapezoid(x, a, b, b, c)


def degree(x: ArrayLike, mf: MembershipFunction) -> ArrayLike:
    """
    Evaluate a membership function.

    Args:
        x: Scalar or numpy array of crisp values
        mf: The membership function

    Returns:
        Degree of membership in [0, 1] (float for scalar input).
    """
    return trapezoid(x, *mf.corners)
