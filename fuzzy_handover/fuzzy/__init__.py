"""Fuzzy logic module: membership functions, rules and Mamdani inference."""

from .exceptions import FuzzyConfigurationError
from .membership import (
    MembershipFunction,
    TRIANGULAR,
    TRAPEZOIDAL,
    degree,
    triangle,
    trapezoid,
)
from .variable import FuzzyVariable
from .rule import Rule, Combinator
from .defuzzify import defuzzify, DEFUZZIFICATION_METHODS
from .inference import FuzzySystem, InferenceSettings, evaluate
from .handover_fis import (
    build_handover_fis,
    rss_difference_variable,
    speed_variable,
    urgency_variable,
    HANDOVER_RULES,
)

__all__ = [
    "FuzzyConfigurationError",
    "MembershipFunction",
    "TRIANGULAR",
    "TRAPEZOIDAL",
    "degree",
    "triangle",
    "trapezoid",
    "FuzzyVariable",
    "Rule",
    "Combinator",
    "defuzzify",
    "DEFUZZIFICATION_METHODS",
    "FuzzySystem",
    "InferenceSettings",
    "evaluate",
    "build_handover_fis",
    "rss_difference_variable",
    "speed_variable",
    "urgency_variable",
    "HANDOVER_RULES",
]
