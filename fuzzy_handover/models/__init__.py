"""Data models for the handover simulation."""

from .scenario import ScenarioState, ScenarioSeries
from .decision import DecisionResult, THRESHOLD, FUZZY

__all__ = [
    "ScenarioState",
    "ScenarioSeries",
    "DecisionResult",
    "THRESHOLD",
    "FUZZY",
]
