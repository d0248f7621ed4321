"""Fuzzy-logic handover decision simulation package."""

from .config import (
    Config,
    ScenarioParams,
    DecisionParams,
    setup_logging,
    get_default_config,
)

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ScenarioParams",
    "DecisionParams",
    "setup_logging",
    "get_default_config",
]
