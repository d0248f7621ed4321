"""Utility functions for the handover simulation."""

from .data_loader import (
    load_json,
    save_json,
    load_config,
)
from .validators import (
    SimulationValidator,
    ValidationResult,
)

__all__ = [
    "load_json",
    "save_json",
    "load_config",
    "SimulationValidator",
    "ValidationResult",
]
