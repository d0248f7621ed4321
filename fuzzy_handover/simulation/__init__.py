"""Radio propagation, handover decisions and the simulation driver."""

from .propagation import (
    PropagationModel,
    RadioSample,
    user_position,
    generate_radio_samples,
)
from .decision import (
    first_crossing,
    drop_flags,
    decide,
    threshold_decision,
    fuzzy_decision,
)
from .simulator import HandoverSimulator, SimulationResult

__all__ = [
    "PropagationModel",
    "RadioSample",
    "user_position",
    "generate_radio_samples",
    "first_crossing",
    "drop_flags",
    "decide",
    "threshold_decision",
    "fuzzy_decision",
    "HandoverSimulator",
    "SimulationResult",
]
