"""Handover decision outcome of one strategy."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

THRESHOLD = "threshold"
FUZZY = "fuzzy"


@dataclass(frozen=True)
class DecisionResult:
    """
    When (if ever) a strategy triggered, and whether a drop was seen.

    ``drop_before`` covers serving-cell samples up to and including the
    trigger step; ``drop_after`` covers target-cell samples from the
    trigger step on. A strategy that never triggers has the whole series
    in "before" and ``drop_after`` is False.
    """
    strategy: str
    triggered: bool
    trigger_index: Optional[int] = None
    trigger_time: Optional[float] = None
    trigger_position: Optional[float] = None
    drop_before: bool = False
    drop_after: bool = False

    @classmethod
    def never_triggered(cls, strategy: str, drop_before: bool) -> "DecisionResult":
        return cls(strategy=strategy, triggered=False, drop_before=drop_before)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy,
            "triggered": self.triggered,
            "trigger_index": self.trigger_index,
            "trigger_time": self.trigger_time,
            "trigger_position": self.trigger_position,
            "drop_before": self.drop_before,
            "drop_after": self.drop_after,
        }
