"""Per-step scenario state and the simulated time series."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List

import numpy as np


@dataclass(frozen=True)
class ScenarioState:
    """Radio conditions and fuzzy urgency at one time step."""
    time: float             # s
    position: float         # m
    rss_serving: float      # dBm, from BS1
    rss_target: float       # dBm, from BS2
    rss_difference: float   # dB, target - serving
    rss_difference_clipped: float  # dB, clipped to the FIS input domain
    urgency: float


@dataclass
class ScenarioSeries:
    """
    Append-only sequence of ScenarioState over the simulation horizon.

    Column accessors return numpy arrays in time order.
    """
    states: List[ScenarioState] = field(default_factory=list)

    def append(self, state: ScenarioState) -> None:
        self.states.append(state)

    def __len__(self) -> int:
        return len(self.states)

    def __iter__(self) -> Iterator[ScenarioState]:
        return iter(self.states)

    def __getitem__(self, index: int) -> ScenarioState:
        return self.states[index]

    def _column(self, name: str) -> np.ndarray:
        return np.array([getattr(s, name) for s in self.states], dtype=float)

    @property
    def times(self) -> np.ndarray:
        return self._column("time")

    @property
    def positions(self) -> np.ndarray:
        return self._column("position")

    @property
    def rss_serving(self) -> np.ndarray:
        return self._column("rss_serving")

    @property
    def rss_target(self) -> np.ndarray:
        return self._column("rss_target")

    @property
    def rss_difference(self) -> np.ndarray:
        return self._column("rss_difference")

    @property
    def rss_difference_clipped(self) -> np.ndarray:
        return self._column("rss_difference_clipped")

    @property
    def urgency(self) -> np.ndarray:
        return self._column("urgency")

    def to_dict(self) -> Dict[str, List[float]]:
        """Column-oriented form for JSON serialization."""
        return {
            "time": self.times.tolist(),
            "position": self.positions.tolist(),
            "rss_serving": self.rss_serving.tolist(),
            "rss_target": self.rss_target.tolist(),
            "rss_difference": self.rss_difference.tolist(),
            "rss_difference_clipped": self.rss_difference_clipped.tolist(),
            "urgency": self.urgency.tolist(),
        }
