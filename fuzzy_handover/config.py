"""Configuration module for the fuzzy handover simulation."""

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, Optional
import logging


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure and return the application logger."""
    logger = logging.getLogger("handover")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


# Simulate a bit beyond the point where the user reaches the target station
HORIZON_FACTOR = 1.2


@dataclass
class ScenarioParams:
    """Geometry, mobility and radio parameters of the two-cell scenario."""
    distance_m: float = 1000.0
    bs1_position_m: float = 0.0
    bs2_position_m: Optional[float] = None  # defaults to bs1 + distance
    speed_ms: float = 20.0
    dt_s: float = 0.1
    duration_s: Optional[float] = None  # defaults to HORIZON_FACTOR * station gap / speed
    tx_power_dbm: float = -30.0
    path_loss_exponent: float = 3.5
    shadowing_std_db: float = 2.0
    seed: int = 1

    def __post_init__(self):
        if self.bs2_position_m is None:
            self.bs2_position_m = self.bs1_position_m + self.distance_m

        if self.distance_m <= 0:
            raise ValueError(f"distance_m must be positive, got {self.distance_m}")
        if self.bs1_position_m == self.bs2_position_m:
            raise ValueError("Base stations must not share a position")
        if self.speed_ms <= 0:
            raise ValueError(f"speed_ms must be positive, got {self.speed_ms}")
        if self.dt_s <= 0:
            raise ValueError(f"dt_s must be positive, got {self.dt_s}")
        if self.duration_s is not None and self.duration_s < 0:
            raise ValueError(f"duration_s must not be negative, got {self.duration_s}")
        if self.shadowing_std_db < 0:
            raise ValueError(
                f"shadowing_std_db must not be negative, got {self.shadowing_std_db}"
            )

    @property
    def speed_kmh(self) -> float:
        return self.speed_ms * 3.6

    @property
    def station_gap_m(self) -> float:
        """Distance travelled from BS1 to BS2."""
        return abs(self.bs2_position_m - self.bs1_position_m)

    @property
    def horizon_s(self) -> float:
        """Simulated time span."""
        if self.duration_s is not None:
            return self.duration_s
        return HORIZON_FACTOR * self.station_gap_m / self.speed_ms

    @property
    def num_steps(self) -> int:
        """Number of samples on the grid 0, dt, ..., horizon."""
        # Tolerance keeps 60 / 0.1 from rounding down to 599
        return int(self.horizon_s / self.dt_s + 1e-9) + 1


@dataclass
class DecisionParams:
    """Thresholds of both handover strategies and of the drop indicator."""
    rss_threshold_db: float = 3.0
    urgency_threshold: float = 0.6
    drop_threshold_dbm: float = -100.0


@dataclass
class Config:
    """Configuration class for a simulation run."""

    scenario: ScenarioParams = field(default_factory=ScenarioParams)
    decision: DecisionParams = field(default_factory=DecisionParams)

    # Output discretisation of the fuzzy system
    num_points: int = 1001

    # Output files
    results_file: str = "simulation_results.json"
    figures_dir: str = "figures"

    # Logging
    log_level: int = logging.INFO

    # Base directory (computed)
    _base_dir: Path = field(init=False, repr=False)

    def __post_init__(self):
        self._base_dir = Path(__file__).parent.parent

        # Resolve relative paths
        if not Path(self.results_file).is_absolute():
            self.results_file = str(self._base_dir / "results" / self.results_file)

        if not Path(self.figures_dir).is_absolute():
            self.figures_dir = str(self._base_dir / self.figures_dir)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """
        Create a Config from a JSON-like document.

        Expected layout::

            {"scenario": {...ScenarioParams fields...},
             "decision": {...DecisionParams fields...},
             "num_points": 1001,
             "results_file": "...", "figures_dir": "..."}

        Unknown keys raise ValueError.
        """
        known = {"scenario", "decision", "num_points", "results_file", "figures_dir"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")

        kwargs: Dict[str, Any] = {}
        try:
            if "scenario" in data:
                kwargs["scenario"] = ScenarioParams(**data["scenario"])
            if "decision" in data:
                kwargs["decision"] = DecisionParams(**data["decision"])
        except TypeError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

        for key in ("num_points", "results_file", "figures_dir"):
            if key in data:
                kwargs[key] = data[key]
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scenario": asdict(self.scenario),
            "decision": asdict(self.decision),
            "num_points": self.num_points,
        }


# Default configuration
def get_default_config() -> Config:
    """Return the reference scenario: D=1000 m, 72 km/h, dt=0.1 s, seed 1."""
    return Config()
