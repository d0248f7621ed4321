"""Log-distance path loss with shadowing, and the two-cell trajectory."""

import logging
import math
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from fuzzy_handover.config import ScenarioParams

logger = logging.getLogger("handover.simulation")


@dataclass(frozen=True)
class PropagationModel:
    """
    Log-distance path-loss model.

    RSS = Ptx - 10 * n * log10(max(min_distance, d)) + N(0, sigma)
    """
    tx_power_dbm: float = -30.0
    path_loss_exponent: float = 3.5
    shadowing_std_db: float = 2.0
    min_distance_m: float = 1.0

    @classmethod
    def from_params(cls, params: ScenarioParams) -> "PropagationModel":
        return cls(
            tx_power_dbm=params.tx_power_dbm,
            path_loss_exponent=params.path_loss_exponent,
            shadowing_std_db=params.shadowing_std_db
        )

    def mean_rss(self, distance: float) -> float:
        """Deterministic RSS in dBm; distance is floored at min_distance_m."""
        d = max(self.min_distance_m, abs(distance))
        return self.tx_power_dbm - 10 * self.path_loss_exponent * math.log10(d)

    def received_power(self, distance: float, rng: np.random.Generator) -> float:
        """RSS in dBm including one shadowing draw from ``rng``."""
        return self.mean_rss(distance) + self.shadowing_std_db * rng.standard_normal()


@dataclass(frozen=True)
class RadioSample:
    """Position and RSS from both stations at one time step."""
    time: float
    position: float
    rss_serving: float
    rss_target: float

    @property
    def rss_difference(self) -> float:
        return self.rss_target - self.rss_serving


def user_position(params: ScenarioParams, time: float) -> float:
    """
    Position of a user moving from BS1 towards BS2 at constant speed.

    The position is clamped to the segment between the two stations.
    """
    start, end = params.bs1_position_m, params.bs2_position_m
    direction = 1.0 if end > start else -1.0
    x = start + direction * params.speed_ms * time
    return min(max(x, min(start, end)), max(start, end))


def generate_radio_samples(
    params: ScenarioParams,
    rng: Optional[np.random.Generator] = None,
    model: Optional[PropagationModel] = None
) -> Iterator[RadioSample]:
    """
    Yield one RadioSample per time step over the simulation horizon.

    Shadowing is drawn independently per station and per step, serving
    station first, from ``rng``. Without an explicit generator one is
    seeded from ``params.seed``, so equal params give identical series.

    Args:
        params: Scenario geometry, mobility and radio parameters
        rng: Random generator for the shadowing draws
        model: Path-loss model (built from params by default)

    Yields:
        RadioSample for t = 0, dt, 2 dt, ...
    """
    rng = rng if rng is not None else np.random.default_rng(params.seed)
    model = model or PropagationModel.from_params(params)

    logger.debug(
        f"Generating {params.num_steps} samples: D={params.distance_m} m, "
        f"v={params.speed_ms} m/s, n={model.path_loss_exponent}, "
        f"sigma={model.shadowing_std_db} dB"
    )

    for k in range(params.num_steps):
        t = k * params.dt_s
        x = user_position(params, t)

        rss_serving = model.received_power(x - params.bs1_position_m, rng)
        rss_target = model.received_power(x - params.bs2_position_m, rng)

        yield RadioSample(time=t, position=x, rss_serving=rss_serving, rss_target=rss_target)
