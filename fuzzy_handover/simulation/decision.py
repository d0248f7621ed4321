"""Handover trigger detection and drop indicators."""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from fuzzy_handover.config import DecisionParams
from fuzzy_handover.models import DecisionResult, ScenarioSeries, THRESHOLD, FUZZY

logger = logging.getLogger("handover.simulation")


def first_crossing(values: Sequence[float], threshold: float) -> Optional[int]:
    """
    Index of the first value reaching the threshold.

    Later samples are never looked at again, so a trigger cannot be
    withdrawn or repeated.

    Returns:
        First index with ``value >= threshold``, or None.
    """
    for index, value in enumerate(values):
        if value >= threshold:
            return index
    return None


def drop_flags(
    rss_serving: Sequence[float],
    rss_target: Sequence[float],
    trigger_index: Optional[int],
    drop_threshold_dbm: float = -100.0
) -> Tuple[bool, bool]:
    """
    Check for call drops before and after a handover.

    The trigger sample belongs to both segments: "before" is the serving
    cell over [0, trigger_index] and "after" the target cell over
    [trigger_index, end].

    Args:
        rss_serving: RSS series from the serving cell (dBm)
        rss_target: RSS series from the target cell (dBm)
        trigger_index: Handover step, or None if never triggered
        drop_threshold_dbm: RSS below this counts as a drop

    Returns:
        (drop_before, drop_after). Without a handover the whole series is
        "before" and drop_after is False.
    """
    serving = np.asarray(rss_serving, dtype=float)
    target = np.asarray(rss_target, dtype=float)

    if trigger_index is None:
        return bool(np.any(serving < drop_threshold_dbm)), False

    drop_before = bool(np.any(serving[:trigger_index + 1] < drop_threshold_dbm))
    drop_after = bool(np.any(target[trigger_index:] < drop_threshold_dbm))
    return drop_before, drop_after


def decide(
    strategy: str,
    signal: Sequence[float],
    threshold: float,
    series: ScenarioSeries,
    drop_threshold_dbm: float = -100.0
) -> DecisionResult:
    """
    Evaluate one strategy over a complete scenario.

    Args:
        strategy: Strategy label stored in the result
        signal: Decision signal, one value per step
        threshold: Trigger when the signal first reaches this value
        series: The scenario the signal was derived from
        drop_threshold_dbm: Drop threshold for the RSS checks

    Returns:
        DecisionResult with trigger instant and drop flags.
    """
    index = first_crossing(signal, threshold)
    drop_before, drop_after = drop_flags(
        series.rss_serving, series.rss_target, index, drop_threshold_dbm
    )

    if index is None:
        logger.info(f"{strategy} strategy never triggered")
        return DecisionResult.never_triggered(strategy, drop_before)

    state = series[index]
    logger.info(
        f"{strategy} strategy triggered at step {index}: "
        f"t={state.time:.2f} s, x={state.position:.1f} m"
    )
    return DecisionResult(
        strategy=strategy,
        triggered=True,
        trigger_index=index,
        trigger_time=state.time,
        trigger_position=state.position,
        drop_before=drop_before,
        drop_after=drop_after
    )


def threshold_decision(series: ScenarioSeries, params: Optional[DecisionParams] = None) -> DecisionResult:
    """Trigger on the unclipped RSS difference reaching the margin."""
    params = params or DecisionParams()
    return decide(
        THRESHOLD,
        series.rss_difference,
        params.rss_threshold_db,
        series,
        params.drop_threshold_dbm
    )


def fuzzy_decision(series: ScenarioSeries, params: Optional[DecisionParams] = None) -> DecisionResult:
    """Trigger on the fuzzy urgency reaching its threshold."""
    params = params or DecisionParams()
    return decide(
        FUZZY,
        series.urgency,
        params.urgency_threshold,
        series,
        params.drop_threshold_dbm
    )
