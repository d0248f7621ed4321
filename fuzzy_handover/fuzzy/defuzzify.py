"""Defuzzification of an aggregated output curve."""

import numpy as np

from fuzzy_handover.fuzzy.exceptions import FuzzyConfigurationError

DEFUZZIFICATION_METHODS = ("centroid", "bisector", "mom", "som", "lom")


def defuzzify(grid: np.ndarray, mu: np.ndarray, method: str = "centroid") -> float:
    """
    Convert an aggregated fuzzy set to a crisp value.

    Args:
        grid: Uniform sample points of the output domain
        mu: Aggregated possibility at each sample point
        method: Defuzzification method. Options:
            - "centroid": Center of gravity (default)
            - "bisector": Point splitting the area in two halves
            - "mom": Mean of maximum
            - "som": Smallest of maximum
            - "lom": Largest of maximum

    Returns:
        Crisp value. When the curve carries no mass at all the midpoint of
        the grid is returned.
    """
    if method not in DEFUZZIFICATION_METHODS:
        raise FuzzyConfigurationError(f"Unknown defuzzification method: {method}")

    total = float(np.sum(mu))
    if total <= 0.0:
        return float((grid[0] + grid[-1]) / 2)

    if method == "centroid":
        return float(np.sum(grid * mu) / total)
    elif method == "bisector":
        cumulative = np.cumsum(mu)
        index = int(np.searchsorted(cumulative, total / 2))
        return float(grid[min(index, len(grid) - 1)])

    peak_points = grid[np.isclose(mu, mu.max())]
    if method == "mom":
        return float(np.mean(peak_points))
    elif method == "som":
        return float(peak_points[0])
    return float(peak_points[-1])
