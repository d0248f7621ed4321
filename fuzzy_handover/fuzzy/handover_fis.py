"""The handover-urgency fuzzy inference system."""

from fuzzy_handover.fuzzy.inference import FuzzySystem, InferenceSettings
from fuzzy_handover.fuzzy.membership import MembershipFunction
from fuzzy_handover.fuzzy.variable import FuzzyVariable

RSS_DIFF = "RSSdiff"
SPEED = "Speed"
URGENCY = "Urgency"

# MF indices:
#   RSSdiff: 1=VeryNegative, 2=Negative, 3=Zero, 4=Positive, 5=VeryPositive
#   Speed:   1=Low, 2=Medium, 3=High
#   Urgency: 1=VeryLow, 2=Low, 3=Medium, 4=High, 5=VeryHigh
HANDOVER_RULES = (
    (1, 0, 1, 1, 1),  # VeryNegative -> VeryLow
    (2, 0, 2, 1, 1),  # Negative -> Low
    (3, 1, 3, 1, 1),  # Zero & Low -> Medium
    (3, 3, 4, 1, 1),  # Zero & High -> High
    (4, 1, 4, 1, 1),  # Positive & Low -> High
    (4, 3, 5, 1, 1),  # Positive & High -> VeryHigh
    (5, 0, 5, 1, 1),  # VeryPositive -> VeryHigh
)


def rss_difference_variable() -> FuzzyVariable:
    """RSS_target - RSS_serving in dB."""
    return FuzzyVariable.create(RSS_DIFF, (-20, 20), [
        MembershipFunction.trapezoidal("VeryNegative", -20, -20, -15, -10),
        MembershipFunction.triangular("Negative", -15, -8, -1),
        MembershipFunction.triangular("Zero", -4, 0, 4),
        MembershipFunction.triangular("Positive", 1, 8, 15),
        MembershipFunction.trapezoidal("VeryPositive", 10, 15, 20, 20),
    ])


def speed_variable() -> FuzzyVariable:
    """User speed in km/h."""
    return FuzzyVariable.create(SPEED, (0, 130), [
        MembershipFunction.trapezoidal("Low", 0, 0, 20, 40),
        MembershipFunction.triangular("Medium", 30, 60, 90),
        MembershipFunction.trapezoidal("High", 80, 100, 130, 130),
    ])


def urgency_variable() -> FuzzyVariable:
    return FuzzyVariable.create(URGENCY, (0, 1), [
        MembershipFunction.trapezoidal("VeryLow", 0, 0, 0.1, 0.3),
        MembershipFunction.triangular("Low", 0.1, 0.3, 0.5),
        MembershipFunction.triangular("Medium", 0.3, 0.5, 0.7),
        MembershipFunction.triangular("High", 0.5, 0.7, 0.9),
        MembershipFunction.trapezoidal("VeryHigh", 0.7, 0.9, 1, 1),
    ])


def build_handover_fis(num_points: int = 1001) -> FuzzySystem:
    """
    Build the Mamdani system mapping (RSS difference, speed) to urgency.

    Args:
        num_points: Number of samples of the urgency domain used for
            defuzzification

    Returns:
        FuzzySystem with min/max/min/max/centroid operators.
    """
    return FuzzySystem.from_rule_list(
        name="HandoverDecision",
        inputs=(rss_difference_variable(), speed_variable()),
        output=urgency_variable(),
        rule_list=HANDOVER_RULES,
        settings=InferenceSettings(
            and_method="min",
            or_method="max",
            implication_method="min",
            aggregation_method="max",
            defuzzification_method="centroid"
        ),
        num_points=num_points
    )
