"""Result reporting utilities."""

from typing import List

from fuzzy_handover.fuzzy import FuzzySystem
from fuzzy_handover.models import DecisionResult
from fuzzy_handover.simulation import SimulationResult


def format_decision(label: str, decision: DecisionResult) -> str:
    """One line with the trigger instant of a strategy."""
    if decision.triggered:
        return f"{label + ' HO:':<16}t = {decision.trigger_time:.2f} s, x = {decision.trigger_position:.1f} m"
    return f"{label + ' HO:':<16}never triggered."


def print_results(result: SimulationResult) -> None:
    """
    Print the simulation summary to console.

    Args:
        result: The simulation result to print
    """
    print("\n" + "=" * 60)
    print("SIMULATION SUMMARY")
    print("=" * 60)

    print(f"\nUser speed: {result.scenario.speed_kmh:.1f} km/h")
    print(f"Steps simulated: {len(result.series)}")

    print()
    print(format_decision("Fuzzy", result.fuzzy))
    print(format_decision("Threshold", result.threshold))

    print("\n--- Drop Indicators ---")
    print(f"Fuzzy scheme - any drop before HO on BS1?  {int(result.fuzzy.drop_before)}")
    print(f"Fuzzy scheme - any drop after HO on BS2?   {int(result.fuzzy.drop_after)}")
    print(f"Thresh scheme - any drop before HO on BS1? {int(result.threshold.drop_before)}")
    print(f"Thresh scheme - any drop after HO on BS2?  {int(result.threshold.drop_after)}")

    if result.threshold.triggered and result.fuzzy.triggered:
        lag = result.fuzzy.trigger_time - result.threshold.trigger_time
        print(f"\nFuzzy HO lag vs threshold HO: {lag:+.2f} s")

    if result.validation.warnings:
        print("\n--- Warnings ---")
        for warning in result.validation.warnings:
            print(f"  ! {warning}")

    print("\n" + "=" * 60)


def format_fis_summary(fis: FuzzySystem) -> str:
    """
    Format a brief description of a fuzzy system.

    Args:
        fis: The system to summarize

    Returns:
        Formatted string summary
    """
    lines: List[str] = [f"FIS: {fis.name}"]

    for variable in fis.inputs + (fis.output,):
        low, high = variable.domain
        terms = ", ".join(variable.term_names)
        lines.append(f"  {variable.name} [{low:g}, {high:g}]: {terms}")

    lines.append(f"  Rules ({len(fis.rules)}):")
    for number, text in enumerate(fis.describe_rules(), start=1):
        lines.append(f"    {number}. {text}")

    return "\n".join(lines)
