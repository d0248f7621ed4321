"""Figure export for a simulation run."""

import logging
from pathlib import Path
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from fuzzy_handover.fuzzy import FuzzySystem, FuzzyVariable
from fuzzy_handover.simulation import SimulationResult

logger = logging.getLogger("handover.reporters")

NUM_CURVE_POINTS = 401


def _plot_memberships(ax, variable: FuzzyVariable, title: str, xlabel: str) -> None:
    xs = variable.grid(NUM_CURVE_POINTS)
    for name, curve in zip(variable.term_names, variable.curves(NUM_CURVE_POINTS)):
        ax.plot(xs, curve, linewidth=1.2, label=name)
    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel("Degree of membership")
    ax.set_ylim(-0.05, 1.05)
    ax.legend(loc="best", fontsize="small")
    ax.grid(True)


def plot_input_memberships(fis: FuzzySystem):
    fig, axes = plt.subplots(len(fis.inputs), 1, figsize=(8, 3.5 * len(fis.inputs)), squeeze=False)
    labels = ["RSS_target - RSS_serving (dB)", "Speed (km/h)"]
    for i, (ax, variable) in enumerate(zip(axes[:, 0], fis.inputs)):
        xlabel = labels[i] if i < len(labels) else variable.name
        _plot_memberships(ax, variable, f"Input {i + 1}: {variable.name}", xlabel)
    fig.tight_layout()
    return fig


def plot_output_memberships(fis: FuzzySystem):
    fig, ax = plt.subplots(figsize=(8, 4))
    _plot_memberships(ax, fis.output, "Output: Handover urgency", "Urgency")
    fig.tight_layout()
    return fig


def plot_rss(result: SimulationResult):
    series = result.series
    fig, ax = plt.subplots(figsize=(9, 5))
    ax.plot(series.times, series.rss_serving, linewidth=1.2, label="RSS from BS1 (serving)")
    ax.plot(series.times, series.rss_target, linewidth=1.2, label="RSS from BS2 (target)")

    if result.fuzzy.triggered:
        ax.axvline(result.fuzzy.trigger_time, linestyle="--", color="tab:purple", label="Fuzzy HO")
    if result.threshold.triggered:
        ax.axvline(result.threshold.trigger_time, linestyle=":", color="tab:green", label="Threshold HO")
    ax.axhline(result.decision_params.drop_threshold_dbm, linestyle="--", color="red", label="Drop threshold")

    ax.set_xlabel("Time (s)")
    ax.set_ylabel("RSS (dBm)")
    ax.set_title("Received signal strength vs time")
    ax.legend(loc="best")
    ax.grid(True)
    fig.tight_layout()
    return fig


def plot_rss_difference_and_urgency(result: SimulationResult):
    series = result.series
    fig, ax_left = plt.subplots(figsize=(9, 5))
    ax_left.plot(series.times, series.rss_difference, linewidth=1.2, label="RSS diff")
    ax_left.set_xlabel("Time (s)")
    ax_left.set_ylabel("RSS_target - RSS_serving (dB)")
    ax_left.grid(True)

    ax_right = ax_left.twinx()
    ax_right.plot(series.times, series.urgency, linewidth=1.2, color="tab:orange", label="Urgency")
    ax_right.axhline(
        result.decision_params.urgency_threshold, linestyle="--", color="gray", label="Urgency threshold"
    )
    ax_right.set_ylabel("Fuzzy handover urgency")

    handles = ax_left.get_legend_handles_labels()[0] + ax_right.get_legend_handles_labels()[0]
    ax_left.legend(handles=handles, loc="best")
    ax_left.set_title("RSS difference and fuzzy handover urgency")
    fig.tight_layout()
    return fig


def plot_position(result: SimulationResult):
    series = result.series
    scenario = result.scenario
    fig, ax = plt.subplots(figsize=(9, 5))
    ax.plot(series.times, series.positions, linewidth=1.2, label="User position")
    ax.axhline(scenario.bs1_position_m, linestyle="--", color="black", label="BS1")
    ax.axhline(scenario.bs2_position_m, linestyle="--", color="black", label="BS2")

    if result.fuzzy.triggered:
        ax.plot(result.fuzzy.trigger_time, result.fuzzy.trigger_position, "ro", markersize=8, label="Fuzzy HO")
    if result.threshold.triggered:
        ax.plot(result.threshold.trigger_time, result.threshold.trigger_position, "gx", markersize=8, label="Threshold HO")

    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Position x (m)")
    ax.set_title("User trajectory between base stations")
    ax.legend(loc="best")
    ax.grid(True)
    fig.tight_layout()
    return fig


def save_figures(result: SimulationResult, fis: FuzzySystem, directory: str | Path) -> List[Path]:
    """
    Render all figures of a run as PNG files.

    Args:
        result: The simulation result to plot
        fis: The fuzzy system used in the run
        directory: Output folder, created if missing

    Returns:
        Paths of the written files
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    figures = {
        "fig_mf_inputs.png": plot_input_memberships(fis),
        "fig_mf_output.png": plot_output_memberships(fis),
        "fig_rss_vs_time.png": plot_rss(result),
        "fig_rssdiff_urgency.png": plot_rss_difference_and_urgency(result),
        "fig_position.png": plot_position(result),
    }

    paths = []
    for filename, fig in figures.items():
        path = directory / filename
        fig.savefig(path, dpi=120)
        plt.close(fig)
        paths.append(path)

    logger.info(f"Saved {len(paths)} figures to {directory}")
    return paths
