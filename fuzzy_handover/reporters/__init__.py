"""Reporting utilities for simulation results."""

from .console_reporter import print_results, format_decision, format_fis_summary
from .plot_reporter import save_figures

__all__ = [
    "print_results",
    "format_decision",
    "format_fis_summary",
    "save_figures",
]
