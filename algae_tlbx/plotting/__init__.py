"""Plotting utilities for data visualization."""

from .diagnostic_plots import plot_reference_lines
from .distribution_plots import plot_distribution, plot_distribution_with_qq, plot_normal_qq
from .group_plots import (
    plot_binned_scatter,
    plot_binned_scatter_plotly,
    plot_grouped_box,
    plot_grouped_violin,
)
from .missing_plots import plot_missing_matrix, plot_row_missing_ratios


__all__ = [
    "plot_binned_scatter",
    "plot_binned_scatter_plotly",
    "plot_distribution",
    "plot_distribution_with_qq",
    "plot_grouped_box",
    "plot_grouped_violin",
    "plot_missing_matrix",
    "plot_normal_qq",
    "plot_reference_lines",
    "plot_row_missing_ratios",
]
