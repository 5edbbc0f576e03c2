"""Visualization of missing values."""

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns
from matplotlib.figure import Figure

from algae_tlbx.analysis.missing_values import MissingValueFilterResult
from algae_tlbx.data.views import DatasetView


def plot_row_missing_ratios(
    result: MissingValueFilterResult,
    figsize: tuple[int, int] = (12, 4),
) -> Figure:
    """Bar chart of the missing-cell ratio of every row with the filter threshold.

    Flagged rows (ratio at or above the threshold) are drawn in red.
    """
    ratios = result.row_ratios.to_numpy()
    positions = np.arange(len(ratios))
    colors = np.where(result.flagged_mask.to_numpy(dtype=bool), "tab:red", "tab:gray")

    fig, ax = plt.subplots(figsize=figsize)
    ax.bar(positions, ratios, color=colors, width=0.8)
    ax.axhline(result.prop, color="black", linestyle="--", linewidth=1, label=f"prop = {result.prop:.2f}")
    ax.set_xlabel("Row position")
    ax.set_ylabel("Share of missing cells")
    ax.set_ylim(0, 1.05)
    ax.set_title(f"Missing ratio per row ({result.n_flagged} flagged)")
    ax.legend(loc="upper right")
    fig.tight_layout()
    return fig


def plot_missing_matrix(view: DatasetView, figsize: tuple[int, int] = (10, 6)) -> Figure:
    """Heatmap of missing cells (rows = observations, columns = variables)."""
    fig, ax = plt.subplots(figsize=figsize)
    mask = view.df.isna().astype(int).rename(columns=lambda c: view.pretty(c))
    sns.heatmap(mask, cbar=False, cmap=["#f0f0f0", "tab:red"], vmin=0, vmax=1, ax=ax, yticklabels=False)
    ax.set_xticklabels(ax.get_xticklabels(), rotation=45, ha="right", rotation_mode="anchor")
    ax.set_ylabel("Observation")
    ax.set_title("Missing values")
    fig.tight_layout()
    return fig
