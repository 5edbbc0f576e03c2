"""Per-observation diagnostic plots."""

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from algae_tlbx.data.views import DatasetView
from algae_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


def plot_reference_lines(
    view: DatasetView,
    column: str,
    *,
    highlight_above: float | None = None,
    ax: plt.Axes | None = None,
    config: PlottingConfig = DEFAULT_PLOT_CFG,
) -> plt.Axes:
    """Plot each value of ``column`` against its row position with reference lines.

    Horizontal lines mark the mean, mean ± one standard deviation and the median,
    which makes isolated extreme observations easy to spot.

    Args:
        view: Dataset view holding ``column``
        column: Numeric column to plot
        highlight_above: Annotate the row position of every value above this level
        ax: Axes to draw on (defaults to the current axes)
        config: Plotting style providing the reference line colors

    Returns:
        The axes drawn on
    """
    ax = ax or plt.gca()
    values = view.df[column]
    positions = np.arange(len(values))
    mean, std, median = values.mean(), values.std(), values.median()
    colors = config.reference_colors

    sns.scatterplot(x=positions, y=values.to_numpy(), ax=ax, color="tab:blue", alpha=0.7)
    ax.axhline(mean, color=colors["mean"], linestyle="-", linewidth=1.5, label=f"Mean ({mean:.2f})")
    ax.axhline(mean + std, color=colors["std"], linestyle="--", linewidth=1, label=f"Mean ± 1 SD ({std:.2f})")
    ax.axhline(mean - std, color=colors["std"], linestyle="--", linewidth=1)
    ax.axhline(median, color=colors["median"], linestyle=":", linewidth=1.5, label=f"Median ({median:.2f})")

    if highlight_above is not None:
        for pos, value in zip(positions, values.to_numpy(), strict=True):
            if value > highlight_above:
                ax.annotate(str(pos), (pos, value), textcoords="offset points", xytext=(4, 4), fontsize=8)

    ax.set_xlabel("Observation")
    ax.set_ylabel(view.pretty(column))
    ax.set_title(f"{view.pretty(column)} per observation")
    ax.legend(loc="best", fontsize="small")
    return ax
