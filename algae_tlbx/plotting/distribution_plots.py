"""Univariate distribution plots: density histograms and normal Q-Q plots."""

import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.figure import Figure
from statsmodels.graphics.gofplots import qqplot

from algae_tlbx.data.views import DatasetView


def plot_distribution(
    view: DatasetView,
    column: str,
    *,
    kde: bool = True,
    rug: bool = True,
    bins: int | str = "auto",
    ax: plt.Axes | None = None,
) -> plt.Axes:
    """Density-scaled histogram with optional kernel density curve and rug marks.

    Wraps [:func:`seaborn.histplot`](https://seaborn.pydata.org/generated/seaborn.histplot.html)
    (``stat="density"``) and :func:`seaborn.rugplot`. Missing values are ignored.
    """
    ax = ax or plt.gca()
    values = view.df[column].dropna()

    sns.histplot(x=values, stat="density", bins=bins, kde=kde, ax=ax, color="tab:blue", alpha=0.4)
    if rug:
        sns.rugplot(x=values, ax=ax, color="black", height=0.04)

    ax.set_xlabel(view.pretty(column))
    ax.set_ylabel("Density")
    ax.set_title(f"Distribution of {view.pretty(column)}")
    return ax


def plot_normal_qq(
    view: DatasetView,
    column: str,
    *,
    ax: plt.Axes | None = None,
) -> plt.Axes:
    """Q-Q plot of a column against the normal distribution.

    Uses :func:`statsmodels.graphics.gofplots.qqplot` with a reference line through
    the quartiles (``line="q"``).
    """
    ax = ax or plt.gca()
    qqplot(view.df[column].dropna().to_numpy(), line="q", ax=ax)
    ax.set_ylabel(f"{view.pretty(column)} quantiles")
    ax.set_title(f"Normal Q-Q plot of {view.pretty(column)}")
    return ax


def plot_distribution_with_qq(
    view: DatasetView,
    column: str,
    figsize: tuple[int, int] = (12, 5),
    **kwargs: object,
) -> Figure:
    """Histogram (left) and normal Q-Q plot (right) of one column side by side.

    Args:
        view: Dataset view holding ``column``
        column: Numeric column to inspect
        figsize: Figure size (width, height)
        **kwargs: Forwarded to :func:`plot_distribution`

    Returns:
        matplotlib Figure object
    """
    fig, (ax_hist, ax_qq) = plt.subplots(1, 2, figsize=figsize)
    plot_distribution(view, column, ax=ax_hist, **kwargs)  # type: ignore[arg-type]
    plot_normal_qq(view, column, ax=ax_qq)
    fig.tight_layout()
    return fig
