"""Plots of a numeric column across groups: box, violin and quantile-faceted scatter."""

from collections.abc import Sequence

import matplotlib.pyplot as plt
import pandas as pd
import plotly.graph_objects as go
import seaborn as sns
from matplotlib.figure import Figure
from plotly.subplots import make_subplots

from algae_tlbx.data.views import DatasetView, quantile_bins
from algae_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


def _group_order(view: DatasetView, by: str, order: Sequence[str] | None) -> list[str]:
    """Explicit order if given, else the categorical order of ``by``, else sorted labels."""
    if order is not None:
        return list(order)
    values = view.df[by]
    if isinstance(values.dtype, pd.CategoricalDtype):
        return [str(c) for c in values.cat.categories]
    return sorted(values.dropna().astype(str).unique())


def _grouping_view(view: DatasetView, by: str, order: Sequence[str] | None) -> tuple[DatasetView, list[str]]:
    resolved = _group_order(view, by, order)
    return view.with_ordered_categories(by, resolved), resolved


def plot_grouped_box(
    view: DatasetView,
    column: str,
    by: str | None = None,
    *,
    order: Sequence[str] | None = None,
    rug: bool = False,
    ax: plt.Axes | None = None,
    config: PlottingConfig = DEFAULT_PLOT_CFG,
) -> plt.Axes:
    """Box plot of ``column``, one box per level of the categorical ``by``.

    Without ``by`` a single box of the whole column is drawn. Groups are shown in
    ``order`` when given, otherwise in the declared category order (e.g.
    small < medium < large). Reordering happens on a derived view.
    """
    ax = ax or plt.gca()
    if by is None:
        sns.boxplot(data=view.df, y=column, color=config.box_color, saturation=1, ax=ax)
        frame = view.df
        ax.set_title(view.pretty(column))
    else:
        grouped, resolved = _grouping_view(view, by, order)
        sns.boxplot(data=grouped.df, x=by, y=column, order=resolved, color=config.box_color, saturation=1, ax=ax)
        frame = grouped.df
        ax.set_xlabel(view.pretty(by))
        ax.set_title(f"{view.pretty(column)} by {view.pretty(by)}")

    if rug:
        sns.rugplot(data=frame, y=column, ax=ax, color="black", height=0.02)
    ax.set_ylabel(view.pretty(column))
    return ax


def plot_grouped_violin(
    view: DatasetView,
    column: str,
    by: str,
    *,
    order: Sequence[str] | None = None,
    ax: plt.Axes | None = None,
    config: PlottingConfig = DEFAULT_PLOT_CFG,
) -> plt.Axes:
    """Violin plot of ``column`` per level of ``by`` with quartile lines and the raw points."""
    ax = ax or plt.gca()
    grouped, resolved = _grouping_view(view, by, order)

    sns.violinplot(
        data=grouped.df,
        x=by,
        y=column,
        order=resolved,
        inner="quart",
        cut=0,
        color=config.box_color,
        saturation=1,
        ax=ax,
    )
    sns.stripplot(data=grouped.df, x=by, y=column, order=resolved, color="black", size=3, alpha=0.5, ax=ax)

    ax.set_xlabel(view.pretty(by))
    ax.set_ylabel(view.pretty(column))
    ax.set_title(f"{view.pretty(column)} by {view.pretty(by)}")
    return ax


def _binned_frame(
    view: DatasetView,
    bin_column: str,
    q: int | Sequence[float],
) -> tuple[pd.DataFrame, str]:
    """Throwaway frame with an extra quantile-bin column (rows without a bin dropped)."""
    bin_label = f"{view.pretty(bin_column)} (quantile bin)"
    bins = quantile_bins(view.df[bin_column], q=q)
    binned = view.with_column(bin_label, bins, pretty_name=bin_label).df.dropna(subset=[bin_label])
    return binned.assign(**{bin_label: binned[bin_label].cat.remove_unused_categories()}), bin_label


def plot_binned_scatter(
    view: DatasetView,
    x: str,
    y: str,
    bin_column: str,
    *,
    q: int | Sequence[float] = 4,
    col_wrap: int = 2,
    height: float = 3.0,
) -> Figure:
    """Scatter of ``y`` against ``x`` in one panel per quantile bin of ``bin_column``.

    The bins are computed with :func:`pandas.qcut` on a derived frame and never
    stored in the dataset. ``y`` may be categorical (e.g. season), in which case its
    category order is kept on the axis.

    Returns:
        Figure of the underlying :class:`seaborn.FacetGrid`
    """
    binned, bin_label = _binned_frame(view, bin_column, q)

    grid = sns.FacetGrid(binned, col=bin_label, col_wrap=col_wrap, height=height, sharex=True, sharey=True)
    grid.map_dataframe(sns.scatterplot, x=x, y=y, alpha=0.7)
    grid.set_axis_labels(view.pretty(x), view.pretty(y))
    grid.set_titles(col_template="{col_name}")
    grid.figure.suptitle(f"{view.pretty(y)} vs {view.pretty(x)} by {view.pretty(bin_column)} quantiles")
    grid.figure.tight_layout()
    return grid.figure


def plot_binned_scatter_plotly(
    view: DatasetView,
    x: str,
    y: str,
    bin_column: str,
    *,
    q: int | Sequence[float] = 4,
    col_wrap: int = 2,
    height: int = 600,
    width: int = 900,
) -> go.Figure:
    """Interactive version of :func:`plot_binned_scatter` built with plotly subplots."""
    binned, bin_label = _binned_frame(view, bin_column, q)
    levels = list(binned[bin_label].cat.categories)
    n_rows = -(-len(levels) // col_wrap)

    fig = make_subplots(
        rows=n_rows,
        cols=col_wrap,
        subplot_titles=[str(level) for level in levels],
        shared_xaxes=True,
        shared_yaxes=True,
    )
    for i, level in enumerate(levels):
        subset = binned.loc[binned[bin_label] == level]
        fig.add_trace(
            go.Scatter(
                x=subset[x],
                y=subset[y].astype(str) if isinstance(subset[y].dtype, pd.CategoricalDtype) else subset[y],
                mode="markers",
                marker={"size": 7, "opacity": 0.75},
                name=str(level),
                hovertemplate=f"{view.pretty(x)}: %{{x}}<br>{view.pretty(y)}: %{{y}}<extra></extra>",
            ),
            row=i // col_wrap + 1,
            col=i % col_wrap + 1,
        )

    if isinstance(binned[y].dtype, pd.CategoricalDtype):
        fig.update_yaxes(categoryorder="array", categoryarray=[str(c) for c in binned[y].cat.categories])
    fig.update_xaxes(title_text=view.pretty(x), row=n_rows)
    fig.update_layout(
        title=f"{view.pretty(y)} vs {view.pretty(x)} by {view.pretty(bin_column)} quantiles",
        showlegend=False,
        height=height,
        width=width,
    )
    return fig
