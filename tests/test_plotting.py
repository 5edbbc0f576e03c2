"""Smoke tests for plotting utilities using the bundled data."""

import matplotlib as mpl
import matplotlib.pyplot as plt
import plotly.graph_objects as go
import plotly.io as pio
import pytest
from matplotlib.colors import to_rgb

from algae_tlbx.data import AlgaeCol
from algae_tlbx.plotting import (
    plot_binned_scatter,
    plot_binned_scatter_plotly,
    plot_distribution,
    plot_distribution_with_qq,
    plot_grouped_box,
    plot_grouped_violin,
    plot_missing_matrix,
    plot_normal_qq,
    plot_reference_lines,
    plot_row_missing_ratios,
)
from algae_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


@pytest.fixture
def algae_view(algae_dataset):
    return algae_dataset.view()


def test_distribution_plots(algae_view) -> None:
    """Histogram and Q-Q plot render side by side."""
    fig = plot_distribution_with_qq(algae_view, AlgaeCol.MX_PH, figsize=(8, 4))
    ax_hist, ax_qq = fig.axes
    assert ax_hist.get_xlabel() == "Maximum pH"
    assert ax_hist.get_ylabel() == "Density"
    assert "Maximum pH" in ax_qq.get_title()
    plt.close(fig)


def test_distribution_without_rug(algae_view) -> None:
    fig, ax = plt.subplots()
    plot_distribution(algae_view, AlgaeCol.CHLA, kde=False, rug=False, bins=5, ax=ax)
    assert len(ax.patches) == 5
    plt.close(fig)


def test_normal_qq_has_reference_line(algae_view) -> None:
    fig, ax = plt.subplots()
    plot_normal_qq(algae_view, AlgaeCol.MX_PH, ax=ax)
    # sample points plus the quartile line
    assert len(ax.lines) == 2
    plt.close(fig)


def test_grouped_box_follows_category_order(algae_view) -> None:
    fig, ax = plt.subplots()
    plot_grouped_box(algae_view, AlgaeCol.A1, by=AlgaeCol.SIZE, ax=ax)
    assert [t.get_text() for t in ax.get_xticklabels()] == ["small", "medium", "large"]
    assert ax.get_xlabel() == "River Size"
    plt.close(fig)


def test_grouped_box_explicit_order_leaves_view_untouched(algae_view) -> None:
    fig, ax = plt.subplots()
    plot_grouped_box(algae_view, AlgaeCol.A1, by=AlgaeCol.SIZE, order=["large", "medium", "small"], ax=ax)
    assert [t.get_text() for t in ax.get_xticklabels()] == ["large", "medium", "small"]
    assert list(algae_view.df[AlgaeCol.SIZE].cat.categories) == ["small", "medium", "large"]
    plt.close(fig)


def test_single_box_with_rug(algae_view) -> None:
    fig, ax = plt.subplots()
    plot_grouped_box(algae_view, AlgaeCol.O_PO4, rug=True, ax=ax)
    assert ax.get_ylabel() == algae_view.pretty(AlgaeCol.O_PO4)
    assert ax.collections  # rug marks
    plt.close(fig)


def test_grouped_violin(algae_view) -> None:
    fig, ax = plt.subplots()
    plot_grouped_violin(algae_view, AlgaeCol.A1, by=AlgaeCol.SIZE, ax=ax)
    assert [t.get_text() for t in ax.get_xticklabels()] == ["small", "medium", "large"]
    plt.close(fig)


def test_binned_scatter(algae_view) -> None:
    """One panel per quantile bin, without adding the bin column to the view."""
    fig = plot_binned_scatter(algae_view, x=AlgaeCol.A3, y=AlgaeCol.SEASON, bin_column=AlgaeCol.MN_O2, q=4)
    assert 1 <= len(fig.axes) <= 4
    assert list(algae_view.df.columns) == list(AlgaeCol.predictor_columns()) + list(AlgaeCol.algae_columns())
    plt.close(fig)


def test_binned_scatter_plotly(algae_view) -> None:
    fig = plot_binned_scatter_plotly(algae_view, x=AlgaeCol.A3, y=AlgaeCol.SEASON, bin_column=AlgaeCol.MN_O2, q=4)
    assert isinstance(fig, go.Figure)
    assert 1 <= len(fig.data) <= 4
    n_binned = algae_view.df[AlgaeCol.MN_O2].notna().sum()
    assert sum(len(trace.x) for trace in fig.data) == n_binned


def test_reference_lines(algae_view) -> None:
    """Mean, both standard deviation lines and the median are drawn."""
    values = algae_view.df[AlgaeCol.NH4]
    threshold = values.quantile(0.9)

    fig, ax = plt.subplots()
    plot_reference_lines(algae_view, AlgaeCol.NH4, highlight_above=threshold, ax=ax)

    assert len(ax.lines) == 4
    assert ax.lines[0].get_ydata()[0] == pytest.approx(values.mean())
    assert ax.lines[3].get_ydata()[0] == pytest.approx(values.median())
    assert len(ax.texts) == int((values > threshold).sum())
    plt.close(fig)


def test_missing_plots(algae_dataset) -> None:
    result = algae_dataset.make_missing_value_filter(prop=0.2).fit().result()
    ratio_fig = plot_row_missing_ratios(result, figsize=(8, 3))
    assert len(ratio_fig.axes[0].patches) == len(algae_dataset)

    matrix_fig = plot_missing_matrix(algae_dataset.view(), figsize=(6, 4))
    assert len(matrix_fig.axes) == 1

    plt.close(ratio_fig)
    plt.close(matrix_fig)


def test_result_plot_shortcut(algae_dataset) -> None:
    fig = algae_dataset.make_missing_value_filter(prop=0.5).fit().result().plot_row_ratios()
    assert fig.axes
    plt.close(fig)


class TestPlottingConfig:
    """Test PlottingConfig."""

    def test_apply_restores_previous_style(self) -> None:
        before_title = mpl.rcParams["axes.titlesize"]
        before_dpi = mpl.rcParams["savefig.dpi"]
        before_template = pio.templates.default

        cfg = PlottingConfig(title_size=21, savefig_dpi=72, plotly_template="simple_white")
        with cfg.apply():
            assert mpl.rcParams["axes.titlesize"] == 21
            assert mpl.rcParams["savefig.dpi"] == 72
            assert pio.templates.default == "simple_white"

        assert mpl.rcParams["axes.titlesize"] == before_title
        assert mpl.rcParams["savefig.dpi"] == before_dpi
        assert pio.templates.default == before_template

    def test_apply_restores_theme_params(self) -> None:
        """Grid, face color and font size set by the seaborn theme are reverted."""
        keys = ("axes.grid", "axes.facecolor", "axes.edgecolor", "font.size", "grid.color")
        before = {k: mpl.rcParams[k] for k in keys}

        with PlottingConfig(style="darkgrid", font_scale=1.5).apply():
            assert mpl.rcParams["axes.grid"] is True
            assert mpl.rcParams["axes.facecolor"] == "#EAEAF2"

        assert {k: mpl.rcParams[k] for k in keys} == before

    def test_restores_on_error(self) -> None:
        before_title = mpl.rcParams["axes.titlesize"]
        with pytest.raises(RuntimeError), PlottingConfig(title_size=30).apply():
            raise RuntimeError("boom")
        assert mpl.rcParams["axes.titlesize"] == before_title

    def test_defaults_are_independent(self) -> None:
        a, b = PlottingConfig(), PlottingConfig()
        a.reference_colors["mean"] = "black"
        assert b.reference_colors["mean"] == "tab:red"


class TestPlotColorsFromConfig:
    """Plots take their colors from the passed plotting config."""

    def test_box_color(self, algae_view) -> None:
        cfg = PlottingConfig(box_color="#ff0000")
        fig, ax = plt.subplots()
        plot_grouped_box(algae_view, AlgaeCol.A1, ax=ax, config=cfg)

        assert ax.patches
        for patch in ax.patches:
            assert patch.get_facecolor()[:3] == pytest.approx(to_rgb("#ff0000"), abs=0.01)
        plt.close(fig)

    def test_grouped_box_color(self, algae_view) -> None:
        cfg = PlottingConfig(box_color="#00ff00")
        fig, ax = plt.subplots()
        plot_grouped_box(algae_view, AlgaeCol.A1, by=AlgaeCol.SIZE, ax=ax, config=cfg)

        assert len(ax.patches) == 3
        for patch in ax.patches:
            assert patch.get_facecolor()[:3] == pytest.approx(to_rgb("#00ff00"), abs=0.01)
        plt.close(fig)

    def test_default_box_color(self, algae_view) -> None:
        fig, ax = plt.subplots()
        plot_grouped_box(algae_view, AlgaeCol.A1, ax=ax)
        assert ax.patches[0].get_facecolor()[:3] == pytest.approx(to_rgb(DEFAULT_PLOT_CFG.box_color), abs=0.01)
        plt.close(fig)

    def test_reference_line_colors(self, algae_view) -> None:
        cfg = PlottingConfig(reference_colors={"mean": "black", "std": "purple", "median": "gold"})
        fig, ax = plt.subplots()
        plot_reference_lines(algae_view, AlgaeCol.NH4, ax=ax, config=cfg)

        assert [line.get_color() for line in ax.lines] == ["black", "purple", "purple", "gold"]
        plt.close(fig)
