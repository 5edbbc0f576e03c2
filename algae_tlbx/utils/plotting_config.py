"""Shared plotting configuration (style, palette, font sizes)."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import matplotlib as mpl
import plotly.io as pio
import seaborn as sns


@dataclass
class PlottingConfig:
    """Reusable plotting style for the matplotlib/seaborn and plotly figures of the toolbox.

    Attributes:
        box_color: Fill color of grouped box and violin plots.
        reference_colors: Line colors for the mean, standard deviation band and median.
    """

    style: str = "whitegrid"
    palette: str | list[str] = "tab10"
    font_family: str = "DejaVu Sans"
    font_scale: float = 1.0
    title_size: int = 14
    label_size: int = 12
    tick_size: int = 10
    figure_dpi: int = 100
    savefig_dpi: int = 150
    context: str = "notebook"
    plotly_template: str = "plotly_white"
    plotly_colorway: list[str] | None = None
    box_color: str = "#9ecae1"
    reference_colors: dict[str, str] = field(
        default_factory=lambda: {"mean": "tab:red", "std": "tab:orange", "median": "tab:green"},
    )
    seaborn_kwargs: dict[str, Any] = field(default_factory=dict)

    def _rc_params(self) -> dict[str, Any]:
        palette_colors = sns.color_palette(self.palette)
        return {
            "axes.titlesize": self.title_size,
            "axes.labelsize": self.label_size,
            "xtick.labelsize": self.tick_size,
            "ytick.labelsize": self.tick_size,
            "figure.dpi": self.figure_dpi,
            "savefig.dpi": self.savefig_dpi,
            "axes.prop_cycle": mpl.cycler(color=palette_colors),
            "font.family": [self.font_family],
        }

    def _set_theme(self) -> None:
        sns.set_theme(
            style=self.style,
            palette=sns.color_palette(self.palette),
            context=self.context,
            font_scale=self.font_scale,
            **self.seaborn_kwargs,
        )
        mpl.rcParams.update(self._rc_params())
        pio.templates.default = self.plotly_template
        if self.plotly_colorway is not None:
            pio.templates[self.plotly_template].layout.colorway = self.plotly_colorway

    def apply_global(self) -> None:
        """Apply plotting style globally (no automatic restore).

        Intended for notebooks and the EDA command, where the style is set
        once up front. For temporary styling use :meth:`apply` instead.
        """
        self._set_theme()

    @contextmanager
    def apply(self) -> Generator[None]:
        """Apply style within a context.

        All matplotlib rcParams touched by the seaborn theme (grid, face colors,
        font sizes, ...) and the plotly default template are restored afterwards.
        """
        prev_plotly_template = pio.templates.default
        prev_colorway = pio.templates[self.plotly_template].layout.colorway

        with mpl.rc_context():
            self._set_theme()
            try:
                yield
            finally:
                pio.templates[self.plotly_template].layout.colorway = prev_colorway
                pio.templates.default = prev_plotly_template


# Default configuration used across plotting functions
DEFAULT_PLOT_CFG = PlottingConfig()


__all__ = ["DEFAULT_PLOT_CFG", "PlottingConfig"]
