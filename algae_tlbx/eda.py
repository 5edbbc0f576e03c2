"""End-to-end exploratory analysis of the algae tables.

Runs the summaries, renders the exploratory plots to PNG files and walks
through the missing-value strategies. Usable from Python via :func:`run_eda`
or from the shell::

    algae-eda --output-dir figures --prop 0.2
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from algae_tlbx.analysis.summary import SummaryResult
from algae_tlbx.data import AlgaeCol, AlgaeDataset, AlgaeTables, load_algae_tables
from algae_tlbx.plotting import (
    plot_binned_scatter,
    plot_distribution_with_qq,
    plot_grouped_box,
    plot_grouped_violin,
    plot_reference_lines,
    plot_row_missing_ratios,
)
from algae_tlbx.utils.plotting_config import DEFAULT_PLOT_CFG, PlottingConfig


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EDAReport:
    """What an EDA run produced.

    Attributes:
        summary: Descriptive summary of the training table.
        n_incomplete_rows: Training rows with at least one missing value.
        flagged_indices: 0-based positions removed by the missing-ratio filter.
        cleaned: Training table after row removal and mean/median imputation.
        figures: Paths of the written figures, keyed by figure name.
    """

    summary: SummaryResult
    n_incomplete_rows: int
    flagged_indices: list[int]
    cleaned: AlgaeDataset
    figures: dict[str, Path] = field(default_factory=dict)


def _save(fig: Figure, output_dir: Path, name: str, figures: dict[str, Path]) -> None:
    path = output_dir / f"{name}.png"
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    figures[name] = path
    logger.debug("Wrote %s", path)


@contextmanager
def _closing_new_figures() -> Iterator[None]:
    """Close every pyplot figure opened inside the block, also when drawing fails."""
    before = set(plt.get_fignums())
    try:
        yield
    finally:
        for num in set(plt.get_fignums()) - before:
            plt.close(num)


def run_eda(
    tables: AlgaeTables | None = None,
    output_dir: str | Path = "figures",
    prop: float = 0.2,
    config: PlottingConfig = DEFAULT_PLOT_CFG,
) -> EDAReport:
    """Run the exploratory workflow on the training table.

    Args:
        tables: Loaded algae tables (defaults to the bundled data)
        output_dir: Directory the PNG figures are written to (created if needed)
        prop: Threshold of the missing-ratio row filter
        config: Plotting style applied while drawing

    Returns:
        EDAReport describing the run
    """
    tables = tables or load_algae_tables()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    train = tables.train
    view = train.view()
    figures: dict[str, Path] = {}

    summary = train.make_summary_analyzer().fit().result()
    logger.info("Training table summary:\n%s", summary)

    with config.apply(), _closing_new_figures():
        _save(plot_distribution_with_qq(view, AlgaeCol.MX_PH), output_dir, "mx_ph_distribution", figures)

        fig, ax = plt.subplots(figsize=(8, 5))
        plot_grouped_box(view, AlgaeCol.O_PO4, rug=True, ax=ax, config=config)
        _save(fig, output_dir, "o_po4_box", figures)

        fig, ax = plt.subplots(figsize=(10, 5))
        plot_reference_lines(
            view,
            AlgaeCol.NH4,
            highlight_above=view.df[AlgaeCol.NH4].quantile(0.95),
            ax=ax,
            config=config,
        )
        _save(fig, output_dir, "nh4_reference_lines", figures)

        fig, (ax_box, ax_violin) = plt.subplots(1, 2, figsize=(12, 5))
        plot_grouped_box(view, AlgaeCol.A1, by=AlgaeCol.SIZE, ax=ax_box, config=config)
        plot_grouped_violin(view, AlgaeCol.A1, by=AlgaeCol.SIZE, ax=ax_violin, config=config)
        fig.tight_layout()
        _save(fig, output_dir, "a1_by_size", figures)

        _save(
            plot_binned_scatter(view, x=AlgaeCol.A3, y=AlgaeCol.SEASON, bin_column=AlgaeCol.MN_O2, q=4),
            output_dir,
            "a3_by_season_mn_o2_bins",
            figures,
        )

        filter_result = train.make_missing_value_filter(prop=prop).fit().result()
        _save(plot_row_missing_ratios(filter_result), output_dir, "row_missing_ratios", figures)

    logger.info("%d rows have at least one missing value", summary.n_incomplete_rows)
    logger.info("Complete cases: %d of %d rows", len(train.drop_incomplete()), len(train))
    logger.info("Rows with missing ratio >= %.2f: %s", prop, filter_result.flagged_indices)

    cleaned = (
        train.with_df(filter_result.filtered_df)
        .impute([AlgaeCol.MX_PH], strategy="mean")
        .impute([AlgaeCol.CHLA], strategy="median")
    )
    logger.info("Cleaned training table: %d rows, %d missing cells", len(cleaned), int(cleaned.df.isna().sum().sum()))

    return EDAReport(
        summary=summary,
        n_incomplete_rows=summary.n_incomplete_rows,
        flagged_indices=filter_result.flagged_indices,
        cleaned=cleaned,
        figures=figures,
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Exploratory analysis of the algae bloom data.")
    p.add_argument("--data-dir", default=None, help="Directory with algae.csv, test_algae.csv and algae_sols.csv.")
    p.add_argument("--output-dir", default="figures", help="Directory the figures are written to.")
    p.add_argument("--prop", type=float, default=0.2, help="Missing-ratio threshold for dropping rows (0-1).")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s")

    plt.switch_backend("Agg")
    DEFAULT_PLOT_CFG.apply_global()
    report = run_eda(load_algae_tables(data_dir=args.data_dir), output_dir=args.output_dir, prop=args.prop)
    logger.info("Done. Figures written: %d", len(report.figures))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
