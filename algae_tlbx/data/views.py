"""Task-specific views over dataset content.

Display-only transformations (category ordering, quantile bins) live here as
helpers that return *new* frames or views, so nothing derived for a plot is
ever written back into a dataset.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace

import pandas as pd


def ordered_categories(df: pd.DataFrame, column: str, order: Sequence[str]) -> pd.DataFrame:
    """Return a copy of ``df`` where ``column`` is an ordered categorical in ``order``.

    Args:
        df: Source frame (left untouched).
        column: Column to reorder.
        order: Explicit display order of the labels, e.g. ``["small", "medium", "large"]``.

    Returns:
        New DataFrame with the reordered column.

    Raises:
        ValueError: If the column holds labels not listed in ``order``.
    """
    values = df[column]
    present = set(values.dropna().astype(str).unique())
    unknown = sorted(present.difference(order))
    if unknown:
        raise ValueError(f"Column '{column}' has labels {unknown} not present in order {list(order)}")

    dtype = pd.CategoricalDtype(categories=list(order), ordered=True)
    return df.assign(**{column: values.astype(str).where(values.notna()).astype(dtype)})


def quantile_bins(series: pd.Series, q: int | Sequence[float] = 4) -> pd.Series:
    """Discretize a continuous series into quantile intervals via :func:`pandas.qcut`.

    Args:
        series: Continuous values; missing values stay missing.
        q: Number of equal-frequency bins or explicit quantile cut points in [0, 1].

    Returns:
        Categorical series of intervals aligned with ``series.index``.
    """
    return pd.qcut(series, q=q, duplicates="drop")


@dataclass(frozen=True)
class DatasetView:
    """Immutable snapshot of dataset data and related metadata.

    Attributes:
        df: Dataframe slice containing the relevant columns.
        pretty_by_col: Mapping from normalized column names to display-friendly labels.
        numeric_cols: Ordered list of numeric feature names present in ``df``.
        categorical_cols: Ordered list of enumerated columns present in ``df``.
        target_col: Optional name of the target variable used for analysis.
    """

    df: pd.DataFrame
    """Dataframe slice containing the relevant columns."""
    pretty_by_col: Mapping[str, str]
    """Mapping from normalized column names to display-friendly labels."""
    numeric_cols: list[str]
    categorical_cols: list[str] = field(default_factory=list)
    target_col: str | None = None

    @property
    def features(self) -> pd.DataFrame:
        """Return view over numeric feature columns."""
        cols = self.numeric_cols or self.df.columns.tolist()
        return self.df.loc[:, cols]

    def pretty(self, column: str) -> str:
        """Display label for ``column`` (falls back to the raw name)."""
        return self.pretty_by_col.get(column, column)

    def with_df(self, df: pd.DataFrame) -> "DatasetView":
        """Return a new view over ``df`` keeping the metadata of this view."""
        return replace(
            self,
            df=df,
            numeric_cols=[c for c in self.numeric_cols if c in df.columns],
            categorical_cols=[c for c in self.categorical_cols if c in df.columns],
        )

    def with_ordered_categories(self, column: str, order: Sequence[str]) -> "DatasetView":
        """Return a new view whose ``column`` is displayed in ``order``."""
        return self.with_df(ordered_categories(self.df, column, order))

    def with_column(self, name: str, values: pd.Series, pretty_name: str | None = None) -> "DatasetView":
        """Return a new view with an extra derived column (e.g. a quantile bin for faceting)."""
        return replace(
            self,
            df=self.df.assign(**{name: values}),
            pretty_by_col={**self.pretty_by_col, name: pretty_name or name},
        )
