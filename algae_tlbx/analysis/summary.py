"""Descriptive statistics and frequency tables."""

from dataclasses import dataclass
from typing import Self

import pandas as pd

from algae_tlbx.data.views import DatasetView

from .base_analyser import BaseAnalyser


@dataclass(frozen=True)
class SummaryResult:
    """Descriptive summary of a dataset view.

    Attributes:
        numeric: One row per numeric column with ``count``, ``mean``, ``std``, ``min``,
            ``25%``, ``median``, ``75%``, ``max`` and ``n_missing``.
        categorical: Frequency table per categorical column, in category order.
        missing_by_column: Number of missing cells per column.
        n_incomplete_rows: Rows with at least one missing cell.
        pretty_by_col: Mapping from raw column names to presentation labels.
    """

    numeric: pd.DataFrame
    categorical: dict[str, pd.Series]
    missing_by_column: pd.Series
    n_incomplete_rows: int
    pretty_by_col: dict[str, str]

    def __str__(self) -> str:
        parts = [self.numeric.round(3).to_string()]
        parts.extend(f"\n{counts.to_string()}" for counts in self.categorical.values())
        parts.append(f"\nRows with missing values: {self.n_incomplete_rows}")
        return "\n".join(parts)


class SummaryAnalyzer(BaseAnalyser):
    """Per-column summary statistics via :meth:`pandas.DataFrame.describe`.

    Example:
        >>> from algae_tlbx.data import AlgaeDataset
        >>> res = AlgaeDataset.from_csv().make_summary_analyzer().fit().result()
        >>> res.numeric.loc["mx_ph", ["mean", "median", "std"]]
        >>> res.categorical["size"]
    """

    def __init__(self, view: DatasetView) -> None:
        self._view = view
        self._numeric: pd.DataFrame | None = None
        self._categorical: dict[str, pd.Series] | None = None

    def fit(self) -> Self:
        df = self._view.df
        numeric = df.loc[:, self._view.numeric_cols]

        if numeric.shape[1]:
            described = numeric.describe().T.rename(columns={"50%": "median"})
        else:
            described = pd.DataFrame(columns=["count", "mean", "std", "min", "25%", "median", "75%", "max"])
        self._numeric = described.assign(n_missing=numeric.isna().sum())

        # value_counts keeps empty categories (count 0) and the declared order for categoricals
        self._categorical = {
            col: df[col].value_counts(sort=False, dropna=False).rename(self._view.pretty(col))
            for col in self._view.categorical_cols
        }
        return self

    def result(self) -> SummaryResult:
        if self._numeric is None or self._categorical is None:
            raise ValueError("Must call fit() before result()")

        df = self._view.df
        return SummaryResult(
            numeric=self._numeric,
            categorical=self._categorical,
            missing_by_column=df.isna().sum(),
            n_incomplete_rows=int(df.isna().any(axis=1).sum()),
            pretty_by_col=dict(self._view.pretty_by_col),
        )
