"""Missing value handling: threshold-based row removal and complete-case filtering.

The row filter flags every row whose share of missing cells reaches the
threshold ``prop``. The comparison is inclusive (``ratio >= prop``), so
``prop=0`` flags *every* row, complete ones included, and ``prop=1`` flags only
rows in which all cells are missing.
"""

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Literal, TypeVar, overload

import numpy as np
import pandas as pd

from algae_tlbx.data.base_dataset import BaseDataset
from algae_tlbx.data.views import DatasetView

from .base_analyser import BaseAnalyser


logger = logging.getLogger(__name__)

TableT = TypeVar("TableT", pd.DataFrame, BaseDataset, DatasetView)


class InvalidArgumentError(ValueError):
    """Raised when a missing-value filter receives an argument it cannot work with."""


def _validate_prop(prop: float) -> float:
    if isinstance(prop, bool) or not isinstance(prop, Real) or math.isnan(prop) or not 0 <= prop <= 1:
        raise InvalidArgumentError(f"prop must be a number in [0, 1], got {prop!r}")
    return float(prop)


def _as_frame(data: pd.DataFrame | BaseDataset | DatasetView) -> pd.DataFrame:
    if isinstance(data, pd.DataFrame):
        return data
    if isinstance(data, (BaseDataset, DatasetView)):
        return data.df
    raise TypeError(f"Expected a DataFrame, dataset or dataset view, got {type(data).__name__}")


def _rewrap(data: TableT, df: pd.DataFrame) -> TableT:
    if isinstance(data, pd.DataFrame):
        return df
    return data.with_df(df)


def row_missing_ratio(df: pd.DataFrame) -> pd.Series:
    """Fraction of missing cells in each row.

    Raises:
        InvalidArgumentError: If the frame has no columns.
    """
    n_cols = df.shape[1]
    if n_cols == 0:
        raise InvalidArgumentError("Cannot compute a missing ratio for rows without columns")
    return df.isna().sum(axis=1).div(n_cols)


@overload
def many_missing_rows(
    data: TableT,
    prop: float = ...,
    *,
    mode: Literal["filtered"],
) -> TableT: ...


@overload
def many_missing_rows(
    data: pd.DataFrame | BaseDataset | DatasetView,
    prop: float = ...,
    mode: Literal["indices"] = ...,
) -> list[int]: ...


def many_missing_rows(data, prop=0.2, mode="indices"):
    """Find (or drop) rows whose missing-cell ratio is at least ``prop``.

    Args:
        data: DataFrame, dataset or dataset view to inspect; never modified.
        prop: Threshold in [0, 1]. A row is flagged when ``n_missing / n_columns >= prop``.
        mode: ``"indices"`` returns the flagged 0-based row positions in ascending order,
            ``"filtered"`` returns a new table of the same kind without the flagged rows.

    Returns:
        Sorted list of flagged row positions, or the filtered table.

    Raises:
        InvalidArgumentError: If ``prop`` is outside [0, 1], ``mode`` is unknown, or the table
            has no columns. Argument checks happen before any row is looked at.

    Example:
        >>> df = pd.DataFrame({"a": [1, None, None], "b": [1, 2, None]})
        >>> many_missing_rows(df, prop=0.5)
        [1, 2]
        >>> many_missing_rows(df, prop=1.0, mode="filtered").index.tolist()
        [0, 1]
    """
    prop = _validate_prop(prop)
    if mode not in ("indices", "filtered"):
        raise InvalidArgumentError(f"mode must be 'indices' or 'filtered', got {mode!r}")

    frame = _as_frame(data)
    flagged = row_missing_ratio(frame).ge(prop).to_numpy(dtype=bool)
    logger.debug("Flagged %d of %d rows at prop=%.3f", flagged.sum(), len(frame), prop)

    if mode == "indices":
        return np.flatnonzero(flagged).tolist()
    return _rewrap(data, frame.loc[~flagged])


def incomplete_rows(data: TableT) -> TableT:
    """Return the rows holding at least one missing cell."""
    frame = _as_frame(data)
    return _rewrap(data, frame.loc[frame.isna().any(axis=1).to_numpy(dtype=bool)])


def drop_incomplete_rows(data: TableT) -> TableT:
    """Return a new table with only the complete rows (row deletion)."""
    frame = _as_frame(data)
    return _rewrap(data, frame.dropna(axis=0, how="any"))


@dataclass(frozen=True)
class MissingValueFilterResult:
    """Outcome of the missing-value row filter.

    Attributes:
        prop: Threshold the rows were compared against (inclusive).
        row_ratios: Missing-cell ratio per row, aligned with the input index.
        flagged_mask: Boolean Series, ``True`` for rows at or above the threshold.
        flagged_indices: Ascending 0-based positions of the flagged rows.
        filtered_df: Input rows that were not flagged, original order.
        pretty_names: Mapping of column names to pretty display names.
    """

    prop: float
    row_ratios: pd.Series
    flagged_mask: pd.Series
    flagged_indices: list[int]
    filtered_df: pd.DataFrame
    pretty_names: dict[str, str] | None = None

    @property
    def n_flagged(self) -> int:
        return len(self.flagged_indices)

    def plot_row_ratios(self, **kwargs: object):
        """Plot the per-row missing ratio against the threshold."""
        from algae_tlbx.plotting.missing_plots import plot_row_missing_ratios  # noqa: PLC0415

        return plot_row_missing_ratios(self, **kwargs)


class MissingValueFilter(BaseAnalyser):
    """Flag rows with too many missing cells.

    Example:
        >>> from algae_tlbx.data import AlgaeDataset
        >>> ds = AlgaeDataset.from_csv()
        >>> res = MissingValueFilter(ds.view(), prop=0.2).fit().result()
        >>> res.flagged_indices, res.filtered_df.shape

    Attributes:
        prop: Inclusive threshold on the per-row missing ratio (default: 0.2).
    """

    def __init__(self, view: DatasetView, prop: float = 0.2) -> None:
        """Initialize the filter.

        Raises:
            InvalidArgumentError: If ``prop`` is outside [0, 1].
        """
        self._view = view
        self.prop = _validate_prop(prop)
        self._ratios: pd.Series | None = None

    def fit(self) -> "MissingValueFilter":
        """Compute the missing ratio of every row.

        Returns:
            Self for method chaining.
        """
        self._ratios = row_missing_ratio(self._view.df)
        return self

    def result(self) -> MissingValueFilterResult:
        """Return the flagged rows and the filtered table.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._ratios is None:
            raise ValueError("Must call fit() before result()")

        mask = self._ratios.ge(self.prop)
        flagged = mask.to_numpy(dtype=bool)
        logger.info("%d of %d rows have a missing ratio >= %.3f", flagged.sum(), len(flagged), self.prop)

        return MissingValueFilterResult(
            prop=self.prop,
            row_ratios=self._ratios,
            flagged_mask=mask,
            flagged_indices=np.flatnonzero(flagged).tolist(),
            filtered_df=self._view.df.loc[~flagged],
            pretty_names=dict(self._view.pretty_by_col),
        )
