"""Fill missing numeric values with a column's mean or median."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, Self

import pandas as pd
from sklearn.impute import SimpleImputer

from algae_tlbx.data.views import DatasetView

from .base_analyser import BaseAnalyser


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImputationResult:
    """Imputed copy of the data plus what was filled.

    Attributes:
        imputed_df: Copy of the view's frame with missing cells of the selected columns filled.
        fill_values: Value used per column, NaN for columns without any observed value.
        n_filled: Number of cells filled per column.
        strategy: ``"mean"`` or ``"median"``.
    """

    imputed_df: pd.DataFrame
    fill_values: pd.Series
    n_filled: pd.Series
    strategy: str


class CentralTendencyImputer(BaseAnalyser):
    """Mean/median imputation of selected numeric columns using [sklearn's SimpleImputer](https://scikit-learn.org/stable/modules/generated/sklearn.impute.SimpleImputer.html).

    The mean is sensitive to skewed distributions and outliers; for strongly
    skewed measurements (e.g. chlorophyll) the median is usually the better
    representative value.

    Example:
        >>> from algae_tlbx.data import AlgaeDataset, AlgaeCol
        >>> ds = AlgaeDataset.from_csv()
        >>> res = CentralTendencyImputer(ds.view(), [AlgaeCol.CHLA], strategy="median").fit().result()
        >>> res.fill_values, res.n_filled
    """

    def __init__(
        self,
        view: DatasetView,
        columns: Sequence[str],
        strategy: Literal["mean", "median"] = "mean",
    ) -> None:
        """Initialize the imputer.

        Args:
            view: Dataset view holding the columns to fill
            columns: Numeric columns to impute
            strategy: ``"mean"`` or ``"median"``

        Raises:
            ValueError: If the strategy is unknown or a column is missing / not numeric.
        """
        if strategy not in ("mean", "median"):
            raise ValueError(f"Invalid strategy='{strategy}'. Use 'mean' or 'median'.")
        columns = list(columns)
        if not columns:
            raise ValueError("At least one column is required for imputation.")
        not_numeric = [c for c in columns if c not in view.numeric_cols]
        if not_numeric:
            raise ValueError(f"Columns {not_numeric} are not numeric columns of the view.")

        self._view = view
        self.columns = columns
        self.strategy = strategy
        self._imputer: SimpleImputer | None = None
        self._empty_cols: list[str] = []
        self._fill_cols: list[str] = []

    def fit(self) -> Self:
        source = self._view.df[self.columns]
        # a column without any observed value has no mean/median; it stays missing
        self._empty_cols = [c for c in self.columns if source[c].isna().all()]
        if self._empty_cols:
            logger.warning("Columns %s have no observed values and are left missing", self._empty_cols)

        self._fill_cols = [c for c in self.columns if c not in self._empty_cols]
        self._imputer = SimpleImputer(strategy=self.strategy)
        if self._fill_cols:
            self._imputer.fit(source[self._fill_cols])
        return self

    def result(self) -> ImputationResult:
        if self._imputer is None:
            raise ValueError("Must call fit() before result()")

        source = self._view.df
        imputed = source.copy()
        fill_values = pd.Series(float("nan"), index=self.columns, name=self.strategy)
        n_filled = pd.Series(0, index=self.columns)
        if self._fill_cols:
            imputed[self._fill_cols] = self._imputer.transform(source[self._fill_cols])
            fill_values[self._fill_cols] = self._imputer.statistics_
            n_filled[self._fill_cols] = source[self._fill_cols].isna().sum().to_numpy()

        logger.info(
            "Imputed %d cells with the column %s: %s",
            int(n_filled.sum()),
            self.strategy,
            fill_values.round(3).to_dict(),
        )

        return ImputationResult(
            imputed_df=imputed,
            fill_values=fill_values,
            n_filled=n_filled,
            strategy=self.strategy,
        )
