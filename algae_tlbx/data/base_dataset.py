"""Base dataset class for all dataset implementations."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Literal, Self

import pandas as pd


if TYPE_CHECKING:
    from algae_tlbx.analysis.imputation import CentralTendencyImputer
    from algae_tlbx.analysis.missing_values import MissingValueFilter
    from algae_tlbx.analysis.summary import SummaryAnalyzer

from .base_columns import BaseColumn
from .views import DatasetView


class BaseDataset(ABC):
    """Abstract base class for dataset handlers used throughout the toolbox.

    Datasets are treated as values: every transformation returns a new instance
    built through :meth:`with_df`, the wrapped frame is never edited in place.
    """

    Col: type[BaseColumn]

    def __init__(self, df: pd.DataFrame | None = None) -> None:
        """Initialize the base dataset.

        Args:
            df: Pre-loaded and cleaned DataFrame (optional)
        """
        self._df: pd.DataFrame | None = df

    @classmethod
    @abstractmethod
    def from_csv(cls, filepath: str | Path, **kwargs: object) -> "BaseDataset":
        """Load dataset from CSV file.

        Args:
            filepath: Path to the CSV file
            **kwargs: Additional loading parameters

        Returns:
            Dataset instance with loaded data
        """
        ...

    def __len__(self) -> int:
        return len(self.df)

    @property
    def df(self) -> pd.DataFrame:
        """Get the raw/cleaned DataFrame.

        Raises:
            ValueError: If dataset not loaded
        """
        if self._df is None:
            raise ValueError("Dataset not loaded. Use from_csv() to load data.")
        return self._df

    @property
    def df_pretty(self) -> pd.DataFrame:
        """Get the DataFrame with pretty column names."""
        return self.df.rename(columns={col: self.get_pretty_name(col) for col in self.df.columns})

    @property
    def numeric_cols(self) -> pd.Index:
        """Get numeric column names.

        Default implementation filters columns by numeric dtypes.
        """
        return self.df.select_dtypes(include=["number"]).columns

    @property
    def categorical_cols(self) -> pd.Index:
        """Get categorical column names."""
        return self.df.select_dtypes(include=["category"]).columns

    def with_df(self, df: pd.DataFrame) -> Self:
        """Return a new dataset of the same concrete class wrapping ``df``."""
        return type(self)(df=df)

    def copy(self) -> Self:
        """Return an independent deep copy of this dataset."""
        return self.with_df(self.df.copy(deep=True))

    def get_pretty_name(self, column_name: str) -> str:
        """Convert column name to pretty name for visualization.

        Args:
            column_name: The cleaned column name

        Returns:
            Pretty name suitable for plot labels and titles
        """
        try:
            col_enum = self.Col(column_name)
        except ValueError:
            # Fallback: capitalize and replace underscores if not in enum
            return column_name.replace("_", " ").title()
        else:
            return str(col_enum.pretty_name)

    def get_pretty_names(self, column_names: list[str] | None = None) -> list[str]:
        """Convert multiple column names to pretty names."""
        return [self.get_pretty_name(name) for name in column_names or self.df.columns.to_list()]

    def view(
        self,
        columns: Iterable[str] | None = None,
        target_col: str | None = None,
        missing_strategy: Literal["keep", "drop"] = "keep",
    ) -> DatasetView:
        """Build an immutable dataset view for analyzers and plotting layers.

        Args:
            columns: Columns to include in the view (defaults to all)
            target_col: Optional target column reference
            missing_strategy: ``"keep"`` leaves missing cells in place, ``"drop"`` removes
                rows with any missing value in the selected columns

        Returns:
            DatasetView containing selected data and metadata
        """
        if missing_strategy not in ("keep", "drop"):
            raise ValueError(f"Invalid missing_strategy='{missing_strategy}'. Use 'keep' or 'drop'.")

        selected_cols = list(columns or self.df.columns.to_list())
        frame = self.df.loc[:, selected_cols]

        if missing_strategy == "drop":
            frame = frame.dropna(axis=0, how="any")

        return DatasetView(
            df=frame,
            pretty_by_col={col: self.get_pretty_name(col) for col in selected_cols},
            numeric_cols=[col for col in selected_cols if col in self.numeric_cols],
            categorical_cols=[col for col in selected_cols if col in self.categorical_cols],
            target_col=target_col or (self.Col.TARGET if self.Col.TARGET in selected_cols else None),
        )

    def make_missing_value_filter(
        self,
        prop: float = 0.2,
        columns: Sequence[str] | None = None,
    ) -> "MissingValueFilter":
        """Instantiate a row filter that flags rows with a missing-cell ratio ``>= prop``.

        Example:
            >>> from algae_tlbx.data import AlgaeDataset
            >>> ds = AlgaeDataset.from_csv()
            >>> result = ds.make_missing_value_filter(prop=0.2).fit().result()
            >>> result.flagged_indices
            [19, 29]
        """
        from algae_tlbx.analysis.missing_values import MissingValueFilter

        return MissingValueFilter(self.view(columns=columns), prop=prop)

    def make_summary_analyzer(self, columns: Iterable[str] | None = None) -> "SummaryAnalyzer":
        """Instantiate a descriptive summary analyzer (numeric statistics and frequency tables)."""
        from algae_tlbx.analysis.summary import SummaryAnalyzer

        return SummaryAnalyzer(self.view(columns=columns))

    def make_imputer(
        self,
        columns: Sequence[str],
        strategy: Literal["mean", "median"] = "mean",
    ) -> "CentralTendencyImputer":
        """Instantiate a mean/median imputer for the given numeric columns."""
        from algae_tlbx.analysis.imputation import CentralTendencyImputer

        return CentralTendencyImputer(self.view(), columns=columns, strategy=strategy)

    def drop_many_missing(self, prop: float = 0.2) -> Self:
        """Return a new dataset without rows whose missing-cell ratio is ``>= prop``."""
        return self.with_df(self.make_missing_value_filter(prop=prop).fit().result().filtered_df)

    def drop_incomplete(self) -> Self:
        """Return a new dataset holding only complete rows."""
        from algae_tlbx.analysis.missing_values import drop_incomplete_rows

        return self.with_df(drop_incomplete_rows(self.df))

    def impute(
        self,
        columns: Sequence[str],
        strategy: Literal["mean", "median"] = "mean",
    ) -> Self:
        """Return a new dataset with missing cells of ``columns`` filled by their mean/median."""
        return self.with_df(self.make_imputer(columns, strategy=strategy).fit().result().imputed_df)
