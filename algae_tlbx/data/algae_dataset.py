"""Loading and preprocessing of the algae bloom tables."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import pandas as pd

from algae_tlbx.utils.paths import get_dataset_path

from .algae_columns import AlgaeColumn as Col
from .base_dataset import BaseDataset


logger = logging.getLogger(__name__)


class AlgaeDataset(BaseDataset):
    """Loading and preprocessing for the algae bloom dataset (river water samples).

    **Example workflow**:
    >>> from algae_tlbx.data import AlgaeDataset, AlgaeCol
    >>> from algae_tlbx.plotting import plot_distribution_with_qq, plot_grouped_box
    >>> ds = AlgaeDataset.from_csv()
    >>> summary = ds.make_summary_analyzer().fit().result()
    >>> summary.categorical[AlgaeCol.SIZE]
    >>> _ = plot_distribution_with_qq(ds.view(), AlgaeCol.MX_PH)
    >>> _ = plot_grouped_box(ds.view(), AlgaeCol.A1, by=AlgaeCol.SIZE)


    Missing value strategies, each returning a new dataset:

    >>> complete = ds.drop_incomplete()
    >>> sparse_rows = ds.make_missing_value_filter(prop=0.2).fit().result().flagged_indices
    >>> cleaned = ds.drop_many_missing(prop=0.2).impute([AlgaeCol.MX_PH]).impute([AlgaeCol.CHLA], strategy="median")
    """

    Col = Col

    @classmethod
    def from_csv(
        cls,
        *,
        csv_path: str | Path | None = None,
        category_order: Literal["declared", "alphabetical"] = "declared",
    ) -> "AlgaeDataset":
        """Load and preprocess an algae table from a CSV file.

        - Normalize column names (``mxPH`` -> ``mx_ph``, ...)
        - Convert descriptors to categoricals and measurements to floats

        Args:
            csv_path: Path to the CSV file (defaults to the bundled training table)
            category_order: ``"declared"`` uses the natural order of each descriptor
                (e.g. small < medium < large), ``"alphabetical"`` sorts the labels.

        Returns:
            AlgaeDataset instance with loaded and cleaned data
        """
        csv_path = get_dataset_path("algae") if csv_path is None else Path(csv_path)

        algae_df = (
            pd.read_csv(csv_path, na_values=["NA", "XXXXXXX"])
            .pipe(cls._normalize_col_names)
            .pipe(cls._convert_data_types, category_order=category_order)
        )
        logger.debug("Loaded %s with shape %s", csv_path, algae_df.shape)

        return cls(df=algae_df)

    @staticmethod
    def _normalize_col_names(df: pd.DataFrame) -> pd.DataFrame:
        """Rename raw headers to the AlgaeColumn values.

        Known headers are mapped through the column metadata; anything else is
        stripped, lower-cased and snake_cased.
        """
        known = Col.original_names()
        fallback = (
            df.columns.str.strip()
            .str.replace(r"(?<=[a-z])(?=[A-Z])", "_", regex=True)
            .str.lower()
            .str.replace(r"[\s/\-]+", "_", regex=True)
            .str.replace(r"_+", "_", regex=True)
        )
        return df.set_axis(
            [known.get(str(raw).strip(), clean) for raw, clean in zip(df.columns, fallback, strict=True)],
            axis=1,
        )

    @staticmethod
    def _convert_data_types(
        df: pd.DataFrame,
        category_order: Literal["declared", "alphabetical"] = "declared",
    ) -> pd.DataFrame:
        """Set appropriate data types for each col.

        Raises:
            ValueError: If a descriptor holds a label outside its allowed set, or
                ``category_order`` is unknown.
        """
        if category_order not in ("declared", "alphabetical"):
            raise ValueError(f"Invalid category_order='{category_order}'. Use 'declared' or 'alphabetical'.")

        converted: dict[str, pd.Series] = {}
        for col, order in Col.category_orders().items():
            if col not in df.columns:
                continue
            labels = df[col].astype("string").str.strip().str.lower()
            unknown = sorted(set(labels.dropna()).difference(order))
            if unknown:
                raise ValueError(f"Column '{col}' has unexpected labels {unknown}; allowed: {order}")
            categories = order if category_order == "declared" else sorted(order)
            converted[col] = pd.Categorical(
                labels.to_numpy(dtype=object, na_value=None),
                categories=categories,
                ordered=True,
            )

        numeric_cols = df.columns.difference(Col.categorical_columns())
        converted.update({col: pd.to_numeric(df[col], errors="coerce").astype("float64") for col in numeric_cols})
        return df.assign(**converted)

    @property
    def algae_df(self) -> pd.DataFrame:
        """Algae frequency columns present in this table."""
        return self.df.loc[:, [c for c in Col.algae_columns() if c in self.df.columns]]

    @property
    def predictors_df(self) -> pd.DataFrame:
        """Descriptor and chemical measurement columns present in this table."""
        return self.df.loc[:, [c for c in Col.predictor_columns() if c in self.df.columns]]


@dataclass(frozen=True)
class AlgaeTables:
    """The three related algae tables.

    Attributes:
        train: Predictors and algae frequencies combined.
        test_predictors: Predictor-only evaluation table.
        test_targets: Algae frequencies for the evaluation table, row-aligned with ``test_predictors``.
    """

    train: AlgaeDataset
    test_predictors: AlgaeDataset
    test_targets: pd.DataFrame

    def __post_init__(self) -> None:
        if len(self.test_predictors) != len(self.test_targets):
            raise ValueError(
                f"Test predictors ({len(self.test_predictors)} rows) and targets "
                f"({len(self.test_targets)} rows) are not row-aligned.",
            )

    @property
    def test(self) -> AlgaeDataset:
        """Evaluation predictors joined with their algae frequencies."""
        joined = self.test_predictors.df.join(self.test_targets.set_axis(self.test_predictors.df.index))
        return AlgaeDataset(df=joined)


def load_algae_tables(
    data_dir: str | Path | None = None,
    category_order: Literal["declared", "alphabetical"] = "declared",
) -> AlgaeTables:
    """Load the training table, the test predictors and the test solutions.

    Args:
        data_dir: Directory holding ``algae.csv``, ``test_algae.csv`` and ``algae_sols.csv``
            (defaults to the bundled data directory)
        category_order: Passed to :meth:`AlgaeDataset.from_csv`

    Returns:
        AlgaeTables bundle
    """
    train = AlgaeDataset.from_csv(
        csv_path=get_dataset_path("algae", data_dir=data_dir),
        category_order=category_order,
    )
    test_predictors = AlgaeDataset.from_csv(
        csv_path=get_dataset_path("test_algae", data_dir=data_dir),
        category_order=category_order,
    )
    test_targets = (
        pd.read_csv(get_dataset_path("algae_sols", data_dir=data_dir), na_values=["NA"])
        .pipe(AlgaeDataset._normalize_col_names)
        .astype("float64")
    )
    logger.info(
        "Loaded algae tables: train=%s, test=%s, solutions=%s",
        train.df.shape,
        test_predictors.df.shape,
        test_targets.shape,
    )
    return AlgaeTables(train=train, test_predictors=test_predictors, test_targets=test_targets)
