"""Tests for mean/median imputation."""

import numpy as np
import pandas as pd
import pytest

from algae_tlbx.analysis.imputation import CentralTendencyImputer, ImputationResult
from algae_tlbx.data import AlgaeCol, AlgaeDataset
from algae_tlbx.data.views import DatasetView


@pytest.fixture
def sample_view() -> DatasetView:
    df = pd.DataFrame(
        {
            "season": pd.Categorical(["winter", "spring", "summer", "autumn"]),
            "mx_ph": [8.0, np.nan, 7.0, 9.0],
            "chla": [1.0, 2.0, 30.0, np.nan],
        },
    )
    return DatasetView(df=df, pretty_by_col={}, numeric_cols=["mx_ph", "chla"], categorical_cols=["season"])


class TestCentralTendencyImputer:
    """Test CentralTendencyImputer."""

    def test_mean_imputation(self, sample_view: DatasetView) -> None:
        result = CentralTendencyImputer(sample_view, ["mx_ph"], strategy="mean").fit().result()

        assert isinstance(result, ImputationResult)
        assert result.imputed_df.loc[1, "mx_ph"] == pytest.approx(8.0)
        assert result.fill_values["mx_ph"] == pytest.approx(8.0)
        assert result.n_filled["mx_ph"] == 1
        # untouched columns keep their missing values
        assert np.isnan(result.imputed_df.loc[3, "chla"])

    def test_median_imputation(self, sample_view: DatasetView) -> None:
        result = CentralTendencyImputer(sample_view, ["chla"], strategy="median").fit().result()
        assert result.imputed_df.loc[3, "chla"] == pytest.approx(2.0)
        assert result.strategy == "median"

    def test_source_not_mutated(self, sample_view: DatasetView) -> None:
        before = sample_view.df.copy()
        CentralTendencyImputer(sample_view, ["mx_ph", "chla"]).fit().result()
        pd.testing.assert_frame_equal(sample_view.df, before)

    def test_other_columns_preserved(self, sample_view: DatasetView) -> None:
        result = CentralTendencyImputer(sample_view, ["mx_ph", "chla"]).fit().result()
        pd.testing.assert_series_equal(result.imputed_df["season"], sample_view.df["season"])
        assert not result.imputed_df[["mx_ph", "chla"]].isna().any().any()

    def test_all_missing_column_stays_missing(self) -> None:
        """A column without observed values gets no made-up fill value."""
        df = pd.DataFrame({"mx_ph": [8.0, np.nan], "chla": [np.nan, np.nan]})
        view = DatasetView(df=df, pretty_by_col={}, numeric_cols=["mx_ph", "chla"])

        result = CentralTendencyImputer(view, ["mx_ph", "chla"], strategy="median").fit().result()

        assert result.imputed_df["chla"].isna().all()
        assert np.isnan(result.fill_values["chla"])
        assert result.n_filled["chla"] == 0
        assert result.imputed_df.loc[1, "mx_ph"] == pytest.approx(8.0)
        assert result.n_filled["mx_ph"] == 1

    def test_only_all_missing_columns(self) -> None:
        df = pd.DataFrame({"chla": [np.nan, np.nan]})
        view = DatasetView(df=df, pretty_by_col={}, numeric_cols=["chla"])

        result = CentralTendencyImputer(view, ["chla"], strategy="median").fit().result()

        assert result.imputed_df["chla"].isna().all()
        assert result.fill_values.isna().all()
        assert not (result.imputed_df["chla"] == 0).any()

    def test_invalid_strategy(self, sample_view: DatasetView) -> None:
        with pytest.raises(ValueError, match="strategy"):
            CentralTendencyImputer(sample_view, ["mx_ph"], strategy="mode")  # type: ignore[arg-type]

    def test_non_numeric_column(self, sample_view: DatasetView) -> None:
        with pytest.raises(ValueError, match="season"):
            CentralTendencyImputer(sample_view, ["season"])

    def test_no_columns(self, sample_view: DatasetView) -> None:
        with pytest.raises(ValueError):
            CentralTendencyImputer(sample_view, [])

    def test_result_before_fit_raises(self, sample_view: DatasetView) -> None:
        with pytest.raises(ValueError, match="fit"):
            CentralTendencyImputer(sample_view, ["mx_ph"]).result()


class TestDatasetImpute:
    """Imputation through the dataset API."""

    def test_impute_returns_new_dataset(self, algae_dataset: AlgaeDataset) -> None:
        imputed = algae_dataset.impute([AlgaeCol.MX_PH], strategy="mean")

        assert isinstance(imputed, AlgaeDataset)
        assert imputed is not algae_dataset
        assert imputed.df[AlgaeCol.MX_PH].isna().sum() == 0
        assert algae_dataset.df[AlgaeCol.MX_PH].isna().sum() == 1
        assert imputed.df.loc[18, AlgaeCol.MX_PH] == pytest.approx(algae_dataset.df[AlgaeCol.MX_PH].mean())

    def test_median_chla(self, algae_dataset: AlgaeDataset) -> None:
        imputed = algae_dataset.impute([AlgaeCol.CHLA], strategy="median")
        median = algae_dataset.df[AlgaeCol.CHLA].median()
        filled = algae_dataset.df[AlgaeCol.CHLA].isna()
        assert (imputed.df.loc[filled, AlgaeCol.CHLA] == median).all()
