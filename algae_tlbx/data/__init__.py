"""Data module for dataset classes."""

from .algae_columns import AlgaeColumn as AlgaeCol
from .algae_dataset import AlgaeDataset, AlgaeTables, load_algae_tables
from .views import DatasetView, ordered_categories, quantile_bins


__all__ = [
    "AlgaeCol",
    "AlgaeDataset",
    "AlgaeTables",
    "DatasetView",
    "load_algae_tables",
    "ordered_categories",
    "quantile_bins",
]
