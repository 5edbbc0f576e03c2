"""Exploratory analysis toolbox for the algae bloom river water-quality data."""

from .data import AlgaeCol, AlgaeDataset, AlgaeTables, load_algae_tables


__all__ = ["AlgaeCol", "AlgaeDataset", "AlgaeTables", "load_algae_tables"]
