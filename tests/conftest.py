"""Test configuration for the algae toolbox."""

from pathlib import Path
import sys

import matplotlib
import pandas as pd
import pytest


matplotlib.use("Agg")

# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(scope="session")
def algae_tables():
    """Load the bundled algae tables once per test session."""
    from algae_tlbx.data import load_algae_tables

    return load_algae_tables()


@pytest.fixture(scope="session")
def algae_dataset(algae_tables):
    """Training table of the bundled algae data."""
    return algae_tables.train


@pytest.fixture
def four_by_four() -> pd.DataFrame:
    """4x4 table with 0, 1, 2 and 4 missing cells per row."""
    nan = float("nan")
    return pd.DataFrame(
        {
            "a": [1.0, nan, nan, nan],
            "b": [2.0, 2.0, nan, nan],
            "c": [3.0, 3.0, 3.0, nan],
            "d": [4.0, 4.0, 4.0, nan],
        },
    )
