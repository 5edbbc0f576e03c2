import os
from pathlib import Path
from typing import Literal


__all__ = ["DATA_DIR_ENV_VAR", "get_data_dir", "get_dataset_path"]


DATA_DIR_ENV_VAR = "ALGAE_TLBX_DATA_DIR"

_DATASET_MAP: dict[str, str] = {
    "algae": "algae.csv",
    "test_algae": "test_algae.csv",
    "algae_sols": "algae_sols.csv",
}


def get_data_dir() -> Path:
    """Get the path to the data directory.

    The ``ALGAE_TLBX_DATA_DIR`` environment variable overrides the bundled ``_data`` directory.

    Returns:
        Path to the data directory
    """
    override = os.environ.get(DATA_DIR_ENV_VAR)
    data_dir = Path(override).resolve() if override else (Path(__file__).parents[2] / "_data").resolve()
    assert data_dir.exists(), f"Data directory not found at {data_dir}"
    return data_dir


def get_dataset_path(
    filename: Literal["algae", "test_algae", "algae_sols"] | str,  # noqa: PYI051
    data_dir: str | Path | None = None,
) -> Path:
    """Get the full path to a dataset file in the data directory.

    Args:
        filename: Key to known dataset or custom filename
        data_dir: Directory to look in instead of :func:`get_data_dir`

    Returns:
        Full path to the dataset file

    Supported: algae.csv test_algae.csv algae_sols.csv
    """
    base = Path(data_dir) if data_dir is not None else get_data_dir()
    ds_path = base / _DATASET_MAP.get(filename, filename)
    assert ds_path.exists(), f"Dataset file '{filename}' not found at {ds_path}"

    return ds_path
