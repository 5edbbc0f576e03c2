"""Analysis modules for summaries and missing value handling."""

from .imputation import CentralTendencyImputer, ImputationResult
from .missing_values import (
    InvalidArgumentError,
    MissingValueFilter,
    MissingValueFilterResult,
    drop_incomplete_rows,
    incomplete_rows,
    many_missing_rows,
    row_missing_ratio,
)
from .summary import SummaryAnalyzer, SummaryResult


__all__ = [
    "CentralTendencyImputer",
    "ImputationResult",
    "InvalidArgumentError",
    "MissingValueFilter",
    "MissingValueFilterResult",
    "SummaryAnalyzer",
    "SummaryResult",
    "drop_incomplete_rows",
    "incomplete_rows",
    "many_missing_rows",
    "row_missing_ratio",
]
