"""Column enum mixin and per-column metadata."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class ColumnMetadata:
    """What the loader and the plots need to know about one column.

    Attributes:
        original_name: Header in the raw CSV file (e.g. ``mxPH``).
        cleaned_name: snake_case name used in every DataFrame.
        dtype: ``"float64"`` for measurements, ``"category"`` for enumerated columns.
        pretty_name: Axis and table label.
        categories: Declared level order of an enumerated column, ``None`` otherwise.
    """

    original_name: str
    cleaned_name: str
    dtype: str
    pretty_name: str
    categories: tuple[str, ...] | None = None


class BaseColumn(StrEnum):
    """StrEnum of a dataset's columns; members compare equal to the cleaned names.

    Subclasses define a ``TARGET`` member and implement :meth:`metadata`. The
    column groups below are derived from the metadata table.
    """

    TARGET: str

    def metadata(self) -> ColumnMetadata:
        raise NotImplementedError(f"{type(self).__name__} must implement metadata()")

    @classmethod
    def categorical_columns(cls) -> list[str]:
        """Enumerated columns, in declaration order."""
        return [col.value for col in cls if col.categories is not None]

    @classmethod
    def numeric_columns(cls) -> list[str]:
        """Measurement columns, in declaration order."""
        return [col.value for col in cls if col.categories is None]

    @classmethod
    def category_orders(cls) -> dict[str, list[str]]:
        """Declared level order per enumerated column."""
        return {col.value: list(col.categories) for col in cls if col.categories is not None}

    @classmethod
    def original_names(cls) -> dict[str, str]:
        """Raw CSV header -> cleaned name."""
        return {col.original_name: col.value for col in cls}

    @property
    def pretty_name(self) -> str:
        return self.metadata().pretty_name

    @property
    def original_name(self) -> str:
        return self.metadata().original_name

    @property
    def dtype_name(self) -> str:
        return self.metadata().dtype

    @property
    def categories(self) -> tuple[str, ...] | None:
        return self.metadata().categories
