"""
Table, classification, filter/sort and status schemas for the table store.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import pandas as pd


class ColumnType(str, Enum):
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


@dataclass(frozen=True)
class ColumnClassification:
    """Partition of the table's columns into numeric and categorical."""
    numeric: list[str] = field(default_factory=list)
    categorical: list[str] = field(default_factory=list)

    def type_of(self, column: str) -> Optional[ColumnType]:
        if column in self.numeric:
            return ColumnType.NUMERIC
        if column in self.categorical:
            return ColumnType.CATEGORICAL
        return None

    def as_dict(self) -> dict[str, str]:
        """Column → type name, numeric columns first."""
        out = {c: ColumnType.NUMERIC.value for c in self.numeric}
        out.update({c: ColumnType.CATEGORICAL.value for c in self.categorical})
        return out


@dataclass(frozen=True, eq=False)
class Table:
    """One parsed CSV: rows, header-ordered columns and their classification.

    Replaced as a whole on every successful load, never edited in place.
    """
    df: pd.DataFrame
    columns: list[str]
    classification: ColumnClassification

    @classmethod
    def empty(cls) -> "Table":
        return cls(df=pd.DataFrame(), columns=[], classification=ColumnClassification())

    @property
    def row_count(self) -> int:
        return len(self.df)


@dataclass(frozen=True)
class FilterSpec:
    """Case-insensitive substring filter, optionally scoped to one column."""
    column: Optional[str] = None    # None = search every column
    value: str = ""

    @property
    def is_active(self) -> bool:
        return bool(self.value)


ASCENDING = 1
DESCENDING = -1


@dataclass(frozen=True)
class SortSpec:
    """Single-column sort; ``column=None`` keeps the original row order."""
    column: Optional[str] = None
    direction: int = ASCENDING      # +1 ascending, -1 descending

    def __post_init__(self) -> None:
        if self.direction not in (ASCENDING, DESCENDING):
            raise ValueError(f"direction must be 1 or -1, got {self.direction!r}")


@dataclass(frozen=True)
class Status:
    """Outcome of the last load attempt."""
    message: str = ""
    is_error: bool = False


@dataclass(frozen=True)
class ChartSelection:
    """Columns currently picked for each chart."""
    histogram: Optional[str] = None
    category: Optional[str] = None
    scatter_x: Optional[str] = None
    scatter_y: Optional[str] = None

    def synced(self, classification: ColumnClassification) -> "ChartSelection":
        """Replace picks that are no longer eligible with the first eligible columns."""
        numeric = classification.numeric
        categorical = classification.categorical
        first_numeric = numeric[0] if numeric else None

        histogram = self.histogram if self.histogram in numeric else first_numeric
        category = self.category if self.category in categorical else (categorical[0] if categorical else None)
        scatter_x = self.scatter_x if self.scatter_x in numeric else first_numeric
        if self.scatter_y in numeric:
            scatter_y = self.scatter_y
        else:
            scatter_y = numeric[1] if len(numeric) > 1 else first_numeric
        return ChartSelection(histogram, category, scatter_x, scatter_y)
