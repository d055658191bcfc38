"""
Exploratory summary — missingness per column and numeric column statistics.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

import pandas as pd

from csv_explorer.config import NO_DATA, SUMMARY_DECIMALS
from csv_explorer.data.normalize import missing_mask, numeric_values


@dataclass(frozen=True)
class NumericSummary:
    """min/max/mean/median of one numeric column; None when it has no numbers."""
    column: str
    count: int
    min: Optional[float]
    max: Optional[float]
    mean: Optional[float]
    median: Optional[float]

    def formatted(self) -> dict[str, str]:
        """Two-decimal strings for display, NO_DATA for empty columns."""
        def fmt(v: Optional[float]) -> str:
            return NO_DATA if v is None else f"{v:.{SUMMARY_DECIMALS}f}"

        return {
            "column": self.column,
            "min": fmt(self.min),
            "max": fmt(self.max),
            "mean": fmt(self.mean),
            "median": fmt(self.median),
        }

    def to_dict(self) -> dict:
        return asdict(self)


def count_missing(df: pd.DataFrame, column: str) -> int:
    """Rows whose value for ``column`` is absent or blank."""
    if column not in df.columns:
        return len(df)
    return int(missing_mask(df[column]).sum())


def missingness_report(df: pd.DataFrame, columns: list[str]) -> list[dict]:
    """Missing count per column, most missing first; ties keep header order."""
    report = [{"column": c, "missing": count_missing(df, c)} for c in columns]
    return sorted(report, key=lambda r: r["missing"], reverse=True)


def total_missing(df: pd.DataFrame, columns: list[str]) -> int:
    return sum(count_missing(df, c) for c in columns)


def median(values: pd.Series) -> float:
    """Middle value of the ascending order; mean of the two middles for even counts."""
    ordered = values.sort_values().tolist()
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def summarize_column(df: pd.DataFrame, column: str) -> NumericSummary:
    values = numeric_values(df[column]) if column in df.columns else pd.Series([], dtype=float)
    if values.empty:
        return NumericSummary(column, 0, None, None, None, None)
    return NumericSummary(
        column=column,
        count=int(len(values)),
        min=round(float(values.min()), SUMMARY_DECIMALS),
        max=round(float(values.max()), SUMMARY_DECIMALS),
        mean=round(float(values.mean()), SUMMARY_DECIMALS),
        median=round(float(median(values)), SUMMARY_DECIMALS),
    )


def numeric_summary(df: pd.DataFrame, numeric_columns: list[str]) -> list[NumericSummary]:
    """One summary per numeric column, over the values that parse as numbers."""
    return [summarize_column(df, c) for c in numeric_columns]
