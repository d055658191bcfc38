"""
Column type inference — numeric vs categorical.
"""
from __future__ import annotations

import pandas as pd

from csv_explorer.config import NUMERIC_THRESHOLD
from csv_explorer.data.normalize import missing_mask, to_number
from csv_explorer.data.schemas import ColumnClassification


def is_numeric_column(series: pd.Series, threshold: float = NUMERIC_THRESHOLD) -> bool:
    """A column is numeric when at least ``threshold`` of its non-missing values parse.

    All-missing columns are categorical.
    """
    present = series[~missing_mask(series)]
    if present.empty:
        return False
    numeric_count = present.map(to_number).notna().sum()
    return numeric_count / len(present) >= threshold


def classify_columns(
    df: pd.DataFrame,
    columns: list[str],
    threshold: float = NUMERIC_THRESHOLD,
) -> ColumnClassification:
    """Assign every column to exactly one of numeric / categorical, header order kept."""
    numeric: list[str] = []
    categorical: list[str] = []
    for column in columns:
        series = df[column] if column in df.columns else pd.Series([], dtype=object)
        if is_numeric_column(series, threshold):
            numeric.append(column)
        else:
            categorical.append(column)
    return ColumnClassification(numeric=numeric, categorical=categorical)
