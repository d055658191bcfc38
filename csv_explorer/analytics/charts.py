"""
Chart data — histogram bins, top category counts, scatter point pairs.
"""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Iterable

import numpy as np
import pandas as pd

from csv_explorer.config import CATEGORY_TOP_N, HISTOGRAM_BINS, MISSING_LABEL
from csv_explorer.data.normalize import is_missing, numeric_values, to_number


@dataclass(frozen=True)
class HistogramBin:
    lower: float
    upper: float
    label: str
    count: int

    def to_dict(self) -> dict:
        return asdict(self)


def histogram_bins(values: Iterable[float], bin_count: int = HISTOGRAM_BINS) -> list[HistogramBin]:
    """Equal-width bins between min and max of already-numeric values.

    A zero range is widened to 1 and the maximum lands in the last bin.
    """
    arr = np.asarray(list(values), dtype=float)
    if arr.size == 0 or bin_count < 1:
        return []

    lo, hi = float(arr.min()), float(arr.max())
    width = ((hi - lo) or 1) / bin_count
    index = np.minimum(bin_count - 1, np.floor((arr - lo) / width).astype(int))
    counts = np.bincount(index, minlength=bin_count)

    bins = []
    for i in range(bin_count):
        lower = lo + i * width
        upper = lo + (i + 1) * width
        bins.append(HistogramBin(lower, upper, f"{lower:.1f} - {upper:.1f}", int(counts[i])))
    return bins


def column_histogram(df: pd.DataFrame, column: str, bin_count: int = HISTOGRAM_BINS) -> list[HistogramBin]:
    return histogram_bins(numeric_values(df[column]).tolist(), bin_count)


def category_counts(values: Iterable, top_n: int = CATEGORY_TOP_N) -> list[dict]:
    """Most frequent raw values; missing cells count as MISSING_LABEL.

    Equal counts keep first-seen order.
    """
    counts: dict[str, int] = {}
    for value in values:
        key = MISSING_LABEL if is_missing(value) else str(value)
        counts[key] = counts.get(key, 0) + 1
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [{"label": label, "count": count} for label, count in ranked[:top_n]]


def scatter_points(df: pd.DataFrame, x_column: str, y_column: str) -> list[dict]:
    """(x, y) pairs for rows where both cells parse as finite numbers."""
    points = []
    for x_raw, y_raw in zip(df[x_column].tolist(), df[y_column].tolist()):
        x, y = to_number(x_raw), to_number(y_raw)
        if x is not None and y is not None and math.isfinite(x) and math.isfinite(y):
            points.append({"x": x, "y": y})
    return points
