"""
Row views — substring filtering, the header-click sort, and sort toggling.
"""
from __future__ import annotations

from functools import cmp_to_key

import pandas as pd

from csv_explorer.data.normalize import cell_text, is_missing, to_number
from csv_explorer.data.schemas import ASCENDING, FilterSpec, SortSpec


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------

def _contains(series: pd.Series, needle: str) -> pd.Series:
    return series.map(cell_text).str.lower().str.contains(needle, regex=False)


def get_filtered_rows(df: pd.DataFrame, columns: list[str], spec: FilterSpec) -> pd.DataFrame:
    """Rows matching the filter, in source order.

    An empty needle returns a copy of every row. With a target column only
    that column is searched; otherwise a row matches when any column does.
    """
    if not spec.value:
        return df.copy()

    needle = spec.value.lower()
    if spec.column:
        if spec.column not in df.columns:
            return df.iloc[0:0].copy()
        mask = _contains(df[spec.column], needle)
    else:
        mask = pd.Series(False, index=df.index)
        for column in columns:
            if column in df.columns:
                mask |= _contains(df[column], needle)
    return df[mask.astype(bool)].copy()


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------

def locale_compare(a: str, b: str) -> int:
    """Case-insensitive string ordering; lowercase wins ties between case variants."""
    ka, kb = (a.casefold(), a.swapcase()), (b.casefold(), b.swapcase())
    return (ka > kb) - (ka < kb)


def _sort_number(value) -> float | None:
    # absent and blank cells sort as 0 against numbers
    return 0.0 if is_missing(value) else to_number(value)


def compare_cells(a, b) -> int:
    """Numeric comparison when both cells parse as numbers, string comparison otherwise.

    Blank cells count as 0 here. Decided per pair, so a mixed column is
    not totally ordered.
    """
    a_num, b_num = _sort_number(a), _sort_number(b)
    if a_num is not None and b_num is not None:
        return (a_num > b_num) - (a_num < b_num)
    return locale_compare(cell_text(a), cell_text(b))


def apply_sort(df: pd.DataFrame, spec: SortSpec) -> pd.DataFrame:
    """Stable sort by one column; unsorted specs return the input untouched."""
    if not spec.column or spec.column not in df.columns:
        return df

    values = df[spec.column].tolist()
    direction = spec.direction
    order = sorted(
        range(len(values)),
        key=cmp_to_key(lambda i, j: direction * compare_cells(values[i], values[j])),
    )
    return df.iloc[order]


def toggle_sort(current: SortSpec, column: str) -> SortSpec:
    """Header click: flip direction on the sorted column, else sort the new column ascending."""
    if current.column == column:
        return SortSpec(column=column, direction=-current.direction)
    return SortSpec(column=column, direction=ASCENDING)
