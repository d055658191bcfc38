"""
Cell-level predicates shared by the classifier, filters, summaries and charts.
"""
from __future__ import annotations

import math
import re

import numpy as np
import pandas as pd


# ---------------------------------------------------------------------------
# Missingness
# ---------------------------------------------------------------------------

def is_missing(value) -> bool:
    """True for absent cells (None/NaN) and strings that are blank after trimming."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return str(value).strip() == ""


def missing_mask(series: pd.Series) -> pd.Series:
    """Vectorized ``is_missing`` over a column."""
    return series.map(is_missing).astype(bool)


# ---------------------------------------------------------------------------
# Numeric parsing
# ---------------------------------------------------------------------------

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_PREFIXED_RE = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY_RE = re.compile(r"^[+-]?Infinity$")


def to_number(value) -> float | None:
    """Parse a raw cell as a numeric literal, or return None.

    Accepts signed decimals with optional fraction/exponent, ``Infinity``
    with an optional sign and 0x/0o/0b integer literals, after trimming
    whitespace. Literals beyond float range become infinities. Blank cells
    and NaN are not numbers.
    """
    if is_missing(value):
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)

    text = str(value).strip()
    if _DECIMAL_RE.match(text) or _INFINITY_RE.match(text):
        return float(text)
    if _PREFIXED_RE.match(text):
        try:
            return float(int(text, 0))
        except OverflowError:
            return math.inf
    return None


def numeric_values(series: pd.Series) -> pd.Series:
    """Finite numbers parsed from a column, everything else dropped, index preserved."""
    values = series.map(to_number).dropna().astype(float)
    return values[np.isfinite(values)]


def cell_text(value) -> str:
    """Raw cell as text with absent values rendered as an empty string."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return ""
    return str(value)
