"""
CSV text parsing and dataset retrieval (bundled file, HTTP, uploads).
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from urllib.parse import urlparse

import pandas as pd
import requests

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class CSVExplorerError(Exception):
    """Base class for load and parse failures."""


class LoadError(CSVExplorerError):
    """The CSV source could not be read (network failure, HTTP error, unreadable file)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(CSVExplorerError):
    """The CSV parser reported a syntax problem; carries the first reported error."""


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_csv_text(csv_text: str) -> pd.DataFrame:
    """Parse CSV text with a header row into an all-string DataFrame.

    Blank lines are skipped and no type coercion happens: every cell stays the
    string from the file, absent trailing fields become None. Empty input
    yields an empty frame with no columns.
    """
    text = csv_text.strip()
    if not text:
        return pd.DataFrame()

    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            na_values=[],
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except pd.errors.ParserError as exc:
        raise ParseError(_first_error(exc)) from exc

    # pandas silently turns a leading extra field into an index
    if not isinstance(df.index, pd.RangeIndex):
        raise ParseError(f"Too many fields: expected {len(df.columns)} fields per row")

    df.columns = [str(c) for c in df.columns]
    df = df.astype(object)
    return df.where(df.notna(), None)


def _first_error(exc: Exception) -> str:
    message = str(exc).strip().splitlines()
    if not message:
        return "Unknown parse error"
    return message[0].replace("Error tokenizing data. C error: ", "")


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

def source_name(source: str | Path) -> str:
    """Short display name for a path or URL (its last path segment)."""
    if isinstance(source, Path):
        return source.name
    path = urlparse(source).path
    return path.rstrip("/").rsplit("/", 1)[-1] or source


def read_csv_file(path: Path) -> str:
    """Read a local CSV file fully as text."""
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Could not load {source_name(Path(path))}.") from exc


def decode_upload(content: bytes, filename: str = "upload.csv") -> str:
    """Decode uploaded bytes as UTF-8 (BOM tolerated)."""
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise LoadError(f"Could not read {filename}: file is not UTF-8 text.") from exc


def fetch_csv_text(url: str) -> str:
    """GET a CSV resource; any non-2xx response or network failure raises LoadError."""
    name = source_name(url)
    try:
        response = requests.get(url)
        response.raise_for_status()
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        suffix = f" ({status})" if status else ""
        raise LoadError(f"Could not load {name}{suffix}.", status_code=status) from exc
    except requests.RequestException as exc:
        logger.warning("Fetching %s failed: %s", url, exc)
        raise LoadError(f"Could not load {name}.") from exc
    return response.text
