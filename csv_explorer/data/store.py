"""
TableStore — the single in-memory table plus its filter, sort and status.

One writer owns the store; readers pull derived views whenever ``version``
changes. A load builds a complete ``Table`` first and swaps it in with one
assignment, so concurrent loads resolve as last-completed-wins.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from csv_explorer.config import DATA_FILE, DATA_URL
from csv_explorer.analytics.classify import classify_columns
from csv_explorer.analytics.query import apply_sort, get_filtered_rows, toggle_sort
from csv_explorer.analytics.summary import count_missing, total_missing
from csv_explorer.data.loader import (
    LoadError,
    ParseError,
    decode_upload,
    fetch_csv_text,
    parse_csv_text,
    read_csv_file,
    source_name,
)
from csv_explorer.data.schemas import ChartSelection, FilterSpec, SortSpec, Status, Table

logger = logging.getLogger(__name__)


class TableStore:
    """In-memory CSV table with filter/sort state and a change counter."""

    def __init__(self, data_file: Path = DATA_FILE, data_url: Optional[str] = DATA_URL) -> None:
        self.data_file = Path(data_file)
        self.data_url = data_url
        self.table: Table = Table.empty()
        self.filter: FilterSpec = FilterSpec()
        self.sort: SortSpec = SortSpec()
        self.charts: ChartSelection = ChartSelection()
        self.status: Status = Status(f"Loading {self.default_source_name}…")
        self.version = 0
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_text(self, csv_text: str) -> Table:
        """Parse CSV text and replace the whole table.

        On a parse error the current table stays as it was and the status
        carries the first parser message.
        """
        try:
            df = parse_csv_text(csv_text)
        except ParseError as exc:
            self.set_status(f"CSV parse error: {exc}", is_error=True)
            logger.warning("CSV parse error: %s", exc)
            raise

        columns = list(df.columns)
        table = Table(
            df=df.reset_index(drop=True),
            columns=columns,
            classification=classify_columns(df, columns),
        )

        self.table = table
        self.filter = FilterSpec()
        self.sort = SortSpec()
        self.charts = self.charts.synced(table.classification)
        self._loaded = True
        self._bump()
        self.set_status(f"Loaded {table.row_count} rows from CSV.")
        logger.info(
            "Loaded %d rows, %d columns (%d numeric)",
            table.row_count, len(columns), len(table.classification.numeric),
        )
        return table

    def load_file(self, path: Path) -> Table:
        """Read a local CSV file and load it like pasted text."""
        try:
            text = read_csv_file(path)
        except LoadError as exc:
            self.set_status(str(exc), is_error=True)
            raise
        return self.load_text(text)

    def load_upload(self, content: bytes, filename: str = "upload.csv") -> Table:
        """Load the bytes of an uploaded file."""
        try:
            text = decode_upload(content, filename)
        except LoadError as exc:
            self.set_status(str(exc), is_error=True)
            raise
        return self.load_text(text)

    def load_url(self, url: str) -> Table:
        """Fetch CSV text over HTTP and load it."""
        self.set_status(f"Loading {source_name(url)}…")
        try:
            text = fetch_csv_text(url)
        except LoadError as exc:
            self.set_status(str(exc), is_error=True)
            logger.warning("Load failed: %s", exc)
            raise
        return self.load_text(text)

    def load_default(self) -> Table:
        """(Re)load the bundled dataset from its URL if configured, else from disk."""
        if self.data_url:
            return self.load_url(self.data_url)
        self.set_status(f"Loading {self.default_source_name}…")
        return self.load_file(self.data_file)

    @property
    def default_source_name(self) -> str:
        return source_name(self.data_url) if self.data_url else self.data_file.name

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def _bump(self) -> None:
        self.version += 1

    def set_status(self, message: str, is_error: bool = False) -> None:
        self.status = Status(message, is_error)

    @property
    def columns(self) -> list[str]:
        return self.table.columns

    @property
    def df(self) -> pd.DataFrame:
        return self.table.df

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def has_column(self, column: str) -> bool:
        return column in self.table.columns

    def set_filter(self, spec: FilterSpec) -> None:
        self.filter = spec
        self._bump()

    def clear_filter(self) -> None:
        self.set_filter(FilterSpec())

    def set_sort(self, spec: SortSpec) -> None:
        self.sort = spec
        self._bump()

    def toggle_sort(self, column: str) -> SortSpec:
        """Header click on ``column``."""
        self.set_sort(toggle_sort(self.sort, column))
        return self.sort

    def set_chart_selection(self, selection: ChartSelection) -> None:
        self.charts = selection
        self._bump()

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def filtered_rows(self) -> pd.DataFrame:
        """Rows passing the current filter, original order."""
        return get_filtered_rows(self.table.df, self.table.columns, self.filter)

    def view_rows(self) -> pd.DataFrame:
        """Filtered rows in the current sort order."""
        return apply_sort(self.filtered_rows(), self.sort)

    def summary_rows(self, scope: str = "filtered") -> pd.DataFrame:
        """Rows the statistics describe: the filtered rows, or the whole table for ``"all"``."""
        return self.table.df if scope == "all" else self.filtered_rows()

    def count_missing(self, column: str) -> int:
        return count_missing(self.table.df, column)

    def row_count(self) -> int:
        return self.table.row_count

    def overview(self) -> dict:
        """Headline counts for the summary panel."""
        return {
            "rows": self.table.row_count,
            "columns": len(self.table.columns),
            "missing": total_missing(self.table.df, self.table.columns),
            "version": self.version,
            "status": {"message": self.status.message, "is_error": self.status.is_error},
        }
