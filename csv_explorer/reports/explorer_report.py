"""
Explorer Report — summary panel plus the current filtered/sorted view.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from csv_explorer.config import EXPORT_MAX_ROWS
from csv_explorer.data.store import TableStore
from csv_explorer.analytics.common import rows_to_records, sanitize_for_json
from csv_explorer.analytics.summary import missingness_report, numeric_summary
from csv_explorer.excel.writer import ExcelWriter


MISSING_COLS = [
    ("column", "text", "Column"),
    ("missing", "number", "Missing values"),
]

NUMERIC_COLS = [
    ("column", "text", "Column"),
    ("count", "number", "Numeric values"),
    ("min", "decimal", "Min"),
    ("max", "decimal", "Max"),
    ("mean", "decimal", "Mean"),
    ("median", "decimal", "Median"),
]


def _describe_view(store: TableStore) -> str:
    parts = []
    if store.filter.is_active:
        scope = store.filter.column or "any column"
        parts.append(f'filter: {scope} contains "{store.filter.value}"')
    if store.sort.column:
        parts.append(f"sort: {store.sort.column} {'ascending' if store.sort.direction == 1 else 'descending'}")
    return "  |  ".join(parts) if parts else "all rows, original order"


def generate_json(store: TableStore, limit: int | None = None) -> dict:
    """Overview, missingness and numeric statistics of the filtered rows, plus the displayed rows."""
    view = store.view_rows()
    rows = store.summary_rows()
    return sanitize_for_json({
        "overview": store.overview(),
        "view": _describe_view(store),
        "classification": store.table.classification.as_dict(),
        "missing_by_column": missingness_report(rows, store.columns),
        "numeric": [s.to_dict() for s in numeric_summary(rows, store.table.classification.numeric)],
        "filtered_rows": len(view),
        "rows": rows_to_records(view, limit),
    })


def build_workbook(store: TableStore) -> ExcelWriter:
    data = generate_json(store, limit=EXPORT_MAX_ROWS)
    o = data["overview"]
    ew = ExcelWriter()

    ws = ew.add_sheet("Summary")
    ew.write_title(ws, "CSV EXPLORER",
                   f"{_describe_view(store)}  |  Generated {pd.Timestamp.now():%B %d, %Y}")

    row = ew.write_section(ws, 5, "SHAPE")
    row = ew.write_kpi_row(ws, row, [
        (o["rows"], "ROWS"),
        (o["columns"], "COLUMNS"),
        (o["missing"], "MISSING VALUES"),
        (data["filtered_rows"], "ROWS IN VIEW"),
    ])

    row = ew.write_section(ws, row, "MISSING VALUES BY COLUMN")
    row = ew.write_table(ws, row, MISSING_COLS, data["missing_by_column"], freeze=False)

    row = ew.write_section(ws, row + 1, "NUMERIC SUMMARY")
    ew.write_table(ws, row, NUMERIC_COLS, data["numeric"], freeze=False)

    ws_rows = ew.add_sheet("Rows")
    ew.write_table(ws_rows, 1, [(c, "text", c) for c in store.columns], data["rows"])
    return ew


def generate_excel(store: TableStore, output_path: str | Path) -> Path:
    return build_workbook(store).save(output_path)
