"""
Reusable Excel cell/row formatting helpers.
"""
from __future__ import annotations

from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from csv_explorer.excel.styles import (
    HEADER_FONT, HEADER_FILL, HEADER_BORDER,
    DATA_FONT, THIN_BORDER, ALTERNATE_FILL,
    KPI_VALUE_FONT, KPI_LABEL_FONT, KPI_FILL,
    CENTER, LEFT, RIGHT,
)


def format_header_row(ws: Worksheet, row_num: int, num_cols: int) -> None:
    """Apply header styling to an entire row."""
    for col in range(1, num_cols + 1):
        cell = ws.cell(row=row_num, column=col)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = CENTER
        cell.border = HEADER_BORDER


def format_data_cell(ws: Worksheet, row_num: int, col_num: int, value, col_type: str = "text") -> None:
    """Write and format a single data cell.

    ``col_type``: "text" (raw CSV string), "number" (integer count) or
    "decimal" (two-decimal statistic).
    """
    cell = ws.cell(row=row_num, column=col_num)
    cell.value = value
    cell.font = DATA_FONT
    cell.border = THIN_BORDER
    cell.alignment = RIGHT if col_type in ("number", "decimal") else LEFT

    if col_type == "number":
        cell.number_format = "#,##0"
    elif col_type == "decimal":
        cell.number_format = "0.00"

    if row_num % 2 == 0:
        cell.fill = ALTERNATE_FILL


def auto_column_width(ws: Worksheet, min_width: int = 10, max_width: int = 55) -> None:
    """Auto-fit column widths based on content length."""
    for column in ws.columns:
        max_length = 0
        column_letter = get_column_letter(column[0].column)
        for cell in column:
            if cell.value is not None:
                max_length = max(max_length, len(str(cell.value)))
        ws.column_dimensions[column_letter].width = min(max(max_length + 2, min_width), max_width)


def add_kpi_card(ws: Worksheet, row: int, col: int, value, label: str) -> None:
    """Write a large KPI value + small label below it."""
    value_cell = ws.cell(row=row, column=col)
    label_cell = ws.cell(row=row + 1, column=col)

    value_cell.value = value
    value_cell.font = KPI_VALUE_FONT
    value_cell.fill = KPI_FILL
    value_cell.alignment = CENTER
    value_cell.number_format = "#,##0"

    label_cell.value = label
    label_cell.font = KPI_LABEL_FONT
    label_cell.alignment = CENTER
