"""
Pydantic request/response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    message: str
    is_error: bool
    version: int


class HealthResponse(BaseModel):
    status: str
    rows: int
    columns: int
    version: int


class ColumnsResponse(BaseModel):
    columns: list[str]
    numeric: list[str]
    categorical: list[str]
    types: dict[str, str]


class LoadTextRequest(BaseModel):
    csv_text: str


class LoadResponse(BaseModel):
    status: StatusResponse
    rows: int
    columns: list[str]


class FilterRequest(BaseModel):
    column: Optional[str] = None   # None / "" = all columns
    value: str = ""


class SortRequest(BaseModel):
    column: Optional[str] = None
    direction: Literal[1, -1] = 1


class ToggleSortRequest(BaseModel):
    column: str


class SortResponse(BaseModel):
    column: Optional[str]
    direction: int
    version: int


class RowsResponse(BaseModel):
    columns: list[str]
    rows: list[dict[str, Any]]
    total: int
    filtered: int
    filter: FilterRequest
    sort: SortRequest
    version: int


class NumericSummaryRow(BaseModel):
    column: str
    count: int
    min: Optional[float]
    max: Optional[float]
    mean: Optional[float]
    median: Optional[float]
    display: dict[str, str]


class MissingRow(BaseModel):
    column: str
    missing: int


class SummaryResponse(BaseModel):
    rows: int
    columns: int
    missing: int
    missing_by_column: list[MissingRow]
    numeric: list[NumericSummaryRow]
    scope: str
    version: int


class HistogramBinModel(BaseModel):
    lower: float
    upper: float
    label: str
    count: int


class HistogramResponse(BaseModel):
    column: Optional[str]
    bins: list[HistogramBinModel]


class CategoryCount(BaseModel):
    label: str
    count: int


class CategoryResponse(BaseModel):
    column: Optional[str]
    counts: list[CategoryCount]


class ScatterPoint(BaseModel):
    x: float
    y: float


class ScatterResponse(BaseModel):
    x_column: Optional[str]
    y_column: Optional[str]
    points: list[ScatterPoint]


class ChartSelectionModel(BaseModel):
    histogram: Optional[str] = None
    category: Optional[str] = None
    scatter_x: Optional[str] = None
    scatter_y: Optional[str] = None
    version: int = Field(0, description="Store version after the update")
