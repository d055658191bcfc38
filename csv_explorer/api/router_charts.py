"""
Chart endpoints — histogram, category counts, scatter, chart column selection.

Every chart is derived from the rows passing the current filter. Column
params default to the store's chart selection.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from csv_explorer.analytics.charts import category_counts, column_histogram, scatter_points
from csv_explorer.config import CATEGORY_TOP_N, HISTOGRAM_BINS
from csv_explorer.data.schemas import ChartSelection
from csv_explorer.data.store import TableStore
from csv_explorer.api.dependencies import get_store, get_store_or_empty, require_column
from csv_explorer.api.response_models import (
    CategoryResponse, ChartSelectionModel, HistogramResponse, ScatterResponse,
)

router = APIRouter(prefix="/api/charts", tags=["charts"])


@router.get("/histogram", response_model=HistogramResponse)
def histogram(
    column: Optional[str] = Query(None, description="Numeric column (default: current selection)"),
    bins: int = Query(HISTOGRAM_BINS, ge=1, le=100),
    store: TableStore = Depends(get_store),
):
    column = column or store.charts.histogram
    if column is None:
        return HistogramResponse(column=None, bins=[])
    require_column(store, column, store.table.classification.numeric)
    result = column_histogram(store.filtered_rows(), column, bins)
    return HistogramResponse(column=column, bins=[b.to_dict() for b in result])


@router.get("/category", response_model=CategoryResponse)
def category(
    column: Optional[str] = Query(None, description="Categorical column (default: current selection)"),
    top: int = Query(CATEGORY_TOP_N, ge=1, le=100),
    store: TableStore = Depends(get_store),
):
    column = column or store.charts.category
    if column is None:
        return CategoryResponse(column=None, counts=[])
    require_column(store, column, store.table.classification.categorical)
    values = store.filtered_rows()[column].tolist()
    return CategoryResponse(column=column, counts=category_counts(values, top))


@router.get("/scatter", response_model=ScatterResponse)
def scatter(
    x: Optional[str] = Query(None, description="Numeric X column"),
    y: Optional[str] = Query(None, description="Numeric Y column"),
    store: TableStore = Depends(get_store),
):
    x = x or store.charts.scatter_x
    y = y or store.charts.scatter_y
    if x is None or y is None:
        return ScatterResponse(x_column=x, y_column=y, points=[])
    numeric = store.table.classification.numeric
    require_column(store, x, numeric)
    require_column(store, y, numeric)
    return ScatterResponse(x_column=x, y_column=y, points=scatter_points(store.filtered_rows(), x, y))


@router.get("/selection", response_model=ChartSelectionModel)
def get_selection(store: TableStore = Depends(get_store_or_empty)):
    return ChartSelectionModel(**vars(store.charts), version=store.version)


@router.put("/selection", response_model=ChartSelectionModel)
def set_selection(req: ChartSelectionModel, store: TableStore = Depends(get_store_or_empty)):
    """Pick chart columns; omitted fields keep their current value."""
    classification = store.table.classification
    current = store.charts
    picks = {
        "histogram": (req.histogram, classification.numeric),
        "category": (req.category, classification.categorical),
        "scatter_x": (req.scatter_x, classification.numeric),
        "scatter_y": (req.scatter_y, classification.numeric),
    }
    updated = {}
    for name, (column, allowed) in picks.items():
        if column is None:
            updated[name] = getattr(current, name)
        else:
            updated[name] = require_column(store, column, allowed)
    store.set_chart_selection(ChartSelection(**updated))
    return ChartSelectionModel(**vars(store.charts), version=store.version)
