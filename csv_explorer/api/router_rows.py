"""
Row view endpoints: filtered + sorted rows, filter and sort state.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from csv_explorer.analytics.common import rows_to_records
from csv_explorer.data.schemas import FilterSpec, SortSpec
from csv_explorer.data.store import TableStore
from csv_explorer.api.dependencies import get_store, get_store_or_empty, require_column
from csv_explorer.api.response_models import (
    FilterRequest, RowsResponse, SortRequest, SortResponse, ToggleSortRequest,
)

router = APIRouter(prefix="/api", tags=["rows"])


def _sort_response(store: TableStore) -> SortResponse:
    return SortResponse(column=store.sort.column, direction=store.sort.direction, version=store.version)


@router.get("/rows", response_model=RowsResponse)
def get_rows(
    limit: Optional[int] = Query(None, ge=0, description="Max rows to return"),
    store: TableStore = Depends(get_store),
):
    """The table as displayed: current filter applied, then current sort."""
    view = store.view_rows()
    return RowsResponse(
        columns=store.columns,
        rows=rows_to_records(view, limit),
        total=store.row_count(),
        filtered=len(view),
        filter=FilterRequest(column=store.filter.column, value=store.filter.value),
        sort=SortRequest(column=store.sort.column, direction=store.sort.direction),
        version=store.version,
    )


@router.put("/filter", response_model=FilterRequest)
def set_filter(req: FilterRequest, store: TableStore = Depends(get_store_or_empty)):
    column = req.column or None
    if column is not None:
        require_column(store, column)
    store.set_filter(FilterSpec(column=column, value=req.value))
    return FilterRequest(column=store.filter.column, value=store.filter.value)


@router.delete("/filter", response_model=FilterRequest)
def clear_filter(store: TableStore = Depends(get_store_or_empty)):
    store.clear_filter()
    return FilterRequest()


@router.put("/sort", response_model=SortResponse)
def set_sort(req: SortRequest, store: TableStore = Depends(get_store_or_empty)):
    column = req.column or None
    if column is not None:
        require_column(store, column)
    store.set_sort(SortSpec(column=column, direction=req.direction))
    return _sort_response(store)


@router.post("/sort/toggle", response_model=SortResponse)
def toggle_sort(req: ToggleSortRequest, store: TableStore = Depends(get_store_or_empty)):
    """Column header click."""
    require_column(store, req.column)
    store.toggle_sort(req.column)
    return _sort_response(store)
