"""
Meta endpoints: health, status, columns, reload of the bundled dataset.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from csv_explorer.data.loader import LoadError, ParseError
from csv_explorer.data.store import TableStore
from csv_explorer.api.dependencies import get_store_or_empty
from csv_explorer.api.response_models import (
    ColumnsResponse, HealthResponse, LoadResponse, StatusResponse,
)

router = APIRouter(prefix="/api", tags=["meta"])


def status_response(store: TableStore) -> StatusResponse:
    return StatusResponse(
        message=store.status.message,
        is_error=store.status.is_error,
        version=store.version,
    )


@router.get("/health", response_model=HealthResponse)
def health(store: TableStore = Depends(get_store_or_empty)):
    return HealthResponse(
        status="ok" if store.is_loaded else "empty",
        rows=store.row_count(),
        columns=len(store.columns),
        version=store.version,
    )


@router.get("/status", response_model=StatusResponse)
def get_status(store: TableStore = Depends(get_store_or_empty)):
    return status_response(store)


@router.get("/columns", response_model=ColumnsResponse)
def list_columns(store: TableStore = Depends(get_store_or_empty)):
    classification = store.table.classification
    return ColumnsResponse(
        columns=store.columns,
        numeric=classification.numeric,
        categorical=classification.categorical,
        types=classification.as_dict(),
    )


@router.post("/reload", response_model=LoadResponse)
def reload_data(store: TableStore = Depends(get_store_or_empty)):
    """Re-read the bundled dataset. The previous table survives a failed reload."""
    try:
        store.load_default()
    except LoadError as exc:
        raise HTTPException(502, str(exc))
    except ParseError:
        raise HTTPException(422, store.status.message)
    return LoadResponse(status=status_response(store), rows=store.row_count(), columns=store.columns)
