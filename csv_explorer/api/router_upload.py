"""
Load endpoints: parse pasted CSV text, upload a CSV file.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from csv_explorer.data.loader import LoadError, ParseError
from csv_explorer.data.store import TableStore
from csv_explorer.api.dependencies import get_store_or_empty
from csv_explorer.api.response_models import LoadResponse, LoadTextRequest
from csv_explorer.api.router_meta import status_response

router = APIRouter(prefix="/api/load", tags=["load"])


def _loaded(store: TableStore) -> LoadResponse:
    return LoadResponse(status=status_response(store), rows=store.row_count(), columns=store.columns)


@router.post("/text", response_model=LoadResponse)
def load_text(req: LoadTextRequest, store: TableStore = Depends(get_store_or_empty)):
    """Parse pasted CSV text, replacing the current table."""
    if not req.csv_text.strip():
        store.set_status("Paste CSV text to parse.", is_error=True)
        raise HTTPException(400, store.status.message)
    try:
        store.load_text(req.csv_text)
    except ParseError:
        raise HTTPException(422, store.status.message)
    return _loaded(store)


@router.post("/upload", response_model=LoadResponse)
def upload_csv(file: UploadFile = File(...), store: TableStore = Depends(get_store_or_empty)):
    """Read an uploaded CSV fully as text and parse it like pasted text."""
    if not file.filename:
        raise HTTPException(400, "Missing filename")
    content = file.file.read()
    try:
        store.load_upload(content, file.filename)
    except LoadError:
        raise HTTPException(400, store.status.message)
    except ParseError:
        raise HTTPException(422, store.status.message)
    return _loaded(store)
