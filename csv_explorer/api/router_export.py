"""
Export endpoints — the current view as JSON snapshot or Excel workbook.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response

from csv_explorer.config import EXPORT_FILENAME
from csv_explorer.data.store import TableStore
from csv_explorer.api.dependencies import get_store
from csv_explorer.reports import explorer_report

router = APIRouter(prefix="/api/export", tags=["export"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("/json")
def export_json(
    limit: Optional[int] = Query(None, ge=0),
    store: TableStore = Depends(get_store),
):
    return JSONResponse(content=explorer_report.generate_json(store, limit))


@router.get("/xlsx")
def export_xlsx(store: TableStore = Depends(get_store)):
    content = explorer_report.build_workbook(store).to_bytes()
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
