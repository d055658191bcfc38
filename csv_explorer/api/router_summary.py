"""
Summary endpoint — headline counts, missingness, numeric statistics.
"""
from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, Query

from csv_explorer.analytics.summary import missingness_report, numeric_summary, total_missing
from csv_explorer.data.store import TableStore
from csv_explorer.api.dependencies import get_store
from csv_explorer.api.response_models import MissingRow, NumericSummaryRow, SummaryResponse

router = APIRouter(prefix="/api", tags=["summary"])


@router.get("/summary", response_model=SummaryResponse)
def summary(
    scope: Literal["filtered", "all"] = Query("filtered", description="'all' ignores the current filter"),
    store: TableStore = Depends(get_store),
):
    df = store.summary_rows(scope)
    columns = store.columns
    numeric = [
        NumericSummaryRow(**s.to_dict(), display=s.formatted())
        for s in numeric_summary(df, store.table.classification.numeric)
    ]
    return SummaryResponse(
        rows=len(df),
        columns=len(columns),
        missing=total_missing(df, columns),
        missing_by_column=[MissingRow(**r) for r in missingness_report(df, columns)],
        numeric=numeric,
        scope=scope,
        version=store.version,
    )
