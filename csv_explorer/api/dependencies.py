"""
FastAPI dependencies — TableStore singleton, column validation.
"""
from __future__ import annotations

from typing import Optional

from fastapi import HTTPException

from csv_explorer.data.store import TableStore

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: TableStore | None = None


def set_store(store: TableStore) -> None:
    global _store
    _store = store


def get_store() -> TableStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "Data not loaded yet")
    return _store


def get_store_or_empty() -> TableStore:
    """Return the store even if nothing loaded yet (for load/reload endpoints)."""
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


# ---------------------------------------------------------------------------
# Column checks
# ---------------------------------------------------------------------------

def require_column(store: TableStore, column: Optional[str], allowed: list[str] | None = None) -> str:
    """400 unless ``column`` names a column of the table (and of ``allowed`` if given)."""
    if not column:
        raise HTTPException(400, "No column selected")
    if not store.has_column(column):
        raise HTTPException(400, f"Unknown column: {column}")
    if allowed is not None and column not in allowed:
        raise HTTPException(400, f"Column not eligible for this chart: {column}")
    return column
