"""
CSV Explorer — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from csv_explorer import __version__
from csv_explorer.config import LOG_FORMAT, LOG_LEVEL, STATIC_FOLDER
from csv_explorer.data.loader import CSVExplorerError
from csv_explorer.data.store import TableStore
from csv_explorer.api.dependencies import set_store
from csv_explorer.api.router_meta import router as meta_router
from csv_explorer.api.router_upload import router as upload_router
from csv_explorer.api.router_rows import router as rows_router
from csv_explorer.api.router_summary import router as summary_router
from csv_explorer.api.router_charts import router as charts_router
from csv_explorer.api.router_export import router as export_router

logger = logging.getLogger(__name__)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the bundled dataset at startup; a failure leaves an empty table and an error status."""
    store: TableStore = app.state.store
    try:
        store.load_default()
    except CSVExplorerError as exc:
        logger.warning("Startup load failed: %s", exc)
    else:
        logger.info("CSV Explorer ready — %s", store.status.message)
    yield


def create_app(store: TableStore | None = None, load_on_startup: bool = True) -> FastAPI:
    store = store or TableStore()
    set_store(store)

    app = FastAPI(
        title="CSV Explorer API",
        description="Load CSV text, infer column types, filter/sort rows, summarize and chart",
        version=__version__,
        lifespan=lifespan if load_on_startup else None,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(upload_router)
    app.include_router(rows_router)
    app.include_router(summary_router)
    app.include_router(charts_router)
    app.include_router(export_router)

    # Bundled dataset is fetchable over HTTP (e.g. as CSVX_DATA_URL)
    if STATIC_FOLDER.is_dir():
        app.mount("/static", StaticFiles(directory=str(STATIC_FOLDER)), name="static")

    return app


configure_logging()
app = create_app()
