"""
Fundboard — FastAPI app factory with startup wiring.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fundboard.api.dependencies import set_kvstore, set_store
from fundboard.api.router_analytics import router as analytics_router
from fundboard.api.router_dashboard import router as dashboard_router
from fundboard.api.router_export import router as export_router
from fundboard.api.router_meta import router as meta_router
from fundboard.api.router_photos import router as photos_router
from fundboard.api.router_sheets import router as sheets_router
from fundboard.data.store import SheetStore
from fundboard.errors import NoDataError, SheetFetchError, StoreError
from fundboard.kvstore import RestStore
from fundboard.logging_setup import configure_logging, get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Error bodies: {"error": message}
# ---------------------------------------------------------------------------

async def _no_data(request: Request, exc: NoDataError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def _upstream_failure(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


def create_app(store: SheetStore | None = None, kvstore: RestStore | None = None) -> FastAPI:
    """Build the app; collaborators default to live sheet and store clients."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        set_store(store or SheetStore())
        set_kvstore(kvstore or RestStore())
        logger.info("Fundboard ready")
        yield

    app = FastAPI(
        title="Fundboard API",
        description="Fundraising transparency dashboard — donations, expenses, gallery",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NoDataError, _no_data)
    app.add_exception_handler(SheetFetchError, _upstream_failure)
    app.add_exception_handler(StoreError, _upstream_failure)
    app.add_exception_handler(StarletteHTTPException, _http_error)

    app.include_router(meta_router)
    app.include_router(sheets_router)
    app.include_router(dashboard_router)
    app.include_router(export_router)
    app.include_router(photos_router)
    app.include_router(analytics_router)

    # Dashboard page with no-cache headers so browsers always get fresh data
    index_html = Path(__file__).parent / "static" / "index.html"
    if index_html.is_file():
        @app.get("/", response_class=HTMLResponse, include_in_schema=False)
        async def serve_index():
            return HTMLResponse(
                content=index_html.read_text(encoding="utf-8"),
                headers={"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache"},
            )

    return app


app = create_app()
