"""
Meta endpoints: health, reload.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from fundboard.api.dependencies import get_kvstore, get_store
from fundboard.api.response_models import HealthResponse, ReloadResponse
from fundboard.data.store import SheetStore
from fundboard.kvstore import RestStore

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: SheetStore = Depends(get_store), kvstore: RestStore = Depends(get_kvstore)):
    return HealthResponse(
        status="ok",
        sheets=store.status(),
        kvstore_configured=kvstore.is_configured,
    )


@router.post("/reload", response_model=ReloadResponse)
def reload_data(store: SheetStore = Depends(get_store)):
    """Drop cached sheet snapshots; the next request refetches."""
    store.invalidate()
    return ReloadResponse(status="ok", message="Cache cleared. Next request fetches fresh sheet data.")
