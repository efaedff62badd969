"""
Sheet endpoints: processed donation and expense data.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from fundboard.analytics.common import sanitize_for_json
from fundboard.api.dependencies import get_store
from fundboard.data.store import SheetStore

router = APIRouter(prefix="/api", tags=["sheets"])

# Browsers and proxies must not hold on to sheet snapshots
NO_CACHE_HEADERS = {"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache"}


def _safe_json(data: dict) -> JSONResponse:
    return JSONResponse(content=sanitize_for_json(data), headers=NO_CACHE_HEADERS)


@router.get("/donations")
def donations(
    refresh: bool = Query(False, description="Bypass the cache"),
    store: SheetStore = Depends(get_store),
):
    """Donation totals, progress toward the target, and the sorted ledger."""
    return _safe_json(store.donations(refresh).to_dict())


@router.get("/expenses")
def expenses(
    refresh: bool = Query(False, description="Bypass the cache"),
    category: Optional[str] = Query(None, description="Only list expenses in this category"),
    store: SheetStore = Depends(get_store),
):
    """Expense totals, category totals, and the sorted ledger."""
    summary = store.expenses(refresh)
    payload = summary.to_dict()
    if category:
        payload["expenses"] = [e.to_dict() for e in summary.filtered(category)]
    return _safe_json(payload)
