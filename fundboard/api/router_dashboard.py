"""
Dashboard endpoints: donation progress and expense breakdown overviews.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from fundboard.analytics.dashboard import donation_overview, expense_overview
from fundboard.api.dependencies import get_store
from fundboard.data.store import SheetStore
from fundboard.errors import FundboardError
from fundboard.logging_setup import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/donations")
def donations_dashboard(
    refresh: bool = Query(False),
    store: SheetStore = Depends(get_store),
):
    return JSONResponse(content=donation_overview(store.donations(refresh)))


@router.get("/expenses")
def expenses_dashboard(
    refresh: bool = Query(False),
    store: SheetStore = Depends(get_store),
):
    """Expense overview; budget figures use the donation total when available."""
    summary = store.expenses(refresh)
    try:
        total_raised = store.donations().total_amount
    except FundboardError as exc:
        logger.warning("Donation total unavailable for budget: %s", exc)
        total_raised = 0
    return JSONResponse(content=expense_overview(summary, total_raised))
