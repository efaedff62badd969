"""
Visitor analytics endpoints backed by the key-value store.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from fundboard.api.dependencies import get_kvstore
from fundboard.api.response_models import AnalyticsEventRequest, SuccessResponse
from fundboard.kvstore import EVENT_TYPES, RestStore, analytics_summary, record_event

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.post("", response_model=SuccessResponse)
def track(req: AnalyticsEventRequest, kvstore: RestStore = Depends(get_kvstore)):
    if req.type not in EVENT_TYPES:
        raise HTTPException(400, "Invalid type")
    record_event(kvstore, req.type, req.data)
    return SuccessResponse(success=True)


@router.get("")
def summary(kvstore: RestStore = Depends(get_kvstore)):
    """Row counts and recent rows per analytics table."""
    return analytics_summary(kvstore)
