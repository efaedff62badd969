"""
Pydantic request/response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class SheetStatus(BaseModel):
    configured: bool
    cached: bool
    age_seconds: Optional[float] = None


class HealthResponse(BaseModel):
    status: str
    sheets: dict[str, SheetStatus]
    kvstore_configured: bool


class ReloadResponse(BaseModel):
    status: str
    message: str


class PhotoCreateRequest(BaseModel):
    url: Optional[str] = None
    caption: Optional[str] = None
    display_order: Optional[int] = None


class AnalyticsEventRequest(BaseModel):
    type: Optional[str] = None
    data: dict[str, Any] = {}


class SuccessResponse(BaseModel):
    success: bool
