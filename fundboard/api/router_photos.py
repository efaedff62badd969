"""
Gallery photo endpoints backed by the key-value store.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from fundboard.api.dependencies import get_kvstore
from fundboard.api.response_models import PhotoCreateRequest, SuccessResponse
from fundboard.kvstore import RestStore, add_photo, delete_photo, list_photos

router = APIRouter(prefix="/api/photos", tags=["photos"])


@router.get("")
def photos(kvstore: RestStore = Depends(get_kvstore)):
    return list_photos(kvstore)


@router.post("")
def create_photo(req: PhotoCreateRequest, kvstore: RestStore = Depends(get_kvstore)):
    if not req.url:
        raise HTTPException(400, "URL is required")
    return add_photo(kvstore, req.url, req.caption, req.display_order)


@router.delete("", response_model=SuccessResponse)
def remove_photo(id: Optional[str] = Query(None), kvstore: RestStore = Depends(get_kvstore)):
    if not id:
        raise HTTPException(400, "ID is required")
    delete_photo(kvstore, id)
    return SuccessResponse(success=True)
