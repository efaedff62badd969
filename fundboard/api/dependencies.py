"""
FastAPI dependencies — SheetStore and key-value store singletons.
"""
from __future__ import annotations

from fastapi import HTTPException

from fundboard.data.store import SheetStore
from fundboard.kvstore import RestStore

# ---------------------------------------------------------------------------
# Global singletons (set during startup)
# ---------------------------------------------------------------------------
_store: SheetStore | None = None
_kvstore: RestStore | None = None


def set_store(store: SheetStore) -> None:
    global _store
    _store = store


def get_store() -> SheetStore:
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


def set_kvstore(kvstore: RestStore) -> None:
    global _kvstore
    _kvstore = kvstore


def get_kvstore() -> RestStore:
    if _kvstore is None:
        raise HTTPException(503, "Server not initialized yet")
    return _kvstore
