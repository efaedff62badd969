"""
Key-value store client — gallery photo metadata and visitor analytics.

Talks to a PostgREST-style endpoint (Supabase ``/rest/v1/<table>``).
"""
from __future__ import annotations

from typing import Any

import requests

from fundboard.config import FETCH_TIMEOUT_SECONDS, SUPABASE_ANON_KEY, SUPABASE_URL
from fundboard.errors import StoreError
from fundboard.logging_setup import get_logger

logger = get_logger(__name__)

PHOTOS_TABLE = "gallery_photos"
ANALYTICS_TABLES = ("visits", "events", "login_visits", "login_attempts")


class RestStore:
    """Minimal table client: select, insert, delete."""

    def __init__(
        self,
        base_url: str = SUPABASE_URL,
        api_key: str = SUPABASE_ANON_KEY,
        *,
        session: requests.Session | None = None,
        timeout_seconds: float = FETCH_TIMEOUT_SECONDS,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self._session = session or requests.Session()
        self._timeout_seconds = timeout_seconds

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url and self.api_key)

    def _headers(self, **extra: str) -> dict[str, str]:
        return {"apikey": self.api_key, "Authorization": f"Bearer {self.api_key}", **extra}

    def _request(self, method: str, table: str, **kwargs) -> requests.Response:
        if not self.is_configured:
            raise StoreError("Supabase not configured")

        url = f"{self.base_url}/rest/v1/{table}"
        try:
            response = self._session.request(method, url, timeout=self._timeout_seconds, **kwargs)
        except (requests.Timeout, requests.ConnectionError) as exc:
            raise StoreError(f"Supabase unreachable: {exc}") from exc

        if not response.ok:
            logger.error("Store request failed method=%s table=%s status=%s", method, table, response.status_code)
            raise StoreError(f"Supabase error: {response.reason} - {response.text}")
        return response

    def select(self, table: str, params: dict[str, str] | None = None) -> list[dict[str, Any]]:
        params = {"select": "*", **(params or {})}
        return self._request("GET", table, params=params, headers=self._headers()).json()

    def insert(self, table: str, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        response = self._request(
            "POST", table, json=rows,
            headers=self._headers(**{"Content-Type": "application/json", "Prefer": "return=representation"}),
        )
        return response.json() if response.content else []

    def delete(self, table: str, filters: dict[str, str]) -> None:
        self._request("DELETE", table, params=filters, headers=self._headers())


# ---------------------------------------------------------------------------
# Gallery photos
# ---------------------------------------------------------------------------

def list_photos(store: RestStore) -> list[dict]:
    return store.select(PHOTOS_TABLE, {"order": "display_order.asc,created_at.desc"})


def add_photo(store: RestStore, url: str, caption: str | None = None, display_order: int | None = None) -> dict:
    if not url:
        raise ValueError("URL is required")
    rows = store.insert(PHOTOS_TABLE, [{
        "url": url,
        "caption": caption or None,
        "display_order": display_order or 0,
    }])
    return rows[0] if rows else {}


def delete_photo(store: RestStore, photo_id: str | int) -> None:
    if photo_id in (None, ""):
        raise ValueError("ID is required")
    store.delete(PHOTOS_TABLE, {"id": f"eq.{photo_id}"})


# ---------------------------------------------------------------------------
# Analytics events
# ---------------------------------------------------------------------------

# event type -> (table, column <- payload key)
_EVENT_COLUMNS: dict[str, tuple[str, dict[str, str]]] = {
    "visit": ("visits", {
        "visitor_id": "visitorId",
        "timestamp": "timestamp",
        "user_agent": "userAgent",
        "referrer": "referrer",
        "url": "url",
        "screen_width": "screenWidth",
        "screen_height": "screenHeight",
    }),
    "event": ("events", {
        "visitor_id": "visitorId",
        "event_type": "type",
        "event_label": "label",
        "timestamp": "timestamp",
    }),
    "login_visit": ("login_visits", {
        "page": "page",
        "timestamp": "timestamp",
        "user_agent": "userAgent",
        "referrer": "referrer",
        "url": "url",
    }),
    "login_attempt": ("login_attempts", {
        "success": "success",
        "timestamp": "timestamp",
        "user_agent": "userAgent",
        "attempted_password_length": "attemptedPasswordLength",
    }),
}

EVENT_TYPES = tuple(_EVENT_COLUMNS)


def record_event(store: RestStore, event_type: str, data: dict[str, Any]) -> None:
    """Store one analytics event; unknown types raise ValueError."""
    if event_type not in _EVENT_COLUMNS:
        raise ValueError("Invalid type")
    table, columns = _EVENT_COLUMNS[event_type]
    store.insert(table, [{column: data.get(key) for column, key in columns.items()}])


def analytics_summary(store: RestStore, recent: int = 10) -> dict:
    """Row counts per analytics table plus the most recent rows of each."""
    summary: dict[str, Any] = {}
    for table in ANALYTICS_TABLES:
        rows = store.select(table, {"order": "timestamp.desc"})
        summary[table] = {"count": len(rows), "recent": rows[:recent]}
        if table == "visits":
            summary["unique_visitors"] = len({r["visitor_id"] for r in rows if r.get("visitor_id")})
    return summary
