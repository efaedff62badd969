"""
SheetStore — cached access to the processed donation and expense sheets.

Each dataset is fetched and processed on demand, then served from memory
until it is older than the freshness window. Failed fetches are never cached.
"""
from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from fundboard.config import DONATIONS_CSV_URL, EXPENSES_CSV_URL, SHEET_CACHE_SECONDS, TARGET_AMOUNT
from fundboard.data.pipeline import DONATIONS, EXPENSES, get_kind, process_csv
from fundboard.data.schemas import DonationSummary, ExpenseSummary, RecordKind
from fundboard.logging_setup import get_logger
from fundboard.sheets import SheetClient

logger = get_logger(__name__)


@dataclass
class _Entry:
    summary: Any
    loaded_at: float


class SheetStore:
    """Processed sheet snapshots with a TTL refresh policy."""

    def __init__(
        self,
        client: SheetClient | None = None,
        *,
        donations_url: str = DONATIONS_CSV_URL,
        expenses_url: str = EXPENSES_CSV_URL,
        target_amount: int = TARGET_AMOUNT,
        ttl_seconds: float = SHEET_CACHE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.client = client or SheetClient()
        self.target_amount = target_amount
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._urls = {DONATIONS.name: donations_url, EXPENSES.name: expenses_url}
        self._cache: dict[str, _Entry] = {}
        self._locks = {name: threading.Lock() for name in self._urls}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _is_fresh(self, entry: Optional[_Entry]) -> bool:
        return entry is not None and (self._clock() - entry.loaded_at) < self.ttl_seconds

    def load(self, kind: RecordKind, refresh: bool = False):
        """Return the summary for ``kind``, fetching when stale or forced."""
        with self._locks[kind.name]:
            entry = self._cache.get(kind.name)
            if not refresh and self._is_fresh(entry):
                return entry.summary

            csv_text = self.client.fetch_csv(self._urls[kind.name])
            summary = process_csv(csv_text, kind, self.target_amount)
            self._cache[kind.name] = _Entry(summary=summary, loaded_at=self._clock())
            logger.info("Loaded %s from sheet", kind.name)
            return summary

    def donations(self, refresh: bool = False) -> DonationSummary:
        return self.load(DONATIONS, refresh)

    def expenses(self, refresh: bool = False) -> ExpenseSummary:
        return self.load(EXPENSES, refresh)

    def invalidate(self, kind: RecordKind | None = None) -> None:
        """Drop cached snapshots so the next request refetches."""
        if kind is None:
            self._cache.clear()
        else:
            self._cache.pop(kind.name, None)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def age_seconds(self, kind: RecordKind) -> float | None:
        entry = self._cache.get(kind.name)
        if entry is None:
            return None
        return round(self._clock() - entry.loaded_at, 1)

    def status(self) -> dict:
        return {
            name: {
                "configured": bool(url),
                "cached": name in self._cache,
                "age_seconds": self.age_seconds(get_kind(name)),
            }
            for name, url in self._urls.items()
        }
