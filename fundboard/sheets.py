"""
Published-sheet fetcher: pulls CSV exports from Google Sheets with retries.
"""
from __future__ import annotations

import time

import requests

from fundboard.config import (
    FETCH_BACKOFF_SECONDS,
    FETCH_MAX_RETRIES,
    FETCH_TIMEOUT_SECONDS,
    FETCH_USER_AGENT,
)
from fundboard.errors import SheetFetchError
from fundboard.logging_setup import get_logger

logger = get_logger(__name__)

RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}
_PLACEHOLDER_URL = "YOUR_GOOGLE_SHEET_CSV_URL_HERE"


class SheetClient:
    """Fetches CSV text from a published spreadsheet URL."""

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout_seconds: float = FETCH_TIMEOUT_SECONDS,
        max_retries: int = FETCH_MAX_RETRIES,
        backoff_seconds: float = FETCH_BACKOFF_SECONDS,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout_seconds = timeout_seconds
        self._max_retries = max_retries
        self._backoff_seconds = backoff_seconds

    def fetch_csv(self, url: str) -> str:
        """Return the CSV body, raising SheetFetchError on any failure."""
        if not url or url == _PLACEHOLDER_URL:
            raise SheetFetchError("Google Sheet CSV URL not configured")

        response = self._request(url)
        text = response.text
        if not text or not text.strip():
            raise SheetFetchError("Received empty response from Google Sheets")
        return text

    def _request(self, url: str) -> requests.Response:
        last_error: Exception | None = None

        for attempt in range(self._max_retries + 1):
            # Cache-busting parameter: Sheets serves stale exports otherwise
            params = {"t": str(int(time.time() * 1000))}
            try:
                response = self._session.get(
                    url,
                    params=params,
                    headers={"User-Agent": FETCH_USER_AGENT, "Accept": "text/csv"},
                    timeout=self._timeout_seconds,
                    allow_redirects=True,
                )
            except (requests.Timeout, requests.ConnectionError) as exc:
                last_error = exc
            else:
                if response.ok:
                    return response
                last_error = SheetFetchError(
                    f"Failed to fetch data: {response.status_code} {response.reason}. "
                    "Make sure the Google Sheet is published to the web."
                )
                if response.status_code not in RETRYABLE_STATUS_CODES:
                    logger.error(
                        "Sheet request failed status=%s url=%s body=%s",
                        response.status_code, url, (response.text or "")[:500],
                    )
                    raise last_error

            if attempt >= self._max_retries:
                break

            wait = self._backoff_seconds * (2 ** attempt)
            logger.warning(
                "Sheet request retry attempt=%s/%s wait_seconds=%.2f url=%s error=%s",
                attempt + 1, self._max_retries, wait, url, last_error,
            )
            time.sleep(wait)

        logger.error("Sheet request exhausted retries url=%s error=%s", url, last_error)
        if isinstance(last_error, SheetFetchError):
            raise last_error
        raise SheetFetchError(f"Failed to fetch data: {last_error}") from last_error
