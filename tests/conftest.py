"""Shared fixtures: sample sheet exports, fake HTTP plumbing, and an API client.

Nothing here touches the network. Sheet fetches go through ``FakeSheetClient``
(keyed by URL) and REST calls through ``FakeSession``; exports are redirected
to the test's temporary directory.
"""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from fundboard.data.store import SheetStore
from fundboard.kvstore import RestStore
from fundboard.main import create_app

DONATIONS_URL = "https://sheets.test/donations.csv"
EXPENSES_URL = "https://sheets.test/expenses.csv"

DONATIONS_CSV = """Timestamp,Name,Amount,Receipt
1/15/2024 10:30:00,Nimal Perera,"LKR 1,500.00",https://drive.test/r1
2/01/2024 09:00:00,,Rs. 2000,
1/20/2024 18:45:00,Kamala,=500,https://drive.test/r3
3/01/2024 08:00:00,Bad Row,abc,

"""

EXPENSES_CSV = """Timestamp,Expense Date,Expense Title / Purpose,Expense Categories,Description,Amount (LKR),Receipt,Remarks,Invoice Upload,Photos (if available)
1/10/2024 12:00:00,1/05/2024,Rice and dhal,Food,"Lunch packets, 40 pax",LKR 12000,https://r.test/1,,https://inv.test/1,"https://p.test/1, https://p.test/2"
1/12/2024 12:00:00,,Bus hire,Travel,Return trip,"8,000",,Paid in cash,,
1/15/2024 12:00:00,1/14/2024,Snacks,Food,,3000,https://r.test/3,,,
1/16/2024 12:00:00,,Volunteer note,,Donated chairs,0,,,,
"""


# ---- Fake HTTP ---------------------------------------------------------------


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "", payload: Any = None, reason: str = "OK") -> None:
        self.status_code = status_code
        self.text = text
        self.reason = reason
        self._payload = payload
        self.content = text.encode() if text else (b"[]" if payload is not None else b"")

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        return self._payload


class FakeSession:
    """Stand-in for ``requests.Session``: replays queued responses, records calls.

    Queue items may be a FakeResponse or an exception instance to raise.
    """

    def __init__(self, *responses) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def _next(self):
        item = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(item, Exception):
            raise item
        return item

    def get(self, url, **kwargs):
        self.calls.append({"method": "GET", "url": url, **kwargs})
        return self._next()

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        return self._next()


class FakeSheetClient:
    """Returns canned CSV text per URL; values may be exceptions to raise."""

    def __init__(self, sheets: dict[str, Any]) -> None:
        self.sheets = sheets
        self.fetches: list[str] = []

    def fetch_csv(self, url: str) -> str:
        self.fetches.append(url)
        value = self.sheets[url]
        if isinstance(value, Exception):
            raise value
        return value


# ---- Fixtures ----------------------------------------------------------------


@pytest.fixture()
def donations_csv() -> str:
    return DONATIONS_CSV


@pytest.fixture()
def expenses_csv() -> str:
    return EXPENSES_CSV


@pytest.fixture()
def sheet_client() -> FakeSheetClient:
    return FakeSheetClient({DONATIONS_URL: DONATIONS_CSV, EXPENSES_URL: EXPENSES_CSV})


@pytest.fixture()
def sheet_store(sheet_client: FakeSheetClient) -> SheetStore:
    return SheetStore(
        sheet_client,
        donations_url=DONATIONS_URL,
        expenses_url=EXPENSES_URL,
        target_amount=10000,
        ttl_seconds=60,
    )


@pytest.fixture()
def rest_session() -> FakeSession:
    return FakeSession(FakeResponse(200, payload=[]))


@pytest.fixture()
def rest_store(rest_session: FakeSession) -> RestStore:
    return RestStore("https://kv.test", "anon-key", session=rest_session)


@pytest.fixture()
def client(sheet_store: SheetStore, rest_store: RestStore, tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("fundboard.api.router_export.EXPORTS_FOLDER", tmp_path)
    app = create_app(store=sheet_store, kvstore=rest_store)
    with TestClient(app) as test_client:
        yield test_client
