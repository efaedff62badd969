from fundboard.errors import SheetFetchError

from conftest import DONATIONS_URL, EXPENSES_URL, FakeResponse


def test_donations(client, sheet_client) -> None:
    resp = client.get("/api/donations")
    assert resp.status_code == 200
    body = resp.json()
    assert body["totalAmount"] == 4000
    assert body["totalDonors"] == 3
    assert body["targetAmount"] == 10000
    assert body["percentage"] == 40.0
    assert resp.headers["cache-control"].startswith("no-cache")

    client.get("/api/donations")
    client.get("/api/donations", params={"refresh": "true"})
    assert sheet_client.fetches.count(DONATIONS_URL) == 2


def test_expenses_with_category_filter(client) -> None:
    body = client.get("/api/expenses", params={"category": "Food"}).json()
    assert [e["title"] for e in body["expenses"]] == ["Snacks", "Rice and dhal"]
    assert body["totalAmount"] == 23000
    assert body["categories"]["Travel"] == 8000


def test_no_data_is_404(client, sheet_client) -> None:
    sheet_client.sheets[DONATIONS_URL] = "Name,Amount\nA,0\n"
    resp = client.get("/api/donations")
    assert resp.status_code == 404
    assert resp.json() == {"error": "No donation data found in the sheet"}


def test_fetch_failure_is_500(client, sheet_client) -> None:
    sheet_client.sheets[EXPENSES_URL] = SheetFetchError("Failed to fetch data: 403 Forbidden")
    resp = client.get("/api/expenses")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch data: 403 Forbidden"}


def test_dashboards(client) -> None:
    donations = client.get("/api/dashboard/donations").json()
    assert donations["remaining_to_target"] == 6000
    assert donations["monthly"][0]["month"] == "2024-01"

    expenses = client.get("/api/dashboard/expenses").json()
    assert expenses["budget"]["budget"] == 4000
    assert expenses["top_purposes"][0]["title"] == "Rice and dhal"


def test_expense_dashboard_survives_missing_donations(client, sheet_client) -> None:
    sheet_client.sheets[DONATIONS_URL] = SheetFetchError("down")
    body = client.get("/api/dashboard/expenses").json()
    assert body["budget"]["available"] is False


def test_excel_exports(client, tmp_path) -> None:
    resp = client.get("/api/export/expenses.xlsx")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/vnd.openxmlformats")
    assert (tmp_path / "Expenses.xlsx").exists()
    assert client.get("/api/export/donations.xlsx").status_code == 200


def test_health_and_reload(client) -> None:
    client.get("/api/donations")
    health = client.get("/api/health").json()
    assert health["status"] == "ok"
    assert health["sheets"]["donations"]["cached"] is True
    assert health["sheets"]["expenses"]["cached"] is False
    assert health["kvstore_configured"] is True

    assert client.post("/api/reload").json()["status"] == "ok"
    assert client.get("/api/health").json()["sheets"]["donations"]["cached"] is False


def test_photos(client, rest_session) -> None:
    rest_session.responses = [FakeResponse(200, payload=[{"id": 1, "url": "https://img.test/1"}])]
    assert client.get("/api/photos").json() == [{"id": 1, "url": "https://img.test/1"}]

    rest_session.responses = [FakeResponse(201, payload=[{"id": 2, "url": "https://img.test/2"}])]
    created = client.post("/api/photos", json={"url": "https://img.test/2", "caption": "Day one"})
    assert created.json()["id"] == 2
    assert rest_session.calls[-1]["json"][0]["caption"] == "Day one"

    rest_session.responses = [FakeResponse(204)]
    assert client.delete("/api/photos", params={"id": "2"}).json() == {"success": True}


def test_photo_validation(client, rest_session) -> None:
    resp = client.post("/api/photos", json={"caption": "no url"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "URL is required"}

    resp = client.delete("/api/photos")
    assert resp.status_code == 400
    assert resp.json() == {"error": "ID is required"}
    assert rest_session.calls == []


def test_store_failure_is_500(client, rest_session) -> None:
    rest_session.responses = [FakeResponse(500, text="oops", reason="Internal Server Error")]
    resp = client.get("/api/photos")
    assert resp.status_code == 500
    assert "Supabase error" in resp.json()["error"]


def test_analytics(client, rest_session) -> None:
    resp = client.post("/api/analytics", json={"type": "event", "data": {"visitorId": "v", "type": "click"}})
    assert resp.json() == {"success": True}
    assert rest_session.calls[-1]["json"][0]["event_type"] == "click"

    resp = client.post("/api/analytics", json={"type": "bogus", "data": {}})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid type"}

    summary = client.get("/api/analytics").json()
    assert summary["visits"]["count"] == 0


def test_index_page_is_not_cached(client) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    assert "Fundboard" in resp.text
    assert resp.headers["cache-control"] == "no-cache, no-store, must-revalidate"
