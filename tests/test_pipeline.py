import pytest

from fundboard.data.pipeline import DONATIONS, get_kind, process_csv, process_donations, process_expenses
from fundboard.errors import EmptyInput, NoDataError, NoValidRecords


def test_process_donations(donations_csv: str) -> None:
    summary = process_donations(donations_csv, target_amount=10000)
    assert summary.total_amount == 4000
    assert summary.total_donors == 3
    assert summary.percentage == 40.0
    assert [d.amount for d in summary.donations] == [2000, 500, 1500]
    assert summary.donations[0].name == "Anonymous"


def test_donation_payload_shape(donations_csv: str) -> None:
    payload = process_donations(donations_csv, target_amount=10000).to_dict()
    assert set(payload) == {"totalAmount", "totalDonors", "targetAmount", "percentage", "donations", "lastUpdated"}
    assert set(payload["donations"][0]) == {"timestamp", "name", "amount", "receipt"}


def test_process_expenses(expenses_csv: str) -> None:
    summary = process_expenses(expenses_csv)
    assert summary.total_amount == 23000
    assert summary.total_expenses == 4
    assert summary.categories == {"Food": 15000, "Travel": 8000, "Uncategorized": 0}
    assert [e.title for e in summary.expenses] == ["Volunteer note", "Snacks", "Bus hire", "Rice and dhal"]

    rice = summary.expenses[-1]
    assert rice.description == "Lunch packets, 40 pax"
    assert rice.photo_urls == ["https://p.test/1", "https://p.test/2"]
    assert rice.invoice_urls == ["https://inv.test/1"]


def test_expense_payload_shape(expenses_csv: str) -> None:
    payload = process_expenses(expenses_csv).to_dict()
    assert set(payload) == {"totalAmount", "totalExpenses", "expenses", "lastUpdated", "categories"}
    assert set(payload["expenses"][0]) == {
        "timestamp", "expenseDate", "title", "category", "description",
        "amount", "receipt", "remarks", "invoice", "photos",
    }


def test_header_only_csv_is_empty_input() -> None:
    with pytest.raises(EmptyInput) as exc:
        process_csv("Timestamp,Name,Amount\n", DONATIONS)
    assert str(exc.value) == "No donation data found in the sheet"


def test_all_rows_discarded_is_no_valid_records() -> None:
    with pytest.raises(NoValidRecords):
        process_donations("Name,Amount\nA,0\nB,abc")


def test_blank_expense_sheet_is_no_data() -> None:
    with pytest.raises(NoDataError) as exc:
        process_expenses("Title,Amount\n,\n")
    assert exc.value.kind == "expense"
    assert "expense" in str(exc.value)


def test_default_target_comes_from_config() -> None:
    summary = process_donations("Name,Amount\nA,60000")
    assert summary.target_amount == 600000
    assert summary.percentage == 10.0


def test_get_kind() -> None:
    assert get_kind("donations") is DONATIONS
    with pytest.raises(ValueError):
        get_kind("pledges")
