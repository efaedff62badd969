from fundboard.config import DONATION_COLUMN_ALIASES, EXPENSE_COLUMN_ALIASES, EXPENSE_COLUMN_FALLBACKS
from fundboard.data.columns import normalize_header, resolve_columns


def test_normalize_header() -> None:
    assert normalize_header("  Amount   (LKR) ") == "amount (lkr)"
    assert normalize_header("Donor\tName") == "donor name"


def test_renamed_donation_headers_resolve() -> None:
    headers = ["Donation Date", "Donor Full Name", "Amount (LKR)", "Proof Link"]
    mapping = resolve_columns(headers, DONATION_COLUMN_ALIASES)
    assert mapping.as_dict() == {
        "timestamp": "Donation Date",
        "name": "Donor Full Name",
        "amount": "Amount (LKR)",
        "receipt": "Proof Link",
    }


def test_resolution_is_idempotent() -> None:
    headers = ["Timestamp", "Expense Date", "Title", "Category", "Amount", "Receipt"]
    first = resolve_columns(headers, EXPENSE_COLUMN_ALIASES, EXPENSE_COLUMN_FALLBACKS)
    second = resolve_columns(headers, EXPENSE_COLUMN_ALIASES, EXPENSE_COLUMN_FALLBACKS)
    assert first == second


def test_exact_match_beats_earlier_substring_hit() -> None:
    mapping = resolve_columns(["Expense Date", "Timestamp"], EXPENSE_COLUMN_ALIASES)
    assert mapping.header("timestamp") == "Timestamp"
    assert mapping.header("expenseDate") == "Expense Date"


def test_substring_match_takes_first_header_in_order() -> None:
    mapping = resolve_columns(["Payment Amount", "Amount Pledged"], {"amount": ["amount"]})
    assert mapping.header("amount") == "Payment Amount"


def test_unresolved_fields_read_as_empty() -> None:
    mapping = resolve_columns(["Timestamp", "Amount"], DONATION_COLUMN_ALIASES)
    assert mapping.header("name") is None
    assert "name" in mapping.unresolved()
    assert mapping.cell({"Timestamp": "x", "Amount": "1"}, "name") == ""


def test_attachment_fallback_keywords() -> None:
    headers = ["Timestamp", "Amount", "Upload Invoices Here", "Photo uploads"]
    mapping = resolve_columns(headers, EXPENSE_COLUMN_ALIASES, EXPENSE_COLUMN_FALLBACKS)
    assert mapping.header("invoice") == "Upload Invoices Here"
    assert mapping.header("photos") == "Photo uploads"

    without = resolve_columns(headers, EXPENSE_COLUMN_ALIASES)
    assert without.header("photos") is None
