import re

from fundboard.data.aggregate import (
    aggregate_donations,
    aggregate_expenses,
    category_totals,
    parse_timestamp,
    sort_donations,
    sort_expenses,
    target_percentage,
    utc_now_iso,
)
from fundboard.data.schemas import Donation, Expense


def _expense(category="Food", amount=0, timestamp="", expense_date="", title="x") -> Expense:
    return Expense(
        timestamp=timestamp, expense_date=expense_date, title=title,
        category=category, description="", amount=amount,
    )


def test_donation_totals_and_percentage() -> None:
    donations = [Donation(f"2024-01-0{i}", "d", amt) for i, amt in enumerate([100, 200, 300], 1)]
    summary = aggregate_donations(donations, 1000)
    assert summary.total_amount == 600
    assert summary.percentage == 60.0
    assert summary.total_donors == 3
    assert summary.target_amount == 1000


def test_percentage_is_capped_and_guarded() -> None:
    assert target_percentage(1500, 1000) == 100.0
    assert target_percentage(100, 0) == 0.0


def test_expense_category_totals() -> None:
    expenses = [_expense("Food", 50), _expense("Food", 30), _expense("Travel", 20)]
    summary = aggregate_expenses(expenses)
    assert summary.categories == {"Food": 80, "Travel": 20}
    assert summary.total_amount == 100
    assert summary.total_expenses == 3
    assert category_totals(expenses) == {"Food": 80, "Travel": 20}


def test_donations_sort_newest_first() -> None:
    jan = Donation("2024-01-01", "a", 100)
    feb = Donation("2024-02-01", "b", 50)
    assert sort_donations([jan, feb]) == [feb, jan]


def test_donation_sort_falls_back_to_amount_per_pair() -> None:
    small = Donation("", "a", 50)
    large = Donation("not a date", "b", 300)
    assert sort_donations([small, large]) == [large, small]


def test_expenses_sort_by_effective_date_undated_last() -> None:
    undated = _expense(title="undated")
    old = _expense(timestamp="2024-03-01", expense_date="2024-01-01", title="old")
    new = _expense(timestamp="2024-02-01", title="new")
    ordered = sort_expenses([undated, old, new])
    assert [e.title for e in ordered] == ["new", "old", "undated"]


def test_parse_timestamp() -> None:
    assert parse_timestamp("1/15/2024 10:30:00").month == 1
    assert parse_timestamp("2024-01-15T10:30:00+05:30").hour == 5
    assert parse_timestamp("") is None
    assert parse_timestamp(None) is None
    assert parse_timestamp("not a date") is None


def test_last_updated_is_iso_utc() -> None:
    assert re.fullmatch(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z", utc_now_iso())
