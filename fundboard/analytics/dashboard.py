"""
Dashboard analytics — donation progress and expense breakdown payloads.

Time-series buckets, top purposes, receipt coverage and budget position,
computed server-side from processed summaries.
"""
from __future__ import annotations

import datetime as dt
from collections.abc import Mapping, Sequence

import pandas as pd

from fundboard.analytics.common import pct_of_total, safe_divide, sanitize_for_json
from fundboard.config import DAILY_SERIES_LIMIT, PROGRAM_DATE, TOP_PURPOSES_LIMIT, UNTITLED_EXPENSE
from fundboard.data.aggregate import parse_timestamp
from fundboard.data.schemas import Donation, DonationSummary, Expense, ExpenseSummary


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _record_date(record: Donation | Expense) -> str:
    if isinstance(record, Expense):
        return record.effective_date
    return record.timestamp


def _dated_frame(records: Sequence[Donation | Expense]) -> pd.DataFrame:
    """One row per record with a parseable date: [date, amount]."""
    rows = []
    for r in records:
        ts = parse_timestamp(_record_date(r))
        if ts is not None:
            rows.append({"date": ts, "amount": r.amount})
    if not rows:
        return pd.DataFrame(columns=["date", "amount"])
    df = pd.DataFrame(rows)
    df["date"] = pd.to_datetime(df["date"])
    return df


# ---------------------------------------------------------------------------
# Time series
# ---------------------------------------------------------------------------

def daily_totals(records: Sequence[Donation | Expense], limit: int | None = DAILY_SERIES_LIMIT) -> list[dict]:
    """Amount per calendar day, oldest first; only the last ``limit`` days."""
    df = _dated_frame(records)
    if df.empty:
        return []

    df["day"] = df["date"].dt.normalize()
    grouped = df.groupby("day")["amount"].sum().sort_index()
    if limit:
        grouped = grouped.tail(limit)

    return [
        {"date": f"{day:%Y-%m-%d}", "label": f"{day:%b} {day.day}", "amount": int(amount)}
        for day, amount in grouped.items()
    ]


def monthly_totals(records: Sequence[Donation | Expense]) -> list[dict]:
    """Amount and record count per calendar month, oldest first."""
    df = _dated_frame(records)
    if df.empty:
        return []

    df["year_month"] = df["date"].dt.to_period("M")
    grouped = df.groupby("year_month").agg(
        amount=("amount", "sum"),
        count=("amount", "size"),
    ).sort_index()

    return [
        {
            "month": f"{period.year}-{period.month:02d}",
            "label": f"{dt.date(period.year, period.month, 1):%B %Y}",
            "amount": int(r["amount"]),
            "count": int(r["count"]),
        }
        for period, r in grouped.iterrows()
    ]


# ---------------------------------------------------------------------------
# Expense breakdowns
# ---------------------------------------------------------------------------

def top_purposes(expenses: Sequence[Expense], limit: int = TOP_PURPOSES_LIMIT) -> list[dict]:
    """Largest spend by expense title."""
    if not expenses:
        return []
    df = pd.DataFrame({
        "title": [e.title or UNTITLED_EXPENSE for e in expenses],
        "amount": [e.amount for e in expenses],
    })
    grouped = df.groupby("title", sort=False)["amount"].sum()
    grouped = grouped.sort_values(ascending=False, kind="stable").head(limit)
    return [{"title": title, "amount": int(amount)} for title, amount in grouped.items()]


def category_breakdown(categories: Mapping[str, int]) -> list[dict]:
    """Categories by amount, largest first, with share of the total."""
    total = sum(categories.values())
    ordered = sorted(categories.items(), key=lambda kv: kv[1], reverse=True)
    return [
        {"category": name, "amount": amount, "share": round(pct_of_total(amount, total), 1)}
        for name, amount in ordered
    ]


def verification_status(expense: Expense) -> str:
    """Receipt-based status: verified or no_receipt."""
    return "verified" if expense.has_receipt else "no_receipt"


def receipt_status(expenses: Sequence[Expense]) -> dict:
    """Amount and count of expenses with and without a receipt."""
    with_receipt = [e for e in expenses if e.has_receipt]
    without_receipt = [e for e in expenses if not e.has_receipt]
    return {
        "with_receipt_amount": sum(e.amount for e in with_receipt),
        "with_receipt_count": len(with_receipt),
        "without_receipt_amount": sum(e.amount for e in without_receipt),
        "without_receipt_count": len(without_receipt),
    }


# ---------------------------------------------------------------------------
# Budget & countdown
# ---------------------------------------------------------------------------

def budget_status(total_raised: int, total_spent: int) -> dict:
    """Spending measured against money raised so far."""
    if total_raised <= 0:
        return {
            "available": False,
            "label": "Budget: Not available",
            "budget": 0,
            "spent": total_spent,
            "spent_pct": 0.0,
            "remaining": 0,
            "over_budget": False,
            "over_budget_amount": 0,
        }

    balance = total_raised - total_spent
    return {
        "available": True,
        "label": "Over Budget" if balance < 0 else "Available",
        "budget": total_raised,
        "spent": total_spent,
        "spent_pct": min(safe_divide(total_spent, total_raised) * 100, 100.0),
        "remaining": max(0, balance),
        "over_budget": balance < 0,
        "over_budget_amount": abs(balance) if balance < 0 else 0,
    }


def days_remaining(program_date: dt.date = PROGRAM_DATE, today: dt.date | None = None) -> int:
    """Whole days left until the program date, never negative."""
    today = today or dt.date.today()
    return max(0, (program_date - today).days)


# ---------------------------------------------------------------------------
# Page payloads
# ---------------------------------------------------------------------------

def donation_overview(summary: DonationSummary, today: dt.date | None = None) -> dict:
    """Donation dashboard: progress, countdown, monthly and daily inflow."""
    return sanitize_for_json({
        "total_amount": summary.total_amount,
        "total_donors": summary.total_donors,
        "target_amount": summary.target_amount,
        "percentage": round(summary.percentage, 1),
        "remaining_to_target": max(0, summary.target_amount - summary.total_amount),
        "average_donation": round(safe_divide(summary.total_amount, summary.total_donors), 2),
        "days_remaining": days_remaining(today=today),
        "monthly": monthly_totals(summary.donations),
        "daily": daily_totals(summary.donations),
        "last_updated": summary.last_updated,
    })


def expense_overview(summary: ExpenseSummary, total_raised: int = 0, recent: int = 5) -> dict:
    """Expense dashboard: budget position, receipts, categories, trends."""
    return sanitize_for_json({
        "total_amount": summary.total_amount,
        "total_expenses": summary.total_expenses,
        "budget": budget_status(total_raised, summary.total_amount),
        "receipts": receipt_status(summary.expenses),
        "categories": category_breakdown(summary.categories),
        "top_purposes": top_purposes(summary.expenses),
        "daily": daily_totals(summary.expenses),
        "monthly": monthly_totals(summary.expenses),
        "recent": [
            {**e.to_dict(), "status": verification_status(e)}
            for e in summary.expenses[:recent]
        ],
        "last_updated": summary.last_updated,
    })
