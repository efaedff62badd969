"""
Aggregation: totals, target percentage, category sums and presentation order.
"""
from __future__ import annotations

import datetime as dt
import warnings
from collections.abc import Mapping, Sequence
from functools import cmp_to_key

import pandas as pd

from fundboard.data.schemas import Donation, DonationSummary, Expense, ExpenseSummary


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------

def parse_timestamp(value: str | None) -> pd.Timestamp | None:
    """Parse a sheet date/time cell; None when blank or unparseable.

    Timezone-aware values are converted to naive UTC so every parsed value is
    comparable with every other.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None

    try:
        with warnings.catch_warnings():
            # pandas warns when it falls back to dateutil for mixed formats
            warnings.simplefilter("ignore")
            ts = pd.to_datetime(text, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None

    if ts is None or pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts


def _epoch_ms(ts: pd.Timestamp | None) -> int:
    return 0 if ts is None else ts.value // 1_000_000


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = dt.datetime.now(dt.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

def sort_donations(donations: Sequence[Donation]) -> list[Donation]:
    """Newest first when both timestamps parse, else larger amount first.

    The fallback is decided per comparison, so dated and undated rows can mix.
    """
    parsed = [(parse_timestamp(d.timestamp), d) for d in donations]

    def _compare(a, b) -> int:
        (ta, da), (tb, db) = a, b
        if ta is not None and tb is not None:
            if ta == tb:
                return 0
            return -1 if ta > tb else 1
        return (db.amount > da.amount) - (db.amount < da.amount)

    return [d for _, d in sorted(parsed, key=cmp_to_key(_compare))]


def sort_expenses(expenses: Sequence[Expense]) -> list[Expense]:
    """Newest effective date first; undated rows sink to the bottom."""
    keyed = [(_epoch_ms(parse_timestamp(e.effective_date)), e) for e in expenses]
    keyed.sort(key=lambda pair: pair[0], reverse=True)
    return [e for _, e in keyed]


# ---------------------------------------------------------------------------
# Totals
# ---------------------------------------------------------------------------

def target_percentage(total_amount: int, target_amount: int) -> float:
    """Progress towards the target, capped at 100."""
    if target_amount <= 0:
        return 0.0
    return min(total_amount * 100 / target_amount, 100.0)


def category_totals(expenses: Sequence[Expense]) -> dict[str, int]:
    totals: dict[str, int] = {}
    for e in expenses:
        totals[e.category] = totals.get(e.category, 0) + e.amount
    return totals


def aggregate_donations(donations: Sequence[Donation], target_amount: int) -> DonationSummary:
    ordered = sort_donations(donations)
    total = sum(d.amount for d in ordered)
    return DonationSummary(
        total_amount=total,
        total_donors=len(ordered),
        target_amount=target_amount,
        percentage=target_percentage(total, target_amount),
        donations=tuple(ordered),
        last_updated=utc_now_iso(),
    )


def aggregate_expenses(
    expenses: Sequence[Expense],
    categories: Mapping[str, int] | None = None,
) -> ExpenseSummary:
    """Summarize expenses; ``categories`` may come from the normalization pass."""
    ordered = sort_expenses(expenses)
    if categories is None:
        categories = category_totals(ordered)
    return ExpenseSummary(
        total_amount=sum(e.amount for e in ordered),
        total_expenses=len(ordered),
        expenses=tuple(ordered),
        last_updated=utc_now_iso(),
        categories=dict(categories),
    )
