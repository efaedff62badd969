"""
Fetch-cycle pipeline: CSV text -> rows -> resolved columns -> records -> summary.

One generic pass serves both sheets; DONATIONS and EXPENSES describe what
differs between them.
"""
from __future__ import annotations

from fundboard.config import (
    DONATION_COLUMN_ALIASES,
    EXPENSE_COLUMN_ALIASES,
    EXPENSE_COLUMN_FALLBACKS,
    TARGET_AMOUNT,
)
from fundboard.data.aggregate import aggregate_donations, aggregate_expenses
from fundboard.data.columns import resolve_columns
from fundboard.data.normalize import build_donation, build_expense, normalize_rows
from fundboard.data.schemas import DonationSummary, ExpenseSummary, NormalizeOutcome, RecordKind
from fundboard.data.tokenizer import tokenize
from fundboard.errors import EmptyInput, NoValidRecords
from fundboard.logging_setup import get_logger

logger = get_logger(__name__)


def _summarize_donations(outcome: NormalizeOutcome, target_amount: int) -> DonationSummary:
    return aggregate_donations(outcome.records, target_amount)


def _summarize_expenses(outcome: NormalizeOutcome, target_amount: int) -> ExpenseSummary:
    return aggregate_expenses(outcome.records, outcome.categories)


DONATIONS = RecordKind(
    name="donations",
    label="donation",
    aliases=DONATION_COLUMN_ALIASES,
    build=build_donation,
    summarize=_summarize_donations,
)

EXPENSES = RecordKind(
    name="expenses",
    label="expense",
    aliases=EXPENSE_COLUMN_ALIASES,
    fallbacks=EXPENSE_COLUMN_FALLBACKS,
    build=build_expense,
    summarize=_summarize_expenses,
)

KINDS = {kind.name: kind for kind in (DONATIONS, EXPENSES)}


def get_kind(name: str) -> RecordKind:
    try:
        return KINDS[name]
    except KeyError:
        raise ValueError(f"Unknown record kind: {name!r}. Valid: {list(KINDS)}") from None


def process_csv(csv_text: str | None, kind: RecordKind, target_amount: int | None = None):
    """Run one dataset snapshot through the whole pipeline.

    Raises EmptyInput when the CSV has no data rows and NoValidRecords when
    every row was discarded. Never performs I/O.
    """
    rows = tokenize(csv_text)
    if not rows:
        raise EmptyInput(kind.label)

    # Columns are resolved once per snapshot, from the first row's headers
    mapping = resolve_columns(rows[0].keys(), kind.aliases, kind.fallbacks)
    outcome = normalize_rows(rows, mapping, kind)
    if not outcome.records:
        raise NoValidRecords(kind.label)

    logger.info(
        "Processed %s: %d row(s), %d kept, %d discarded",
        kind.name, len(rows), len(outcome.records), outcome.discarded,
    )
    target = TARGET_AMOUNT if target_amount is None else target_amount
    return kind.summarize(outcome, target)


def process_donations(csv_text: str | None, target_amount: int | None = None) -> DonationSummary:
    return process_csv(csv_text, DONATIONS, target_amount)


def process_expenses(csv_text: str | None) -> ExpenseSummary:
    return process_csv(csv_text, EXPENSES)
