"""
Row normalization: resolved columns + sanitizers -> typed records.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping

from fundboard.config import ANONYMOUS_DONOR, UNCATEGORIZED, UNTITLED_EXPENSE
from fundboard.data.sanitize import sanitize_amount
from fundboard.data.schemas import ColumnMapping, Donation, Expense, NormalizeOutcome, RecordKind
from fundboard.logging_setup import get_logger

logger = get_logger(__name__)


def _row_label(index: int) -> str:
    """Sheet row number for data row ``index`` (header is row 1)."""
    return f"Row {index + 2}"


def _text(row: Mapping[str, str], mapping: ColumnMapping, field: str, default: str = "") -> str:
    value = mapping.cell(row, field).strip()
    return value or default


def _has_content(row: Mapping[str, str]) -> bool:
    return any((v or "").strip() for v in row.values())


# ---------------------------------------------------------------------------
# Per-kind builders
# ---------------------------------------------------------------------------

def build_donation(row: Mapping[str, str], index: int, mapping: ColumnMapping) -> Donation | None:
    """A donation needs a positive amount; anything else is a stray line."""
    amount = sanitize_amount(mapping.cell(row, "amount"))
    if amount <= 0:
        return None

    return Donation(
        timestamp=_text(row, mapping, "timestamp", _row_label(index)),
        name=_text(row, mapping, "name", ANONYMOUS_DONOR),
        amount=amount,
        receipt=_text(row, mapping, "receipt"),
    )


def build_expense(row: Mapping[str, str], index: int, mapping: ColumnMapping) -> Expense | None:
    """Keep zero-cost expenses as long as the row says something."""
    amount = sanitize_amount(mapping.cell(row, "amount"))
    if amount <= 0 and not _has_content(row):
        return None

    return Expense(
        timestamp=_text(row, mapping, "timestamp", _row_label(index)),
        expense_date=_text(row, mapping, "expenseDate"),
        title=_text(row, mapping, "title", UNTITLED_EXPENSE),
        category=_text(row, mapping, "category", UNCATEGORIZED),
        description=_text(row, mapping, "description"),
        amount=amount,
        receipt=_text(row, mapping, "receipt"),
        remarks=_text(row, mapping, "remarks"),
        invoice=_text(row, mapping, "invoice"),
        photos=_text(row, mapping, "photos"),
    )


# ---------------------------------------------------------------------------
# Generic pass
# ---------------------------------------------------------------------------

def normalize_row(row: Mapping[str, str], index: int, mapping: ColumnMapping, kind: RecordKind):
    """Build one record, or return None to discard the row."""
    return kind.build(row, index, mapping)


def normalize_rows(
    rows: Iterable[Mapping[str, str]],
    mapping: ColumnMapping,
    kind: RecordKind,
) -> NormalizeOutcome:
    """Normalize every row, tallying category totals along the way."""
    outcome = NormalizeOutcome()

    for index, row in enumerate(rows):
        record = normalize_row(row, index, mapping, kind)
        if record is None:
            outcome.discarded += 1
            continue

        outcome.records.append(record)
        category = getattr(record, "category", None)
        if category is not None:
            outcome.categories[category] = outcome.categories.get(category, 0) + record.amount

    if outcome.discarded:
        logger.debug("Discarded %d %s row(s)", outcome.discarded, kind.label)
    return outcome
