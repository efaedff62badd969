"""
Record, mapping and summary schemas for the donation/expense pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

from fundboard.data.sanitize import split_urls


# ---------------------------------------------------------------------------
# Column mapping
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ColumnMapping:
    """Canonical field -> observed header (None when unresolved)."""
    columns: Mapping[str, Optional[str]]

    def header(self, field_name: str) -> Optional[str]:
        return self.columns.get(field_name)

    def cell(self, row: Mapping[str, str], field_name: str) -> str:
        """Raw cell text for a field; unresolved fields read as ""."""
        header = self.columns.get(field_name)
        if header is None:
            return ""
        return row.get(header, "") or ""

    def unresolved(self) -> list[str]:
        return [f for f, h in self.columns.items() if h is None]

    def as_dict(self) -> dict[str, Optional[str]]:
        return dict(self.columns)


# ---------------------------------------------------------------------------
# Normalized records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Donation:
    timestamp: str
    name: str
    amount: int
    receipt: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "name": self.name,
            "amount": self.amount,
            "receipt": self.receipt,
        }


@dataclass(frozen=True)
class Expense:
    timestamp: str
    expense_date: str
    title: str
    category: str
    description: str
    amount: int
    receipt: str = ""
    remarks: str = ""
    invoice: str = ""
    photos: str = ""

    @property
    def effective_date(self) -> str:
        """Expense date when filled in, else the form submission time."""
        return self.expense_date or self.timestamp

    @property
    def has_receipt(self) -> bool:
        return bool(self.receipt and self.receipt.strip())

    @property
    def photo_urls(self) -> list[str]:
        return split_urls(self.photos)

    @property
    def invoice_urls(self) -> list[str]:
        return split_urls(self.invoice)

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "expenseDate": self.expense_date,
            "title": self.title,
            "category": self.category,
            "description": self.description,
            "amount": self.amount,
            "receipt": self.receipt,
            "remarks": self.remarks,
            "invoice": self.invoice,
            "photos": self.photos,
        }


Record = Donation | Expense


@dataclass
class NormalizeOutcome:
    """Records kept by one normalization pass, plus running category totals."""
    records: list = field(default_factory=list)
    categories: dict[str, int] = field(default_factory=dict)
    discarded: int = 0


# ---------------------------------------------------------------------------
# Aggregate results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DonationSummary:
    total_amount: int
    total_donors: int
    target_amount: int
    percentage: float
    donations: tuple[Donation, ...]
    last_updated: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalAmount": self.total_amount,
            "totalDonors": self.total_donors,
            "targetAmount": self.target_amount,
            "percentage": self.percentage,
            "donations": [d.to_dict() for d in self.donations],
            "lastUpdated": self.last_updated,
        }


@dataclass(frozen=True)
class ExpenseSummary:
    total_amount: int
    total_expenses: int
    expenses: tuple[Expense, ...]
    last_updated: str
    categories: Mapping[str, int]

    def filtered(self, category: str) -> list[Expense]:
        return [e for e in self.expenses if e.category == category]

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalAmount": self.total_amount,
            "totalExpenses": self.total_expenses,
            "expenses": [e.to_dict() for e in self.expenses],
            "lastUpdated": self.last_updated,
            "categories": dict(self.categories),
        }


# ---------------------------------------------------------------------------
# Record kind descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RecordKind:
    """Everything that differs between the donation and expense pipelines.

    ``build`` returns None for rows the kind discards. ``summarize`` orders the
    kept records and computes totals; it receives the normalization outcome
    and the target amount (ignored by kinds without a target).
    """
    name: str                       # "donations" / "expenses"
    label: str                      # singular, used in messages
    aliases: Mapping[str, Sequence[str]]
    build: Callable[[Mapping[str, str], int, ColumnMapping], Optional[Record]]
    summarize: Callable[[NormalizeOutcome, int], Any]
    fallbacks: Mapping[str, str] = field(default_factory=dict)

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self.aliases.keys())
