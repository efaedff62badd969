"""
Ledger workbooks for the donation and expense sheets.
"""
from __future__ import annotations

from pathlib import Path

from fundboard.analytics.dashboard import category_breakdown, verification_status
from fundboard.config import CURRENCY
from fundboard.data.schemas import DonationSummary, ExpenseSummary
from fundboard.excel.writer import ExcelWriter

DONATION_COLUMNS = [
    ("timestamp", "text", "Date"),
    ("name", "text", "Donor"),
    ("amount", "currency", f"Amount ({CURRENCY})"),
    ("receipt", "text", "Receipt"),
]

EXPENSE_COLUMNS = [
    ("date", "text", "Date"),
    ("title", "text", "Expense"),
    ("category", "text", "Category"),
    ("description", "text", "Description"),
    ("amount", "currency", f"Amount ({CURRENCY})"),
    ("status", "text", "Status"),
    ("receipt", "text", "Receipt"),
    ("remarks", "text", "Remarks"),
]

CATEGORY_COLUMNS = [
    ("category", "text", "Category"),
    ("amount", "currency", f"Amount ({CURRENCY})"),
    ("share", "percent", "Share"),
]


def donations_workbook(summary: DonationSummary, output_path: str | Path) -> Path:
    ew = ExcelWriter()
    ws = ew.add_sheet("Donations")
    ew.write_title(ws, "DONATIONS LEDGER", f"Last updated {summary.last_updated}", merge_cols=len(DONATION_COLUMNS))

    row = ew.write_kpi_row(ws, 4, [
        (summary.total_amount, "Total Raised", "currency"),
        (summary.total_donors, "Donors", "number"),
        (summary.percentage, "Of Target", "percent"),
    ])
    row = ew.write_section(ws, row, "DONATIONS")
    ew.write_table(
        ws, row, DONATION_COLUMNS,
        [d.to_dict() for d in summary.donations],
        show_total=True, freeze=False,
    )
    return ew.save(output_path)


def expenses_workbook(summary: ExpenseSummary, output_path: str | Path) -> Path:
    ew = ExcelWriter()
    ws = ew.add_sheet("Expenses")
    ew.write_title(ws, "EXPENSES LEDGER", f"Last updated {summary.last_updated}", merge_cols=len(EXPENSE_COLUMNS))

    row = ew.write_kpi_row(ws, 4, [
        (summary.total_amount, "Total Spent", "currency"),
        (summary.total_expenses, "Expenses", "number"),
        (len(summary.categories), "Categories", "number"),
    ])
    row = ew.write_section(ws, row, "EXPENSES")
    rows = [
        {**e.to_dict(), "date": e.effective_date, "status": verification_status(e)}
        for e in summary.expenses
    ]
    ew.write_table(
        ws, row, EXPENSE_COLUMNS, rows,
        highlight_fn=lambda i, r: "warning" if r["status"] == "no_receipt" else None,
        show_total=True, freeze=False,
    )

    ws2 = ew.add_sheet("By Category")
    ew.write_table(ws2, 1, CATEGORY_COLUMNS, category_breakdown(summary.categories), show_total=True)
    return ew.save(output_path)
