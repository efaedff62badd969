from openpyxl import load_workbook

from fundboard.data.pipeline import process_donations, process_expenses
from fundboard.excel.formatters import CURRENCY_FORMAT
from fundboard.excel.reports import donations_workbook, expenses_workbook


def test_donations_workbook(tmp_path, donations_csv: str) -> None:
    summary = process_donations(donations_csv, target_amount=10000)
    path = donations_workbook(summary, tmp_path / "out" / "Donations.xlsx")
    assert path.exists()

    ws = load_workbook(path)["Donations"]
    assert ws["A1"].value == "DONATIONS LEDGER"
    assert ws["A4"].value == 4000
    assert ws["A4"].number_format == CURRENCY_FORMAT

    # header row, then one row per donation, then the total row
    assert [ws.cell(row=9, column=c).value for c in range(1, 5)] == ["Date", "Donor", "Amount (LKR)", "Receipt"]
    assert ws.cell(row=10, column=3).value == 2000
    assert ws.cell(row=13, column=1).value == "TOTAL"
    assert ws.cell(row=13, column=3).value == 4000


def test_expenses_workbook(tmp_path, expenses_csv: str) -> None:
    summary = process_expenses(expenses_csv)
    path = expenses_workbook(summary, tmp_path / "Expenses.xlsx")

    wb = load_workbook(path)
    assert wb.sheetnames == ["Expenses", "By Category"]

    ws = wb["Expenses"]
    titles = [ws.cell(row=r, column=2).value for r in range(10, 14)]
    assert titles == ["Volunteer note", "Snacks", "Bus hire", "Rice and dhal"]
    assert ws.cell(row=10, column=6).value == "no_receipt"

    by_cat = wb["By Category"]
    assert by_cat["A2"].value == "Food"
    assert by_cat["B2"].value == 15000
