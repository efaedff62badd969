"""
Ledger export endpoints — Excel downloads.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from fundboard.api.dependencies import get_store
from fundboard.config import EXPORTS_FOLDER
from fundboard.data.store import SheetStore
from fundboard.excel.reports import donations_workbook, expenses_workbook

router = APIRouter(prefix="/api/export", tags=["export"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _download(path) -> FileResponse:
    return FileResponse(path=str(path), filename=path.name, media_type=XLSX_MEDIA_TYPE)


@router.get("/donations.xlsx")
def export_donations(store: SheetStore = Depends(get_store)):
    out_path = donations_workbook(store.donations(), EXPORTS_FOLDER / "Donations.xlsx")
    return _download(out_path)


@router.get("/expenses.xlsx")
def export_expenses(store: SheetStore = Depends(get_store)):
    out_path = expenses_workbook(store.expenses(), EXPORTS_FOLDER / "Expenses.xlsx")
    return _download(out_path)
