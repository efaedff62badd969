"""
Fundboard — Configuration: sheet sources, targets, column aliases, paths.
"""
import datetime as dt
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths: override with FUNDBOARD_DATA_DIR env var for cloud deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("FUNDBOARD_DATA_DIR", str(Path.home() / "Fundboard")))
BASE_FOLDER = _data_dir
EXPORTS_FOLDER = _data_dir / "exports"

# ---------------------------------------------------------------------------
# Published Google Sheets (File > Share > Publish to web, CSV)
# The gid parameter is left off: Sheets answers 400 for some tabs with it.
# ---------------------------------------------------------------------------
SHEET_CSV_TEMPLATE = "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv"

DONATIONS_SHEET_ID = os.environ.get("DONATIONS_SHEET_ID", "15wWPAOJL5COh5flsyubX4AM_beoFoMc4W7D6ri7t-Ak")
EXPENSES_SHEET_ID = os.environ.get("EXPENSES_SHEET_ID", "1VU3ajNLA8EpTUMwp1Z4qTpuXlX5kS1Ec64AGgr3mZCg")

DONATIONS_CSV_URL = os.environ.get(
    "DONATIONS_CSV_URL", SHEET_CSV_TEMPLATE.format(sheet_id=DONATIONS_SHEET_ID)
)
EXPENSES_CSV_URL = os.environ.get(
    "EXPENSES_CSV_URL", SHEET_CSV_TEMPLATE.format(sheet_id=EXPENSES_SHEET_ID)
)

# ---------------------------------------------------------------------------
# Fundraising target (LKR) and program date
# ---------------------------------------------------------------------------
TARGET_AMOUNT = int(os.environ.get("TARGET_AMOUNT", "600000"))
PROGRAM_DATE = dt.date.fromisoformat(os.environ.get("PROGRAM_DATE", "2025-12-27"))
CURRENCY = "LKR"

# ---------------------------------------------------------------------------
# Fetching & caching
# ---------------------------------------------------------------------------
SHEET_CACHE_SECONDS = float(os.environ.get("SHEET_CACHE_SECONDS", "60"))
FETCH_TIMEOUT_SECONDS = float(os.environ.get("FETCH_TIMEOUT_SECONDS", "15"))
FETCH_MAX_RETRIES = int(os.environ.get("FETCH_MAX_RETRIES", "2"))
FETCH_BACKOFF_SECONDS = float(os.environ.get("FETCH_BACKOFF_SECONDS", "0.5"))
FETCH_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

# ---------------------------------------------------------------------------
# Key-value store (Supabase REST) for gallery photos and analytics events
# ---------------------------------------------------------------------------
SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_ANON_KEY = os.environ.get("SUPABASE_ANON_KEY", "")

# ---------------------------------------------------------------------------
# Column aliases. Each canonical field carries a ranked list of header
# variants; the first hit wins. Matching is case/whitespace-insensitive, exact before substring.
# ---------------------------------------------------------------------------
DONATION_COLUMN_ALIASES = {
    "timestamp": ["timestamp", "date", "time", "datetime", "submitted", "submission time"],
    "name": ["name", "donor", "donor name", "donor_name", "full name"],
    "amount": ["amount", "donation", "donation amount", "value", "lkr"],
    "receipt": ["receipt", "receipt link", "receipt_url", "link", "url", "proof"],
}

EXPENSE_COLUMN_ALIASES = {
    "timestamp": ["timestamp", "date", "time", "datetime", "submitted", "submission time"],
    "expenseDate": ["expense date", "expense_date", "date"],
    "title": ["expense title", "title", "purpose", "expense title / purpose", "expense_title", "expense purpose"],
    "category": ["category", "categories", "expense categories", "expense category", "expense_categories"],
    "description": ["description", "desc", "details"],
    "amount": ["amount", "amount (lkr)", "amount(lkr)", "value", "lkr"],
    "receipt": ["receipt", "receipt link", "receipt_url", "link", "url", "proof"],
    "remarks": ["remarks", "remark", "notes", "note"],
    "invoice": ["invoice", "invoice link", "invoice_url", "invoice url"],
    "photos": ["photos", "photos (if available)", "photos if available", "images", "images (if available)"],
}

# Looser last-resort keywords for the optional attachment columns
EXPENSE_COLUMN_FALLBACKS = {
    "invoice": "invoice",
    "photos": "photo",
}

# ---------------------------------------------------------------------------
# Fallback values for blank / unresolved cells
# ---------------------------------------------------------------------------
ANONYMOUS_DONOR = "Anonymous"
UNTITLED_EXPENSE = "No title"
UNCATEGORIZED = "Uncategorized"

# ---------------------------------------------------------------------------
# Dashboard defaults
# ---------------------------------------------------------------------------
DAILY_SERIES_LIMIT = 20
TOP_PURPOSES_LIMIT = 5
