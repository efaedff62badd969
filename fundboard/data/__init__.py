"""CSV tokenizing, column resolution, normalization, aggregation, and the cached sheet store."""
from .pipeline import DONATIONS, EXPENSES, get_kind, process_csv, process_donations, process_expenses
from .schemas import ColumnMapping, Donation, DonationSummary, Expense, ExpenseSummary, RecordKind
from .store import SheetStore
