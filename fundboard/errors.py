"""
Failure signals raised across the pipeline, sheet fetcher and key-value store.
"""
from __future__ import annotations


class FundboardError(RuntimeError):
    """Base class for all errors surfaced by this package."""


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

class PipelineError(FundboardError):
    """Raised when a dataset cannot produce an aggregate result."""


class NoDataError(PipelineError):
    """The sheet produced nothing usable. Callers answer "not found"."""

    def __init__(self, kind: str, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or f"No {kind} data found in the sheet")


class EmptyInput(NoDataError):
    """The CSV had a header line but no data lines (or nothing at all)."""


class NoValidRecords(NoDataError):
    """Rows were present but none survived normalization."""


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

class SheetFetchError(FundboardError):
    """Raised when the published sheet cannot be retrieved."""


class StoreError(FundboardError):
    """Raised when the key-value store is unconfigured or rejects a request."""
