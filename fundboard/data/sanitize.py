"""
Cell sanitizers: currency amounts and comma-separated link lists.
"""
from __future__ import annotations

import math
import re

# "RS." must be tried before "RS", otherwise "Rs. 2000" leaves ".2000" behind.
_CURRENCY_MARKERS = re.compile(r"LKR|RS\.|RS", re.IGNORECASE)
_NUMBER_RUN = re.compile(r"[0-9.]+")


def sanitize_amount(value: str | None) -> int:
    """Parse a free-text LKR cell into a non-negative whole amount.

    "LKR 1,500.00" -> 1500, "Rs. 2000" -> 2000, "=500" -> 500.
    Anything unparseable becomes 0; a leading minus sign is ignored.
    """
    if not value:
        return 0

    cleaned = _CURRENCY_MARKERS.sub("", str(value).upper())
    cleaned = cleaned.replace("=", "")
    cleaned = re.sub(r"\s+", "", cleaned)
    cleaned = cleaned.replace(",", "").strip()

    match = _NUMBER_RUN.search(cleaned)
    if not match:
        return 0

    run = match.group(0)
    # parseFloat semantics: read the longest valid prefix ("1.2.3" -> 1.2)
    prefix = re.match(r"\d*\.?\d*", run).group(0)
    try:
        amount = float(prefix)
    except ValueError:
        return 0
    if math.isnan(amount) or math.isinf(amount):
        return 0
    return int(math.floor(amount + 0.5))


def split_urls(value: str | None) -> list[str]:
    """Split a comma-separated link cell into trimmed, non-empty URLs."""
    if not value:
        return []
    return [u.strip() for u in str(value).split(",") if u.strip()]
