"""
Column resolution: map a sheet's actual headers onto canonical fields.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence

from fundboard.data.schemas import ColumnMapping
from fundboard.logging_setup import get_logger

logger = get_logger(__name__)


def normalize_header(text: str) -> str:
    """Lowercase, trim and collapse whitespace runs to a single space."""
    return re.sub(r"\s+", " ", str(text).lower().strip())


def _match_field(
    headers: Sequence[str],
    normalized: Sequence[str],
    aliases: Sequence[str],
) -> str | None:
    patterns = [normalize_header(a) for a in aliases]

    # Exact match on any alias beats a substring hit on an earlier one
    for pattern in patterns:
        for header, norm in zip(headers, normalized):
            if norm == pattern:
                return header

    for pattern in patterns:
        for header, norm in zip(headers, normalized):
            if pattern and pattern in norm:
                return header

    return None


def resolve_columns(
    headers: Iterable[str],
    aliases: Mapping[str, Sequence[str]],
    fallbacks: Mapping[str, str] | None = None,
) -> ColumnMapping:
    """Resolve each canonical field to one observed header (or None).

    Fields are resolved independently, in the order ``aliases`` declares them.
    ``fallbacks`` maps a field to a bare keyword accepted anywhere in a header
    when none of its aliases matched.
    """
    headers = list(headers)
    normalized = [normalize_header(h) for h in headers]
    fallbacks = fallbacks or {}

    columns: dict[str, str | None] = {}
    for field, field_aliases in aliases.items():
        found = _match_field(headers, normalized, field_aliases)

        if found is None and field in fallbacks:
            keyword = fallbacks[field].lower()
            found = next((h for h, n in zip(headers, normalized) if keyword in n), None)

        columns[field] = found

    mapping = ColumnMapping(columns)
    unresolved = mapping.unresolved()
    if unresolved:
        logger.info("Unresolved columns %s; available headers: %s", unresolved, headers)
    logger.debug("Resolved columns: %s", mapping.as_dict())
    return mapping
