"""
CSV tokenizer for published-sheet exports.

Handles commas inside quoted cells (addresses, descriptions). Quoted cells that
span several physical lines are not supported: Sheets form exports keep each
response on one line.
"""
from __future__ import annotations

RawRow = dict[str, str]


def _strip_cell(value: str) -> str:
    """Trim whitespace, then one wrapping quote on each side."""
    value = value.strip()
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def split_line(line: str) -> list[str]:
    """Split one data line on commas that sit outside double quotes."""
    values: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append(_strip_cell("".join(current)))
            current = []
        else:
            current.append(char)
    values.append(_strip_cell("".join(current)))
    return values


def _split_header(line: str) -> list[str]:
    return [h.strip().replace('"', "") for h in line.split(",")]


def tokenize(csv_text: str | None) -> list[RawRow]:
    """Turn raw CSV text into header-keyed rows, in input order.

    The first line is the header. Returns an empty list when there is no data
    line. Short lines are padded with "", surplus cells are ignored, and rows
    whose cells are all blank are dropped.
    """
    if not csv_text:
        return []

    lines = [line.rstrip("\r") for line in csv_text.strip().split("\n")]
    if len(lines) < 2:
        return []

    headers = _split_header(lines[0])
    rows: list[RawRow] = []

    for line in lines[1:]:
        values = split_line(line)
        row = {
            header: (values[i] if i < len(values) else "")
            for i, header in enumerate(headers)
        }
        if any(v.strip() for v in row.values()):
            rows.append(row)

    return rows
