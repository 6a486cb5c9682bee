"""Quote-aware row splitting shared by the backup and broker formats."""

from __future__ import annotations

QUOTE = '"'


def strip_quotes(token: str) -> str:
    """Remove one layer of surrounding double quotes, if present."""
    if len(token) >= 2 and token.startswith(QUOTE) and token.endswith(QUOTE):
        return token[1:-1]
    return token


def split_row(line: str, delimiter: str = ",") -> list[str]:
    """Split one line into fields.

    A quote flips the in-quotes state and the delimiter only separates fields
    outside quotes. Quote characters are kept while scanning and one
    surrounding layer is stripped from each finished field, so `"22,000"`
    yields `22,000`.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
            current.append(char)
        elif char == delimiter and not in_quotes:
            fields.append(strip_quotes("".join(current)))
            current = []
        else:
            current.append(char)
    fields.append(strip_quotes("".join(current)))
    return fields
