"""
app/parsers/csv_tokenizer.py

Tokenizer for hand-edited CSV exports.

Rules:
- A field wrapped in double quotes may contain commas and newlines.
- Inside quotes, two consecutive quotes decode to one literal quote.
- Carriage returns outside quotes are ignored (CRLF files tokenize like LF files).
- A row ends at a newline seen outside quotes.
- The last row is kept even without a terminating newline; blank trailing
  lines are dropped.

Malformed quoting never raises. An unterminated quote simply runs to the end
of the text.
"""

from __future__ import annotations

_QUOTE = '"'
_DELIMITER = ","
_NEWLINE = "\n"
_CARRIAGE_RETURN = "\r"
_BOM = "\ufeff"


def tokenize(text: str) -> list[list[str]]:
    """
    Split CSV text into logical rows of raw (untrimmed) string cells.
    """

    if text.startswith(_BOM):
        text = text[1:]

    rows: list[list[str]] = []
    row: list[str] = []
    cell: list[str] = []
    in_quotes = False
    index = 0
    length = len(text)

    while index < length:
        char = text[index]

        if in_quotes:
            if char == _QUOTE:
                if index + 1 < length and text[index + 1] == _QUOTE:
                    cell.append(_QUOTE)
                    index += 2
                    continue
                in_quotes = False
            else:
                cell.append(char)
        elif char == _QUOTE:
            in_quotes = True
        elif char == _DELIMITER:
            row.append("".join(cell))
            cell = []
        elif char == _NEWLINE:
            row.append("".join(cell))
            rows.append(row)
            row = []
            cell = []
        elif char != _CARRIAGE_RETURN:
            cell.append(char)

        index += 1

    if cell or row or in_quotes:
        row.append("".join(cell))
        rows.append(row)

    while rows and _is_blank_row(rows[-1]):
        rows.pop()

    return rows


def _is_blank_row(row: list[str]) -> bool:
    return len(row) == 1 and not row[0].strip()
