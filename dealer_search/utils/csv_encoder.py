"""CSV text encoding for Google Ads Editor import files.

Fields are quoted only when they contain a comma, a double quote or a
newline, and rows are joined with a bare "\\n". These rules are narrower
than ``csv.writer``'s QUOTE_MINIMAL, which also quotes on "\\r" and on a
lone empty field.
"""

from typing import Any, Iterable, Sequence

Cell = Any
Row = Sequence[Cell]

_QUOTE_TRIGGERS = (",", '"', "\n")


def escape_field(value: Cell) -> str:
    """Render one cell as CSV text.

    ``None`` becomes an empty field, everything else goes through ``str()``.
    """
    text = "" if value is None else str(value)
    if any(ch in text for ch in _QUOTE_TRIGGERS):
        return '"' + text.replace('"', '""') + '"'
    return text


def encode_row(row: Row) -> str:
    return ",".join(escape_field(value) for value in row)


def to_csv(headers: Row, rows: Iterable[Row]) -> str:
    """Serialize a header row plus data rows into one CSV document.

    With no data rows the document is just the header line.
    """
    lines = [encode_row(headers)]
    lines.extend(encode_row(row) for row in rows)
    return "\n".join(lines)
