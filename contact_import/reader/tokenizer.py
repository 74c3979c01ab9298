from __future__ import annotations

import logging

from ..errors import EmptyInputError
from ..models.raw_row import RawRow

"""Row tokenizer for delimited contact uploads.

Splits on newlines and commas only. Quoted fields containing commas or
newlines are NOT supported: a token keeps whatever the comma split gives it,
minus one surrounding pair of double quotes.
"""

__all__ = [
    "tokenize",
    "split_line",
    "clean_token",
]

logger = logging.getLogger(__name__)

DELIMITER = ","
QUOTE = '"'


def clean_token(token: str) -> str:
    """Trim whitespace, then strip one leading and one trailing quote if both exist."""
    value = token.strip()
    if len(value) >= 2 and value.startswith(QUOTE) and value.endswith(QUOTE):
        value = value[1:-1]
    return value


def split_line(line: str) -> list[str]:
    return [clean_token(t) for t in line.split(DELIMITER)]


def tokenize(text: str) -> tuple[list[str], list[RawRow]]:
    """Parse raw upload text into headers and rows.

    Args:
        text: Complete text content of the uploaded file

    Returns:
        (headers, rows) where rows keep input order

    Raises:
        EmptyInputError: no header line, or header line without data lines
    """
    headers: list[str] | None = None
    rows: list[RawRow] = []
    short_rows = 0

    for line_number, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            continue  # 空行は行として扱わない
        tokens = split_line(line)
        if headers is None:
            headers = tokens
            continue
        if len(tokens) < len(headers):
            short_rows += 1
        # zip は短い方に合わせる: 不足セルはキー自体が存在しない
        values = dict(zip(headers, tokens))
        rows.append(RawRow(line_number=line_number, values=values))

    if headers is None or not rows:
        raise EmptyInputError()

    if short_rows:
        logger.debug(f"tokenizer: {short_rows} row(s) shorter than header ({len(headers)} columns)")
    return headers, rows
