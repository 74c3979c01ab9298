"""Readers turning uploaded files into headers + RawRow sequences."""

from __future__ import annotations

from pathlib import Path

from ..errors import UnsupportedFileError
from ..models.raw_row import RawRow
from .excel import read_excel_table
from .tokenizer import tokenize

__all__ = [
    "tokenize",
    "read_excel_table",
    "read_source",
    "TEXT_EXTENSIONS",
    "SPREADSHEET_EXTENSIONS",
]

TEXT_EXTENSIONS = (".csv", ".txt")
SPREADSHEET_EXTENSIONS = (".xlsx", ".xls")


def read_source(path: Path, encoding: str = "utf-8") -> tuple[list[str], list[RawRow]]:
    """Read a contact file from disk, dispatching on its extension.

    Raises:
        UnsupportedFileError: unknown extension or undecodable text
        EmptyInputError: the file has no header or no data rows
    """
    suffix = path.suffix.lower()
    if suffix in SPREADSHEET_EXTENSIONS:
        return read_excel_table(path)
    if suffix not in TEXT_EXTENSIONS:
        raise UnsupportedFileError(f"unsupported file type: {path.name}")
    try:
        # utf-8-sig: Excel 由来 CSV の BOM を除去
        codec = "utf-8-sig" if encoding.lower().replace("_", "-") == "utf-8" else encoding
        text = path.read_text(encoding=codec)
    except (UnicodeDecodeError, LookupError) as e:
        raise UnsupportedFileError(f"cannot decode {path.name} as {encoding}: {e}") from e
    return tokenize(text)
