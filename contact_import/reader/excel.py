from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Any

import pandas as pd
from xlrd import XLRDError
from xlrd.compdoc import CompDocError

from ..errors import EmptyInputError, UnsupportedFileError
from ..models.raw_row import RawRow
from .tokenizer import clean_token

"""Spreadsheet reader for .xlsx / .xls contact uploads.

The first sheet is read without a header, the first non-empty row becomes the
header and every following non-empty row becomes a RawRow. Cells are turned
into trimmed strings so that the format processors see the same shape as for
delimited text; null cells and cells under a blank header are left out of the row.
"""

__all__ = [
    "read_excel_table",
    "cell_to_text",
]


def cell_to_text(value: Any) -> str | None:
    """Render a spreadsheet cell as text; None for empty cells."""
    if value is None or pd.isna(value):
        return None
    if isinstance(value, float) and value.is_integer():
        # 電話番号などが 5550100.0 のように読まれるのを防ぐ
        value = int(value)
    if hasattr(value, "isoformat"):
        value = value.isoformat()
    text = clean_token(str(value))
    return text or None


def read_excel_table(path: Path, sheet: str | int = 0) -> tuple[list[str], list[RawRow]]:
    """Read one sheet of a workbook into headers and rows.

    Parameters
    ----------
    path: workbook path
    sheet: sheet name or index (default: first sheet)

    Raises
    ------
    UnsupportedFileError: the workbook cannot be opened
    EmptyInputError: no header row or no data rows
    """
    try:
        # ヘッダなしで生読み (先頭の非空行をヘッダとして適用)
        df = pd.read_excel(path, sheet_name=sheet, header=None, dtype=object)
    except ImportError as e:
        # .xls は xlrd エンジンが必要
        raise UnsupportedFileError(f"no spreadsheet engine for {path.name}: {e}") from e
    except (OSError, ValueError, KeyError, zipfile.BadZipFile, XLRDError, CompDocError) as e:
        raise UnsupportedFileError(f"cannot read spreadsheet {path.name}: {e}") from e

    headers: list[str] | None = None
    rows: list[RawRow] = []
    for index, raw in df.iterrows():
        cells = [cell_to_text(v) for v in raw.tolist()]
        if all(c is None for c in cells):
            continue
        if headers is None:
            headers = [c or "" for c in cells]
            continue
        values = {
            header: cell
            for header, cell in zip(headers, cells)
            if cell is not None and header
        }
        # pandas index は 0 始まり、行番号は 1 始まりで記録
        rows.append(RawRow(line_number=int(index) + 1, values=values))

    if headers is None or not rows:
        raise EmptyInputError()
    return headers, rows
