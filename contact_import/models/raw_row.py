from __future__ import annotations

from dataclasses import dataclass

"""RawRow model for the contact import pipeline.

A RawRow is one data line of the uploaded table, keyed by the header text as
it appeared in the source (trimmed, quote-stripped). Rows are created once by
the tokenizer (or the spreadsheet reader) and consumed by a format processor.
"""

__all__ = [
    "RawRow",
]


def _fold(header: str) -> str:
    return header.strip().lower()


@dataclass(frozen=True)
class RawRow:
    """Single data line after tokenization.

    Short lines simply lack the trailing headers in ``values``; a header is
    never present with a placeholder value it did not have in the source.
    """
    line_number: int  # 1-based physical line (or sheet row) in the source
    values: dict[str, str]  # header -> cell, insertion order = column order

    @property
    def headers(self) -> list[str]:
        return list(self.values)

    def get(self, header: str) -> str | None:
        """Case-insensitive cell lookup; None when the header is absent."""
        if header in self.values:
            return self.values[header]
        wanted = _fold(header)
        for key, value in self.values.items():
            if _fold(key) == wanted:
                return value
        return None

    def first(self, *headers: str) -> str | None:
        """Return the first non-empty cell among ``headers`` (in that order)."""
        for header in headers:
            value = self.get(header)
            if value is not None and value.strip():
                return value.strip()
        return None

    def has_any(self, *headers: str) -> bool:
        return any(self.get(h) is not None for h in headers)
