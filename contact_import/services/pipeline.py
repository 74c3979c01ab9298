from __future__ import annotations

import logging
from collections.abc import Sequence

from ..models.contact import ParsedContact
from ..models.import_format import FormatOverride
from ..models.import_result import ImportResult
from ..models.raw_row import RawRow
from ..reader.tokenizer import tokenize
from .duplicates import count_duplicates, detect_duplicates
from .format_detector import resolve_format
from .processors import iter_drafts

"""Import pipeline: raw upload text in, annotated contact list out.

    tokenize -> resolve format (override or detection) -> process rows
    -> detect duplicates -> result

The pipeline holds no state between runs, so the same text and override
always give the same output. Re-running with another override is a fresh,
independent computation.
"""

__all__ = [
    "ImportPipeline",
    "run",
]

logger = logging.getLogger(__name__)


class ImportPipeline:
    """Synchronous, side-effect free contact import."""

    def parse(self, text: str, format_override: FormatOverride = "auto") -> ImportResult:
        """Run the pipeline and return contacts plus counters.

        Raises:
            EmptyInputError: no header line or no data lines
            UnknownFormatError: format_override is not a known value
        """
        headers, rows = tokenize(text)
        return self.run_rows(headers, rows, format_override)

    def run(self, text: str, format_override: FormatOverride = "auto") -> list[ParsedContact]:
        """Run the pipeline and return only the annotated contact list."""
        return self.parse(text, format_override).contacts

    def run_rows(
        self,
        headers: Sequence[str],
        rows: Sequence[RawRow],
        format_override: FormatOverride = "auto",
    ) -> ImportResult:
        """Run everything after tokenization (used by the spreadsheet reader too)."""
        fmt = resolve_format(headers, format_override)
        drafts: list[ParsedContact] = []
        line_numbers: list[int] = []
        for row, draft in iter_drafts(fmt, rows):
            drafts.append(draft)
            line_numbers.append(row.line_number)

        contacts = detect_duplicates(drafts)
        duplicates = count_duplicates(contacts)
        dropped = len(rows) - len(drafts)
        logger.info(
            f"format={fmt.value} rows={len(rows)} contacts={len(contacts)} "
            f"duplicates={duplicates} dropped={dropped}"
        )
        return ImportResult(
            contacts=contacts,
            format=fmt,
            duplicate_count=duplicates,
            dropped_rows=dropped,
            total_rows=len(rows),
            line_numbers=line_numbers,
        )


def run(text: str, format_override: FormatOverride = "auto") -> list[ParsedContact]:
    """Convenience wrapper around ImportPipeline().run()."""
    return ImportPipeline().run(text, format_override)
