from __future__ import annotations

from dataclasses import dataclass, field

from .contact import ParsedContact
from .import_format import ImportFormat

"""ImportResult model: one pipeline run over one uploaded table."""

__all__ = [
    "ImportResult",
]


@dataclass(frozen=True)
class ImportResult:
    """Annotated contacts plus the counters shown to the caller."""
    contacts: list[ParsedContact]
    format: ImportFormat  # resolved format (detected or overridden)
    duplicate_count: int
    dropped_rows: int  # rows without name and email
    total_rows: int  # data rows produced by the reader
    line_numbers: list[int] = field(default_factory=list)  # source line per contact (same order)

    def unique_contacts(self) -> list[ParsedContact]:
        return [c for c in self.contacts if not c.duplicate]

    def payloads(self) -> list[dict[str, object]]:
        """Persistence payloads for every non-duplicate contact."""
        return [c.to_payload() for c in self.unique_contacts()]

    def line_of(self, index: int) -> int:
        """Source line of contacts[index]; -1 when unknown."""
        if 0 <= index < len(self.line_numbers):
            return self.line_numbers[index]
        return -1
