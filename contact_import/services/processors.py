from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType

from ..models.contact import ParsedContact, ordered_tags
from ..models.import_format import ImportFormat
from ..models.raw_row import RawRow
from .header_normalizer import FIELD_SYNONYMS, normalize_header

"""Format processors: RawRow -> ParsedContact, one row in, one draft out.

Each exporter has its own column preferences; the generic processor resolves
columns through the header synonym table instead. Processors never look at
other rows, so a draft depends only on its own line.
"""

__all__ = [
    "PROCESSORS",
    "GENERIC_SOURCE",
    "process_generic",
    "process_eventbrite",
    "process_luma",
    "process_partiful",
    "iter_drafts",
    "process_rows",
    "split_tags",
]

logger = logging.getLogger(__name__)

GENERIC_SOURCE = "CSV Import"

_TAG_SEPARATORS = re.compile(r"[,;]")

Processor = Callable[[RawRow], ParsedContact]


def split_tags(value: str) -> list[str]:
    return [piece.strip() for piece in _TAG_SEPARATORS.split(value) if piece.strip()]


def _joined_name(row: RawRow) -> str:
    first = row.first("First Name") or ""
    last = row.first("Last Name") or ""
    return f"{first} {last}".strip()


def process_generic(row: RawRow, synonyms: Mapping[str, str] = FIELD_SYNONYMS) -> ParsedContact:
    fields: dict[str, str] = {}
    tags: list[str] = []
    notes: list[str] = []

    for header, raw_value in row.values.items():
        canonical = normalize_header(header, synonyms)
        if canonical is None:
            continue
        value = raw_value.strip()
        if not value:
            continue  # 空セルで既存値を上書きしない
        if canonical == "tags":
            tags = split_tags(value)
        elif canonical == "notes":
            notes.append(value)
        else:
            fields[canonical] = value

    name = fields.pop("name", "")
    if not name and row.has_any("First Name", "Last Name"):
        name = _joined_name(row)

    tags.append(GENERIC_SOURCE)

    return ParsedContact(
        name=name,
        email=fields.get("email"),
        phone=fields.get("phone"),
        organization=fields.get("organization"),
        role=fields.get("role"),
        location=fields.get("location"),
        notes="\n".join(notes) or None,
        tags=ordered_tags(tags),
        source=GENERIC_SOURCE,
    )


def process_eventbrite(row: RawRow) -> ParsedContact:
    return ParsedContact(
        name=_joined_name(row),
        email=row.first("Email", "Email Address"),
        phone=row.first("Phone", "Cell Phone"),
        organization=row.first("Company", "Organization"),
        role=row.first("Job Title", "Position"),
        location=row.first("Shipping Address", "Billing Address", "Address"),
        tags=("Eventbrite",),
        source="Eventbrite",
    )


def process_luma(row: RawRow) -> ParsedContact:
    return ParsedContact(
        name=row.first("Name", "Guest Name", "Attendee Name") or _joined_name(row),
        email=row.first("Email", "Guest Email", "Email Address"),
        phone=row.first("Phone", "Phone Number", "Mobile"),
        organization=row.first("Company", "Organization", "Company Name"),
        role=row.first("Job Title", "Title", "Role", "Position"),
        location=row.first("Location", "City", "Address"),
        tags=("Luma",),
        source="Luma",
    )


def process_partiful(row: RawRow) -> ParsedContact:
    # Partiful のエクスポートには所属/役職/所在地の列が無い
    return ParsedContact(
        name=row.first("Name", "Guest") or _joined_name(row),
        email=row.first("Email", "Guest Email"),
        phone=row.first("Phone"),
        tags=("Partiful",),
        source="Partiful",
    )


PROCESSORS: Mapping[ImportFormat, Processor] = MappingProxyType({
    ImportFormat.GENERIC: process_generic,
    ImportFormat.EVENTBRITE: process_eventbrite,
    ImportFormat.LUMA: process_luma,
    ImportFormat.PARTIFUL: process_partiful,
})


def iter_drafts(fmt: ImportFormat, rows: Iterable[RawRow]) -> Iterator[tuple[RawRow, ParsedContact]]:
    """Yield (row, draft) for every row that produces an importable draft.

    Drafts without a name and an email are excluded, for every format.
    """
    processor = PROCESSORS[fmt]
    for row in rows:
        draft = processor(row)
        if not draft.is_importable:
            logger.debug(f"line {row.line_number}: dropped (no name or email)")
            continue
        yield row, draft


def process_rows(fmt: ImportFormat, rows: Iterable[RawRow]) -> list[ParsedContact]:
    """Apply the processor for ``fmt`` to every row, keeping input order."""
    return [draft for _, draft in iter_drafts(fmt, rows)]
