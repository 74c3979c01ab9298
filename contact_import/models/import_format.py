from __future__ import annotations

from enum import Enum

from ..errors import UnknownFormatError

"""Known exporter formats and the format override values."""

__all__ = [
    "ImportFormat",
    "AUTO",
    "FORMAT_CHOICES",
    "FormatOverride",
    "parse_format_override",
]


class ImportFormat(str, Enum):
    """Exporter that produced an uploaded table.

    - GENERIC: unknown source, headers resolved through the synonym table
    - EVENTBRITE / LUMA / PARTIFUL: event platform attendee exports
    """
    GENERIC = "generic"
    EVENTBRITE = "eventbrite"
    LUMA = "luma"
    PARTIFUL = "partiful"


AUTO = "auto"
FORMAT_CHOICES: tuple[str, ...] = (AUTO,) + tuple(f.value for f in ImportFormat)

# "auto" / None: detect from headers
FormatOverride = str | ImportFormat | None


def parse_format_override(value: FormatOverride) -> ImportFormat | None:
    """Validate a caller supplied override.

    Returns None for "auto" (or None), meaning the format should be detected.

    Raises:
        UnknownFormatError: value is not one of FORMAT_CHOICES
    """
    if value is None:
        return None
    if isinstance(value, ImportFormat):
        return value
    folded = str(value).strip().lower()
    if folded == AUTO:
        return None
    try:
        return ImportFormat(folded)
    except ValueError:
        raise UnknownFormatError(
            f"unknown format '{value}' (expected one of: {', '.join(FORMAT_CHOICES)})"
        ) from None
