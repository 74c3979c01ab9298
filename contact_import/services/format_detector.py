from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from ..models.import_format import FormatOverride, ImportFormat, parse_format_override

"""Exporter detection from the header line.

Each known exporter has a small set of marker headers. A file is classified
as the first format (in FORMAT_MARKERS order) whose marker set shares at
least one header with the file. The order is the tie-break for overlapping
markers: "RSVP Status" is both a Luma and a Partiful marker, Luma wins.
"""

__all__ = [
    "FORMAT_MARKERS",
    "detect_format",
    "resolve_format",
]

logger = logging.getLogger(__name__)

# 判定順 = 定義順 (Eventbrite -> Luma -> Partiful)
FORMAT_MARKERS: Mapping[ImportFormat, frozenset[str]] = MappingProxyType({
    ImportFormat.EVENTBRITE: frozenset({"Order #", "Attendee Status", "Event Name", "Ticket Type"}),
    ImportFormat.LUMA: frozenset({"Guest ID", "Guest Status", "Event Name", "Ticket Type", "RSVP Status"}),
    ImportFormat.PARTIFUL: frozenset({"Guest Name", "RSVP Status", "Party", "Plus Ones"}),
})


def _fold_all(headers: Iterable[str]) -> set[str]:
    return {h.strip().lower() for h in headers}


def detect_format(
    headers: Iterable[str],
    markers: Mapping[ImportFormat, Iterable[str]] = FORMAT_MARKERS,
) -> ImportFormat:
    """Classify a header list as one of the known exporters, or generic."""
    present = _fold_all(headers)
    for fmt, marker_set in markers.items():
        if present & _fold_all(marker_set):
            return fmt
    return ImportFormat.GENERIC


def resolve_format(headers: Sequence[str], override: FormatOverride = "auto") -> ImportFormat:
    """Honor an explicit override, detect otherwise."""
    explicit = parse_format_override(override)
    if explicit is not None:
        logger.debug(f"format override: {explicit.value}")
        return explicit
    detected = detect_format(headers)
    logger.debug(f"format detected: {detected.value}")
    return detected
