from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

"""Header normalization for generic contact uploads.

Maps header spellings (lower-cased, trimmed) to the canonical contact fields.
The table is built once at import time and exposed read-only; callers that
need a different vocabulary pass their own mapping instead of mutating it.

"first name" / "last name" are intentionally absent: the generic processor
joins them into `name` only when no full-name column was mapped.
"""

__all__ = [
    "CANONICAL_FIELDS",
    "FIELD_SYNONYMS",
    "normalize_header",
]

CANONICAL_FIELDS = (
    "name",
    "email",
    "phone",
    "organization",
    "role",
    "location",
    "tags",
    "notes",
)

_SYNONYMS_BY_FIELD: dict[str, tuple[str, ...]] = {
    "name": (
        "name", "full name", "fullname", "full_name", "contact name", "contact_name",
        "display name", "display_name", "attendee", "attendee name", "guest",
        "guest name",
    ),
    "email": (
        "email", "e-mail", "e_mail", "mail", "email address", "email_address",
        "contact email", "primary email", "primary_email", "work email",
        "work_email", "personal email", "personal_email",
    ),
    "phone": (
        "phone", "phone number", "phone_number", "telephone", "telephone_number",
        "tel", "mobile", "mobile phone", "mobile_phone", "cell", "cell phone",
        "cell_phone", "work phone", "work_phone", "home phone", "home_phone",
    ),
    "organization": (
        "organization", "organisation", "org", "company", "company name",
        "company_name", "business", "employer",
    ),
    "role": (
        "role", "title", "job title", "job_title", "position", "job",
        "occupation", "designation",
    ),
    "location": (
        "location", "address", "city", "country", "region", "state",
    ),
    "tags": (
        "tags", "tag", "categories", "category", "labels", "label",
    ),
    "notes": (
        "notes", "note", "comments", "comment", "description", "memo", "remarks",
    ),
}


def _build_table(by_field: Mapping[str, tuple[str, ...]]) -> Mapping[str, str]:
    table: dict[str, str] = {}
    for canonical, spellings in by_field.items():
        for spelling in spellings:
            key = spelling.strip().lower()
            if key in table and table[key] != canonical:
                raise ValueError(f"synonym '{key}' mapped to both {table[key]} and {canonical}")
            table[key] = canonical
    return MappingProxyType(table)


FIELD_SYNONYMS: Mapping[str, str] = _build_table(_SYNONYMS_BY_FIELD)


def normalize_header(header: str, synonyms: Mapping[str, str] = FIELD_SYNONYMS) -> str | None:
    """Return the canonical field for ``header`` or None when unrecognized.

    >>> normalize_header(" E-Mail ")
    'email'
    >>> normalize_header("Favourite Colour") is None
    True
    """
    return synonyms.get(header.strip().lower())
