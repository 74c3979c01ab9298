from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

"""ParsedContact model for the contact import pipeline.

ParsedContact is the canonical draft every format processor produces. It is
frozen: the duplicate detector returns annotated copies instead of mutating
the drafts it receives.
"""

__all__ = [
    "ParsedContact",
    "ordered_tags",
    "ANNOTATION_FIELDS",
]

# 永続化前に呼び出し側で除去するフィールド
ANNOTATION_FIELDS = ("duplicate", "duplicate_of", "source")


def ordered_tags(values: Iterable[str]) -> tuple[str, ...]:
    """Deduplicate tags while keeping first-seen order."""
    seen: dict[str, None] = {}
    for value in values:
        tag = value.strip()
        if tag and tag not in seen:
            seen[tag] = None
    return tuple(seen)


@dataclass(frozen=True)
class ParsedContact:
    """Canonical contact draft with duplicate annotations.

    Attributes:
        name: Display name. May be empty only when email is set.
        email, phone, organization, role, location: Optional canonical fields.
        notes: Free text carried beside the canonical fields (generic imports).
        tags: Ordered set of tags.
        source: Exporter identifier, e.g. "CSV Import" or "Eventbrite".
        duplicate: True when an earlier contact in the batch shares a key.
        duplicate_of: Descriptor of that earlier contact (name plus the key).
    """
    name: str
    email: str | None = None
    phone: str | None = None
    organization: str | None = None
    role: str | None = None
    location: str | None = None
    notes: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    source: str = ""
    duplicate: bool = False
    duplicate_of: str | None = None

    @property
    def is_importable(self) -> bool:
        return bool(self.name.strip()) or bool(self.email and self.email.strip())

    def to_dict(self) -> dict[str, Any]:
        """Annotated record, JSON-serializable."""
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "organization": self.organization,
            "role": self.role,
            "location": self.location,
            "notes": self.notes,
            "tags": list(self.tags),
            "source": self.source,
            "duplicate": self.duplicate,
            "duplicate_of": self.duplicate_of,
        }

    def to_payload(self) -> dict[str, Any]:
        """Record handed to persistence: annotations stripped, empty fields omitted."""
        payload: dict[str, Any] = {}
        for key, value in self.to_dict().items():
            if key in ANNOTATION_FIELDS:
                continue
            if value is None or value == []:
                continue
            payload[key] = value
        return payload
