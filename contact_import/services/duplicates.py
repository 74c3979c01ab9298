from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import replace

from ..models.contact import ParsedContact

"""Within-batch duplicate detection.

Two passes over the ordered draft list:

1. Build first-seen indexes (normalized key -> lowest draft index) for email,
   phone digits and multi-word names.
2. For each draft, check email, then phone, then name, stopping at the first
   key whose first occurrence is an earlier draft.

The first occurrence of a key is never a duplicate, and a draft flagged
through a higher priority key is not re-examined with a lower one. Single
word names are never matched. Matching is exact on the normalized key; there
is no similarity scoring.
"""

__all__ = [
    "email_key",
    "phone_key",
    "name_key",
    "detect_duplicates",
    "count_duplicates",
]

_NON_DIGITS = re.compile(r"\D")

KeyFunc = Callable[[ParsedContact], "str | None"]


def email_key(contact: ParsedContact) -> str | None:
    if not contact.email:
        return None
    return contact.email.strip().lower() or None


def phone_key(contact: ParsedContact) -> str | None:
    if not contact.phone:
        return None
    return _NON_DIGITS.sub("", contact.phone) or None


def name_key(contact: ParsedContact) -> str | None:
    key = contact.name.strip().lower()
    # 一語の名前 (例: "Sam") は誤検出が多いため照合対象外
    if len(key.split()) < 2:
        return None
    return key


def _first_seen(contacts: Sequence[ParsedContact], key: KeyFunc) -> dict[str, int]:
    index: dict[str, int] = {}
    for i, contact in enumerate(contacts):
        k = key(contact)
        if k is not None and k not in index:
            index[k] = i
    return index


def _describe(first: ParsedContact, value: str | None) -> str:
    return f"{first.name or 'Unknown'} ({value})"


def detect_duplicates(contacts: Sequence[ParsedContact]) -> list[ParsedContact]:
    """Return the drafts annotated with ``duplicate`` / ``duplicate_of``.

    The output has the same length and order as ``contacts``; references
    always point to a lower index.
    """
    emails = _first_seen(contacts, email_key)
    phones = _first_seen(contacts, phone_key)
    names = _first_seen(contacts, name_key)

    annotated: list[ParsedContact] = []
    for i, contact in enumerate(contacts):
        duplicate_of: str | None = None

        key = email_key(contact)
        if key is not None and emails[key] < i:
            first = contacts[emails[key]]
            duplicate_of = _describe(first, first.email)
        else:
            key = phone_key(contact)
            if key is not None and phones[key] < i:
                first = contacts[phones[key]]
                duplicate_of = _describe(first, first.phone)
            else:
                key = name_key(contact)
                if key is not None and names[key] < i:
                    duplicate_of = contacts[names[key]].name

        if duplicate_of is None:
            annotated.append(replace(contact, duplicate=False, duplicate_of=None))
        else:
            annotated.append(replace(contact, duplicate=True, duplicate_of=duplicate_of))
    return annotated


def count_duplicates(contacts: Sequence[ParsedContact]) -> int:
    return sum(1 for c in contacts if c.duplicate)
