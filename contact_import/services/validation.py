from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..models.contact import ParsedContact

"""Contact validation rules applied before contacts are handed over.

Validation only reports: it never drops, edits or re-flags a contact. The
batch orchestrator logs the findings and records INVALID_CONTACT entries.
"""

__all__ = [
    "ValidationResult",
    "validate_contact",
    "MIN_PHONE_DIGITS",
]

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[\d\s\-().+ext]+$")
MIN_PHONE_DIGITS = 7


@dataclass(frozen=True)
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_contact(contact: ParsedContact) -> ValidationResult:
    errors: list[str] = []
    warnings: list[str] = []

    email = (contact.email or "").strip()
    phone = (contact.phone or "").strip()

    if email and not EMAIL_PATTERN.match(email):
        errors.append("Invalid email format")

    if phone:
        if not PHONE_PATTERN.match(phone):
            errors.append("Invalid phone number format")
        elif len(re.sub(r"\D", "", phone)) < MIN_PHONE_DIGITS:
            warnings.append("Phone number seems too short")

    if not email and not phone:
        warnings.append("Contact has no email or phone number")

    return ValidationResult(errors=errors, warnings=warnings)
