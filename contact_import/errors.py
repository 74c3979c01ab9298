from __future__ import annotations

"""Exception types raised by the contact import pipeline.

Only EmptyInputError is surfaced to end users during a normal import; the
other types guard the edges (bad override values, unreadable uploads).
"""

__all__ = [
    "ContactImportError",
    "EmptyInputError",
    "UnknownFormatError",
    "UnsupportedFileError",
]

EMPTY_INPUT_MESSAGE = "file appears empty or could not be parsed"


class ContactImportError(Exception):
    """Base exception for contact import errors."""


class EmptyInputError(ContactImportError):
    """Raised when the upload has no header line or no data lines."""

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE) -> None:
        super().__init__(message)


class UnknownFormatError(ContactImportError, ValueError):
    """Raised when a format override is not one of the known values."""


class UnsupportedFileError(ContactImportError):
    """Raised when a source file cannot be read as a contact table."""
