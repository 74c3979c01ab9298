"""Bulk contact import.

Parses an uploaded contact table, detects the exporter that produced it
(Eventbrite, Luma, Partiful or a generic CSV), normalizes every row into a
ParsedContact and flags duplicates within the batch.

    >>> from contact_import import ImportPipeline
    >>> contacts = ImportPipeline().run("Name,Email\\nJane Doe,jane@x.com\\n")
    >>> contacts[0].source
    'CSV Import'
"""

from .errors import ContactImportError, EmptyInputError, UnknownFormatError, UnsupportedFileError
from .models import ImportFormat, ImportResult, ParsedContact, RawRow
from .services.pipeline import ImportPipeline, run

__version__ = "0.1.0"

__all__ = [
    "ImportPipeline",
    "run",
    "ParsedContact",
    "RawRow",
    "ImportFormat",
    "ImportResult",
    "ContactImportError",
    "EmptyInputError",
    "UnknownFormatError",
    "UnsupportedFileError",
]
