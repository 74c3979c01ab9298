from __future__ import annotations

from dataclasses import dataclass

"""Config dataclasses for the contact import CLI.

Built by contact_import.config.loader after schema validation; defaults here
mirror the defaults declared in config_schema.json.
"""

__all__ = [
    "ImportConfig",
    "SUPPORTED_EXTENSIONS",
]

# 対応拡張子 (小文字比較)
SUPPORTED_EXTENSIONS = (".csv", ".txt", ".xlsx", ".xls")


@dataclass(frozen=True)
class ImportConfig:
    """Root configuration object for batch imports."""
    source_directory: str  # Directory scanned for contact files
    output_directory: str | None = None  # JSON output written here when set
    format: str = "auto"  # Format override applied to every file
    encoding: str = "utf-8"  # Text encoding of .csv/.txt uploads
    include_duplicates: bool = True  # False: write only unique persistence payloads
    validate: bool = True  # Run contact validation and log warnings
