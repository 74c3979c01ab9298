from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

"""Processing result models for batch imports (one or more files).

ImportResult describes a single pipeline run; the models here aggregate
those runs for the CLI SUMMARY line.
"""

__all__ = [
    "FileStatus",
    "FileStat",
    "ProcessingResult",
]


class FileStatus(Enum):
    """Outcome of importing one file."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class FileStat:
    """Per-file statistics."""
    file_name: str
    status: FileStatus
    format: str | None  # resolved format, None when the file failed before detection
    contacts: int  # contacts in the annotated list (duplicates included)
    duplicates: int
    dropped_rows: int
    elapsed_seconds: float
    output_path: str | None = None
    error: str | None = None  # failure reason summary


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results for the SUMMARY output."""
    success_files: int
    failed_files: int
    total_contacts: int
    total_duplicates: int
    total_dropped_rows: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    file_stats: list[FileStat] | None = None

    @property
    def total_files(self) -> int:
        return self.success_files + self.failed_files
