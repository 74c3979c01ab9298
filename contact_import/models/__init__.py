"""Domain models for the contact import pipeline.

Raw rows come out of the readers, ParsedContact drafts come out of the format
processors, and the result models describe one run or a batch of runs.
"""

from .config_models import ImportConfig
from .contact import ParsedContact
from .error_record import ErrorRecord
from .import_format import ImportFormat
from .import_result import ImportResult
from .processing_result import FileStat, FileStatus, ProcessingResult
from .raw_row import RawRow

__all__ = [
    # Configuration models
    "ImportConfig",
    # Pipeline models
    "RawRow",
    "ParsedContact",
    "ImportFormat",
    "ImportResult",
    # Batch models
    "ErrorRecord",
    "FileStat",
    "FileStatus",
    "ProcessingResult",
]
