"""Import services: detection, processing, duplicates, pipeline and batch runs."""

from .duplicates import count_duplicates, detect_duplicates
from .format_detector import FORMAT_MARKERS, detect_format, resolve_format
from .header_normalizer import FIELD_SYNONYMS, normalize_header
from .pipeline import ImportPipeline, run
from .processors import PROCESSORS, process_rows
from .validation import ValidationResult, validate_contact

__all__ = [
    "FIELD_SYNONYMS",
    "normalize_header",
    "FORMAT_MARKERS",
    "detect_format",
    "resolve_format",
    "PROCESSORS",
    "process_rows",
    "detect_duplicates",
    "count_duplicates",
    "ImportPipeline",
    "run",
    "ValidationResult",
    "validate_contact",
]
