from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path

from ..errors import EmptyInputError, UnsupportedFileError
from ..logging.error_log import ErrorLogBuffer
from ..models.config_models import SUPPORTED_EXTENSIONS, ImportConfig
from ..models.error_record import FILE_LEVEL_ROW, ErrorRecord
from ..models.import_format import ImportFormat, parse_format_override
from ..models.import_result import ImportResult
from ..models.processing_result import FileStat, FileStatus, ProcessingResult
from ..reader import read_source
from .pipeline import ImportPipeline
from .progress import ProgressTracker
from .validation import validate_contact

"""Batch orchestration for the CLI.

Runs the import pipeline over every contact file of a directory (or over an
explicit list of paths), writes the annotated JSON output, aggregates the
counters for the SUMMARY line and buffers error records. A failing file is
recorded and skipped; it never aborts the batch.
"""

__all__ = [
    "ProcessingError",
    "scan_contact_files",
    "process_file",
    "process_all",
    "output_path_for",
]

logger = logging.getLogger(__name__)


class ProcessingError(Exception):
    """Fatal batch error (missing source directory, unreadable directory)."""


def scan_contact_files(directory: Path) -> list[Path]:
    """Scan ``directory`` (non-recursive) for supported contact files, sorted by name.

    Raises:
        ProcessingError: directory missing or unreadable
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        return sorted(
            p for p in directory.iterdir()
            if p.is_file() and p.suffix.lower() in SUPPORTED_EXTENSIONS
        )
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def output_path_for(source: Path, output_directory: Path) -> Path:
    return output_directory / f"{source.stem}.contacts.json"


def _write_output(path: Path, source: Path, result: ImportResult, include_duplicates: bool) -> None:
    if include_duplicates:
        contacts = [c.to_dict() for c in result.contacts]
    else:
        contacts = result.payloads()
    document = {
        "source_file": source.name,
        "format": result.format.value,
        "total_rows": result.total_rows,
        "dropped_rows": result.dropped_rows,
        "duplicates": result.duplicate_count,
        "contacts": contacts,
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")


def _record_validation(source: Path, result: ImportResult, error_log: ErrorLogBuffer) -> None:
    for index, contact in enumerate(result.contacts):
        report = validate_contact(contact)
        line = result.line_of(index)
        label = contact.name or contact.email
        for warning in report.warnings:
            logger.debug(f"{source.name}:{line} {label}: {warning}")
        for error in report.errors:
            logger.warning(f"{source.name}:{line} {label}: {error}")
            error_log.append(ErrorRecord.create(source.name, line, "INVALID_CONTACT", error))


def process_file(
    source: Path,
    config: ImportConfig,
    error_log: ErrorLogBuffer,
    format_override: ImportFormat | None = None,
    pipeline: ImportPipeline | None = None,
) -> FileStat:
    """Import one file; failures are returned as a FAILED FileStat."""
    pipeline = pipeline or ImportPipeline()
    start = datetime.now(UTC)

    def _failed(error_type: str, message: str) -> FileStat:
        logger.error(f"{source.name}: {message}")
        error_log.append(ErrorRecord.create(source.name, FILE_LEVEL_ROW, error_type, message))
        return FileStat(
            file_name=source.name,
            status=FileStatus.FAILED,
            format=None,
            contacts=0,
            duplicates=0,
            dropped_rows=0,
            elapsed_seconds=(datetime.now(UTC) - start).total_seconds(),
            error=message,
        )

    try:
        headers, rows = read_source(source, config.encoding)
        result = pipeline.run_rows(headers, rows, format_override or "auto")
    except EmptyInputError as e:
        return _failed("EMPTY_INPUT", str(e))
    except UnsupportedFileError as e:
        return _failed("UNSUPPORTED_FILE", str(e))
    except OSError as e:
        return _failed("READ_ERROR", f"cannot read {source.name}: {e}")
    except Exception as e:
        # 想定外のエラーでもバッチは継続する
        return _failed("UNEXPECTED_ERROR", f"{type(e).__name__}: {e}")

    if result.dropped_rows:
        error_log.append(ErrorRecord.create(
            source.name,
            FILE_LEVEL_ROW,
            "DROPPED_ROW",
            f"{result.dropped_rows} row(s) without name or email",
        ))

    if config.validate:
        _record_validation(source, result, error_log)

    output: Path | None = None
    if config.output_directory:
        output = output_path_for(source, Path(config.output_directory))
        _write_output(output, source, result, config.include_duplicates)
        logger.debug(f"{source.name}: wrote {output}")

    logger.info(
        f"{source.name}: format={result.format.value} contacts={len(result.contacts)} "
        f"duplicates={result.duplicate_count} dropped={result.dropped_rows}"
    )
    return FileStat(
        file_name=source.name,
        status=FileStatus.SUCCESS,
        format=result.format.value,
        contacts=len(result.contacts),
        duplicates=result.duplicate_count,
        dropped_rows=result.dropped_rows,
        elapsed_seconds=(datetime.now(UTC) - start).total_seconds(),
        output_path=str(output) if output else None,
    )


def process_all(
    config: ImportConfig,
    paths: Sequence[Path] | None = None,
    format_override: str | None = None,
    error_log: ErrorLogBuffer | None = None,
) -> ProcessingResult:
    """Import every file of the batch.

    Args:
        config: Loaded configuration
        paths: Explicit files; None scans config.source_directory
        format_override: Overrides config.format when given
        error_log: Buffer for error records (flushed before returning)

    Raises:
        ProcessingError: source directory missing or unreadable
        UnknownFormatError: bad format override
    """
    start_time = datetime.now(UTC)
    error_log = error_log if error_log is not None else ErrorLogBuffer()
    override = parse_format_override(format_override or config.format)

    if paths is None:
        file_paths = scan_contact_files(Path(config.source_directory))
    else:
        file_paths = list(paths)

    file_stats: list[FileStat] = []
    pipeline = ImportPipeline()

    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path)
            stat = process_file(file_path, config, error_log, override, pipeline)
            file_stats.append(stat)
            progress.finish_file(success=stat.status is FileStatus.SUCCESS)
            progress.set_postfix(
                contacts=sum(s.contacts for s in file_stats),
                failed=progress.failed_files,
            )

    try:
        log_path = error_log.flush()
    except OSError as e:
        logger.warning(f"error log flush failed: {e}")
    else:
        if log_path is not None:
            logger.info(f"error log written: {log_path}")

    end_time = datetime.now(UTC)
    succeeded = [s for s in file_stats if s.status is FileStatus.SUCCESS]
    return ProcessingResult(
        success_files=len(succeeded),
        failed_files=len(file_stats) - len(succeeded),
        total_contacts=sum(s.contacts for s in succeeded),
        total_duplicates=sum(s.duplicates for s in succeeded),
        total_dropped_rows=sum(s.dropped_rows for s in succeeded),
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        file_stats=file_stats,
    )
