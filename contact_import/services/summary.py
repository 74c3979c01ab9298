from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for batch imports."""

__all__ = [
    "render_summary_line",
    "format_seconds",
]


def format_seconds(value: float) -> str:
    """Render seconds without scientific notation; integers without a decimal point."""
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        return f"{value:.6f}".rstrip("0").rstrip(".") or "0"
    return str(round(value, 3))


def render_summary_line(total_files: int, result: ProcessingResult) -> str:
    """Render the SUMMARY line.

    Format:
    SUMMARY files={total}/{total} success={success} failed={failed}
    contacts={contacts} duplicates={duplicates} dropped={dropped} elapsed_sec={elapsed}

    Examples:
        >>> from datetime import datetime, timezone
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     success_files=1, failed_files=0, total_contacts=3,
        ...     total_duplicates=1, total_dropped_rows=0,
        ...     start_time=t, end_time=t, elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(1, result)
        'SUMMARY files=1/1 success=1 failed=0 contacts=3 duplicates=1 dropped=0 elapsed_sec=2'
    """
    return (
        f"SUMMARY files={total_files}/{total_files} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"contacts={result.total_contacts} "
        f"duplicates={result.total_duplicates} "
        f"dropped={result.total_dropped_rows} "
        f"elapsed_sec={format_seconds(result.elapsed_seconds)}"
    )
