from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import ConfigError, load_config
from ..errors import ContactImportError, UnknownFormatError
from ..logging.init import log_summary, set_debug, setup_logging
from ..models.import_format import FORMAT_CHOICES, parse_format_override
from ..services.format_detector import detect_format
from ..services.orchestrator import ProcessingError, process_all, scan_contact_files
from ..services.summary import render_summary_line
from ..reader import read_source

"""CLI entrypoint.

Flow:
- Load .env (overriding), then the YAML config
- Import every contact file of source_directory (or the paths given)
- Print the SUMMARY line and exit with the batch status
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1

DEFAULT_CONFIG_PATH = "config/import.yml"
CONFIG_ENV = "CONTACT_IMPORT_CONFIG"
FORMAT_ENV = "CONTACT_IMPORT_FORMAT"


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env via python-dotenv; a missing file is not an error."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="contact-import",
        description="Bulk contact import with exporter detection and duplicate flagging",
    )
    p.add_argument("paths", nargs="*", type=Path, help="Contact files (default: scan source_directory)")
    p.add_argument(
        "--format",
        default=None,
        help=f"Format override, one of {'|'.join(FORMAT_CHOICES)} (default: from config)",
    )
    p.add_argument("--config", type=Path, default=None, help=f"Config file (default: ${CONFIG_ENV} or {DEFAULT_CONFIG_PATH})")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print headers, detected format & first rows then exit")
    return p.parse_args(argv)


def _inspect_data(paths: list[Path], encoding: str) -> int:
    if not paths:
        print("inspect: no contact files")
        return EXIT_SUCCESS_ALL
    for f in paths:
        print(f"FILE: {f.name}")
        try:
            headers, rows = read_source(f, encoding)
        except (ContactImportError, OSError) as e:
            print(f"  read_error: {e}")
            continue
        except Exception as e:
            print(f"  read_error: {type(e).__name__}: {e}")
            continue
        print(f"  headers={headers}")
        print(f"  detected_format={detect_format(headers).value} rows={len(rows)}")
        for row in rows[:3]:
            print(f"    line {row.line_number}: {row.values}")
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみ sys.argv を読む ([] はテストからの明示的な空引数)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    if args.debug:
        set_debug()
        logger.debug("debug mode enabled")

    config_path = args.config or Path(os.getenv(CONFIG_ENV, DEFAULT_CONFIG_PATH))
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    format_override = args.format or os.getenv(FORMAT_ENV) or None
    try:
        parse_format_override(format_override or cfg.format)
    except UnknownFormatError as e:
        logger.error(f"format: {e}")
        return EXIT_FATAL

    paths: list[Path] | None = list(args.paths) or None
    if paths is None:
        directory = Path(cfg.source_directory)
        if not directory.exists():
            logger.error(f"directory not found: {directory}")
            return EXIT_FATAL
        logger.info(f"Processing files from: {directory}")

    if args.inspect_data:
        try:
            targets = paths if paths is not None else scan_contact_files(Path(cfg.source_directory))
        except ProcessingError as e:
            logger.error(f"inspect: {e}")
            return EXIT_FATAL
        return _inspect_data(targets, cfg.encoding)

    try:
        result = process_all(cfg, paths=paths, format_override=format_override)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    summary_line = render_summary_line(result.total_files, result)
    # log_summary が "SUMMARY " を付与するため接頭辞を除去
    log_summary(summary_line.removeprefix("SUMMARY "))

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
