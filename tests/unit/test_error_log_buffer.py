from __future__ import annotations

import json
import re
from pathlib import Path

from contact_import.logging.error_log import ErrorLogBuffer
from contact_import.models.error_record import FILE_LEVEL_ROW, ErrorRecord


def test_error_record_create():
    """Test ErrorRecord.create stamps a UTC ISO8601 timestamp with Z suffix."""
    record = ErrorRecord.create("guests.csv", 4, "INVALID_CONTACT", "Invalid email format")

    assert record.file == "guests.csv"
    assert record.row == 4
    assert record.error_type == "INVALID_CONTACT"
    assert record.timestamp.endswith("Z")
    assert "+00:00" not in record.timestamp


def test_error_record_json_line_keeps_non_ascii():
    record = ErrorRecord("2024-01-01T00:00:00Z", "名簿.csv", FILE_LEVEL_ROW, "EMPTY_INPUT", "空")
    data = json.loads(record.to_json_line())

    assert data == {
        "timestamp": "2024-01-01T00:00:00Z",
        "file": "名簿.csv",
        "row": -1,
        "error_type": "EMPTY_INPUT",
        "message": "空",
    }
    assert "名簿" in record.to_json_line()


def test_flush_without_records_writes_nothing(temp_workdir: Path):
    buf = ErrorLogBuffer(temp_workdir / "logs")

    assert buf.flush() is None
    assert list((temp_workdir / "logs").iterdir()) == []


def test_flush_writes_json_lines(temp_workdir: Path):
    """Test buffered records are appended as one JSON object per line."""
    logs_dir = temp_workdir / "nested" / "logs"
    buf = ErrorLogBuffer(logs_dir)
    buf.append(ErrorRecord.create("a.csv", -1, "EMPTY_INPUT", "empty"))
    buf.append(ErrorRecord.create("b.csv", 3, "INVALID_CONTACT", "bad email"))
    assert len(buf) == 2

    path = buf.flush()

    assert path is not None
    assert path.parent == logs_dir
    assert re.fullmatch(r"errors-\d{8}-\d{6}\.log", path.name)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["file"] for line in lines] == ["a.csv", "b.csv"]
    assert len(buf) == 0


def test_second_flush_appends_to_same_file(temp_workdir: Path):
    buf = ErrorLogBuffer(temp_workdir / "logs")
    buf.append(ErrorRecord.create("a.csv", -1, "EMPTY_INPUT", "empty"))
    first = buf.flush()
    buf.append(ErrorRecord.create("b.csv", -1, "EMPTY_INPUT", "empty"))
    second = buf.flush()

    assert first == second
    assert len(second.read_text(encoding="utf-8").splitlines()) == 2


def test_default_logs_dir_is_relative_to_cwd(temp_workdir: Path):
    buf = ErrorLogBuffer()
    buf.append(ErrorRecord.create("a.csv", -1, "EMPTY_INPUT", "empty"))

    path = buf.flush()
    assert path.resolve().parent == (temp_workdir / "logs").resolve()
