# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from contact_import.logging.init import reset_logging


@pytest.fixture(autouse=True)
def _fresh_logging():
    # ハンドラは setup 時の sys.stdout に束縛されるため毎テスト再生成
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
output_directory: ./out
format: auto
encoding: utf-8
include_duplicates: true
validate: true
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "import.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def generic_csv() -> str:
    return (
        "Name,Email,Phone\n"
        "Jane Doe,jane@x.com,555-0100\n"
        "Jane D.,jane@x.com,555-9999\n"
    )


@pytest.fixture()
def eventbrite_csv() -> str:
    return (
        "Order #,Attendee Status,Event Name,Ticket Type,First Name,Last Name,Email\n"
        "1001,Attending,Launch Party,GA,Ada,Lovelace,ada@example.com\n"
        "1002,Attending,Launch Party,VIP,Alan,Turing,alan@example.com\n"
    )


@pytest.fixture()
def luma_csv() -> str:
    return (
        "Guest ID,Name,Email,Phone Number,Company,Title,RSVP Status\n"
        "g-1,Grace Hopper,grace@navy.mil,(555) 010-2000,US Navy,Rear Admiral,going\n"
        "g-2,Katherine Johnson,kj@nasa.gov,,NASA,Mathematician,going\n"
    )


@pytest.fixture()
def partiful_csv() -> str:
    return (
        "Name,Email,Phone,Status,Plus Ones\n"
        "Sam Rivera,sam@party.io,555-3030,Going,1\n"
        "Lee,,555-4040,Maybe,0\n"
    )


@pytest.fixture()
def data_dir(temp_workdir: Path) -> Path:
    return temp_workdir / "data"
