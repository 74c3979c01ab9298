from __future__ import annotations

import pytest

from contact_import.errors import UnknownFormatError
from contact_import.models.import_format import ImportFormat
from contact_import.services.format_detector import FORMAT_MARKERS, detect_format, resolve_format


@pytest.mark.parametrize(
    "headers,expected",
    [
        (["Order #", "First Name", "Last Name", "Email"], ImportFormat.EVENTBRITE),
        (["Attendee Status", "Email"], ImportFormat.EVENTBRITE),
        (["Guest ID", "Name", "Email"], ImportFormat.LUMA),
        (["Guest Status", "Name"], ImportFormat.LUMA),
        (["Guest Name", "Email"], ImportFormat.PARTIFUL),
        (["Name", "Plus Ones"], ImportFormat.PARTIFUL),
        (["Name", "Email", "Phone"], ImportFormat.GENERIC),
        ([], ImportFormat.GENERIC),
    ],
)
def test_detect_format(headers: list[str], expected: ImportFormat):
    """Test a single marker header is enough to classify a file."""
    assert detect_format(headers) is expected


def test_detection_ignores_case_and_whitespace():
    assert detect_format(["  order #  ", "email"]) is ImportFormat.EVENTBRITE
    assert detect_format(["GUEST ID"]) is ImportFormat.LUMA


def test_luma_wins_over_partiful():
    """Test Luma markers take precedence when Partiful markers are also present."""
    headers = ["Guest Name", "RSVP Status", "Guest ID", "Plus Ones"]
    assert detect_format(headers) is ImportFormat.LUMA


def test_rsvp_status_alone_is_luma():
    # "RSVP Status" は Luma/Partiful 双方のマーカー: Luma を先に判定
    assert detect_format(["Name", "RSVP Status"]) is ImportFormat.LUMA


def test_eventbrite_wins_over_luma_on_shared_markers():
    assert detect_format(["Event Name", "Ticket Type"]) is ImportFormat.EVENTBRITE


def test_header_order_is_irrelevant():
    headers = ["Email", "Plus Ones", "Name"]
    assert detect_format(headers) is detect_format(list(reversed(headers)))


def test_marker_order_is_eventbrite_luma_partiful():
    assert list(FORMAT_MARKERS) == [ImportFormat.EVENTBRITE, ImportFormat.LUMA, ImportFormat.PARTIFUL]


def test_custom_markers_injected():
    """Test callers can pass their own marker table."""
    markers = {ImportFormat.PARTIFUL: {"Vibe"}}
    assert detect_format(["vibe"], markers) is ImportFormat.PARTIFUL
    assert detect_format(["Order #"], markers) is ImportFormat.GENERIC


class TestResolveFormat:
    def test_auto_detects(self):
        assert resolve_format(["Guest ID"], "auto") is ImportFormat.LUMA

    def test_none_detects(self):
        assert resolve_format(["Order #"], None) is ImportFormat.EVENTBRITE

    def test_override_wins(self):
        """Test an explicit override bypasses detection entirely."""
        assert resolve_format(["Order #"], "generic") is ImportFormat.GENERIC
        assert resolve_format(["Name"], ImportFormat.PARTIFUL) is ImportFormat.PARTIFUL

    def test_override_case_insensitive(self):
        assert resolve_format(["Name"], "Luma") is ImportFormat.LUMA

    def test_unknown_override_raises(self):
        with pytest.raises(UnknownFormatError):
            resolve_format(["Name"], "meetup")
