from __future__ import annotations

import pytest

from contact_import import ImportPipeline, run
from contact_import.errors import EmptyInputError, UnknownFormatError
from contact_import.models.import_format import ImportFormat


def test_generic_duplicate_by_email(generic_csv: str):
    """Test a generic upload with two rows sharing an email."""
    contacts = run(generic_csv)

    assert len(contacts) == 2
    assert contacts[0].name == "Jane Doe"
    assert contacts[0].source == "CSV Import"
    assert contacts[0].tags == ("CSV Import",)
    assert contacts[0].duplicate is False
    assert contacts[1].duplicate is True
    assert contacts[1].duplicate_of == "Jane Doe (jane@x.com)"


def test_eventbrite_upload():
    """Test an Eventbrite export is detected and names are joined."""
    text = "Order #,First Name,Last Name,Email\n1001,Ada,Lovelace,ada@example.com\n"
    result = ImportPipeline().parse(text)

    assert result.format is ImportFormat.EVENTBRITE
    (contact,) = result.contacts
    assert contact.name == "Ada Lovelace"
    assert contact.source == "Eventbrite"
    assert contact.tags == ("Eventbrite",)


def test_header_only_input_fails():
    with pytest.raises(EmptyInputError):
        run("Name,Email\n")


def test_fixture_formats_are_detected(eventbrite_csv: str, luma_csv: str, partiful_csv: str, generic_csv: str):
    pipeline = ImportPipeline()

    assert pipeline.parse(eventbrite_csv).format is ImportFormat.EVENTBRITE
    assert pipeline.parse(luma_csv).format is ImportFormat.LUMA
    assert pipeline.parse(partiful_csv).format is ImportFormat.PARTIFUL
    assert pipeline.parse(generic_csv).format is ImportFormat.GENERIC


def test_partiful_single_word_name_without_email_is_kept(partiful_csv: str):
    contacts = run(partiful_csv)

    assert [c.name for c in contacts] == ["Sam Rivera", "Lee"]
    assert contacts[1].email is None
    assert contacts[1].phone == "555-4040"


def test_override_replaces_detection(eventbrite_csv: str):
    """Test an explicit format override is applied instead of detection."""
    result = ImportPipeline().parse(eventbrite_csv, "generic")

    assert result.format is ImportFormat.GENERIC
    # generic では First/Last Name を結合して name にする
    assert result.contacts[0].name == "Ada Lovelace"
    assert result.contacts[0].source == "CSV Import"


def test_unknown_override_raises(generic_csv: str):
    with pytest.raises(UnknownFormatError):
        run(generic_csv, "meetup")


def test_counters_and_line_numbers():
    text = (
        "Name,Email,Phone\n"
        "Jane Doe,jane@x.com,\n"
        "\n"
        ",,555-0000\n"
        "John Roe,jane@x.com,\n"
    )
    result = ImportPipeline().parse(text)

    assert result.total_rows == 3
    assert result.dropped_rows == 1
    assert result.duplicate_count == 1
    assert result.line_numbers == [2, 5]
    assert result.line_of(1) == 5
    assert result.line_of(7) == -1
    assert [c.name for c in result.unique_contacts()] == ["Jane Doe"]


def test_all_rows_dropped_gives_empty_list():
    result = ImportPipeline().parse("Name,Email,Phone\n,,555-0100\n")

    assert result.contacts == []
    assert result.dropped_rows == 1


def test_pipeline_is_deterministic(generic_csv: str, luma_csv: str):
    """Test repeated runs over the same input give identical output."""
    pipeline = ImportPipeline()

    assert pipeline.run(generic_csv) == pipeline.run(generic_csv)
    assert pipeline.run(luma_csv, "luma") == run(luma_csv, "auto")


def test_rerun_with_other_override_is_independent(eventbrite_csv: str):
    pipeline = ImportPipeline()
    first = pipeline.run(eventbrite_csv, "generic")
    pipeline.run(eventbrite_csv, "partiful")

    assert pipeline.run(eventbrite_csv, "generic") == first


def test_payloads_strip_annotations(generic_csv: str):
    result = ImportPipeline().parse(generic_csv)
    payloads = result.payloads()

    assert payloads == [
        {"name": "Jane Doe", "email": "jane@x.com", "phone": "555-0100", "tags": ["CSV Import"]},
    ]
