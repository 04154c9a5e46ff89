"""Tests for availability models."""

import pytest

from planner.exceptions import ValidationError
from planner.models import (
    AvailabilityRecord,
    Summary,
    SummaryEntry,
    validate_iso_date,
    validate_user_name,
)


def test_record_from_storage_drops_falsy_flags_and_empty_dates():
    """Only truthy flags count as membership; empty dates disappear."""
    record = AvailabilityRecord.from_storage(
        {
            "2024-01-10": {"Alice": True, "Bob": False},
            "2024-01-11": {"Bob": False},
            "2024-01-12": {},
            "2024-01-13": "not-an-object",
        }
    )
    assert record.dates == {"2024-01-10": {"Alice"}}


def test_record_to_storage_shape():
    """Record serializes to {date: {name: true}}."""
    record = AvailabilityRecord(dates={"2024-01-10": {"Bob", "Alice"}})
    assert record.to_storage() == {"2024-01-10": {"Alice": True, "Bob": True}}


def test_record_replace_user_prunes_emptied_dates():
    """Replacing a selection removes dates only that user had."""
    record = AvailabilityRecord(
        dates={"2024-01-05": {"Alice"}, "2024-01-10": {"Alice", "Bob"}}
    )
    record.replace_user("Alice", ["2024-02-01"])

    assert record.dates == {"2024-01-10": {"Bob"}, "2024-02-01": {"Alice"}}


def test_record_dates_for_is_case_sensitive():
    """User names match exactly."""
    record = AvailabilityRecord(dates={"2024-01-10": {"alice"}})
    assert record.dates_for("Alice") == []
    assert record.dates_for("alice") == ["2024-01-10"]


def test_summary_orders_by_count_then_date():
    """Summary sorts count descending, ties by date ascending."""
    record = AvailabilityRecord(
        dates={
            "2024-01-10": {"A", "B"},
            "2024-01-05": {"A"},
            "2024-01-03": {"C"},
            "2024-01-20": {"B", "C"},
        }
    )
    summary = Summary.from_record(record)

    assert [(e.date, e.count) for e in summary.entries] == [
        ("2024-01-10", 2),
        ("2024-01-20", 2),
        ("2024-01-03", 1),
        ("2024-01-05", 1),
    ]
    assert summary.best_count == 2
    assert summary.best_dates == ["2024-01-10", "2024-01-20"]


def test_summary_empty():
    """An empty summary has no best dates."""
    summary = Summary.from_record(AvailabilityRecord())
    assert summary.entries == []
    assert summary.best_count == 0
    assert summary.best_dates == []


def test_summary_others_and_entry_for():
    """Helpers used by the renderers."""
    summary = Summary(
        entries=[
            SummaryEntry(date="2024-01-10", count=2, users=["Alice", "Bob"]),
            SummaryEntry(date="2024-01-11", count=1, users=["Carol"]),
        ]
    )
    assert summary.others("Alice") == {"Bob", "Carol"}
    assert summary.others(None) == {"Alice", "Bob", "Carol"}
    assert summary.entry_for("2024-01-11").users == ["Carol"]
    assert summary.entry_for("2024-01-12") is None
    assert summary.is_best("2024-01-10")
    assert not summary.is_best("2024-01-11")


@pytest.mark.parametrize("value", ["2024-01-05", "2024-02-29", "1999-12-31"])
def test_validate_iso_date_accepts(value):
    assert validate_iso_date(value) == value


@pytest.mark.parametrize(
    "value", ["2024-1-5", "2023-02-29", "2024-13-01", "05/01/2024", "", None, 20240105]
)
def test_validate_iso_date_rejects(value):
    with pytest.raises(ValidationError):
        validate_iso_date(value)


def test_validate_user_name():
    assert validate_user_name("Timothée") == "Timothée"
    with pytest.raises(ValidationError):
        validate_user_name("")
    with pytest.raises(ValidationError):
        validate_user_name(None)


def test_validate_iso_date_hides_parse_error():
    """The strptime failure is not chained onto the ValidationError."""
    with pytest.raises(ValidationError) as exc_info:
        validate_iso_date("2024-02-30")
    assert exc_info.value.__cause__ is None
    assert exc_info.value.__suppress_context__ is True
