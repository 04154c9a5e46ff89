"""Pydantic models for the team date planner."""

from planner.models.availability import (
    AvailabilityRecord,
    Summary,
    SummaryEntry,
    validate_iso_date,
    validate_user_name,
)

__all__ = [
    "AvailabilityRecord",
    "Summary",
    "SummaryEntry",
    "validate_iso_date",
    "validate_user_name",
]
