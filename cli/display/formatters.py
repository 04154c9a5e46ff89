"""Pure formatting functions for display output."""

from datetime import date, datetime
from pathlib import Path


def parse_iso_date(iso: str) -> date:
    """Parse a YYYY-MM-DD string into a date."""
    return datetime.strptime(iso, "%Y-%m-%d").date()


def format_pretty_date(iso: str) -> str:
    """Format an ISO date for display.

    Args:
        iso: Date string in YYYY-MM-DD format.

    Returns:
        Short weekday, day and month (e.g., "Mon 15 Jan"), or the string
        unchanged if it is not an ISO date.
    """
    try:
        d = parse_iso_date(iso)
    except ValueError:
        return iso
    return f"{d:%a} {d.day} {d:%b}"


def pluralize(count: int, singular: str, plural: str) -> str:
    """Pick the singular or plural word for a count."""
    return singular if count == 1 else plural


def format_count(count: int, singular: str, plural: str) -> str:
    """Format a count with its noun (e.g., "1 person", "3 people")."""
    return f"{count} {pluralize(count, singular, plural)}"


def format_path(path: Path) -> str:
    """Format path for display, using ~ for home directory."""
    path = path.resolve()
    try:
        return f"~/{path.relative_to(Path.home())}"
    except ValueError:
        return str(path)
