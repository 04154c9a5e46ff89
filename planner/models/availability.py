"""Availability record and summary models with Pydantic v2."""

from datetime import datetime
from typing import Iterable

from pydantic import BaseModel, Field

from planner.exceptions import ValidationError

DATE_FORMAT = "%Y-%m-%d"


def validate_user_name(user: str) -> str:
    """Check that a user name is a non-empty string.

    Names are matched exactly (case-sensitive, no trimming).

    Raises:
        ValidationError: If the name is empty or not a string.
    """
    if not isinstance(user, str) or not user:
        raise ValidationError("User name must be a non-empty string")
    return user


def validate_iso_date(value: str) -> str:
    """Check that a value is a real calendar date in YYYY-MM-DD form.

    Raises:
        ValidationError: If the value does not parse as an ISO date.
    """
    if not isinstance(value, str) or len(value) != 10:
        raise ValidationError(f"Invalid date: {value!r}. Use YYYY-MM-DD.")
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r}. Use YYYY-MM-DD.") from None
    return value


class AvailabilityRecord(BaseModel):
    """Mapping of ISO date to the set of users available that date.

    A date whose user set is empty is never kept; ``prune`` removes it and
    every mutating helper calls it.
    """

    dates: dict[str, set[str]] = Field(default_factory=dict)

    @classmethod
    def from_storage(cls, data: dict) -> "AvailabilityRecord":
        """Build a record from the persisted ``{date: {name: true}}`` shape.

        Names whose flag is falsy are not members. Dates that are not objects
        are dropped.
        """
        dates: dict[str, set[str]] = {}
        for date_str, users in data.items():
            if not isinstance(users, dict):
                continue
            members = {name for name, flag in users.items() if name and flag}
            if members:
                dates[date_str] = members
        return cls(dates=dates)

    def to_storage(self) -> dict[str, dict[str, bool]]:
        """Convert to the persisted ``{date: {name: true}}`` shape."""
        return {
            date_str: {name: True for name in sorted(users)}
            for date_str, users in self.dates.items()
            if users
        }

    def dates_for(self, user: str) -> list[str]:
        """Dates on which ``user`` is present, in stored order."""
        return [date_str for date_str, users in self.dates.items() if user in users]

    def users(self) -> set[str]:
        """All distinct user names in the record."""
        names: set[str] = set()
        for users in self.dates.values():
            names.update(users)
        return names

    def remove_user(self, user: str) -> None:
        """Remove ``user`` from every date, dropping dates left empty."""
        for users in self.dates.values():
            users.discard(user)
        self.prune()

    def add_user(self, user: str, dates: Iterable[str]) -> None:
        """Add ``user`` to each of ``dates``."""
        for date_str in dates:
            self.dates.setdefault(date_str, set()).add(user)

    def replace_user(self, user: str, dates: Iterable[str]) -> None:
        """Replace the whole selection of ``user`` with ``dates``."""
        self.remove_user(user)
        self.add_user(user, dates)

    def prune(self) -> None:
        """Delete dates whose user set is empty."""
        for date_str in [d for d, users in self.dates.items() if not users]:
            del self.dates[date_str]


class SummaryEntry(BaseModel):
    """Aggregate for one date: how many people and who."""

    date: str
    count: int
    users: list[str]


class Summary(BaseModel):
    """Summary entries ordered by count descending, then date ascending."""

    entries: list[SummaryEntry] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: AvailabilityRecord) -> "Summary":
        """Aggregate a record into ordered summary entries."""
        entries = [
            SummaryEntry(date=date_str, count=len(users), users=sorted(users))
            for date_str, users in record.dates.items()
            if users
        ]
        entries.sort(key=lambda entry: (-entry.count, entry.date))
        return cls(entries=entries)

    @property
    def best_count(self) -> int:
        """Highest count in the summary, or 0 when empty."""
        if not self.entries:
            return 0
        return self.entries[0].count

    @property
    def best_dates(self) -> list[str]:
        """Dates tied for the highest count."""
        best = self.best_count
        if best == 0:
            return []
        return [entry.date for entry in self.entries if entry.count == best]

    @property
    def users(self) -> set[str]:
        """All distinct names across the summary."""
        names: set[str] = set()
        for entry in self.entries:
            names.update(entry.users)
        return names

    def others(self, user: str | None) -> set[str]:
        """Names other than ``user`` that have picked at least one date."""
        return self.users - {user}

    def entry_for(self, date_str: str) -> SummaryEntry | None:
        """Find the entry for a date, if anyone picked it."""
        for entry in self.entries:
            if entry.date == date_str:
                return entry
        return None

    def is_best(self, date_str: str) -> bool:
        """Whether a date is among the best dates."""
        return date_str in self.best_dates
