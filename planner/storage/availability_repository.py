"""Availability repository: the shared date to users store."""

import logging
import threading
from typing import Callable, Iterable

from planner.models.availability import (
    AvailabilityRecord,
    Summary,
    validate_iso_date,
    validate_user_name,
)
from planner.storage.base import AvailabilityStorage

logger = logging.getLogger(__name__)


class AvailabilityRepository:
    """Repository for shared availability with dependency injection.

    Every operation loads the full record from the storage backend. Mutations
    go through ``update``, which holds a lock for the whole
    read-modify-write so calls within one process never interleave.
    """

    def __init__(self, storage: AvailabilityStorage):
        """
        Initialize repository.

        Args:
            storage: Storage backend (dependency injection)
        """
        self.storage = storage
        self._lock = threading.RLock()

    def load(self) -> AvailabilityRecord:
        """Load the full availability record."""
        with self._lock:
            return AvailabilityRecord.from_storage(self.storage.read())

    def update(
        self, fn: Callable[[AvailabilityRecord], AvailabilityRecord | None]
    ) -> AvailabilityRecord:
        """
        Apply ``fn`` to the full record and write the result back.

        Args:
            fn: Takes the current record and returns the new full record;
                a function that mutates the record in place may return None

        Returns:
            The record as written

        Raises:
            StorageWriteError: If the backend cannot write
        """
        with self._lock:
            current = AvailabilityRecord.from_storage(self.storage.read())
            new_record = fn(current)
            if new_record is None:
                new_record = current
            new_record.prune()
            self.storage.write(new_record.to_storage())
            return new_record

    def get_user_availability(self, user: str) -> list[str]:
        """Dates on which ``user`` is available, in stored order."""
        return self.load().dates_for(user)

    def save_user_availability(self, user: str, dates: Iterable[str]) -> bool:
        """
        Replace the entire selection of ``user`` with ``dates``.

        Args:
            user: Exact user name
            dates: ISO dates (YYYY-MM-DD); duplicates collapse

        Returns:
            True once the record has been written

        Raises:
            ValidationError: If the name or a date is invalid (nothing is written)
            StorageWriteError: If the backend cannot write
        """
        validate_user_name(user)
        new_dates = list(dict.fromkeys(validate_iso_date(d) for d in dates))

        def replace(record: AvailabilityRecord) -> AvailabilityRecord:
            record.replace_user(user, new_dates)
            return record

        logger.info(f"Saving {len(new_dates)} date(s) for {user}")
        self.update(replace)
        return True

    def get_summary(self) -> Summary:
        """Per-date counts, ordered by count descending then date ascending."""
        return Summary.from_record(self.load())

    def get_all_users(self) -> list[str]:
        """All user names in the record, sorted case-insensitively."""
        return sorted(self.load().users(), key=lambda name: (name.casefold(), name))
