"""Exception hierarchy for availability operations."""


class PlannerError(Exception):
    """Base exception for planner operations."""

    pass


class StorageError(PlannerError):
    """Base exception for storage backend problems."""

    pass


class StorageWriteError(StorageError):
    """Availability data could not be written."""

    pass


class ValidationError(PlannerError):
    """Invalid user name or date."""

    pass
