"""Base classes for availability storage backends."""

from typing import Protocol


class AvailabilityStorage(Protocol):
    """Protocol for storage backends holding the raw availability mapping.

    The mapping has the persisted shape ``{date: {name: true}}``. Backends
    read and write it wholesale.
    """

    def read(self) -> dict[str, dict[str, bool]]:
        """Return the full stored mapping (empty if nothing usable is stored)."""
        ...

    def write(self, data: dict[str, dict[str, bool]]) -> None:
        """Overwrite the stored mapping with ``data``."""
        ...
