"""Storage layer for the shared availability file."""

from planner.storage.availability_repository import AvailabilityRepository
from planner.storage.json_storage import JSONFileStorage
from planner.storage.memory_storage import InMemoryStorage

__all__ = [
    "AvailabilityRepository",
    "InMemoryStorage",
    "JSONFileStorage",
]
