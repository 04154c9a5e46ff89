"""Async facade over the availability repository."""

import asyncio
from typing import Iterable

from planner.models.availability import Summary
from planner.storage.availability_repository import AvailabilityRepository


class AsyncAvailabilityStore:
    """Non-blocking access to the availability operations.

    Each call runs the repository method in a worker thread, so file I/O never
    blocks the caller's event loop. The repository lock still serializes
    concurrent saves.
    """

    def __init__(self, repository: AvailabilityRepository):
        self.repository = repository

    async def get_user_availability(self, user: str) -> list[str]:
        return await asyncio.to_thread(self.repository.get_user_availability, user)

    async def save_user_availability(self, user: str, dates: Iterable[str]) -> bool:
        return await asyncio.to_thread(
            self.repository.save_user_availability, user, list(dates)
        )

    async def get_summary(self) -> Summary:
        return await asyncio.to_thread(self.repository.get_summary)

    async def get_all_users(self) -> list[str]:
        return await asyncio.to_thread(self.repository.get_all_users)
