"""Tests for the async availability facade."""

import asyncio

import pytest

from planner.exceptions import ValidationError
from planner.service import AsyncAvailabilityStore


@pytest.fixture
def store(repository):
    return AsyncAvailabilityStore(repository)


def test_async_save_and_read(store):
    async def scenario():
        saved = await store.save_user_availability("Alice", ["2024-01-10"])
        await store.save_user_availability("bob", ["2024-01-10", "2024-01-05"])
        return (
            saved,
            await store.get_user_availability("Alice"),
            await store.get_summary(),
            await store.get_all_users(),
        )

    saved, alice_dates, summary, users = asyncio.run(scenario())

    assert saved is True
    assert alice_dates == ["2024-01-10"]
    assert [(e.date, e.count) for e in summary.entries] == [
        ("2024-01-10", 2),
        ("2024-01-05", 1),
    ]
    assert users == ["Alice", "bob"]


def test_async_concurrent_saves_all_land(store):
    names = [f"user{i}" for i in range(10)]

    async def scenario():
        await asyncio.gather(
            *(store.save_user_availability(name, ["2024-01-10"]) for name in names)
        )
        return await store.get_summary()

    summary = asyncio.run(scenario())

    assert summary.entries[0].count == len(names)


def test_async_validation_error_propagates(store):
    with pytest.raises(ValidationError):
        asyncio.run(store.save_user_availability("Alice", ["not-a-date"]))
