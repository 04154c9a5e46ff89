import pytest

from planner import create_app
from planner.storage import AvailabilityRepository, InMemoryStorage, JSONFileStorage


@pytest.fixture
def storage():
    """In-memory storage backend, empty by default."""
    return InMemoryStorage()


@pytest.fixture
def repository(storage):
    """AvailabilityRepository backed by in-memory storage."""
    return AvailabilityRepository(storage)


@pytest.fixture
def data_file(tmp_path):
    """Path to a not-yet-created availability file in a nested folder."""
    return tmp_path / "shared" / "availability.json"


@pytest.fixture
def file_repository(data_file):
    """AvailabilityRepository backed by a JSON file."""
    return AvailabilityRepository(JSONFileStorage(data_file))


@pytest.fixture
def app(repository):
    """Create a Flask app over the in-memory repository for testing."""
    return create_app(repository)
