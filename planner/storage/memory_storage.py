"""In-memory storage backend."""

import copy


class InMemoryStorage:
    """Dict-backed storage for tests and embedding.

    Reads and writes deep-copy, so callers never share state with the backend.
    """

    def __init__(self, initial: dict[str, dict[str, bool]] | None = None):
        self._data: dict[str, dict[str, bool]] = copy.deepcopy(initial or {})
        self.write_count = 0

    def read(self) -> dict[str, dict[str, bool]]:
        return copy.deepcopy(self._data)

    def write(self, data: dict[str, dict[str, bool]]) -> None:
        self._data = copy.deepcopy(data)
        self.write_count += 1
