"""JSON file storage backend for the shared availability file."""

import json
import logging
from pathlib import Path

from planner.exceptions import StorageWriteError

logger = logging.getLogger(__name__)


class JSONFileStorage:
    """Whole-file JSON storage at a fixed path.

    The file and its parent directory are created on first access. Anything
    that cannot be read back as a JSON object (missing, empty, corrupt,
    unreadable) is treated as an empty mapping.
    """

    def __init__(self, path: Path):
        """
        Initialize storage.

        Args:
            path: Location of the shared availability JSON file
        """
        self.path = Path(path)

    def ensure_file(self) -> None:
        """Create the data folder and an empty data file if missing."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            logger.info(f"Creating availability file at {self.path}")
            self.write({})

    def read(self) -> dict[str, dict[str, bool]]:
        """
        Read the stored mapping.

        Returns:
            The stored ``{date: {name: true}}`` mapping, or an empty dict if the
            file is missing, empty, corrupt or unreadable.
        """
        try:
            self.ensure_file()
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, StorageWriteError) as e:
            logger.warning(f"Could not read {self.path}, using empty record: {e}")
            return {}
        except UnicodeDecodeError as e:
            logger.warning(f"Invalid UTF-8 in {self.path}, using empty record: {e}")
            return {}

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Malformed JSON in {self.path}, using empty record: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(
                f"Expected a JSON object in {self.path}, "
                f"got {type(data).__name__}; using empty record"
            )
            return {}

        return data

    def write(self, data: dict[str, dict[str, bool]]) -> None:
        """
        Overwrite the file with ``data``.

        Raises:
            StorageWriteError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except OSError as e:
            logger.error(f"Failed to write {self.path}: {e}")
            raise StorageWriteError(f"Failed to write {self.path}: {e}") from e
