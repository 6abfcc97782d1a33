"""Local durable cache for the event collection."""

import json
import logging
import os
from pathlib import Path
from typing import List

from ..config.constants import EVENT_CACHE_STORAGE_KEY
from ..models.event import Event

logger = logging.getLogger(__name__)


class EventCache:
    """
    Persists the full event collection as a JSON array in one file per key.

    Read and write problems are logged and never raised: the cache only
    speeds up the first render and must not break the store.
    """

    def __init__(self, directory: Path, key: str = EVENT_CACHE_STORAGE_KEY):
        self.directory = Path(directory)
        self.key = key

    @property
    def path(self) -> Path:
        return self.directory / f"{self.key}.json"

    def load(self) -> List[Event]:
        """Read cached events, an empty list if there is no usable cache."""
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
            if not isinstance(data, list):
                raise ValueError("cache content must be a list of events")
            if not all(isinstance(item, dict) for item in data):
                raise ValueError("every cached event must be an object")
            return [Event.from_dict(item) for item in data]
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Failed to read cached events from {self.path}: {e}")
            return []

    def save(self, events: List[Event]) -> bool:
        """
        Write the collection to the cache.

        Returns:
            bool: True if the cache was written
        """
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix('.json.tmp')
            tmp_path.write_text(
                json.dumps([event.to_dict() for event in events], ensure_ascii=False),
                encoding='utf-8'
            )
            os.replace(tmp_path, self.path)
            return True
        except OSError as e:
            logger.warning(f"Failed to persist events cache to {self.path}: {e}")
            return False

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
