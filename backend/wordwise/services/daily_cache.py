"""
Daily Content Cache
Small JSON-file cache for content that should change once a day
(word of the day, quote of the day).

Each entry is stored with its capture timestamp (milliseconds since the
epoch) and is valid for `ttl_hours` after capture.
"""
import json
import logging
import os
import time
from pathlib import Path
from typing import Callable, Optional

from wordwise.config import Settings, get_settings

logger = logging.getLogger(__name__)

WORD_OF_THE_DAY_KEY = "wordOfTheDay"
QUOTE_OF_THE_DAY_KEY = "vocabularyQuote"


def _now_ms() -> int:
    return int(time.time() * 1000)


class DailyCache:
    """Timestamped key/value entries persisted to one JSON file"""

    def __init__(
        self,
        path: str | Path,
        ttl_hours: int = 24,
        clock: Callable[[], int] = _now_ms
    ):
        self.path = Path(path)
        self.ttl_ms = ttl_hours * 60 * 60 * 1000
        self.clock = clock

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "DailyCache":
        settings = settings or get_settings()
        return cls(settings.DAILY_CACHE_FILE, ttl_hours=settings.DAILY_CACHE_TTL_HOURS)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable cache file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[dict]:
        """
        Cached value for key.

        Returns:
            The stored value, or None if absent, expired or unreadable
        """
        entry = self._read_all().get(key)
        if not isinstance(entry, dict) or "timestamp" not in entry or "value" not in entry:
            return None
        try:
            age = self.clock() - int(entry["timestamp"])
        except (TypeError, ValueError):
            return None
        if age < 0 or age >= self.ttl_ms:
            logger.debug(f"Cache entry '{key}' expired")
            return None
        return entry["value"]

    def set(self, key: str, value: dict) -> None:
        """Store value under key with the current timestamp, overwriting."""
        data = self._read_all()
        data[key] = {"timestamp": self.clock(), "value": value}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_name(self.path.name + ".tmp")
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except OSError as e:
            logger.error(f"Failed to write cache file {self.path}: {e}")
