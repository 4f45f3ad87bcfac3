"""
score_store.py
--------------
High score persistence behind a small key-value port.

Responsibilities
----------------
- Define the ``ScoreStore`` port (``get``/``set`` of string values) and
  ``StorageError``, the only error a store may raise.
- Ship a JSON-file store and an in-memory store.
- ScoreManager: read, validate and update the recorded high score.
  Storage failures and corrupt data are logged and never escape.

Stored Format
-------------
The value under ``Persistence.STORAGE_KEY`` is a JSON object:
    {"highScore": <number>, "lastPlayed": <epoch ms>}
"""

import json
import math
import os
import time

from swarmfall.core.debug.debug_logger import DebugLogger
from swarmfall.core.runtime.game_settings import Persistence


class StorageError(Exception):
    """A score store could not read or write its medium."""


# ===========================================================
# Stores
# ===========================================================

class ScoreStore:
    """Key-value port. Implementations raise StorageError on any medium failure."""

    def get(self, key: str):
        raise NotImplementedError

    def set(self, key: str, value: str):
        raise NotImplementedError


class MemoryScoreStore(ScoreStore):
    """Process-local store, used headless and in tests."""

    def __init__(self, initial: dict = None):
        self.data = dict(initial or {})

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value


class JsonFileScoreStore(ScoreStore):
    """Stores every key in one JSON object on disk."""

    def __init__(self, path: str = Persistence.DEFAULT_PATH):
        self.path = path

    def _read_all(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageError(f"unreadable store {self.path}: {e}") from e
        except OSError as e:
            raise StorageError(f"cannot open {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"store {self.path} is not a JSON object")
        return data

    def get(self, key):
        return self._read_all().get(key)

    def set(self, key, value):
        try:
            data = self._read_all()
        except StorageError as e:
            DebugLogger.warn(f"Overwriting damaged store: {e}", category="persistence")
            data = {}
        data[key] = value
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except (OSError, TypeError) as e:
            raise StorageError(f"cannot write {self.path}: {e}") from e


# ===========================================================
# Score Manager
# ===========================================================

class ScoreManager:
    """High score bookkeeping over an injected ScoreStore."""

    def __init__(self, store: ScoreStore = None, key: str = Persistence.STORAGE_KEY, clock=time.time):
        """
        Args:
            store: Key-value port (in-memory store when omitted)
            key: Storage key for the high score record
            clock: Wall-clock source for the ``lastPlayed`` stamp
        """
        self.store = store if store is not None else MemoryScoreStore()
        self.key = key
        self.clock = clock

    def save_score(self, score) -> bool:
        """Write ``score`` as the high score record. Returns False when storage failed."""
        payload = json.dumps({"highScore": score, "lastPlayed": int(self.clock() * 1000)})
        try:
            self.store.set(self.key, payload)
        except StorageError as e:
            DebugLogger.warn(f"High score not saved: {e}", category="persistence")
            return False
        DebugLogger.system(f"High score saved: {score}", category="persistence")
        return True

    def get_high_score(self):
        """
        Recorded high score, 0 when nothing is stored.

        Unreadable or malformed records are logged, overwritten with 0 and
        reported as 0.
        """
        try:
            raw = self.store.get(self.key)
        except StorageError as e:
            DebugLogger.warn(f"Error reading high score, resetting to 0: {e}", category="persistence")
            self.save_score(0)
            return 0

        if raw is None:
            return 0

        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            DebugLogger.warn(f"Corrupted high score data, resetting to 0: {e}", category="persistence")
            self.save_score(0)
            return 0

        value = data.get("highScore") if isinstance(data, dict) else None
        if not self._is_valid_score(value):
            DebugLogger.warn("Corrupted high score data, resetting to 0", category="persistence")
            self.save_score(0)
            return 0

        return value

    @staticmethod
    def _is_valid_score(value) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return not math.isnan(value)

    def is_new_high_score(self, score) -> bool:
        return score > self.get_high_score()

    def update_high_score(self, score) -> bool:
        """Persist ``score`` when it beats the record. Returns True when a new record was saved."""
        if not self.is_new_high_score(score):
            return False
        return self.save_score(score)
