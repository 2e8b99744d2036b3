"""Best-score persistence.

The engine only needs a tiny key-value capability: read an integer under a
key (absent when never written) and write one back. Two stores ship here,
a JSON file for the frontends and an in-memory dict for tests.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "bestScore"
BEST_SCORE_FILE = "best_score.json"


class KeyValueStore(Protocol):
    def get(self, key: str) -> int | None: ...

    def set(self, key: str, value: int) -> None: ...


class MemoryStore:
    """Dict-backed store; nothing survives the process."""

    def __init__(self, initial: dict[str, int] | None = None) -> None:
        self._values: dict[str, int] = dict(initial or {})

    def get(self, key: str) -> int | None:
        return self._values.get(key)

    def set(self, key: str, value: int) -> None:
        self._values[key] = value


class JsonFileStore:
    """Loads and saves integer values from a JSON object on disk."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._values: dict[str, int] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if self.filepath.exists():
            data = json.loads(self.filepath.read_text())
            if not isinstance(data, dict):
                raise ValueError(f"{self.filepath} does not hold a JSON object.")
            for key, value in data.items():
                # bool is an int subclass; a stored true/false is not a score
                if isinstance(value, int) and not isinstance(value, bool):
                    self._values[key] = value

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self.filepath.write_text(json.dumps(self._values, indent=2) + "\n")

    # -- queries --------------------------------------------------------------

    def get(self, key: str) -> int | None:
        return self._values.get(key)

    def set(self, key: str, value: int) -> None:
        self._values[key] = value
        self.save()


def read_best_score(store: KeyValueStore) -> int:
    """Return the stored best score, treating absence as 0."""
    value = store.get(BEST_SCORE_KEY)
    return value if value is not None and value > 0 else 0


def open_store(filepath: Path) -> KeyValueStore:
    """Open the JSON store at *filepath*, falling back to memory.

    A corrupt or unreadable file must not keep the game from starting, so
    the failure is logged and the session keeps its best score in memory.
    """
    try:
        return JsonFileStore(filepath)
    except (OSError, ValueError) as exc:
        logger.warning("Best score file %s is unusable (%s); not persisting.", filepath, exc)
        return MemoryStore()
