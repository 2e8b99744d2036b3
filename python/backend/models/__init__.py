from backend.models.board import Direction, Grid
from backend.models.highscore import (
    BEST_SCORE_FILE,
    BEST_SCORE_KEY,
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    open_store,
)

__all__ = [
    "BEST_SCORE_FILE",
    "BEST_SCORE_KEY",
    "Direction",
    "Grid",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "open_store",
]
