from __future__ import annotations

import os
from collections import deque

MAX_LOG_ENTRIES = int(os.getenv("CHECKERS_MAX_LOG_ENTRIES", "500"))


class LogStore:
    """In-process action log, one bounded JSON-line list per game id."""

    def __init__(self, max_entries: int = MAX_LOG_ENTRIES) -> None:
        self.max_entries = max_entries
        self._data: dict[str, deque[str]] = {}

    def append(self, game_id: str, line: str) -> None:
        # oldest entries fall off once the cap is hit
        self._data.setdefault(game_id, deque(maxlen=self.max_entries)).append(line)

    def list(self, game_id: str, limit: int = 50) -> list[str]:
        """Most recent ``limit`` entries, oldest first."""
        entries = list(self._data.get(game_id, ()))
        return entries[-limit:] if limit > 0 else []

    def clear(self, game_id: str | None = None) -> None:
        if game_id is None:
            self._data.clear()
        else:
            self._data.pop(game_id, None)


logs = LogStore()
