"""
Flat-file persistence: one JSON array per collection.

Reads fail open (an unreadable file is served as an empty collection) and
writes report success as a bool instead of raising. There is no locking and
no atomic rename, so concurrent writers race and the last one wins.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class JsonRecordStore:
    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    def load(self, name: str) -> list[dict[str, Any]]:
        path = self.path_for(name)
        if not path.exists():
            return []
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.exception("Error reading %s", path.name)
            return []
        if not isinstance(data, list):
            logger.error("Error reading %s: expected a JSON array, got %s", path.name, type(data).__name__)
            return []
        return data

    def save(self, name: str, records: list[dict[str, Any]]) -> bool:
        path = self.path_for(name)
        try:
            payload = json.dumps(records, ensure_ascii=False, indent=2, allow_nan=False)
            self.data_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError):
            logger.exception("Error writing to %s", path.name)
            return False
        return True
