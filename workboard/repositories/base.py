from __future__ import annotations

from typing import Any, Protocol


class RecordStore(Protocol):
    """Whole-collection persistence keyed by a resource (file) name."""

    def load(self, name: str) -> list[dict[str, Any]]:
        ...

    def save(self, name: str, records: list[dict[str, Any]]) -> bool:
        ...
