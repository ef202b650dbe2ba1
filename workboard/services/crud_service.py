"""Generic list/get/create/update/delete over one entity's collection."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from workboard.domain.entities import Entity
from workboard.domain.field_mapping import Record, to_external, to_internal
from workboard.repositories.base import RecordStore

logger = logging.getLogger(__name__)


class CrudError(Exception):
    """Base exception for entity CRUD workflow."""


class RecordNotFoundError(CrudError):
    """Raised when no record carries the requested id."""


class StorageError(CrudError):
    """Raised when the collection could not be written back."""


class InvalidPayloadError(CrudError):
    """Raised when a request body is not a JSON object."""


def coerce_id(value: Any) -> int | None:
    """Canonical integer form of an id, or None when it is not one.

    Path ids arrive as strings and some legacy files store ids as strings, so
    both sides go through this before comparison.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def next_id(records: list[Record]) -> int:
    ids = [coerce_id(r.get("id")) for r in records if isinstance(r, dict)]
    return max((i for i in ids if i is not None), default=0) + 1


class EntityService:
    """CRUD for one entity. The collection is reloaded on every call."""

    def __init__(self, entity: Entity, store: RecordStore) -> None:
        self.entity = entity
        self.store = store

    @property
    def file_name(self) -> str:
        return self.entity.file_name

    def _load(self) -> list[Record]:
        return [r for r in self.store.load(self.file_name) if isinstance(r, dict)]

    def _save(self, records: list[Record]) -> None:
        if not self.store.save(self.file_name, records):
            raise StorageError(f"Could not write {self.file_name}")

    def _index_of(self, records: list[Record], record_id: int | None) -> int:
        if record_id is None:
            return -1
        for idx, record in enumerate(records):
            if coerce_id(record.get("id")) == record_id:
                return idx
        return -1

    def _check_payload(self, payload: Any) -> Mapping[str, Any]:
        if not isinstance(payload, Mapping):
            raise InvalidPayloadError("Request body must be a JSON object")
        return payload

    def list_records(self) -> list[Record]:
        return [to_external(r, self.entity.rules) for r in self._load()]

    def get_record(self, record_id: Any) -> Record:
        records = self._load()
        idx = self._index_of(records, coerce_id(record_id))
        if idx < 0:
            raise RecordNotFoundError(f"{self.entity.name} {record_id} not found")
        return to_external(records[idx], self.entity.rules)

    def create_record(self, payload: Any) -> Record:
        payload = self._check_payload(payload)
        records = self._load()
        new_record = to_internal({**payload, "id": next_id(records)}, self.entity.rules)
        records.append(new_record)
        self._save(records)
        logger.info("Created %s id=%s", self.entity.name, new_record["id"])
        return new_record

    def update_record(self, record_id: Any, payload: Any) -> Record:
        payload = self._check_payload(payload)
        canonical = coerce_id(record_id)
        records = self._load()
        idx = self._index_of(records, canonical)
        if idx < 0:
            raise RecordNotFoundError(f"{self.entity.name} {record_id} not found")
        merged = {**records[idx], **payload, "id": canonical}
        # an alias in the payload must win over the stale internal field
        updated = to_internal(merged, self.entity.rules)
        records[idx] = updated
        self._save(records)
        logger.info("Updated %s id=%s", self.entity.name, canonical)
        return to_external(updated, self.entity.rules)

    def delete_record(self, record_id: Any) -> None:
        canonical = coerce_id(record_id)
        records = self._load()
        remaining = [r for r in records if canonical is None or coerce_id(r.get("id")) != canonical]
        if len(remaining) == len(records):
            raise RecordNotFoundError(f"{self.entity.name} {record_id} not found")
        self._save(remaining)
        logger.info("Deleted %s id=%s", self.entity.name, canonical)
