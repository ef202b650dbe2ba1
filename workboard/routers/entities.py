"""Route factory: binds one entity to list/get/create/update/delete endpoints."""

from __future__ import annotations

from typing import Any, Callable

from fastapi import APIRouter, Depends, HTTPException

from workboard.core.config import get_settings
from workboard.core.utils import read_payload
from workboard.domain.entities import ENTITIES, Entity
from workboard.repositories import JsonRecordStore, RecordStore
from workboard.services.crud_service import (
    EntityService,
    InvalidPayloadError,
    RecordNotFoundError,
    StorageError,
)

API_PREFIX = "/api"

StoreFactory = Callable[[], RecordStore]


def default_store() -> RecordStore:
    return JsonRecordStore(get_settings().data_dir)


def build_entity_router(entity: Entity, store_factory: StoreFactory = default_store) -> APIRouter:
    router = APIRouter(prefix=f"{API_PREFIX}/{entity.name}", tags=[entity.name])
    label = entity.file_name

    def _service() -> EntityService:
        return EntityService(entity, store_factory())

    @router.get("")
    def list_items():
        return _service().list_records()

    @router.get("/{item_id}")
    def get_item(item_id: str):
        try:
            return _service().get_record(item_id)
        except RecordNotFoundError:
            raise HTTPException(404, "Item not found")

    @router.post("", status_code=201)
    def create_item(payload: Any = Depends(read_payload)):
        try:
            record = _service().create_record(payload)
        except InvalidPayloadError as exc:
            raise HTTPException(400, str(exc))
        except StorageError:
            raise HTTPException(500, "Error saving data")
        return {"message": f"{label} item created successfully", "data": record}

    @router.put("/{item_id}")
    def update_item(item_id: str, payload: Any = Depends(read_payload)):
        try:
            record = _service().update_record(item_id, payload)
        except InvalidPayloadError as exc:
            raise HTTPException(400, str(exc))
        except RecordNotFoundError:
            raise HTTPException(404, "Item not found")
        except StorageError:
            raise HTTPException(500, "Error saving data")
        return {"message": f"{label} item updated successfully", "data": record}

    @router.delete("/{item_id}")
    def delete_item(item_id: str):
        try:
            _service().delete_record(item_id)
        except RecordNotFoundError:
            raise HTTPException(404, "Item not found")
        except StorageError:
            raise HTTPException(500, "Error saving data")
        return {"message": f"{label} item deleted successfully"}

    return router


def build_entity_routers(store_factory: StoreFactory = default_store) -> list[APIRouter]:
    return [build_entity_router(entity, store_factory) for entity in ENTITIES]
