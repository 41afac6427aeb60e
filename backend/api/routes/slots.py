"""Saved slots: list, create, inspect, load into current, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.deps import get_store
from schemas.requests import SlotCreate
from store import SyncStore

router = APIRouter(prefix="/slots", tags=["slots"])


@router.get("")
def list_slots(store: Annotated[SyncStore, Depends(get_store)]):
    return JSONResponse([s.to_json_dict() for s in store.list_slots()])


@router.post("")
def create_slot(data: SlotCreate, store: Annotated[SyncStore, Depends(get_store)]):
    slot_id = store.create_slot(data.name, data.item)
    return {"status": "ok", "id": slot_id}


@router.get("/{slot_id}")
def get_slot(slot_id: str, store: Annotated[SyncStore, Depends(get_store)]):
    return JSONResponse(store.get_slot(slot_id).to_json_dict())


@router.post("/{slot_id}/load")
def load_slot(slot_id: str, store: Annotated[SyncStore, Depends(get_store)]):
    item = store.load_slot(slot_id)
    return JSONResponse({"status": "ok", "item": item.to_json_dict()})


@router.delete("/{slot_id}")
def delete_slot(slot_id: str, store: Annotated[SyncStore, Depends(get_store)]):
    store.delete_slot(slot_id)
    return {"status": "ok"}
