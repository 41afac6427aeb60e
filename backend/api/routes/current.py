"""Current item: get, replace, clear."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.deps import get_store
from schemas.items import SyncItem
from store import SyncStore

router = APIRouter(prefix="/current", tags=["current"])


@router.get("")
def get_current(store: Annotated[SyncStore, Depends(get_store)]):
    item = store.get_current()
    return JSONResponse(item.to_json_dict() if item else {})


@router.post("")
def set_current(item: SyncItem, store: Annotated[SyncStore, Depends(get_store)]):
    store.set_current(item)
    return {"status": "ok"}


@router.delete("")
def clear_current(store: Annotated[SyncStore, Depends(get_store)]):
    store.clear_current()
    return {"status": "ok"}
