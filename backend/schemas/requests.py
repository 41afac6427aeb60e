"""Request body models for Connexio API."""

from pydantic import BaseModel

from .items import SyncItem


class SlotCreate(BaseModel):
    name: str = ""
    item: SyncItem
