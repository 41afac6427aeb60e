"""Pydantic schemas for API request/response and persisted documents."""

from .items import ItemKind, SavedSlot, SlotSummary, SyncItem, make_preview
from .requests import SlotCreate

__all__ = [
    "ItemKind",
    "SavedSlot",
    "SlotCreate",
    "SlotSummary",
    "SyncItem",
    "make_preview",
]
