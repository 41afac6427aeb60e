"""Content models shared by the store, persistence and API layers."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

PREVIEW_LENGTH = 50


class ItemKind(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    FILE = "file"


class _CamelModel(BaseModel):
    # camelCase on the wire and on disk, snake_case in Python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class SyncItem(_CamelModel):
    """The shared clipboard payload. `content` holds text or base64 image data."""

    kind: ItemKind = Field(alias="type")
    content: str = ""
    filename: str = ""
    mime_type: str = ""
    file_id: str = ""
    timestamp: str = ""


class SlotSummary(_CamelModel):
    id: str
    name: str = ""
    kind: ItemKind = Field(alias="type")
    saved_at: str = ""
    preview: str = ""


class SavedSlot(SlotSummary):
    item: SyncItem

    def summary(self) -> SlotSummary:
        return SlotSummary(**self.model_dump(exclude={"item"}))


def make_preview(item: SyncItem) -> str:
    """First 50 characters of a text item, with "..." when cut. Empty otherwise."""
    if item.kind is not ItemKind.TEXT:
        return ""
    if len(item.content) > PREVIEW_LENGTH:
        return item.content[:PREVIEW_LENGTH] + "..."
    return item.content
