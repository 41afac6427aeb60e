"""Interfaces the shared state store depends on."""

from pathlib import Path
from typing import BinaryIO, Optional, Protocol

from schemas.items import SavedSlot, SyncItem


class StateProtocol(Protocol):
    def load(self) -> tuple[Optional[SyncItem], dict[str, SavedSlot]]: ...

    def flush(self, current: Optional[SyncItem], slots: dict[str, SavedSlot]) -> bool: ...


class BlobProtocol(Protocol):
    def put(self, stream: BinaryIO, max_bytes: Optional[int] = None) -> str: ...

    def path(self, blob_id: str) -> Path: ...
