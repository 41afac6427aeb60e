"""
Connexio shared state store.
Holds the current item and the slot collection in memory, guarded by one
reader/writer lock, and flushes both to disk on every mutation.

Layout on disk:
  data/
    current.json   current item (absent when cleared)
    slots.json     saved slots keyed by ID
    files/{id}     uploaded blobs
"""

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import BinaryIO, Optional

from errors import SlotNotFound
from locks import ReadWriteLock
from repositories import BlobProtocol, BlobStore, StateFile, StateProtocol
from schemas.items import ItemKind, SavedSlot, SlotSummary, SyncItem, make_preview

logger = logging.getLogger(__name__)


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


class SyncStore:
    """Current item + named slots. Last writer wins; reads return copies."""

    def __init__(self, state: StateProtocol, blobs: BlobProtocol):
        self.state = state
        self.blobs = blobs
        self._lock = ReadWriteLock()
        self._current, self._slots = state.load()
        logger.info(
            "Loaded state: current item %s, %d slot(s)",
            "present" if self._current else "empty",
            len(self._slots),
        )

    @classmethod
    def open(cls, data_dir: Path) -> "SyncStore":
        data_dir = Path(data_dir)
        return cls(StateFile(data_dir), BlobStore(data_dir / "files"))

    def _flush(self) -> None:
        # caller holds the write lock
        self.state.flush(self._current, self._slots)

    # Current item
    def get_current(self) -> Optional[SyncItem]:
        with self._lock.read_locked():
            if self._current is None:
                return None
            return self._current.model_copy(deep=True)

    def set_current(self, item: SyncItem) -> None:
        item = item.model_copy(deep=True)
        with self._lock.write_locked():
            self._current = item
            self._flush()

    def clear_current(self) -> None:
        with self._lock.write_locked():
            self._current = None
            self._flush()

    def ingest_upload(
        self,
        filename: str,
        mime_type: str,
        stream: BinaryIO,
        max_bytes: Optional[int] = None,
    ) -> str:
        """
        Store an uploaded file as a blob and make it the current item.
        The blob is written without holding the lock; if that write raises,
        the current item is left as it was.
        """
        blob_id = self.blobs.put(stream, max_bytes=max_bytes)
        item = SyncItem(
            kind=ItemKind.FILE,
            filename=filename,
            mime_type=mime_type,
            file_id=blob_id,
            timestamp=utc_now(),
        )
        with self._lock.write_locked():
            self._current = item
            self._flush()
        logger.info("Upload stored: %s (%s) -> %s", filename, mime_type or "unknown type", blob_id)
        return blob_id

    # Slots
    def list_slots(self) -> list[SlotSummary]:
        with self._lock.read_locked():
            return [slot.summary() for slot in self._slots.values()]

    def get_slot(self, slot_id: str) -> SavedSlot:
        with self._lock.read_locked():
            slot = self._slots.get(slot_id)
            if slot is None:
                raise SlotNotFound(slot_id)
            return slot.model_copy(deep=True)

    def create_slot(self, name: str, item: SyncItem) -> str:
        slot_id = str(uuid.uuid4())
        slot = SavedSlot(
            id=slot_id,
            name=name,
            kind=item.kind,
            saved_at=utc_now(),
            preview=make_preview(item),
            item=item.model_copy(deep=True),
        )
        with self._lock.write_locked():
            self._slots[slot_id] = slot
            self._flush()
        logger.info("Slot created: %s (%r)", slot_id, name)
        return slot_id

    def load_slot(self, slot_id: str) -> SyncItem:
        """Make a slot's item current and return a copy of it."""
        with self._lock.write_locked():
            slot = self._slots.get(slot_id)
            if slot is None:
                raise SlotNotFound(slot_id)
            self._current = slot.item.model_copy(deep=True)
            self._flush()
            loaded = self._current.model_copy(deep=True)
        logger.info("Slot loaded: %s", slot_id)
        return loaded

    def delete_slot(self, slot_id: str) -> None:
        # blobs referenced by the slot are kept
        with self._lock.write_locked():
            removed = self._slots.pop(slot_id, None)
            self._flush()
        if removed is not None:
            logger.info("Slot deleted: %s", slot_id)
