"""
JSON-file persistence for the shared state.
Structure on disk:
  data/
    current.json   the current SyncItem (absent when there is none)
    slots.json     {slot_id: SavedSlot}
Both documents are rewritten in full on every flush.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from schemas.items import SavedSlot, SyncItem

logger = logging.getLogger(__name__)

CURRENT_FILENAME = "current.json"
SLOTS_FILENAME = "slots.json"


class StateFile:
    """Loads and flushes the current item and slot collection.

    Not thread-safe on its own: callers serialize flushes (SyncStore holds its
    write lock across every flush).
    """

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.current_path = self.data_dir / CURRENT_FILENAME
        self.slots_path = self.data_dir / SLOTS_FILENAME

    def _read(self, path: Path) -> Optional[object]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable %s: %s", path.name, e)
            return None

    def _write(self, path: Path, data) -> None:
        tmp = path.with_suffix(".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        tmp.replace(path)

    def load_current(self) -> Optional[SyncItem]:
        data = self._read(self.current_path)
        if data is None:
            return None
        try:
            return SyncItem.model_validate(data)
        except ValidationError as e:
            logger.warning("Ignoring malformed %s: %s", CURRENT_FILENAME, e)
            return None

    def load_slots(self) -> dict[str, SavedSlot]:
        data = self._read(self.slots_path)
        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed %s: expected an object", SLOTS_FILENAME)
            return {}
        slots = {}
        for slot_id, raw in data.items():
            try:
                slot = SavedSlot.model_validate(raw)
            except ValidationError as e:
                logger.warning("Skipping malformed slot %s: %s", slot_id, e)
                continue
            if slot.id != slot_id:
                logger.warning("Skipping slot %s: stored id is %r", slot_id, slot.id)
                continue
            slots[slot_id] = slot
        return slots

    def load(self) -> tuple[Optional[SyncItem], dict[str, SavedSlot]]:
        """Read both documents. Missing or corrupt documents load as empty."""
        return self.load_current(), self.load_slots()

    def flush(self, current: Optional[SyncItem], slots: dict[str, SavedSlot]) -> bool:
        """
        Overwrite both documents. Returns False (after logging) if any write
        failed; the caller's in-memory state stays authoritative either way.
        """
        ok = True
        try:
            if current is None:
                self.current_path.unlink(missing_ok=True)
            else:
                self._write(self.current_path, current.to_json_dict())
        except OSError as e:
            logger.error("Failed to write %s: %s", CURRENT_FILENAME, e, exc_info=True)
            ok = False
        try:
            self._write(
                self.slots_path,
                {slot_id: slot.to_json_dict() for slot_id, slot in slots.items()},
            )
        except OSError as e:
            logger.error("Failed to write %s: %s", SLOTS_FILENAME, e, exc_info=True)
            ok = False
        return ok
