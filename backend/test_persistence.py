"""Tests for the JSON state documents and the blob store."""

import io
import json
import logging
import uuid

import pytest

from errors import BlobNotFound, BlobTooLarge
from repositories import BlobStore, StateFile
from schemas.items import ItemKind, SavedSlot, SyncItem


@pytest.fixture
def state(data_dir):
    return StateFile(data_dir)


@pytest.fixture
def blobs(data_dir):
    return BlobStore(data_dir / "files")


def _slot(slot_id="s1", content="hello"):
    item = SyncItem(kind=ItemKind.TEXT, content=content)
    return SavedSlot(id=slot_id, name="n", kind=ItemKind.TEXT, saved_at="t", preview=content, item=item)


def test_fresh_directory_loads_empty(state):
    assert state.load() == (None, {})


def test_round_trip(state):
    current = SyncItem(
        kind=ItemKind.FILE,
        filename="a.txt",
        mime_type="text/plain",
        file_id=str(uuid.uuid4()),
        timestamp="2026-01-01T00:00:00+00:00",
    )
    slots = {"s1": _slot("s1"), "s2": _slot("s2", "world")}
    assert state.flush(current, slots) is True
    assert state.load() == (current, slots)


def test_round_trip_without_current(state):
    state.flush(SyncItem(kind=ItemKind.TEXT, content="x"), {})
    state.flush(None, {"s1": _slot()})
    assert not state.current_path.exists()
    assert state.load() == (None, {"s1": _slot()})


def test_documents_use_camel_case(state):
    state.flush(SyncItem(kind=ItemKind.FILE, mime_type="image/png", file_id="f"), {"s1": _slot()})
    current = json.loads(state.current_path.read_text(encoding="utf-8"))
    assert current["type"] == "file"
    assert current["mimeType"] == "image/png"
    assert current["fileId"] == "f"
    slots = json.loads(state.slots_path.read_text(encoding="utf-8"))
    assert slots["s1"]["savedAt"] == "t"
    assert slots["s1"]["item"]["content"] == "hello"


def test_reads_original_document_format(state):
    state.current_path.write_text(
        json.dumps({
            "type": "text", "content": "hi", "filename": "", "mimeType": "",
            "fileId": "", "timestamp": "2026-01-01T10:00:00+02:00",
        }),
        encoding="utf-8",
    )
    current, _ = state.load()
    assert current.content == "hi"
    assert current.timestamp == "2026-01-01T10:00:00+02:00"


def test_corrupt_current_loads_empty(state):
    state.current_path.write_text("{not json", encoding="utf-8")
    state.slots_path.write_text(json.dumps({"s1": _slot().to_json_dict()}), encoding="utf-8")
    current, slots = state.load()
    assert current is None
    assert list(slots) == ["s1"]


def test_invalid_current_loads_empty(state):
    state.current_path.write_text(json.dumps({"type": "video"}), encoding="utf-8")
    assert state.load_current() is None


def test_corrupt_slots_loads_empty(state):
    state.slots_path.write_text("[1, 2, 3]", encoding="utf-8")
    assert state.load_slots() == {}
    state.slots_path.write_bytes(b"\xff\xfe garbage")
    assert state.load_slots() == {}


def test_bad_slot_entries_are_skipped(state):
    state.slots_path.write_text(
        json.dumps({"good": _slot("good").to_json_dict(), "bad": {"id": "bad"}}),
        encoding="utf-8",
    )
    assert list(state.load_slots()) == ["good"]


def test_slot_with_mismatched_key_is_skipped(state):
    state.slots_path.write_text(
        json.dumps({"key": _slot("real").to_json_dict(), "s1": _slot("s1").to_json_dict()}),
        encoding="utf-8",
    )
    assert list(state.load_slots()) == ["s1"]


def test_flush_reports_failure(state, monkeypatch):
    def broken_write(path, data):
        raise OSError("disk full")

    monkeypatch.setattr(state, "_write", broken_write)
    assert state.flush(None, {}) is False


def test_blob_put_and_read(blobs):
    blob_id = blobs.put(io.BytesIO(b"\x00\x01binary\xff"))
    assert uuid.UUID(blob_id).version == 4
    assert blobs.read(blob_id) == b"\x00\x01binary\xff"
    assert blobs.path(blob_id) == blobs.files_dir / blob_id


def test_blob_put_logs_size(blobs, caplog):
    with caplog.at_level(logging.INFO, logger="repositories.blob_store"):
        blob_id = blobs.put(io.BytesIO(b"x" * 2048))
    assert f"Blob stored: {blob_id} (2.0 KB)" in caplog.text


def test_blob_put_within_limit(blobs):
    blob_id = blobs.put(io.BytesIO(b"x" * 10), max_bytes=10)
    assert blobs.read(blob_id) == b"x" * 10


def test_blob_put_over_limit_removes_partial(blobs):
    with pytest.raises(BlobTooLarge):
        blobs.put(io.BytesIO(b"x" * 11), max_bytes=10)
    assert list(blobs.files_dir.iterdir()) == []


def test_missing_blob(blobs):
    with pytest.raises(BlobNotFound):
        blobs.path(str(uuid.uuid4()))
    assert blobs.exists(str(uuid.uuid4())) is False


@pytest.mark.parametrize("bad_id", ["", "..", "../current.json", "not-a-uuid"])
def test_malformed_blob_id_is_not_found(blobs, bad_id):
    with pytest.raises(BlobNotFound):
        blobs.path(bad_id)
