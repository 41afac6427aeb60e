"""
Blob storage for uploaded binary payloads.
One file per upload under <data_dir>/files, named by a random UUID4.
Blobs are write-once: there is no update or delete.
"""

import logging
import uuid
from pathlib import Path
from typing import BinaryIO, Optional

from errors import BlobNotFound, BlobTooLarge

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


class BlobStore:
    """File-based blob storage keyed by generated ID."""

    def __init__(self, files_dir: Path):
        self.files_dir = Path(files_dir)
        self.files_dir.mkdir(parents=True, exist_ok=True)

    def put(self, stream: BinaryIO, max_bytes: Optional[int] = None) -> str:
        """
        Copy `stream` into a new blob and return its ID.

        Raises OSError if the write fails (a partial file may be left behind)
        and BlobTooLarge if the stream is longer than `max_bytes`.
        """
        blob_id = str(uuid.uuid4())
        path = self.files_dir / blob_id
        written = 0
        with open(path, "wb") as out:
            while True:
                chunk = stream.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if max_bytes is not None and written > max_bytes:
                    break
                out.write(chunk)
        if max_bytes is not None and written > max_bytes:
            path.unlink(missing_ok=True)
            raise BlobTooLarge(max_bytes)
        logger.info("Blob stored: %s (%.1f KB)", blob_id, written / 1024)
        return blob_id

    def path(self, blob_id: str) -> Path:
        """On-disk path of an existing blob. Raises BlobNotFound."""
        try:
            canonical = str(uuid.UUID(blob_id))
        except (ValueError, TypeError):
            raise BlobNotFound(blob_id)
        if canonical != blob_id:
            raise BlobNotFound(blob_id)
        p = self.files_dir / blob_id
        if not p.is_file():
            raise BlobNotFound(blob_id)
        return p

    def exists(self, blob_id: str) -> bool:
        try:
            self.path(blob_id)
        except BlobNotFound:
            return False
        return True

    def read(self, blob_id: str) -> bytes:
        return self.path(blob_id).read_bytes()
