"""
File upload (becomes the current item) and blob download.
"""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import FileResponse

from api.deps import get_store
from config import Settings, get_settings
from errors import BlobTooLarge
from store import SyncStore

logger = logging.getLogger(__name__)
router = APIRouter(tags=["files"])


@router.post("/upload")
def upload(
    store: Annotated[SyncStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_settings)],
    file: UploadFile = File(...),
):
    """
    Store the multipart `file` field as a blob and make it the current item.
    Returns JSON: { "status": "ok", "fileId": "..." }.
    """
    max_bytes = settings.MAX_UPLOAD_BYTES
    if file.size is not None and file.size > max_bytes:
        raise BlobTooLarge(max_bytes)
    try:
        file_id = store.ingest_upload(
            file.filename or "",
            file.content_type or "",
            file.file,
            max_bytes=max_bytes,
        )
    except OSError as e:
        logger.error("Upload write failed: %s", e, exc_info=True)
        raise HTTPException(
            500, detail={"code": "upload_failed", "message": "Could not store the uploaded file."}
        ) from e
    return {"status": "ok", "fileId": file_id}


@router.get("/files/{blob_id}")
def download(blob_id: str, store: Annotated[SyncStore, Depends(get_store)]):
    path = store.blobs.path(blob_id)
    return FileResponse(path, media_type="application/octet-stream")
