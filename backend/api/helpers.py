"""Shared helpers for API routes (error mapping)."""

from errors import BlobNotFound, BlobTooLarge, ConnexioError, SlotNotFound

_STATUS_BY_ERROR = (
    (SlotNotFound, 404),
    (BlobNotFound, 404),
    (BlobTooLarge, 413),
)


def status_for(error: ConnexioError) -> int:
    """HTTP status for a store error; 400 for anything unmapped."""
    for cls, status in _STATUS_BY_ERROR:
        if isinstance(error, cls):
            return status
    return 400


def error_detail(error: ConnexioError) -> dict:
    return {"code": error.code, "message": error.message}
