"""FastAPI dependencies for routes."""

from fastapi import Request

from store import SyncStore


def get_store(request: Request) -> SyncStore:
    """Return the app's SyncStore. Use in Depends()."""
    return request.app.state.store
