"""Persistence layer: abstract interfaces and file-based implementations."""

from .base import BlobProtocol, StateProtocol
from .blob_store import BlobStore
from .state_file import StateFile

__all__ = ["BlobProtocol", "StateProtocol", "BlobStore", "StateFile"]
