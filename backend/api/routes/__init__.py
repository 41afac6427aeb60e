"""API route modules."""

from .health import router as health_router
from .current import router as current_router
from .files import router as files_router
from .slots import router as slots_router

__all__ = [
    "health_router",
    "current_router",
    "files_router",
    "slots_router",
]
