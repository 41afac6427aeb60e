"""
Connexio Backend API
Clipboard sync relay: one shared current item, named slots, uploaded files.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.helpers import error_detail, status_for
from api.routes import current_router, files_router, health_router, slots_router
from config import Settings, get_settings
from errors import ConnexioError
from store import SyncStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[SyncStore] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)
    app.state.store = store or SyncStore.open(settings.DATA_DIR)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(ConnexioError)
    async def connexio_error_handler(request: Request, exc: ConnexioError):
        return JSONResponse(status_code=status_for(exc), content={"detail": error_detail(exc)})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    app.include_router(health_router)
    app.include_router(current_router)
    app.include_router(files_router)
    app.include_router(slots_router)
    return app


def main(argv: Optional[list[str]] = None) -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Connexio sync server")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Server port")
    parser.add_argument("--data", type=Path, default=settings.DATA_DIR, help="Data directory")
    args = parser.parse_args(argv)
    settings.PORT = args.port
    settings.DATA_DIR = args.data

    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info("Connexio server starting on %s:%d", settings.HOST, settings.PORT)
    logger.info("Data directory: %s", settings.DATA_DIR)

    import uvicorn
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
