"""
Connexio backend configuration.
Single source of truth for environment and app settings.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "Connexio API"
    APP_VERSION: str = "1.0.0"
    ALLOWED_ORIGINS: list[str]

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Storage
    DATA_DIR: Path
    MAX_UPLOAD_BYTES: int = 100 * 1024 * 1024

    def __init__(self):
        origins = os.environ.get("ALLOWED_ORIGINS", "*")
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()] or ["*"]
        self.HOST = (os.environ.get("CONNEXIO_HOST") or "0.0.0.0").strip()
        self.PORT = int(os.environ.get("CONNEXIO_PORT") or 8080)
        self.LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
        self.DATA_DIR = Path(os.environ.get("CONNEXIO_DATA_DIR") or "data")
        max_mb = int(os.environ.get("CONNEXIO_MAX_UPLOAD_MB") or 100)
        self.MAX_UPLOAD_BYTES = max_mb * 1024 * 1024
