# core/config.py
import logging
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///library.db")

    # Web server
    host: str = os.getenv("LIBRARY_HOST", "127.0.0.1")
    port: int = int(os.getenv("LIBRARY_PORT", "8000"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the web app and the CLI"""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
