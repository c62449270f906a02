"""Application settings loaded from ``GROWTHCALC_*`` environment variables."""

from __future__ import annotations

from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Runtime settings for the HTTP service.

    A ``.env`` file is honoured for local development, e.g.::

        GROWTHCALC_LOG_LEVEL=DEBUG
        GROWTHCALC_CORS_ORIGINS='["http://localhost:8080"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="GROWTHCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False, description="Run Flask in debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Level for the growthcalc logger",
    )
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        description="Browser origins allowed to call /api/*",
    )
    service_name: str = "growthcalc"
