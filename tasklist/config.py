"""Settings loaded from environment variables.

Environment variables:
    TASKLIST_LOG_FORMAT: "dev" (default) or "json"
    TASKLIST_LOG_LEVEL: root log level (default "INFO")
    TASKLIST_CORS_ORIGINS: comma separated allowed origins
    TASKLIST_UPCOMING_DAYS: number of dates offered by the picker (default 7)
"""

import os
from typing import Literal

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()


class Settings(BaseModel):
    """Application settings."""

    log_format: Literal["dev", "json"] = Field(default="dev", description="Log renderer")
    log_level: str = Field(default="INFO", description="Root log level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API",
    )
    upcoming_days: int = Field(
        default=7,
        ge=1,
        description="How many dates the picker offers, starting today",
    )


def load_settings() -> Settings:
    """Build Settings from the environment, falling back to defaults."""
    kwargs: dict = {}

    if val := os.environ.get("TASKLIST_LOG_FORMAT"):
        kwargs["log_format"] = "json" if val.strip().lower() == "json" else "dev"

    if val := os.environ.get("TASKLIST_LOG_LEVEL"):
        kwargs["log_level"] = val.strip().upper()

    if val := os.environ.get("TASKLIST_CORS_ORIGINS"):
        kwargs["cors_origins"] = [o.strip() for o in val.split(",") if o.strip()]

    if val := os.environ.get("TASKLIST_UPCOMING_DAYS"):
        try:
            days = int(val)
        except ValueError:
            days = 0
        if days >= 1:
            kwargs["upcoming_days"] = days
        else:
            log.warning(
                "invalid_upcoming_days_config",
                env_var="TASKLIST_UPCOMING_DAYS",
                value=val,
                fallback=7,
            )

    return Settings(**kwargs)
