"""Mini README: Centralised configuration for the SkyRoutes planner.

Structure:
    * SkyroutesSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``SKYROUTES_*`` environment variables (or a
    local ``.env`` file). The planning core never reads settings itself; the
    web interface and CLI pass the relevant values in explicitly.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class SkyroutesSettings(BaseSettings):
    """Runtime configuration for the SkyRoutes service and CLI."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the planning service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the planning service exposes.",
        ge=1,
        le=65535,
    )
    default_strategy: str = Field(
        "nearest_waypoint",
        description="Waypoint sequencing strategy used when a request names none.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the CLI.",
    )
    distance_decimals: int = Field(
        1,
        description="Decimal places used when formatting itinerary distances.",
        ge=0,
        le=6,
    )

    class Config:
        env_prefix = "SKYROUTES_"
        env_file = ".env"
        case_sensitive = False

    @validator("default_strategy")
    def _normalise_strategy(cls, value: str) -> str:
        """Strategy identifiers are registered in lower case."""

        return value.strip().lower()

    @validator("log_level")
    def _validate_log_level(cls, value: str) -> str:
        """Reject level names the logging module does not know."""

        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


@lru_cache()
def get_settings() -> SkyroutesSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SkyroutesSettings()
