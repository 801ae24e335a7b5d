"""
Runtime configuration.

Uses ``pydantic_settings.BaseSettings`` for environment variable
binding, type coercion, and validation.  Only the HTTP server is
configured here; ``LOG_LEVEL`` is read by the logger itself.
Detector thresholds, score weights and grade cutoffs are fixed
module constants.
"""

from __future__ import annotations

import functools

import pydantic
import pydantic_settings


class Settings(pydantic_settings.BaseSettings):
    """Process-wide settings loaded from the environment.

    Attributes:
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        environment: ``production`` disables auto-reload.
        max_personas: Upper bound on personas accepted per
            request; analysis cost is quadratic in this.
    """

    host: str = pydantic.Field(default="0.0.0.0", validation_alias="UVICORN_HOST")
    port: int = pydantic.Field(default=3001, validation_alias="UVICORN_PORT")
    environment: str = pydantic.Field(default="development", validation_alias="ENVIRONMENT")
    max_personas: int = pydantic.Field(
        default=100,
        ge=1,
        validation_alias="PERSONA_PRIVACY_MAX_PERSONAS",
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@functools.cache
def get_settings() -> Settings:
    """Return the cached settings instance.

    Tests that patch the environment call ``get_settings.cache_clear()``.
    """
    return Settings()
