"""Application configuration loading via Pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime configuration sourced from environment variables."""

    safenet_env: Literal["dev", "prod", "test"] = Field(default="dev", alias="SAFENET_ENV")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, ge=1, le=65535, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    event_loop_lag_interval_seconds: float = Field(default=5.0, gt=0, alias="EVENT_LOOP_LAG_INTERVAL_SECONDS")
    metrics_export_timeout_seconds: float = Field(default=5.0, ge=0, alias="METRICS_EXPORT_TIMEOUT_SECONDS")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def test_mode(self) -> bool:
        """Return True when background metric collection must stay off."""

        return self.safenet_env == "test"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()  # type: ignore[call-arg]
