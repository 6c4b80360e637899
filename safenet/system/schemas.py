"""Pydantic schemas for system endpoints."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field

SERVICE_NAME = "safenet"


def utc_timestamp() -> str:
    """Return the current UTC time as ISO-8601 with millisecond precision."""

    now = datetime.now(tz=UTC)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class HealthStatus(BaseModel):
    status: Literal["ok"] = "ok"
    service: str = SERVICE_NAME
    time: str = Field(default_factory=utc_timestamp)
