"""Schema for the public health probe."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"] = Field(description="degraded when the database is unreachable")
    environment: str = Field(description="APP_ENV of the running instance")
    database: Literal["connected", "disconnected"]
