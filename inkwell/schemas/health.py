"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness payload used by load balancers and the client's startup check."""

    status: Literal["ok"] = "ok"
    version: str = Field(description="Running API version")
    environment: str = Field(description="APP_ENV of the running process (dev, prod, test)")
    database: Literal["connected", "disconnected"] | None = None
