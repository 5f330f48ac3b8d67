"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class ConfigRequest(BaseModel):
    """Request carrying a full enclosure configuration."""

    config: dict[str, Any] = Field(..., description="Full enclosure configuration JSON")


class GenerateRequest(ConfigRequest):
    """Request for generating an enclosure."""

    format: str | None = Field(
        default=None,
        description="Response format: 'json' (operation tree) or 'scad'. "
        "Defaults to output.format from the configuration.",
    )
