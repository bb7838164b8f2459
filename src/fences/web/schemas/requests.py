"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class LayoutRequest(BaseModel):
    """Request for computing a fence plan from a configuration."""

    config: dict[str, Any] = Field(
        default_factory=dict,
        description="Fence plan configuration JSON; omitted sections use defaults",
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Fence plan configuration JSON")
