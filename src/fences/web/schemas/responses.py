"""Pydantic response schemas for the REST API.

All lengths are in millimetres.
"""

from typing import Any

from pydantic import BaseModel, Field


class SideLayoutSchema(BaseModel):
    """Solved layout of one side."""

    side: str = Field(..., description="Side name")
    system: str = Field(..., description="Plinth system")
    length: float = Field(..., description="Side length")
    reserved_length: float = Field(..., description="Width taken by gates and wickets")
    available_length: float = Field(..., description="Length left for panels")
    panel_count: int = Field(..., description="Number of panels")
    gap: float = Field(..., description="Gap between consecutive panels")
    linear_post_count: int = Field(..., description="Posts along the side")
    plinth_count: int = Field(..., description="Precast plinths along the side")
    used_length: float = Field(..., description="Available plus reserved length")
    tolerance_clamped: bool = Field(
        default=False, description="Gap was clamped because no count fit the tolerance"
    )


class PerimeterTotalsSchema(BaseModel):
    """Quantities summed over the whole perimeter."""

    panel_count: int
    plinth_count: int
    linear_post_count: int
    corner_count: int
    total_posts: int
    clamps_per_post: int
    total_clamps: int
    corner_clamps: int
    linear_clamps: int
    corner_connectors: dict[str, int] = Field(
        default_factory=dict, description="Corner connectors by plinth system"
    )
    used_length: float


class BomItemSchema(BaseModel):
    """Bill of materials line."""

    name: str = Field(..., description="Element name")
    quantity: int = Field(..., description="Number of pieces")
    details: str = Field(default="", description="Dimensions or notes")


class LayoutOutputSchema(BaseModel):
    """Response for layout computation."""

    is_valid: bool = Field(..., description="Whether computation was successful")
    unit: str = Field(..., description="Display unit of the request")
    sides: list[SideLayoutSchema] = Field(
        default_factory=list, description="Per-side layouts in perimeter order"
    )
    totals: PerimeterTotalsSchema
    bill_of_materials: list[BomItemSchema] = Field(
        default_factory=list, description="Bill of materials"
    )
    warnings: list[str] = Field(default_factory=list, description="Soft warnings")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
