"""Pydantic schemas for the REST API."""

from fences.web.schemas.requests import ConfigValidateRequest, LayoutRequest
from fences.web.schemas.responses import (
    BomItemSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    LayoutOutputSchema,
    PerimeterTotalsSchema,
    SideLayoutSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "LayoutRequest",
    # Responses
    "BomItemSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "LayoutOutputSchema",
    "PerimeterTotalsSchema",
    "SideLayoutSchema",
    "ValidationResultSchema",
]
