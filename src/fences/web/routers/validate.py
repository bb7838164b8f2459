"""Configuration validation endpoints."""

from fastapi import APIRouter

from fences.application.config import load_config_from_dict, validate_config
from fences.web.dependencies import CorrugationTableDep
from fences.web.schemas.requests import ConfigValidateRequest
from fences.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
    table: CorrugationTableDep,
) -> ValidationResultSchema:
    """Validate a fence plan configuration without computing the BOM.

    Schema errors (unknown fields, negative lengths, inverted gap range)
    are raised as ConfigError and returned as 422 by the exception handler.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config, table)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
