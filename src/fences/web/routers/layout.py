"""Fence layout endpoints."""

from fastapi import APIRouter, Query
from fastapi.responses import Response

from fences.application import LayoutOutput
from fences.application.config import config_to_input, load_config_from_dict
from fences.infrastructure.exporters import BomExporter, ExporterRegistry
from fences.web.dependencies import ComputeCommandDep
from fences.web.exceptions import LayoutComputationError, UnsupportedFormatError
from fences.web.schemas.requests import LayoutRequest
from fences.web.schemas.responses import (
    BomItemSchema,
    ExportFormatsSchema,
    LayoutOutputSchema,
    PerimeterTotalsSchema,
    SideLayoutSchema,
)

router = APIRouter(prefix="/layout", tags=["layout"])

BOM_MEDIA_TYPES = {
    "text": "text/plain",
    "csv": "text/csv",
    "json": "application/json",
}


def _compute(request: LayoutRequest, command: ComputeCommandDep) -> LayoutOutput:
    """Load the request config and run the layout command."""
    config = load_config_from_dict(request.config)
    output = command.execute(config_to_input(config))
    if not output.is_valid:
        raise LayoutComputationError(output.errors)
    return output


def _layout_output_to_schema(output: LayoutOutput) -> LayoutOutputSchema:
    """Convert LayoutOutput to response schema."""
    totals = output.totals
    assert totals is not None and output.bill_of_materials is not None

    sides = [
        SideLayoutSchema(
            side=layout.side.value,
            system=layout.system.value,
            length=layout.length,
            reserved_length=layout.reserved_length,
            available_length=layout.available_length,
            panel_count=layout.panel_count,
            gap=layout.gap,
            linear_post_count=layout.linear_post_count,
            plinth_count=layout.plinth_count,
            used_length=layout.used_length,
            tolerance_clamped=layout.tolerance_clamped,
        )
        for layout in totals.sides
    ]

    return LayoutOutputSchema(
        is_valid=output.is_valid,
        unit=output.unit.value,
        sides=sides,
        totals=PerimeterTotalsSchema(
            panel_count=totals.panel_count,
            plinth_count=totals.plinth_count,
            linear_post_count=totals.linear_post_count,
            corner_count=totals.corner_count,
            total_posts=totals.total_posts,
            clamps_per_post=totals.clamps_per_post,
            total_clamps=totals.total_clamps,
            corner_clamps=totals.corner_clamps,
            linear_clamps=totals.linear_clamps,
            corner_connectors={
                system.value: count for system, count in totals.corner_connectors.items()
            },
            used_length=totals.used_length,
        ),
        bill_of_materials=[
            BomItemSchema(name=item.name, quantity=item.quantity, details=item.details)
            for item in output.bill_of_materials.items
        ],
        warnings=output.warnings,
    )


@router.post("", response_model=LayoutOutputSchema)
async def compute_layout(
    request: LayoutRequest,
    command: ComputeCommandDep,
) -> LayoutOutputSchema:
    """Compute per-side layouts, perimeter totals and BOM from a configuration.

    Args:
        request: Request containing the fence plan configuration.
        command: Injected ComputeLayoutCommand.

    Returns:
        Layout output; lengths are in millimetres.
    """
    return _layout_output_to_schema(_compute(request, command))


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List registered file export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/bom")
async def export_bom(
    request: LayoutRequest,
    command: ComputeCommandDep,
    output_format: str = Query(default="text", alias="format"),
) -> Response:
    """Export the bill of materials as text, CSV or JSON."""
    if output_format not in BOM_MEDIA_TYPES:
        raise UnsupportedFormatError(output_format, list(BOM_MEDIA_TYPES))

    output = _compute(request, command)
    content = BomExporter(output_format=output_format).export_string(output)
    return Response(content=content, media_type=BOM_MEDIA_TYPES[output_format])
