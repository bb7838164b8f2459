"""JSON exporter for complete fence plans."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from fences.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from fences.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)


def layout_to_dict(output: LayoutOutput) -> dict[str, Any]:
    """Convert a layout output to a JSON-ready dictionary.

    Lengths are reported in millimetres regardless of the display unit.
    """
    totals = output.totals
    if totals is None:
        return {"is_valid": False, "errors": list(output.errors)}

    params = output.parameters
    data: dict[str, Any] = {
        "is_valid": output.is_valid,
        "unit": output.unit.value,
        "parameters": None,
        "sides": [
            {
                "side": layout.side.value,
                "system": layout.system.value,
                "length_mm": layout.length,
                "reserved_mm": layout.reserved_length,
                "available_mm": layout.available_length,
                "panel_count": layout.panel_count,
                "gap_mm": layout.gap,
                "linear_post_count": layout.linear_post_count,
                "plinth_count": layout.plinth_count,
                "used_length_mm": layout.used_length,
                "tolerance_clamped": layout.tolerance_clamped,
            }
            for layout in totals.sides
        ],
        "openings": [
            {
                "kind": opening.kind.value,
                "enabled": opening.enabled,
                "side": opening.side.value,
                "width_mm": opening.width,
                "height_mm": opening.height,
                "offset_mm": opening.offset,
            }
            for opening in output.openings
        ],
        "totals": {
            "panel_count": totals.panel_count,
            "plinth_count": totals.plinth_count,
            "linear_post_count": totals.linear_post_count,
            "corner_count": totals.corner_count,
            "total_posts": totals.total_posts,
            "clamps_per_post": totals.clamps_per_post,
            "total_clamps": totals.total_clamps,
            "corner_clamps": totals.corner_clamps,
            "linear_clamps": totals.linear_clamps,
            "corner_connectors": {
                system.value: count for system, count in totals.corner_connectors.items()
            },
            "used_length_mm": totals.used_length,
        },
        "bill_of_materials": [],
        "warnings": list(totals.warnings),
    }
    if params is not None:
        data["parameters"] = {
            key: (value.value if hasattr(value, "value") else value)
            for key, value in asdict(params).items()
        }
    if output.bill_of_materials is not None:
        data["bill_of_materials"] = [asdict(item) for item in output.bill_of_materials.items]
    return data


@ExporterRegistry.register("json")
class JsonLayoutExporter:
    """Exports the whole plan (parameters, sides, totals, BOM) as JSON."""

    format_name: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent
        self.file_extension = "json"

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported layout JSON to {path}")

    def export_string(self, output: LayoutOutput) -> str:
        return json.dumps(layout_to_dict(output), indent=self.indent, ensure_ascii=False)
