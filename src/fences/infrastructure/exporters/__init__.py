"""Exporter framework for fence plan outputs.

Registered exporters:
- bom: Bill of materials as text (or csv/json when constructed directly)
- csv: Bill of materials as semicolon-delimited CSV
- json: Complete plan with parameters, per-side layouts, totals and BOM

Usage:
    from fences.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    manager = ExportManager(output_dir=Path("./output"))
    files = manager.export_all(["bom", "json"], layout_output, project_name="plot_12")
"""

from fences.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from fences.infrastructure.exporters.bom import BomCsvExporter, BomExporter
from fences.infrastructure.exporters.json_layout import JsonLayoutExporter, layout_to_dict

__all__ = [
    "BomCsvExporter",
    "BomExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonLayoutExporter",
    "layout_to_dict",
]
