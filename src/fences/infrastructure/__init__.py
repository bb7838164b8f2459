"""Infrastructure layer - formatters and exporters."""

from .exporters import (
    BomCsvExporter,
    BomExporter,
    ExporterRegistry,
    ExportManager,
    JsonLayoutExporter,
    layout_to_dict,
)
from .formatters import (
    BomTableFormatter,
    PerimeterSummaryFormatter,
    SideLayoutFormatter,
    WarningsFormatter,
)

__all__ = [
    "BomCsvExporter",
    "BomExporter",
    "BomTableFormatter",
    "ExportManager",
    "ExporterRegistry",
    "JsonLayoutExporter",
    "PerimeterSummaryFormatter",
    "SideLayoutFormatter",
    "WarningsFormatter",
    "layout_to_dict",
]
