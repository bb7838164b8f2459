"""Bill of Materials exporter for fence plans.

Output formats: text, csv, json. The CSV flavour uses a semicolon
delimiter and is written with a UTF-8 byte order mark so spreadsheet
applications pick up the encoding.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from fences.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from fences.application.dtos import LayoutOutput
    from fences.domain import BillOfMaterials


logger = logging.getLogger(__name__)

CSV_HEADER = ["Element", "Quantity", "Details"]


@ExporterRegistry.register("bom")
class BomExporter:
    """Bill of Materials exporter.

    Attributes:
        format_name: "bom"
        file_extension: "txt", "csv", or "json" based on output_format
    """

    format_name: ClassVar[str] = "bom"

    def __init__(self, output_format: str = "text") -> None:
        """Initialize the exporter.

        Args:
            output_format: Output format - "text", "csv", or "json".
        """
        if output_format not in ("text", "csv", "json"):
            raise ValueError(f"Unsupported BOM format: {output_format}")
        self.output_format = output_format
        self.file_extension = {"text": "txt", "csv": "csv", "json": "json"}[output_format]

    def export(self, output: LayoutOutput, path: Path) -> None:
        """Write the BOM to ``path``."""
        content = self.export_string(output)
        encoding = "utf-8-sig" if self.output_format == "csv" else "utf-8"
        path.write_text(content, encoding=encoding)
        logger.info(f"Exported BOM to {path}")

    def export_string(self, output: LayoutOutput) -> str:
        """Render the BOM of ``output`` in the configured format."""
        bom = output.bill_of_materials
        if bom is None:
            raise ValueError("Layout output has no bill of materials")

        if self.output_format == "csv":
            return self.format_csv(bom)
        if self.output_format == "json":
            return self.format_json(bom)
        return self.format_text(bom)

    def format_text(self, bom: BillOfMaterials) -> str:
        lines = [
            "=" * 60,
            "BILL OF MATERIALS",
            "=" * 60,
            "",
        ]
        if not bom.items:
            lines.append("  (No items)")
        for item in bom.items:
            lines.append(f"  {item.name}: {item.quantity}")
            if item.details:
                lines.append(f"    {item.details}")
        lines.append("")
        return "\n".join(lines)

    def format_csv(self, bom: BillOfMaterials) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, delimiter=";", lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for item in bom.items:
            writer.writerow([item.name, item.quantity, item.details.replace(";", ",")])
        return buffer.getvalue()

    def format_json(self, bom: BillOfMaterials) -> str:
        data = {
            "items": [
                {"name": item.name, "quantity": item.quantity, "details": item.details}
                for item in bom.items
            ],
            "total_pieces": bom.total_pieces,
        }
        return json.dumps(data, indent=2, ensure_ascii=False)


@ExporterRegistry.register("csv")
class BomCsvExporter(BomExporter):
    """BOM exporter fixed to the semicolon-delimited CSV format."""

    format_name: ClassVar[str] = "csv"

    def __init__(self) -> None:
        super().__init__(output_format="csv")
