"""Unit tests for the exporter framework and fence plan exporters."""

import json
from pathlib import Path

import pytest

from fences.application import ComputeLayoutCommand, LayoutOutput, PlanInput
from fences.infrastructure.exporters import (
    BomCsvExporter,
    BomExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonLayoutExporter,
    layout_to_dict,
)


@pytest.fixture
def output() -> LayoutOutput:
    return ComputeLayoutCommand().execute(PlanInput())


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def test_builtin_formats_registered(self) -> None:
        assert ExporterRegistry.available_formats() == ["bom", "csv", "json"]

    def test_get(self) -> None:
        assert ExporterRegistry.get("bom") is BomExporter
        assert ExporterRegistry.get("csv") is BomCsvExporter
        assert ExporterRegistry.get("json") is JsonLayoutExporter

    def test_get_unknown_format(self) -> None:
        with pytest.raises(KeyError, match="No exporter registered for format 'pdf'"):
            ExporterRegistry.get("pdf")

    def test_is_registered(self) -> None:
        assert ExporterRegistry.is_registered("json")
        assert not ExporterRegistry.is_registered("svg")

    def test_exporters_satisfy_protocol(self) -> None:
        assert isinstance(BomExporter(), Exporter)
        assert isinstance(JsonLayoutExporter(), Exporter)


class TestBomExporter:
    """Tests for BomExporter."""

    def test_unsupported_format(self) -> None:
        with pytest.raises(ValueError, match="Unsupported BOM format"):
            BomExporter(output_format="xlsx")

    def test_text(self, output: LayoutOutput) -> None:
        text = BomExporter().export_string(output)

        assert "BILL OF MATERIALS" in text
        assert "  Fence panel: 17" in text
        assert "  Post: 25" in text

    def test_csv(self, output: LayoutOutput) -> None:
        lines = BomExporter(output_format="csv").export_string(output).splitlines()

        assert lines[0] == "Element;Quantity;Details"
        assert lines[1] == "Fence panel;17;type 3D, width 2.50 m, height 1.50 m"
        assert lines[-1].startswith("Wicket;1;")

    def test_json(self, output: LayoutOutput) -> None:
        data = json.loads(BomExporter(output_format="json").export_string(output))

        assert data["items"][0] == {
            "name": "Fence panel",
            "quantity": 17,
            "details": "type 3D, width 2.50 m, height 1.50 m",
        }
        assert data["total_pieces"] == sum(item["quantity"] for item in data["items"])

    def test_csv_file_has_byte_order_mark(self, output: LayoutOutput, tmp_path: Path) -> None:
        path = tmp_path / "bom.csv"
        BomCsvExporter().export(output, path)

        assert path.read_bytes().startswith(b"\xef\xbb\xbf")
        assert path.read_text(encoding="utf-8-sig").startswith("Element;Quantity;Details")

    def test_output_without_bom(self) -> None:
        invalid = ComputeLayoutCommand().execute(PlanInput(panel_width=""))
        with pytest.raises(ValueError, match="no bill of materials"):
            BomExporter().export_string(invalid)


class TestJsonLayoutExporter:
    """Tests for the full layout JSON export."""

    def test_layout_to_dict(self, output: LayoutOutput) -> None:
        data = layout_to_dict(output)

        assert data["is_valid"] is True
        assert data["unit"] == "m"
        assert [side["side"] for side in data["sides"]] == ["front", "right", "back", "left"]
        assert data["sides"][0]["reserved_mm"] == 5000.0
        assert data["totals"]["total_posts"] == 25
        assert data["totals"]["corner_connectors"] == {"concrete_base": 4, "channel_base": 0}
        assert data["parameters"]["panel_type"] == "3D"
        assert data["parameters"]["corrugations_per_post"] is None
        assert len(data["warnings"]) == 3

    def test_invalid_output(self) -> None:
        invalid = ComputeLayoutCommand().execute(PlanInput(min_gap=-1))
        data = layout_to_dict(invalid)

        assert data["is_valid"] is False
        assert "Minimum gap cannot be negative" in data["errors"]

    def test_export_string_is_valid_json(self, output: LayoutOutput) -> None:
        data = json.loads(JsonLayoutExporter().export_string(output))
        assert data["bill_of_materials"][0]["name"] == "Fence panel"


class TestExportManager:
    """Tests for ExportManager."""

    def test_export_all(self, output: LayoutOutput, tmp_path: Path) -> None:
        manager = ExportManager(tmp_path / "out")
        files = manager.export_all(["bom", "csv", "json"], output, project_name="plot_12")

        assert files["bom"] == tmp_path / "out" / "plot_12_bom.txt"
        assert files["csv"] == tmp_path / "out" / "plot_12_csv.csv"
        assert files["json"] == tmp_path / "out" / "plot_12_json.json"
        assert all(path.exists() for path in files.values())

    def test_unknown_format(self, output: LayoutOutput, tmp_path: Path) -> None:
        with pytest.raises(KeyError):
            ExportManager(tmp_path).export_all(["dxf"], output)
