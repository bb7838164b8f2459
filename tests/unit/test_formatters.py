"""Unit tests for text formatters."""

from fences.application import ComputeLayoutCommand, PlanInput
from fences.domain import BillOfMaterials, LengthUnit, PerimeterTotals
from fences.infrastructure import (
    BomTableFormatter,
    PerimeterSummaryFormatter,
    SideLayoutFormatter,
    WarningsFormatter,
)


class TestPerimeterSummaryFormatter:
    def test_contains_totals(self) -> None:
        output = ComputeLayoutCommand().execute(PlanInput())
        assert output.totals is not None
        text = PerimeterSummaryFormatter().format(output.totals, LengthUnit.METER)

        assert text.startswith("PERIMETER SUMMARY")
        assert "Posts (total)" in text
        assert "Fenced length" in text
        assert "50.00 m" in text


class TestSideLayoutFormatter:
    def test_rows_and_clamp_marker(self) -> None:
        output = ComputeLayoutCommand().execute(PlanInput())
        assert output.totals is not None
        text = SideLayoutFormatter().format(output.totals, output.unit)

        assert "SIDE LAYOUT" in text
        for label in ("Front", "Right", "Back", "Left"):
            assert label in text
        assert "* gap out of tolerance, clamped" in text

    def test_no_active_sides(self) -> None:
        assert SideLayoutFormatter().format(PerimeterTotals()) == "No active sides."


class TestBomTableFormatter:
    def test_empty(self) -> None:
        assert BomTableFormatter().format(BillOfMaterials()) == "No items in bill of materials."

    def test_rows(self) -> None:
        output = ComputeLayoutCommand().execute(PlanInput())
        assert output.bill_of_materials is not None
        text = BomTableFormatter().format(output.bill_of_materials)

        assert "BILL OF MATERIALS" in text
        assert "Precast plinth" in text


class TestWarningsFormatter:
    def test_lists_warnings(self) -> None:
        output = ComputeLayoutCommand().execute(PlanInput())
        text = WarningsFormatter().format(output)

        assert text.startswith("Warnings:")
        assert "  - Side 'right'" in text

    def test_empty_without_warnings(self) -> None:
        output = ComputeLayoutCommand().execute(PlanInput(panel_width=""))
        assert WarningsFormatter().format(output) == ""
