"""Text formatters for fence plans."""

from __future__ import annotations

from fences.application.dtos import LayoutOutput
from fences.domain import BillOfMaterials, LengthUnit, PerimeterTotals, format_length


class PerimeterSummaryFormatter:
    """Formats whole-property totals for display."""

    def format(self, totals: PerimeterTotals, unit: LengthUnit = LengthUnit.METER) -> str:
        rows = [
            ("Panels (total)", str(totals.panel_count)),
            ("Posts (total)", str(totals.total_posts)),
            ("Plinths (total)", str(totals.plinth_count)),
            ("Active corners", str(totals.corner_count)),
            ("Clamps per post", str(totals.clamps_per_post)),
            ("Linear clamps", f"{totals.linear_clamps} pcs"),
            ("Corner clamps", f"{totals.corner_clamps} pcs"),
            ("Corner connector (concrete)", str(totals.concrete_corner_connectors)),
            ("Corner channel (to verify)", str(totals.channel_corner_connectors)),
            ("Fenced length", format_length(totals.used_length, unit, 2)),
        ]
        lines = [
            "PERIMETER SUMMARY",
            "=" * 50,
        ]
        for label, value in rows:
            lines.append(f"{label:<32} {value:>16}")
        return "\n".join(lines)


class SideLayoutFormatter:
    """Formats per-side layouts as a table."""

    def format(self, totals: PerimeterTotals, unit: LengthUnit = LengthUnit.METER) -> str:
        if not totals.sides:
            return "No active sides."

        lines = [
            "SIDE LAYOUT",
            "=" * 78,
            f"{'Side':<8} {'Length':>12} {'Openings':>12} {'Panels':>7} {'Gap (mm)':>9} "
            f"{'Posts':>6} {'System':<20}",
            "-" * 78,
        ]
        for layout in totals.sides:
            flag = " *" if layout.tolerance_clamped else ""
            lines.append(
                f"{layout.side.label:<8} {format_length(layout.length, unit, 2):>12} "
                f"{format_length(layout.reserved_length, unit, 2):>12} {layout.panel_count:>7} "
                f"{layout.gap:>9.1f} {layout.linear_post_count:>6} {layout.system.label:<20}{flag}"
            )
        lines.append("-" * 78)
        if any(layout.tolerance_clamped for layout in totals.sides):
            lines.append("* gap out of tolerance, clamped")
        return "\n".join(lines)


class BomTableFormatter:
    """Formats a bill of materials as a table."""

    def format(self, bom: BillOfMaterials) -> str:
        if not bom.items:
            return "No items in bill of materials."

        lines = [
            "BILL OF MATERIALS",
            "=" * 90,
            f"{'Element':<30} {'Qty':>6}  {'Details'}",
            "-" * 90,
        ]
        for item in bom.items:
            lines.append(f"{item.name:<30} {item.quantity:>6}  {item.details}")
        return "\n".join(lines)


class WarningsFormatter:
    """Formats soft warnings."""

    def format(self, output: LayoutOutput) -> str:
        if not output.warnings:
            return ""
        lines = ["Warnings:"]
        lines.extend(f"  - {warning}" for warning in output.warnings)
        return "\n".join(lines)
