"""Application commands (use cases) for fence planning."""

from __future__ import annotations

import logging

from fences.domain import (
    CorrugationTable,
    LengthUnit,
    build_bill_of_materials,
    compute_layout,
)

from .dtos import LayoutOutput, PlanInput

logger = logging.getLogger(__name__)


def _display_unit(value: str) -> LengthUnit:
    """Requested unit, or metres when it is not a known unit."""
    try:
        return LengthUnit(value)
    except ValueError:
        return LengthUnit.METER


class ComputeLayoutCommand:
    """Command to compute a complete fence plan.

    Runs the whole pipeline on every call: unit normalization, per-side
    spacing, perimeter aggregation and bill of materials. Nothing is
    cached between calls.
    """

    def __init__(self, corrugation_table: CorrugationTable | None = None) -> None:
        self.corrugation_table = corrugation_table or CorrugationTable()

    def execute(self, plan_input: PlanInput) -> LayoutOutput:
        """Execute the layout computation.

        Args:
            plan_input: Raw plan values in the display unit.

        Returns:
            LayoutOutput with totals and BOM, or with errors when the input
            cannot be turned into a valid plan.
        """
        unit = _display_unit(plan_input.unit)
        errors = plan_input.validate()
        if errors:
            return LayoutOutput(totals=None, bill_of_materials=None, errors=errors, unit=unit)

        try:
            params = plan_input.to_parameters()
            sides = plan_input.to_sides()
            openings = plan_input.to_openings()
        except ValueError as e:
            return LayoutOutput(
                totals=None, bill_of_materials=None, errors=[str(e)], unit=unit
            )

        totals = compute_layout(sides, openings, params, self.corrugation_table)
        for warning in totals.warnings:
            logger.warning(warning)

        bom = build_bill_of_materials(totals, params, openings, unit)
        logger.debug(
            f"Computed plan: {totals.panel_count} panels, {totals.total_posts} posts, "
            f"{totals.corner_count} corners"
        )

        return LayoutOutput(
            totals=totals,
            bill_of_materials=bom,
            parameters=params,
            openings=openings,
            unit=unit,
        )
