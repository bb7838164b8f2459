"""Whole-perimeter layout computation."""

from __future__ import annotations

from collections.abc import Sequence

from ..corrugation import CorrugationTable, resolve_clamps_per_post
from ..entities import LayoutParameters, Opening, Side
from ..value_objects import SideName
from .openings import check_opening_placement, reserved_width
from .perimeter import PerimeterAggregator, PerimeterTotals
from .spacing_solver import SideLayout, SpacingSolver

__all__ = ["compute_layout"]


def compute_layout(
    sides: Sequence[Side],
    openings: Sequence[Opening],
    params: LayoutParameters,
    corrugation_table: CorrugationTable | None = None,
) -> PerimeterTotals:
    """Compute panel layouts and material totals for a property.

    Pure function of its inputs: openings reserve their width on their
    side, each active side is solved in perimeter order, and the results
    are reduced into perimeter totals.

    Args:
        sides: The sides of the property, in any order. Missing sides are
            treated as not fenced.
        openings: Gate and wicket.
        params: Panel and gap parameters, in mm.
        corrugation_table: Height-to-corrugation reference data; defaults
            to the built-in table.

    Returns:
        PerimeterTotals with per-side layouts and soft warnings.
    """
    solver = SpacingSolver.from_parameters(params)
    by_name = {side.name: side for side in sides}

    layouts: list[SideLayout] = []
    for name in SideName.cyclic_order():
        side = by_name.get(name)
        if side is None or not side.is_active:
            continue
        layouts.append(solver.layout_side(side, reserved_width(openings, name)))

    warnings = [
        (
            f"Side '{layout.side.value}': gap out of tolerance, clamped to "
            f"{layout.gap:.1f} mm ({layout.length_mismatch:+.0f} mm against the run)"
        )
        for layout in layouts
        if layout.tolerance_clamped
    ]
    warnings.extend(issue.message for issue in check_opening_placement(sides, openings))

    clamps_per_post = resolve_clamps_per_post(
        params.panel_height, params.corrugations_per_post, corrugation_table
    )
    return PerimeterAggregator().aggregate(
        sides=list(by_name.values()),
        layouts=layouts,
        clamps_per_post=clamps_per_post,
        warnings=warnings,
    )
