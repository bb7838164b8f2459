"""Domain layer - core business logic."""

from .corrugation import CorrugationTable, resolve_clamps_per_post
from .entities import LayoutParameters, Opening, Side
from .services import (
    BillOfMaterials,
    BomLineItem,
    PerimeterAggregator,
    PerimeterTotals,
    PlacementIssue,
    SideLayout,
    SpacingSolution,
    SpacingSolver,
    build_bill_of_materials,
    check_opening_placement,
    compute_layout,
)
from .units import (
    coerce_number,
    format_length,
    from_canonical,
    round_half_up,
    to_canonical,
)
from .value_objects import LengthUnit, OpeningKind, PanelType, PlinthSystem, SideName

__all__ = [
    "BillOfMaterials",
    "BomLineItem",
    "CorrugationTable",
    "LayoutParameters",
    "LengthUnit",
    "Opening",
    "OpeningKind",
    "PanelType",
    "PerimeterAggregator",
    "PerimeterTotals",
    "PlacementIssue",
    "PlinthSystem",
    "Side",
    "SideLayout",
    "SideName",
    "SpacingSolution",
    "SpacingSolver",
    "build_bill_of_materials",
    "check_opening_placement",
    "coerce_number",
    "compute_layout",
    "format_length",
    "from_canonical",
    "resolve_clamps_per_post",
    "round_half_up",
    "to_canonical",
]
