"""Domain services for fence layout and material calculations.

This package provides:
- Per-side panel spacing solver
- Perimeter aggregation (corners, posts, clamps, connectors)
- Opening placement checks
- Bill of materials construction
"""

from .bill_of_materials import BillOfMaterials, BomLineItem, build_bill_of_materials
from .openings import PlacementIssue, check_opening_placement, reserved_width
from .perimeter import PerimeterAggregator, PerimeterTotals
from .planner import compute_layout
from .spacing_solver import SideLayout, SpacingSolution, SpacingSolver

__all__ = [
    "BillOfMaterials",
    "BomLineItem",
    "PerimeterAggregator",
    "PerimeterTotals",
    "PlacementIssue",
    "SideLayout",
    "SpacingSolution",
    "SpacingSolver",
    "build_bill_of_materials",
    "check_opening_placement",
    "compute_layout",
    "reserved_width",
]
