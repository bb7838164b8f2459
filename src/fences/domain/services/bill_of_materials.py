"""Bill of materials built from perimeter totals.

Turns the computed quantities into ordered line items with a name, a
quantity and a details string formatted in the user's display unit.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from ..entities import LayoutParameters, Opening
from ..units import format_length
from ..value_objects import LengthUnit
from .perimeter import PerimeterTotals

__all__ = ["BillOfMaterials", "BomLineItem", "build_bill_of_materials"]


@dataclass(frozen=True)
class BomLineItem:
    """A single BOM line.

    Attributes:
        name: Item name.
        quantity: Number of pieces, never negative.
        details: Dimensions or remarks for the item.
    """

    name: str
    quantity: int
    details: str = ""

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError(f"Quantity of '{self.name}' must be non-negative")


@dataclass(frozen=True)
class BillOfMaterials:
    """Ordered list of BOM line items."""

    items: tuple[BomLineItem, ...] = field(default_factory=tuple)

    @property
    def total_pieces(self) -> int:
        return sum(item.quantity for item in self.items)

    def quantity_of(self, name: str) -> int:
        """Quantity of the item called ``name``, 0 when absent."""
        return sum(item.quantity for item in self.items if item.name == name)


def build_bill_of_materials(
    totals: PerimeterTotals,
    params: LayoutParameters,
    openings: Sequence[Opening] = (),
    unit: LengthUnit = LengthUnit.METER,
) -> BillOfMaterials:
    """Build BOM line items from perimeter totals.

    Args:
        totals: Computed perimeter totals.
        params: Layout parameters, used for the detail strings.
        openings: Gate and wicket; enabled ones get a line each.
        unit: Display unit for dimensions in the details.

    Returns:
        BillOfMaterials with items in a fixed order.
    """
    items: list[BomLineItem] = [
        BomLineItem(
            name="Fence panel",
            quantity=totals.panel_count,
            details=(
                f"type {params.panel_type.value}, width {format_length(params.panel_width, unit, 2)}, "
                f"height {format_length(params.panel_height, unit, 2)}"
            ),
        ),
        BomLineItem(
            name="Post",
            quantity=totals.total_posts,
            details=(
                f"section {format_length(params.post_width, unit, 3)} x "
                f"{format_length(params.post_width, unit, 3)}"
            ),
        ),
    ]

    if totals.clamps_per_post > 0:
        items.append(
            BomLineItem(
                name="Mounting clamp (linear)",
                quantity=totals.linear_clamps,
                details=f"{totals.clamps_per_post} per linear post",
            )
        )
        items.append(
            BomLineItem(
                name="Mounting clamp (corner)",
                quantity=totals.corner_clamps,
                details=f"{totals.clamps_per_post} per corner post",
            )
        )

    items.append(
        BomLineItem(
            name="Precast plinth",
            quantity=totals.plinth_count,
            details=(
                f"under panel: {format_length(params.panel_width, unit, 2)} x "
                f"height {format_length(params.plinth_height, unit, 2)}"
            ),
        )
    )

    if totals.concrete_corner_connectors > 0:
        items.append(
            BomLineItem(
                name="Concrete corner connector",
                quantity=totals.concrete_corner_connectors,
                details="for 2450 mm plinths",
            )
        )
    if totals.channel_corner_connectors > 0:
        items.append(
            BomLineItem(
                name="Corner channel (to verify)",
                quantity=totals.channel_corner_connectors,
                details="for 2500 mm plinths",
            )
        )

    for opening in openings:
        if not opening.enabled:
            continue
        items.append(
            BomLineItem(
                name=opening.kind.label,
                quantity=1,
                details=(
                    f"side: {opening.side.value}, width {format_length(opening.width, unit, 2)}, "
                    f"height {format_length(opening.height, unit, 2)}"
                ),
            )
        )

    return BillOfMaterials(items=tuple(items))
