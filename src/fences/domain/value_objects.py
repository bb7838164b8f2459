"""Value objects for the fence domain."""

from __future__ import annotations

from enum import Enum


class SideName(str, Enum):
    """The four sides of a property perimeter.

    Declaration order is the cyclic order used for corner adjacency:
    front -> right -> back -> left -> front.
    """

    FRONT = "front"
    RIGHT = "right"
    BACK = "back"
    LEFT = "left"

    @classmethod
    def cyclic_order(cls) -> tuple[SideName, ...]:
        """Sides in perimeter order."""
        return (cls.FRONT, cls.RIGHT, cls.BACK, cls.LEFT)

    @property
    def label(self) -> str:
        """Display label for drawings and reports."""
        return self.value.title()


class PlinthSystem(str, Enum):
    """Footing system used under the panels of a side.

    Attributes:
        CONCRETE_BASE: Precast plinths joined with concrete corner connectors
            (2450 mm plinths).
        CHANNEL_BASE: Plinths held in steel channel sections (2500 mm plinths).
    """

    CONCRETE_BASE = "concrete_base"
    CHANNEL_BASE = "channel_base"

    @property
    def label(self) -> str:
        """Display label naming the corner hardware of this system."""
        if self is PlinthSystem.CONCRETE_BASE:
            return "Concrete connector (2450)"
        return "Steel channel (2500)"


class LengthUnit(str, Enum):
    """Display units accepted at the boundary."""

    MILLIMETER = "mm"
    CENTIMETER = "cm"
    METER = "m"


class PanelType(str, Enum):
    """Fence panel profile.

    Attributes:
        FLAT: 2D panel without corrugations.
        CORRUGATED: 3D panel with horizontal corrugations.
    """

    FLAT = "2D"
    CORRUGATED = "3D"


class OpeningKind(str, Enum):
    """Kinds of openings that can be placed on a side."""

    GATE = "gate"
    WICKET = "wicket"

    @property
    def label(self) -> str:
        return self.value.title()
