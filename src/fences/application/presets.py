"""Side presets for common fencing situations."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import TypeVar

from fences.domain import SideName


class SidePreset(str, Enum):
    """Which sides of the property are fenced.

    Attributes:
        FRONT_ONLY: Street side only.
        FRONT_RIGHT: Street side and right side.
        FRONT_LEFT: Street side and left side.
        ALL: Closed perimeter.
    """

    FRONT_ONLY = "front_only"
    FRONT_RIGHT = "front_right"
    FRONT_LEFT = "front_left"
    ALL = "all"

    @property
    def enabled_sides(self) -> frozenset[SideName]:
        return _ENABLED_SIDES[self]


_ENABLED_SIDES: dict[SidePreset, frozenset[SideName]] = {
    SidePreset.FRONT_ONLY: frozenset({SideName.FRONT}),
    SidePreset.FRONT_RIGHT: frozenset({SideName.FRONT, SideName.RIGHT}),
    SidePreset.FRONT_LEFT: frozenset({SideName.FRONT, SideName.LEFT}),
    SidePreset.ALL: frozenset(SideName),
}

# Any dataclass with ``name`` and ``enabled`` fields (SideInput, Side)
SideT = TypeVar("SideT")


def apply_preset(sides: list[SideT], preset: SidePreset | str) -> list[SideT]:
    """Return new sides with ``enabled`` set from ``preset``.

    Lengths and plinth systems are kept as they are.
    """
    enabled = SidePreset(preset).enabled_sides
    return [
        replace(side, enabled=SideName(side.name) in enabled)  # type: ignore[type-var]
        for side in sides
    ]
