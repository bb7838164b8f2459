"""Corrugation reference data.

A 3D panel has a number of horizontal corrugations that depends on its
height; every post needs one mounting clamp per corrugation. The mapping
from panel height to corrugation count is manufacturer data, so it lives
in a table that callers can replace or extend.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .units import round_half_up

__all__ = [
    "DEFAULT_CORRUGATIONS_BY_HEIGHT",
    "CorrugationTable",
    "resolve_clamps_per_post",
]


# Panel height (mm, rounded to 10) -> corrugations per panel.
# Only the heights confirmed with the manufacturer are listed.
DEFAULT_CORRUGATIONS_BY_HEIGHT: Mapping[int, int] = MappingProxyType(
    {
        830: 2,
        2230: 4,
        2430: 4,
    }
)


def _round_to_ten(height_mm: float) -> int:
    # Half-up rounding, 825 -> 830
    return round_half_up(height_mm / 10) * 10


@dataclass(frozen=True)
class CorrugationTable:
    """Lookup of corrugation counts by panel height.

    Attributes:
        entries: Mapping of rounded panel height in mm to corrugation count.
        default: Count returned for heights missing from ``entries``.
    """

    entries: Mapping[int, int] = field(
        default_factory=lambda: DEFAULT_CORRUGATIONS_BY_HEIGHT
    )
    default: int = 0

    def __post_init__(self) -> None:
        if self.default < 0:
            raise ValueError("Default corrugation count must be non-negative")
        for height, count in self.entries.items():
            if height <= 0:
                raise ValueError(f"Panel height {height} must be positive")
            if count < 0:
                raise ValueError(f"Corrugation count for height {height} must be non-negative")

    def lookup(self, panel_height_mm: float) -> int:
        """Corrugation count for a panel height in millimetres."""
        return self.entries.get(_round_to_ten(panel_height_mm), self.default)

    def has_entry(self, panel_height_mm: float) -> bool:
        """Whether the rounded height is listed in the table."""
        return _round_to_ten(panel_height_mm) in self.entries

    def extended(self, extra: Mapping[int, int]) -> CorrugationTable:
        """Return a new table with ``extra`` entries added or replaced."""
        merged = dict(self.entries)
        merged.update(extra)
        return CorrugationTable(entries=MappingProxyType(merged), default=self.default)


def resolve_clamps_per_post(
    panel_height_mm: float,
    override: int | None,
    table: CorrugationTable | None = None,
) -> int:
    """Clamps per post: the explicit override if given, else the table value.

    An override of ``0`` is a valid explicit choice and wins over the table.
    """
    if override is not None:
        return override
    return (table or CorrugationTable()).lookup(panel_height_mm)
