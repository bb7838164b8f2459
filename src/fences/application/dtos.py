"""Data Transfer Objects for the application layer.

Input DTOs hold raw values in the user's display unit, exactly as they came
from a form, a config file or the command line. ``to_domain`` methods are
the single place where those values are parsed and converted to
millimetres.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fences.domain import (
    BillOfMaterials,
    LayoutParameters,
    LengthUnit,
    Opening,
    OpeningKind,
    PanelType,
    PerimeterTotals,
    PlinthSystem,
    Side,
    SideName,
    coerce_number,
    round_half_up,
    to_canonical,
)

_VALID_UNITS = [u.value for u in LengthUnit]


@dataclass
class SideInput:
    """Input DTO for one side of the property."""

    name: str
    enabled: bool = True
    length: Any = 0
    system: str = PlinthSystem.CONCRETE_BASE.value

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.name not in [s.value for s in SideName]:
            errors.append(f"Unknown side '{self.name}'")
        if coerce_number(self.length) < 0:
            errors.append(f"Length of side '{self.name}' cannot be negative")
        valid_systems = [s.value for s in PlinthSystem]
        if self.system not in valid_systems:
            errors.append(f"Plinth system must be one of: {', '.join(valid_systems)}")
        return errors

    def to_domain(self, unit: str) -> Side:
        return Side(
            name=SideName(self.name),
            enabled=bool(self.enabled),
            length=to_canonical(self.length, unit),
            system=PlinthSystem(self.system),
        )


@dataclass
class OpeningInput:
    """Input DTO for a gate or wicket."""

    kind: str
    enabled: bool = False
    side: str = SideName.FRONT.value
    width: Any = 0
    height: Any = 0
    offset: Any = 0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        label = self.kind.title()
        if self.side not in [s.value for s in SideName]:
            errors.append(f"{label} side must be one of: {', '.join(s.value for s in SideName)}")
        if self.enabled and coerce_number(self.width) <= 0:
            errors.append(f"{label} width must be positive")
        if coerce_number(self.height) < 0:
            errors.append(f"{label} height cannot be negative")
        if coerce_number(self.offset) < 0:
            errors.append(f"{label} offset cannot be negative")
        return errors

    def to_domain(self, unit: str) -> Opening:
        return Opening(
            kind=OpeningKind(self.kind),
            enabled=bool(self.enabled),
            side=SideName(self.side),
            width=max(0.0, to_canonical(self.width, unit)),
            height=to_canonical(self.height, unit),
            offset=to_canonical(self.offset, unit),
        )


def _default_sides() -> list[SideInput]:
    return [
        SideInput(name="front", length=10),
        SideInput(name="right", length=15),
        SideInput(name="back", length=10),
        SideInput(name="left", length=15),
    ]


def parse_corrugations(value: Any) -> int | None:
    """Explicit clamp count, or None when the field is left blank."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return max(0, round_half_up(coerce_number(value)))


@dataclass
class PlanInput:
    """Input DTO for a complete fence plan, in the display unit."""

    unit: str = LengthUnit.METER.value
    panel_width: Any = 2.5
    panel_height: Any = 1.5
    panel_type: str = PanelType.CORRUGATED.value
    corrugations: Any = None
    post_width: Any = 0.06
    plinth_height: Any = 0.2
    min_gap: Any = 0.005
    max_gap: Any = 0.02
    sides: list[SideInput] = field(default_factory=_default_sides)
    gate: OpeningInput = field(
        default_factory=lambda: OpeningInput(kind="gate", enabled=True, width=4, height=1.6, offset=3)
    )
    wicket: OpeningInput = field(
        default_factory=lambda: OpeningInput(kind="wicket", enabled=True, width=1, height=1.6, offset=8)
    )

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.unit not in _VALID_UNITS:
            errors.append(f"Unit must be one of: {', '.join(_VALID_UNITS)}")
        if coerce_number(self.panel_width) <= 0:
            errors.append("Panel width must be positive")
        if coerce_number(self.panel_height) <= 0:
            errors.append("Panel height must be positive")
        if self.panel_type not in [t.value for t in PanelType]:
            errors.append(f"Panel type must be one of: {', '.join(t.value for t in PanelType)}")
        if coerce_number(self.min_gap) < 0:
            errors.append("Minimum gap cannot be negative")
        if coerce_number(self.max_gap) < coerce_number(self.min_gap):
            errors.append("Maximum gap must be greater than or equal to minimum gap")
        if coerce_number(self.post_width) < 0:
            errors.append("Post width cannot be negative")
        if coerce_number(self.plinth_height) < 0:
            errors.append("Plinth height cannot be negative")
        if self.corrugations is not None and coerce_number(self.corrugations) < 0:
            errors.append("Corrugations per post cannot be negative")

        names = [side.name for side in self.sides]
        if len(names) != len(set(names)):
            errors.append("Each side may only be listed once")
        for side in self.sides:
            errors.extend(side.validate())
        errors.extend(self.gate.validate())
        errors.extend(self.wicket.validate())
        return errors

    def to_parameters(self) -> LayoutParameters:
        """Convert to LayoutParameters in millimetres."""
        return LayoutParameters(
            panel_width=to_canonical(self.panel_width, self.unit),
            panel_height=to_canonical(self.panel_height, self.unit),
            min_gap=to_canonical(self.min_gap, self.unit),
            max_gap=to_canonical(self.max_gap, self.unit),
            corrugations_per_post=parse_corrugations(self.corrugations),
            panel_type=PanelType(self.panel_type),
            post_width=to_canonical(self.post_width, self.unit),
            plinth_height=to_canonical(self.plinth_height, self.unit),
        )

    def to_sides(self) -> list[Side]:
        return [side.to_domain(self.unit) for side in self.sides]

    def to_openings(self) -> list[Opening]:
        return [self.gate.to_domain(self.unit), self.wicket.to_domain(self.unit)]


@dataclass
class LayoutOutput:
    """Output DTO containing the computed fence plan.

    Attributes:
        totals: Perimeter totals with per-side layouts.
        bill_of_materials: BOM line items.
        parameters: Layout parameters used, in mm.
        openings: Openings used, in mm.
        unit: Display unit of the request.
        errors: List of error messages if computation failed.
    """

    totals: PerimeterTotals | None
    bill_of_materials: BillOfMaterials | None
    parameters: LayoutParameters | None = None
    openings: list[Opening] = field(default_factory=list)
    unit: LengthUnit = LengthUnit.METER
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layout was computed successfully."""
        return len(self.errors) == 0

    @property
    def warnings(self) -> list[str]:
        """Soft warnings raised during computation."""
        if self.totals is None:
            return []
        return list(self.totals.warnings)
