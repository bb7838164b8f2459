"""Pydantic models for fence plan configuration files.

All lengths are expressed in the configuration's ``unit``. Numeric fields
accept numbers or numeric strings; blanks and non-numeric strings are read
as 0 before range checks are applied, so an empty field reports a clear
range error instead of a type error.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    model_validator,
)

from fences.domain import (
    LengthUnit,
    OpeningKind,
    PanelType,
    PlinthSystem,
    SideName,
    coerce_number,
    round_half_up,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with sides, gate, wicket and gaps
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


def _coerce_optional_int(value: object) -> int | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return round_half_up(coerce_number(value))


Length = Annotated[float, BeforeValidator(coerce_number)]
OptionalCount = Annotated[int | None, BeforeValidator(_coerce_optional_int)]


class PanelConfig(BaseModel):
    """Fence panel dimensions and profile.

    Attributes:
        width: Panel width.
        height: Panel height.
        type: Panel profile, 2D or 3D.
        corrugations: Explicit clamps per post; None to look it up from the
            panel height.
    """

    model_config = ConfigDict(extra="forbid")

    width: Length = Field(default=2.5, gt=0)
    height: Length = Field(default=1.5, gt=0)
    type: PanelType = PanelType.CORRUGATED
    corrugations: OptionalCount = Field(default=None, ge=0)


class PostConfig(BaseModel):
    """Post cross-section."""

    model_config = ConfigDict(extra="forbid")

    width: Length = Field(default=0.06, ge=0)


class PlinthConfig(BaseModel):
    """Plinth (precast base course) dimensions."""

    model_config = ConfigDict(extra="forbid")

    height: Length = Field(default=0.2, ge=0)


class GapConfig(BaseModel):
    """Allowed gap between neighbouring panels."""

    model_config = ConfigDict(extra="forbid")

    min: Length = Field(default=0.005, ge=0)
    max: Length = Field(default=0.02, ge=0)

    @model_validator(mode="after")
    def check_range(self) -> GapConfig:
        if self.max < self.min:
            raise ValueError(
                f"gaps.max ({self.max}) must be greater than or equal to gaps.min ({self.min})"
            )
        return self


class SideConfig(BaseModel):
    """One side of the property."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    length: Length = Field(default=0.0, ge=0)
    system: PlinthSystem = PlinthSystem.CONCRETE_BASE


class SidesConfig(BaseModel):
    """The four sides of the property."""

    model_config = ConfigDict(extra="forbid")

    front: SideConfig = Field(default_factory=lambda: SideConfig(length=10))
    right: SideConfig = Field(default_factory=lambda: SideConfig(length=15))
    back: SideConfig = Field(default_factory=lambda: SideConfig(length=10))
    left: SideConfig = Field(default_factory=lambda: SideConfig(length=15))

    def by_name(self) -> dict[SideName, SideConfig]:
        """Sides keyed by name, in perimeter order."""
        return {name: getattr(self, name.value) for name in SideName.cyclic_order()}


class OpeningConfig(BaseModel):
    """Gate or wicket placement."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    side: SideName = SideName.FRONT
    width: Length = Field(default=0.0, ge=0)
    height: Length = Field(default=0.0, ge=0)
    offset: Length = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def check_width(self) -> OpeningConfig:
        if self.enabled and self.width <= 0:
            raise ValueError("width must be positive when the opening is enabled")
        return self


class OutputConfig(BaseModel):
    """Output preferences."""

    model_config = ConfigDict(extra="forbid")

    format: Literal["summary", "sides", "bom", "json", "csv", "all"] = "all"
    project_name: str = "fence"


class FencePlanConfiguration(BaseModel):
    """Root configuration model for a fence plan."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    unit: LengthUnit = LengthUnit.METER
    panel: PanelConfig = Field(default_factory=PanelConfig)
    post: PostConfig = Field(default_factory=PostConfig)
    plinth: PlinthConfig = Field(default_factory=PlinthConfig)
    gaps: GapConfig = Field(default_factory=GapConfig)
    sides: SidesConfig = Field(default_factory=SidesConfig)
    gate: OpeningConfig = Field(
        default_factory=lambda: OpeningConfig(
            enabled=True, side=SideName.FRONT, width=4, height=1.6, offset=3
        )
    )
    wicket: OpeningConfig = Field(
        default_factory=lambda: OpeningConfig(
            enabled=True, side=SideName.FRONT, width=1, height=1.6, offset=8
        )
    )
    output: OutputConfig = Field(default_factory=OutputConfig)

    @model_validator(mode="after")
    def check_version(self) -> FencePlanConfiguration:
        if self.schema_version not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema_version '{self.schema_version}'. Supported: {supported}"
            )
        return self

    def opening(self, kind: OpeningKind) -> OpeningConfig:
        """Gate or wicket configuration by kind."""
        return self.gate if kind is OpeningKind.GATE else self.wicket
