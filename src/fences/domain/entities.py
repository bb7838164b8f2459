"""Domain entities for fence planning.

All lengths are in millimetres. Entities are immutable snapshots: a
recomputation builds fresh instances from the current inputs.
"""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import OpeningKind, PanelType, PlinthSystem, SideName


@dataclass(frozen=True)
class Side:
    """One side of the property perimeter.

    Attributes:
        name: Which side of the property this is.
        enabled: Whether the side is fenced at all.
        length: Run length in mm.
        system: Plinth system used for this side's corner connectors.
    """

    name: SideName
    enabled: bool = True
    length: float = 0.0
    system: PlinthSystem = PlinthSystem.CONCRETE_BASE

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"Length of side '{self.name.value}' must be non-negative")

    @property
    def is_active(self) -> bool:
        """A side takes part in the layout only when enabled with positive length."""
        return self.enabled and self.length > 0


@dataclass(frozen=True)
class Opening:
    """A gate or wicket assigned to one side.

    Only ``width`` affects quantities: it is reserved from the side's run.
    ``height`` and ``offset`` are carried through for reports.

    Attributes:
        kind: Gate or wicket.
        enabled: Whether the opening is installed.
        side: Side the opening is placed on.
        width: Clear width in mm.
        height: Height in mm.
        offset: Distance from the start of the side to the opening, in mm.
    """

    kind: OpeningKind
    enabled: bool = False
    side: SideName = SideName.FRONT
    width: float = 0.0
    height: float = 0.0
    offset: float = 0.0

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"{self.kind.label} width must be non-negative")
        if self.enabled and self.width <= 0:
            raise ValueError(f"{self.kind.label} width must be positive when enabled")
        if self.height < 0:
            raise ValueError(f"{self.kind.label} height must be non-negative")
        if self.offset < 0:
            raise ValueError(f"{self.kind.label} offset must be non-negative")

    @property
    def end(self) -> float:
        """Position of the far edge of the opening along its side."""
        return self.offset + self.width

    def reserves_on(self, side: SideName) -> float:
        """Width this opening reserves on ``side``."""
        if self.enabled and self.side == side:
            return self.width
        return 0.0


@dataclass(frozen=True)
class LayoutParameters:
    """Global panel and spacing parameters.

    Attributes:
        panel_width: Panel width in mm.
        panel_height: Panel height in mm.
        min_gap: Smallest allowed gap between neighbouring panels, in mm.
        max_gap: Largest allowed gap between neighbouring panels, in mm.
        corrugations_per_post: Explicit clamp count per post. When None the
            count is looked up from the panel height.
        panel_type: 2D or 3D panel profile.
        post_width: Post cross-section in mm.
        plinth_height: Plinth height in mm.
    """

    panel_width: float
    panel_height: float
    min_gap: float = 0.0
    max_gap: float = 0.0
    corrugations_per_post: int | None = None
    panel_type: PanelType = PanelType.CORRUGATED
    post_width: float = 0.0
    plinth_height: float = 0.0

    def __post_init__(self) -> None:
        if self.panel_width <= 0:
            raise ValueError("Panel width must be positive")
        if self.panel_height <= 0:
            raise ValueError("Panel height must be positive")
        if self.min_gap < 0:
            raise ValueError("Minimum gap must be non-negative")
        if self.max_gap < self.min_gap:
            raise ValueError("Maximum gap must be greater than or equal to minimum gap")
        if self.corrugations_per_post is not None and self.corrugations_per_post < 0:
            raise ValueError("Corrugations per post must be non-negative")
        if self.post_width < 0:
            raise ValueError("Post width must be non-negative")
        if self.plinth_height < 0:
            raise ValueError("Plinth height must be non-negative")
