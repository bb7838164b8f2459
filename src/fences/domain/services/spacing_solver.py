"""Per-side panel spacing solver.

Fits fixed-width panels into the run left on a side after openings have
been reserved, keeping the gap between neighbouring panels inside the
allowed tolerance band. The solver never fails: when no panel count gives
an in-tolerance gap it falls back to the nearest count and clamps the gap,
and the difference is absorbed on site.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..entities import LayoutParameters, Side
from ..units import round_half_up
from ..value_objects import PlinthSystem, SideName

__all__ = ["SideLayout", "SpacingSolution", "SpacingSolver"]


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpacingSolution:
    """Panel count and gap for a run.

    Attributes:
        panel_count: Number of panels, always at least 1.
        gap: Gap between neighbouring panels in mm (0 for a single panel).
        tolerance_clamped: True when no count satisfied the tolerance and
            the gap was clamped into range.
    """

    panel_count: int
    gap: float
    tolerance_clamped: bool = False


@dataclass(frozen=True)
class SideLayout:
    """Solved layout of one side.

    Attributes:
        side: Which side was solved.
        system: Plinth system of the side.
        length: Full side length in mm.
        reserved_length: Width reserved by openings on this side, in mm.
        available_length: Run available for panels, in mm.
        panel_width: Panel width used by the solver, in mm.
        panel_count: Number of panels.
        gap: Gap between panels in mm.
        tolerance_clamped: Whether the gap had to be clamped.
    """

    side: SideName
    system: PlinthSystem
    length: float
    reserved_length: float
    available_length: float
    panel_width: float
    panel_count: int
    gap: float
    tolerance_clamped: bool = False

    @property
    def linear_post_count(self) -> int:
        """Posts along the run, one more than the number of panels."""
        return self.panel_count + 1

    @property
    def plinth_count(self) -> int:
        """One plinth under each panel."""
        return self.panel_count

    @property
    def used_length(self) -> float:
        """Length accounted for by the layout, openings included."""
        return self.available_length + self.reserved_length

    @property
    def built_length(self) -> float:
        """Length actually covered by panels and gaps."""
        return self.panel_count * self.panel_width + max(0, self.panel_count - 1) * self.gap

    @property
    def length_mismatch(self) -> float:
        """Built length minus available run; non-zero only for clamped or overlapping layouts."""
        return self.built_length - self.available_length


class SpacingSolver:
    """Solves panel count and gap for a run of given length.

    Candidate counts are tried in a fixed order: the count that fits with
    the minimum gap, one more, then one less. The first count whose gap
    lies in ``[min_gap, max_gap]`` wins.
    """

    def __init__(self, panel_width: float, min_gap: float, max_gap: float) -> None:
        """Initialize with panel width and gap tolerance, all in mm."""
        self.panel_width = panel_width
        self.min_gap = min_gap
        self.max_gap = max_gap

    @classmethod
    def from_parameters(cls, params: LayoutParameters) -> SpacingSolver:
        """Create a solver from global layout parameters."""
        return cls(params.panel_width, params.min_gap, params.max_gap)

    def solve(self, available_length: float) -> SpacingSolution:
        """Find panel count and gap for ``available_length`` mm.

        Always places at least one panel, even when the run is shorter than
        a panel.
        """
        available = max(0.0, available_length)
        initial = max(1, math.floor(available / (self.panel_width + self.min_gap)))

        for candidate in (initial, initial + 1, initial - 1):
            solution = self._try_count(available, candidate)
            if solution is not None:
                return solution

        return self._fallback(available)

    def layout_side(self, side: Side, reserved_length: float = 0.0) -> SideLayout:
        """Solve ``side`` after reserving ``reserved_length`` mm for openings."""
        available = max(0.0, side.length - reserved_length)
        solution = self.solve(available)
        layout = SideLayout(
            side=side.name,
            system=side.system,
            length=side.length,
            reserved_length=reserved_length,
            available_length=available,
            panel_width=self.panel_width,
            panel_count=solution.panel_count,
            gap=solution.gap,
            tolerance_clamped=solution.tolerance_clamped,
        )
        logger.debug(
            f"Side {side.name.value}: {layout.panel_count} panels, gap {layout.gap:.2f} mm "
            f"over {available:.0f} mm"
        )
        return layout

    def _try_count(self, available: float, count: int) -> SpacingSolution | None:
        if count <= 0:
            return None
        if count == 1:
            return SpacingSolution(panel_count=1, gap=0.0)
        gap = (available - count * self.panel_width) / (count - 1)
        if self.min_gap <= gap <= self.max_gap:
            return SpacingSolution(panel_count=count, gap=gap)
        return None

    def _fallback(self, available: float) -> SpacingSolution:
        # Half-up rounding of the panel count
        count = max(1, round_half_up(available / self.panel_width))
        gap = (available - count * self.panel_width) / max(1, count - 1)
        gap = min(self.max_gap, max(self.min_gap, gap))
        return SpacingSolution(panel_count=count, gap=gap, tolerance_clamped=True)
