"""Perimeter aggregation: whole-property totals from per-side layouts."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from ..entities import Side
from ..value_objects import PlinthSystem, SideName
from .spacing_solver import SideLayout

__all__ = ["PerimeterAggregator", "PerimeterTotals"]


@dataclass(frozen=True)
class PerimeterTotals:
    """Material totals for the whole perimeter.

    Attributes:
        sides: Solved layouts of the active sides, in perimeter order.
        panel_count: Total number of panels.
        plinth_count: Total number of plinths.
        linear_post_count: Sum of per-side linear posts.
        corner_count: Number of corners between adjacent active sides.
        total_posts: Linear posts plus one post per corner.
        clamps_per_post: Mounting clamps per post.
        total_clamps: Clamps for all posts.
        corner_clamps: Clamps on corner posts.
        corner_connector_counts: (plinth system, corner connectors) pairs.
        used_length: Total length accounted for, openings included, in mm.
        warnings: Soft warnings raised while computing the layout.
    """

    sides: tuple[SideLayout, ...] = ()
    panel_count: int = 0
    plinth_count: int = 0
    linear_post_count: int = 0
    corner_count: int = 0
    total_posts: int = 0
    clamps_per_post: int = 0
    total_clamps: int = 0
    corner_clamps: int = 0
    corner_connector_counts: tuple[tuple[PlinthSystem, int], ...] = tuple(
        (system, 0) for system in PlinthSystem
    )
    used_length: float = 0.0
    warnings: tuple[str, ...] = ()

    @property
    def linear_clamps(self) -> int:
        """Clamps on posts along the runs."""
        return self.total_clamps - self.corner_clamps

    @property
    def corner_connectors(self) -> Mapping[PlinthSystem, int]:
        """Read-only view of corner connector counts keyed by plinth system."""
        return MappingProxyType(dict(self.corner_connector_counts))

    @property
    def concrete_corner_connectors(self) -> int:
        return self.corner_connectors.get(PlinthSystem.CONCRETE_BASE, 0)

    @property
    def channel_corner_connectors(self) -> int:
        return self.corner_connectors.get(PlinthSystem.CHANNEL_BASE, 0)

    def side(self, name: SideName) -> SideLayout | None:
        """Layout of side ``name``, or None if the side is not active."""
        for layout in self.sides:
            if layout.side == name:
                return layout
        return None


class PerimeterAggregator:
    """Reduces per-side layouts and corner adjacency into perimeter totals.

    Corner posts are added on top of the per-side linear posts. Each side
    already counts a post at both of its ends, so a closed perimeter
    carries one extra post per corner; quoted quantities rely on this.
    """

    def corner_pairs(self, sides: Iterable[Side]) -> list[tuple[Side, Side]]:
        """Adjacent pairs of active sides, walking the cyclic order.

        Sides missing from ``sides`` are treated as inactive.
        """
        by_name = {side.name: side for side in sides}
        order = SideName.cyclic_order()
        pairs: list[tuple[Side, Side]] = []
        for index, name in enumerate(order):
            first = by_name.get(name)
            second = by_name.get(order[(index + 1) % len(order)])
            if first is None or second is None:
                continue
            if first.is_active and second.is_active:
                pairs.append((first, second))
        return pairs

    def count_corners(self, sides: Iterable[Side]) -> int:
        """Number of corners between adjacent active sides (0 to 4)."""
        return len(self.corner_pairs(sides))

    def count_corner_connectors(self, sides: Iterable[Side]) -> Mapping[PlinthSystem, int]:
        """Corner connectors per plinth system.

        A corner joining sides of two different systems counts once for
        each of them.
        """
        counts = {system: 0 for system in PlinthSystem}
        for first, second in self.corner_pairs(sides):
            for system in PlinthSystem:
                if first.system == system or second.system == system:
                    counts[system] += 1
        return MappingProxyType(counts)

    def aggregate(
        self,
        sides: Sequence[Side],
        layouts: Sequence[SideLayout],
        clamps_per_post: int,
        warnings: Sequence[str] = (),
    ) -> PerimeterTotals:
        """Combine side layouts into perimeter totals.

        Args:
            sides: All four sides, active or not, used for corner adjacency.
            layouts: Solved layouts of the active sides.
            clamps_per_post: Mounting clamps needed on each post.
            warnings: Soft warnings to carry into the result.

        Returns:
            PerimeterTotals; all zero when no side is active.
        """
        corner_count = self.count_corners(sides)
        linear_posts = sum(layout.linear_post_count for layout in layouts)
        total_posts = linear_posts + corner_count

        return PerimeterTotals(
            sides=tuple(layouts),
            panel_count=sum(layout.panel_count for layout in layouts),
            plinth_count=sum(layout.plinth_count for layout in layouts),
            linear_post_count=linear_posts,
            corner_count=corner_count,
            total_posts=total_posts,
            clamps_per_post=clamps_per_post,
            total_clamps=clamps_per_post * total_posts,
            corner_clamps=clamps_per_post * corner_count,
            corner_connector_counts=tuple(self.count_corner_connectors(sides).items()),
            used_length=sum(layout.used_length for layout in layouts),
            warnings=tuple(warnings),
        )
