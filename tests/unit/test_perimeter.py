"""Unit tests for perimeter aggregation."""

from itertools import combinations

import pytest

from fences.domain import (
    PerimeterAggregator,
    PerimeterTotals,
    PlinthSystem,
    Side,
    SideName,
    SpacingSolver,
)


@pytest.fixture
def aggregator() -> PerimeterAggregator:
    return PerimeterAggregator()


def _sides(**lengths: float) -> list[Side]:
    """All four sides; those not named are disabled."""
    return [
        Side(name=name, enabled=name.value in lengths, length=lengths.get(name.value, 0.0))
        for name in SideName.cyclic_order()
    ]


class TestCornerCounting:
    """Tests for corner adjacency."""

    def test_closed_perimeter_has_four_corners(
        self, aggregator: PerimeterAggregator, closed_sides: list[Side]
    ) -> None:
        assert aggregator.count_corners(closed_sides) == 4

    def test_single_side_has_no_corners(self, aggregator: PerimeterAggregator) -> None:
        assert aggregator.count_corners(_sides(front=10000.0)) == 0

    def test_adjacent_pair(self, aggregator: PerimeterAggregator) -> None:
        assert aggregator.count_corners(_sides(front=10000.0, right=15000.0)) == 1

    def test_wraparound_pair(self, aggregator: PerimeterAggregator) -> None:
        """Left and front meet at a corner."""
        assert aggregator.count_corners(_sides(left=15000.0, front=10000.0)) == 1

    def test_opposite_sides_do_not_meet(self, aggregator: PerimeterAggregator) -> None:
        assert aggregator.count_corners(_sides(front=10000.0, back=10000.0)) == 0

    def test_three_sides(self, aggregator: PerimeterAggregator) -> None:
        assert aggregator.count_corners(_sides(front=1.0, right=1.0, back=1.0)) == 2

    def test_zero_length_side_breaks_corner(self, aggregator: PerimeterAggregator) -> None:
        sides = [
            Side(name=SideName.FRONT, length=10000.0),
            Side(name=SideName.RIGHT, length=0.0),
            Side(name=SideName.BACK, length=10000.0),
            Side(name=SideName.LEFT, length=15000.0),
        ]
        assert aggregator.count_corners(sides) == 2

    def test_missing_sides_are_inactive(self, aggregator: PerimeterAggregator) -> None:
        sides = [
            Side(name=SideName.FRONT, length=10000.0),
            Side(name=SideName.RIGHT, length=15000.0),
        ]
        assert aggregator.count_corners(sides) == 1

    def test_enabling_more_sides_never_loses_corners(
        self, aggregator: PerimeterAggregator
    ) -> None:
        """Corner count is monotonic over every subset of enabled sides."""
        order = SideName.cyclic_order()
        subsets = [
            frozenset(names)
            for size in range(len(order) + 1)
            for names in combinations(order, size)
        ]
        corners = {
            subset: aggregator.count_corners(
                _sides(**{name.value: 1000.0 for name in subset})
            )
            for subset in subsets
        }

        for subset in subsets:
            for superset in subsets:
                if subset <= superset:
                    assert corners[subset] <= corners[superset], (subset, superset)


class TestCornerConnectors:
    """Tests for corner connector counts per plinth system."""

    def test_single_system(
        self, aggregator: PerimeterAggregator, closed_sides: list[Side]
    ) -> None:
        counts = aggregator.count_corner_connectors(closed_sides)

        assert counts[PlinthSystem.CONCRETE_BASE] == 4
        assert counts[PlinthSystem.CHANNEL_BASE] == 0

    def test_mixed_corner_counts_for_both_systems(
        self, aggregator: PerimeterAggregator, mixed_system_sides: list[Side]
    ) -> None:
        """A corner between different systems increments both counters."""
        counts = aggregator.count_corner_connectors(mixed_system_sides)

        assert counts[PlinthSystem.CONCRETE_BASE] == 3
        assert counts[PlinthSystem.CHANNEL_BASE] == 3


class TestAggregate:
    """Tests for PerimeterAggregator.aggregate."""

    def test_totals(self, aggregator: PerimeterAggregator, closed_sides: list[Side]) -> None:
        solver = SpacingSolver(panel_width=2500.0, min_gap=5.0, max_gap=20.0)
        layouts = [solver.layout_side(side) for side in closed_sides]

        totals = aggregator.aggregate(closed_sides, layouts, clamps_per_post=2)

        assert totals.panel_count == 20
        assert totals.plinth_count == 20
        assert totals.linear_post_count == 24
        assert totals.corner_count == 4
        assert totals.total_posts == 28
        assert totals.total_clamps == 56
        assert totals.corner_clamps == 8
        assert totals.linear_clamps == 48
        assert totals.used_length == 50000.0

    def test_no_active_sides_gives_zero_totals(self, aggregator: PerimeterAggregator) -> None:
        sides = [Side(name=name, enabled=False, length=1000.0) for name in SideName]

        totals = aggregator.aggregate(sides, [], clamps_per_post=4)

        assert totals.panel_count == 0
        assert totals.total_posts == 0
        assert totals.total_clamps == 0
        assert totals.corner_count == 0
        assert totals.concrete_corner_connectors == 0
        assert totals.channel_corner_connectors == 0
        assert totals.used_length == 0.0
        assert totals.sides == ()

    def test_warnings_are_carried(self, aggregator: PerimeterAggregator) -> None:
        totals = aggregator.aggregate([], [], clamps_per_post=0, warnings=["check gate"])
        assert totals.warnings == ("check gate",)

    def test_side_lookup(self, aggregator: PerimeterAggregator) -> None:
        sides = _sides(front=7530.0)
        solver = SpacingSolver(panel_width=2500.0, min_gap=5.0, max_gap=20.0)
        totals = aggregator.aggregate(sides, [solver.layout_side(sides[0])], clamps_per_post=0)

        front = totals.side(SideName.FRONT)
        assert front is not None
        assert front.panel_count == 3
        assert totals.side(SideName.BACK) is None


class TestPerimeterTotalsImmutability:
    """Tests that solved totals cannot be changed after the fact."""

    def test_totals_are_hashable(
        self, aggregator: PerimeterAggregator, closed_sides: list[Side]
    ) -> None:
        solver = SpacingSolver(panel_width=2500.0, min_gap=5.0, max_gap=20.0)
        layouts = [solver.layout_side(side) for side in closed_sides]

        totals = aggregator.aggregate(closed_sides, layouts, clamps_per_post=2)

        assert hash(totals) == hash(
            aggregator.aggregate(closed_sides, layouts, clamps_per_post=2)
        )

    def test_corner_connectors_cannot_be_written(
        self, aggregator: PerimeterAggregator, closed_sides: list[Side]
    ) -> None:
        totals = aggregator.aggregate(closed_sides, [], clamps_per_post=0)

        with pytest.raises(TypeError):
            totals.corner_connectors[PlinthSystem.CONCRETE_BASE] = 99  # type: ignore[index]

        assert totals.concrete_corner_connectors == 4

    def test_default_counts_are_zero(self) -> None:
        totals = PerimeterTotals()

        assert dict(totals.corner_connectors) == {system: 0 for system in PlinthSystem}
        assert hash(totals) == hash(PerimeterTotals())
