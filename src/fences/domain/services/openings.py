"""Placement checks for gates and wickets.

Openings only reserve their width from a side; where they sit along the
side does not change any quantity. These checks report placements that
cannot be built as entered, without altering the computed layout.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..entities import Opening, Side
from ..value_objects import OpeningKind, SideName

__all__ = ["PlacementIssue", "check_opening_placement", "reserved_width"]


@dataclass(frozen=True)
class PlacementIssue:
    """A problem with where an opening is placed.

    Attributes:
        opening: Kind of the opening concerned.
        side: Side the opening is assigned to.
        message: Human-readable description.
    """

    opening: OpeningKind
    side: SideName
    message: str


def reserved_width(openings: Iterable[Opening], side: SideName) -> float:
    """Total width reserved on ``side`` by enabled openings."""
    return sum(opening.reserves_on(side) for opening in openings)


def check_opening_placement(
    sides: Sequence[Side], openings: Sequence[Opening]
) -> tuple[PlacementIssue, ...]:
    """Report enabled openings that do not fit where they are placed.

    Checks, per enabled opening:
    - the assigned side is active (otherwise nothing is reserved),
    - ``offset + width`` stays within the side length,
    - it does not overlap another enabled opening on the same side.
    """
    by_name = {side.name: side for side in sides}
    enabled = [opening for opening in openings if opening.enabled]
    issues: list[PlacementIssue] = []

    for opening in enabled:
        side = by_name.get(opening.side)
        if side is None or not side.is_active:
            issues.append(
                PlacementIssue(
                    opening=opening.kind,
                    side=opening.side,
                    message=(
                        f"{opening.kind.label} is assigned to side '{opening.side.value}' "
                        "which is not fenced"
                    ),
                )
            )
            continue
        if opening.end > side.length:
            issues.append(
                PlacementIssue(
                    opening=opening.kind,
                    side=opening.side,
                    message=(
                        f"{opening.kind.label} ends at {opening.end:.0f} mm, beyond the "
                        f"{side.length:.0f} mm length of side '{side.name.value}'"
                    ),
                )
            )

    for index, first in enumerate(enabled):
        for second in enabled[index + 1 :]:
            if first.side != second.side:
                continue
            if first.offset < second.end and second.offset < first.end:
                issues.append(
                    PlacementIssue(
                        opening=second.kind,
                        side=second.side,
                        message=(
                            f"{first.kind.label} and {second.kind.label} overlap on side "
                            f"'{first.side.value}'"
                        ),
                    )
                )

    return tuple(issues)
