"""Unit tests for side presets."""

import pytest

from fences.application import SideInput, SidePreset, apply_preset
from fences.domain import Side, SideName


class TestSidePreset:
    """Tests for SidePreset."""

    @pytest.mark.parametrize(
        "preset,expected",
        [
            (SidePreset.FRONT_ONLY, {SideName.FRONT}),
            (SidePreset.FRONT_RIGHT, {SideName.FRONT, SideName.RIGHT}),
            (SidePreset.FRONT_LEFT, {SideName.FRONT, SideName.LEFT}),
            (SidePreset.ALL, set(SideName)),
        ],
    )
    def test_enabled_sides(self, preset: SidePreset, expected: set[SideName]) -> None:
        assert preset.enabled_sides == expected


class TestApplyPreset:
    """Tests for apply_preset."""

    def test_on_side_inputs(self) -> None:
        sides = [SideInput(name=name.value, length=10) for name in SideName]
        result = apply_preset(sides, "front_right")

        assert [side.enabled for side in result] == [True, True, False, False]
        assert all(side.length == 10 for side in result)

    def test_on_domain_sides(self, closed_sides: list[Side]) -> None:
        result = apply_preset(closed_sides, SidePreset.FRONT_ONLY)

        assert [side.is_active for side in result] == [True, False, False, False]
        assert result[1].length == 15000.0

    def test_does_not_mutate_input(self, closed_sides: list[Side]) -> None:
        apply_preset(closed_sides, SidePreset.FRONT_ONLY)
        assert all(side.enabled for side in closed_sides)

    def test_unknown_preset_rejected(self) -> None:
        with pytest.raises(ValueError):
            apply_preset([], "back_only")
