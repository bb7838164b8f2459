"""Unit tests for the corrugation reference table."""

from types import MappingProxyType

import pytest

from fences.domain import CorrugationTable, resolve_clamps_per_post
from fences.domain.corrugation import DEFAULT_CORRUGATIONS_BY_HEIGHT


class TestCorrugationTable:
    """Tests for CorrugationTable lookups."""

    def test_default_entries(self) -> None:
        table = CorrugationTable()
        assert table.lookup(830) == 2
        assert table.lookup(2230) == 4
        assert table.lookup(2430) == 4

    def test_height_is_rounded_half_up_to_ten(self) -> None:
        """825 mm rounds to 830, 834.9 mm rounds to 830, 835 mm to 840."""
        table = CorrugationTable()
        assert table.lookup(825) == 2
        assert table.lookup(834.9) == 2
        assert table.lookup(835) == 0

    def test_unmapped_height_resolves_to_default(self) -> None:
        assert CorrugationTable().lookup(1500) == 0
        assert CorrugationTable(default=3).lookup(1500) == 3

    def test_has_entry(self) -> None:
        table = CorrugationTable()
        assert table.has_entry(828)
        assert not table.has_entry(1500)

    def test_extended_returns_new_table(self) -> None:
        """extended() adds entries without touching the original table."""
        table = CorrugationTable()
        extended = table.extended({1530: 3, 830: 5})

        assert extended.lookup(1530) == 3
        assert extended.lookup(830) == 5
        assert table.lookup(1530) == 0
        assert table.lookup(830) == 2

    def test_default_mapping_is_read_only(self) -> None:
        assert isinstance(DEFAULT_CORRUGATIONS_BY_HEIGHT, MappingProxyType)
        with pytest.raises(TypeError):
            DEFAULT_CORRUGATIONS_BY_HEIGHT[1000] = 1  # type: ignore[index]

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            CorrugationTable(entries={830: -1})

    def test_non_positive_height_rejected(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            CorrugationTable(entries={0: 2})


class TestResolveClampsPerPost:
    """Tests for resolve_clamps_per_post."""

    def test_lookup_when_no_override(self) -> None:
        assert resolve_clamps_per_post(830, None) == 2

    def test_explicit_override_wins(self) -> None:
        assert resolve_clamps_per_post(830, 5) == 5

    def test_zero_override_wins_over_table(self) -> None:
        """An explicit 0 is a choice, not a missing value."""
        assert resolve_clamps_per_post(830, 0) == 0

    def test_custom_table(self) -> None:
        table = CorrugationTable(entries={1530: 3})
        assert resolve_clamps_per_post(1530, None, table) == 3
        assert resolve_clamps_per_post(830, None, table) == 0
