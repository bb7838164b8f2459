"""Pytest configuration and shared fixtures for fence tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from fences.domain import (
    LayoutParameters,
    Opening,
    OpeningKind,
    PlinthSystem,
    Side,
    SideName,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures (all lengths in mm)
# =============================================================================


@pytest.fixture
def params() -> LayoutParameters:
    """2500 mm panels with a 5-20 mm gap tolerance and no clamp override."""
    return LayoutParameters(
        panel_width=2500.0,
        panel_height=1500.0,
        min_gap=5.0,
        max_gap=20.0,
        post_width=60.0,
        plinth_height=200.0,
    )


@pytest.fixture
def closed_sides() -> list[Side]:
    """A 10 x 15 m plot fenced on all four sides."""
    return [
        Side(name=SideName.FRONT, length=10000.0),
        Side(name=SideName.RIGHT, length=15000.0),
        Side(name=SideName.BACK, length=10000.0),
        Side(name=SideName.LEFT, length=15000.0),
    ]


@pytest.fixture
def no_openings() -> list[Opening]:
    return [
        Opening(kind=OpeningKind.GATE),
        Opening(kind=OpeningKind.WICKET),
    ]


@pytest.fixture
def front_gate() -> list[Opening]:
    """A 4 m gate on the front side and a disabled wicket."""
    return [
        Opening(
            kind=OpeningKind.GATE,
            enabled=True,
            side=SideName.FRONT,
            width=4000.0,
            height=1600.0,
        ),
        Opening(kind=OpeningKind.WICKET),
    ]


@pytest.fixture
def mixed_system_sides() -> list[Side]:
    """Front and left on concrete base, right and back on steel channel."""
    return [
        Side(name=SideName.FRONT, length=10000.0, system=PlinthSystem.CONCRETE_BASE),
        Side(name=SideName.RIGHT, length=15000.0, system=PlinthSystem.CHANNEL_BASE),
        Side(name=SideName.BACK, length=10000.0, system=PlinthSystem.CHANNEL_BASE),
        Side(name=SideName.LEFT, length=15000.0, system=PlinthSystem.CONCRETE_BASE),
    ]


# =============================================================================
# Configuration file fixtures
# =============================================================================


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Any] | str], Path]:
    """Write a configuration (dict or raw text) to a JSON file in tmp_path."""

    def _write(content: dict[str, Any] | str, name: str = "fence.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def clean_config_data() -> dict[str, Any]:
    """A configuration that validates without warnings.

    Each side is an exact multiple of panel plus gap, the gate sits inside
    the front side, and corrugations are given explicitly.
    """
    return {
        "schema_version": "1.0",
        "unit": "mm",
        "panel": {"width": 2500, "height": 1530, "type": "3D", "corrugations": 3},
        "post": {"width": 60},
        "plinth": {"height": 200},
        "gaps": {"min": 5, "max": 20},
        "sides": {
            "front": {"enabled": True, "length": 12530},
            "right": {"enabled": True, "length": 7530},
            "back": {"enabled": True, "length": 7530},
            "left": {"enabled": True, "length": 7530},
        },
        "gate": {"enabled": True, "side": "front", "width": 5000, "height": 1600, "offset": 1000},
        "wicket": {"enabled": False},
    }
