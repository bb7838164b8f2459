"""Configuration merging for CLI overrides.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values. Overridden lengths are read in
the merged configuration's unit.
"""

from typing import Any

from fences.application.config.loader import load_config_from_dict
from fences.application.config.schema import FencePlanConfiguration
from fences.application.presets import SidePreset
from fences.domain import LengthUnit


def merge_config_with_cli(
    config: FencePlanConfiguration,
    *,
    unit: LengthUnit | str | None = None,
    panel_width: float | None = None,
    panel_height: float | None = None,
    min_gap: float | None = None,
    max_gap: float | None = None,
    corrugations: int | None = None,
    preset: SidePreset | str | None = None,
    output_format: str | None = None,
) -> FencePlanConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base configuration
        unit: Override for unit. Existing lengths are not converted.
        panel_width: Override for panel.width
        panel_height: Override for panel.height
        min_gap: Override for gaps.min
        max_gap: Override for gaps.max
        corrugations: Override for panel.corrugations
        preset: Side preset that sets which sides are enabled
        output_format: Override for output.format

    Returns:
        A new, re-validated FencePlanConfiguration

    Raises:
        ConfigError: If the overrides produce an invalid configuration.

    Example:
        >>> merged = merge_config_with_cli(FencePlanConfiguration(), panel_width=2.0)
        >>> merged.panel.width
        2.0
    """
    data: dict[str, Any] = config.model_dump(mode="json")

    if unit is not None:
        data["unit"] = LengthUnit(unit).value
    if panel_width is not None:
        data["panel"]["width"] = panel_width
    if panel_height is not None:
        data["panel"]["height"] = panel_height
    if corrugations is not None:
        data["panel"]["corrugations"] = corrugations
    if min_gap is not None:
        data["gaps"]["min"] = min_gap
    if max_gap is not None:
        data["gaps"]["max"] = max_gap
    if output_format is not None:
        data["output"]["format"] = output_format

    if preset is not None:
        enabled = SidePreset(preset).enabled_sides
        for name, side in data["sides"].items():
            side["enabled"] = any(name == s.value for s in enabled)

    return load_config_from_dict(data)
