"""Configuration schema and loading for fence plans.

Public API:
    - FencePlanConfiguration: Root configuration model
    - PanelConfig, PostConfig, PlinthConfig, GapConfig: Parameter models
    - SideConfig, SidesConfig: Property side models
    - OpeningConfig: Gate and wicket model
    - OutputConfig: Output preferences
    - load_config / load_config_from_dict: Load and validate configuration
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply command-line overrides
    - config_to_input: Convert configuration to a PlanInput DTO
    - validate_config: Plan-level checks returning a ValidationResult

Example:
    >>> from pathlib import Path
    >>> from fences.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-fence.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from fences.application.config.adapter import config_to_input
from fences.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from fences.application.config.merger import merge_config_with_cli
from fences.application.config.schema import (
    SUPPORTED_VERSIONS,
    FencePlanConfiguration,
    GapConfig,
    OpeningConfig,
    OutputConfig,
    PanelConfig,
    PlinthConfig,
    PostConfig,
    SideConfig,
    SidesConfig,
)
from fences.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "FencePlanConfiguration",
    "GapConfig",
    "OpeningConfig",
    "OutputConfig",
    "PanelConfig",
    "PlinthConfig",
    "PostConfig",
    "SideConfig",
    "SidesConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_input",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
