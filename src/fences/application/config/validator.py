"""Validation results and fencing advisories for plan configurations.

Schema validation happens when the configuration is loaded. This module
adds checks that need the whole plan: opening placement, spacing
tolerance and corrugation lookups. They produce warnings only; a plan
with warnings can still be computed.
"""

from dataclasses import dataclass, field
from typing import Any

from fences.application.config.adapter import config_to_input
from fences.application.config.schema import FencePlanConfiguration
from fences.domain import (
    CorrugationTable,
    PanelType,
    SpacingSolver,
    check_opening_placement,
    to_canonical,
)
from fences.domain.services import reserved_width


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: Dotted path to the invalid field (e.g., "sides.front.length")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: Dotted path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(ValidationWarning(path=path, message=message, suggestion=suggestion))
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_sides(config: FencePlanConfiguration) -> ValidationResult:
    """Warn when no side would be fenced."""
    result = ValidationResult()
    if not any(side.enabled and side.length > 0 for side in config.sides.by_name().values()):
        result.add_warning(
            path="sides",
            message="No side is enabled with a positive length; all quantities will be zero",
            suggestion="Enable at least one side and give it a length",
        )
    return result


def check_openings(config: FencePlanConfiguration) -> ValidationResult:
    """Warn about gates and wickets that cannot be built where placed."""
    result = ValidationResult()
    plan = config_to_input(config)
    for issue in check_opening_placement(plan.to_sides(), plan.to_openings()):
        result.add_warning(
            path=issue.opening.value,
            message=issue.message,
            suggestion="Check the opening offset, width and assigned side",
        )
    return result


def check_spacing(config: FencePlanConfiguration) -> ValidationResult:
    """Warn for sides where no panel count keeps the gap in tolerance."""
    result = ValidationResult()
    plan = config_to_input(config)
    params = plan.to_parameters()
    openings = plan.to_openings()
    solver = SpacingSolver.from_parameters(params)

    for side in plan.to_sides():
        if not side.is_active:
            continue
        layout = solver.layout_side(side, reserved_width(openings, side.name))
        if layout.tolerance_clamped:
            result.add_warning(
                path=f"sides.{side.name.value}.length",
                message=(
                    f"No panel count keeps the gap between {params.min_gap:.1f} and "
                    f"{params.max_gap:.1f} mm; gap clamped to {layout.gap:.1f} mm "
                    f"({layout.length_mismatch:+.0f} mm against the run)"
                ),
                suggestion="Adjust the side length or widen the allowed gap range",
            )
    return result


def check_corrugations(
    config: FencePlanConfiguration, table: CorrugationTable | None = None
) -> ValidationResult:
    """Warn when clamps per post cannot be looked up for a 3D panel."""
    result = ValidationResult()
    if config.panel.corrugations is not None or config.panel.type is not PanelType.CORRUGATED:
        return result
    height_mm = to_canonical(config.panel.height, config.unit)
    if not (table or CorrugationTable()).has_entry(height_mm):
        result.add_warning(
            path="panel.height",
            message=(
                f"No corrugation count is known for a {height_mm:.0f} mm panel; "
                "mounting clamps will be counted as 0"
            ),
            suggestion="Set panel.corrugations explicitly",
        )
    return result


def validate_config(
    config: FencePlanConfiguration, table: CorrugationTable | None = None
) -> ValidationResult:
    """Run all plan-level checks on a loaded configuration.

    Args:
        config: A schema-validated FencePlanConfiguration
        table: Corrugation reference data; defaults to the built-in table

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()

    errors = config_to_input(config).validate()
    for message in errors:
        result.add_error(path="(plan)", message=message)
    if errors:
        return result

    result.merge(check_sides(config))
    result.merge(check_openings(config))
    result.merge(check_spacing(config))
    result.merge(check_corrugations(config, table))
    return result
