"""Configuration file loader with error reporting.

Loads JSON fence plan configurations and turns file system errors, JSON
syntax errors and schema violations into a single ``ConfigError`` type
carrying a category and per-field details.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fences.application.config.schema import FencePlanConfiguration


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, field errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a dotted path.

    Examples:
        >>> format_json_path(("sides", "front", "length"))
        'sides.front.length'
        >>> format_json_path(("items", 0, "name"))
        'items[0].name'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": format_json_path(err["loc"]) or "(root)",
            "message": err["msg"],
            "value": err.get("input") if not isinstance(err.get("input"), dict) else None,
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None:
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def load_config(path: Path) -> FencePlanConfiguration:
    """Load and validate a fence plan configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated FencePlanConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            ``error_type`` attribute tells which.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8-sig")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    if not isinstance(data, dict):
        raise ConfigError(
            message=f"Config file must contain a JSON object: {path}",
            error_type="validation",
            path=path,
            details=[{"path": "(root)", "message": "Expected a JSON object"}],
        )

    try:
        return FencePlanConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config_from_dict(data: dict[str, Any]) -> FencePlanConfiguration:
    """Load and validate a fence plan configuration from a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return FencePlanConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )
