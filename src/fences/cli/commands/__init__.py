"""CLI command implementations for the fences application.

This package contains subcommands for the fences CLI:
- validate: Validate a configuration file
"""

from fences.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
