"""CLI command implementations for the floorplans application.

This package contains subcommands for the floorplans CLI, including:
- validate: Validate a configuration file
"""

from floorplans.cli.commands.validate import validate_command

__all__ = ["validate_command"]
