"""CLI command implementations for the decking application.

This package contains subcommands for the decking CLI, including:
- validate: Validate a configuration file
"""

from decking.cli.commands.validate import validate_command

__all__ = ["validate_command"]
