"""CLI command implementations for the crates application.

This package contains subcommands for the crates CLI, including:
- validate: Validate a configuration file
"""

from crates.cli.commands.validate import validate_command

__all__ = ["validate_command"]
