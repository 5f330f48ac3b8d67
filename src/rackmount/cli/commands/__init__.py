"""CLI command implementations for the rackmount application.

- validate: Validate a configuration file
"""

from rackmount.cli.commands.validate import validate_command

__all__ = ["validate_command"]
