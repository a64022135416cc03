"""CLI command implementations for the cladding application.

- validate: Validate a grid document
- presets: Browse and copy preset grids
"""

from cladding.cli.commands.presets import presets_app
from cladding.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "presets_app", "validate_command"]
