"""User settings management.

This package provides:
- Configuration: the in-memory record of paths and the update-check flag
- load_settings: reads settings.txt from a directory into a Configuration
"""

from licensemangler.settings.configuration import Configuration
from licensemangler.settings.loader import (
    DIRECTIVES,
    PathDirective,
    load_settings,
    parse_value,
    read_settings_file,
)

__all__ = [
    "DIRECTIVES",
    "Configuration",
    "PathDirective",
    "load_settings",
    "parse_value",
    "read_settings_file",
]
