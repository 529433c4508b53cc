"""Exception classes for the license manager shell.

Every failure is handled where it is detected; these types carry enough
context for the CLI to print a message and choose an exit code.
"""

from __future__ import annotations


class LicenseManglerError(Exception):
    """Base class for all licensemangler errors."""


class SettingsError(LicenseManglerError):
    """Problem with the user settings file."""


class SettingsPathError(SettingsError):
    """A path given in the settings does not exist.

    This is fatal: the process stops once the error reaches the CLI.
    """

    def __init__(self, directive: str, path: str, label: str = "") -> None:
        """Initialize the exception.

        Args:
            directive: Settings key that carried the path
            path: The path as written, after quote and whitespace trimming
            label: Human-readable name of the path ("license file", ...)
        """
        self.directive: str = directive
        self.path: str = path
        self.label: str = label or directive
        super().__init__(
            f'The {self.label} path you\'ve specified, "{path}", does not exist. '
            "Please adjust your settings accordingly."
        )


class LicenseManagerUnavailableError(LicenseManglerError):
    """The license manager process cannot be controlled from this shell."""

    def __init__(self, action: str) -> None:
        self.action: str = action
        super().__init__(f"Cannot {action} the license manager: process control is not available")
