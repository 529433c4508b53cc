"""Constants shared across the licensemangler package."""

from __future__ import annotations

from typing import Final

SETTINGS_FILENAME: Final = "settings.txt"
COMMENT_PREFIX: Final = "#"

# Directive keys as they appear in settings.txt
CHECK_FOR_UPDATES_KEY: Final = "checkForUpdatesOnLaunch"
LICENSE_FILE_KEY: Final = "licenseFilePath"
LOG_FILE_KEY: Final = "logFilePath"
LICENSE_MANAGER_KEY: Final = "licenseManagerPath"

# A configured path that does not exist ends the process with this code
FATAL_EXIT_CODE: Final = 0

EXIT_MESSAGE: Final = "Exiting from user input..."
DIRECTORY_ENV_VAR: Final = "LICENSEMANGLER_DIR"
