"""Read user settings from settings.txt.

The file holds one directive per line. Lines starting with ``#`` are
comments. Recognised directives::

    checkForUpdatesOnLaunch = false
    licenseFilePath = "/path/to/license/file"
    logFilePath=/path/to/log/file
    licenseManagerPath = /opt/lm/lmgrd

Anything else is ignored. Values may reference environment variables as
``${VAR}``. Bytes that are not valid UTF-8 are carried through unchanged,
so a stray Latin-1 comment does not stop the lines after it from applying.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from licensemangler.constants import (
    CHECK_FOR_UPDATES_KEY,
    COMMENT_PREFIX,
    LICENSE_FILE_KEY,
    LICENSE_MANAGER_KEY,
    LOG_FILE_KEY,
    SETTINGS_FILENAME,
)
from licensemangler.reporting import ConsoleReporter, Reporter
from licensemangler.settings.configuration import Configuration

logger: Final = logging.getLogger(__name__)


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


def parse_value(remainder: str) -> str:
    """Clean up the text that follows a directive key.

    Surrounding whitespace goes first, then one pair of wrapping double
    quotes, then any whitespace that was inside the quotes. ``${VAR}``
    references are expanded last.

    Args:
        remainder: Everything after ``key =`` or ``key=``

    Returns:
        The value the directive sets
    """
    value = remainder.strip()
    value = value.removeprefix('"').removesuffix('"').strip()
    return _interpolate_env(value)


@dataclass(frozen=True)
class PathDirective:
    """A settings line that assigns a filesystem path."""

    key: str
    label: str
    setter: Callable[[Configuration, str], None]

    @property
    def prefixes(self) -> tuple[str, str]:
        return (f"{self.key} =", f"{self.key}=")

    def match(self, line: str) -> str | None:
        """Return the text after the key if ``line`` is this directive.

        Matching is case-sensitive and anchored at the start of the line.
        """
        for prefix in self.prefixes:
            if line.startswith(prefix):
                return line[len(prefix) :]
        return None

    def apply(self, config: Configuration, line: str, reporter: Reporter) -> bool:
        """Set the path from ``line`` on ``config`` if the line matches.

        Raises:
            SettingsPathError: If the path does not exist
        """
        remainder = self.match(line)
        if remainder is None:
            return False
        path = parse_value(remainder)
        self.setter(config, path)
        reporter.info(f"Your {self.label} path has been set to {path} per your settings.")
        return True


DIRECTIVES: Final[tuple[PathDirective, ...]] = (
    PathDirective(LICENSE_FILE_KEY, "license file", Configuration.set_license_file_path),
    PathDirective(LOG_FILE_KEY, "log file", Configuration.set_log_file_path),
    PathDirective(LICENSE_MANAGER_KEY, "license manager", Configuration.set_license_manager_path),
)


def _apply_update_check(config: Configuration, line: str, reporter: Reporter) -> bool:
    lowered = _interpolate_env(line).lower()
    if not lowered.startswith(CHECK_FOR_UPDATES_KEY.lower()):
        return False
    # Only "false" changes anything; other values keep the current setting
    if "false" in lowered:
        config.disable_update_check()
        reporter.info("Updates for this program will not be checked per your settings.")
    return True


def apply_line(config: Configuration, line: str, reporter: Reporter) -> None:
    """Apply a single settings line to ``config``."""
    if line.startswith(COMMENT_PREFIX):
        return
    if _apply_update_check(config, line, reporter):
        return
    for directive in DIRECTIVES:
        if directive.apply(config, line, reporter):
            return
    if line.strip():
        logger.debug("Ignoring unrecognised settings line: %r", line)


def load_settings(directory: Path | None = None, reporter: Reporter | None = None) -> Configuration:
    """Build a Configuration from ``<directory>/settings.txt``.

    A missing file is the normal case and yields defaults silently. Problems
    resolving the directory, or opening or reading the file, are reported
    and never fatal: the defaults (or whatever was read before a read error)
    are returned.

    Args:
        directory: Where to look for the file (default: current directory)
        reporter: Message channel (default: the terminal)

    Returns:
        The populated Configuration

    Raises:
        SettingsPathError: If a path directive names something that does
            not exist. The settings file is closed before this propagates.
    """
    reporter = reporter or ConsoleReporter()
    config = Configuration()

    if directory is None:
        try:
            directory = Path.cwd()
        except OSError as exc:
            reporter.error(
                "Error getting current working directory while looking for user settings: "
                f"{exc} Default settings will be used instead."
            )
            return config

    return read_settings_file(directory / SETTINGS_FILENAME, reporter, config)


def read_settings_file(
    settings_path: Path,
    reporter: Reporter | None = None,
    config: Configuration | None = None,
) -> Configuration:
    """Apply the directives in ``settings_path`` to ``config``.

    Same rules as :func:`load_settings`, for a file that may have any name.
    """
    reporter = reporter or ConsoleReporter()
    if config is None:
        config = Configuration()

    try:
        settings_path.stat()
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", settings_path)
        return config
    except OSError as exc:
        reporter.error(f"Error checking for user settings: {exc} Default settings will be used instead.")
        return config

    reporter.info("Custom settings found!")
    try:
        handle = settings_path.open(encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        reporter.error(f"Error opening settings file: {exc} Default settings will be used instead.")
        return config

    with handle:
        try:
            for number, line in enumerate(handle, start=1):
                logger.debug("%s:%d %r", settings_path.name, number, line)
                apply_line(config, line.rstrip("\r\n"), reporter)
        except OSError as exc:
            reporter.error(f"Error reading settings file: {exc} Default settings will be used instead.")

    return config
