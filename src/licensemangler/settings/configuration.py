"""In-memory configuration record built from settings.txt."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from licensemangler.constants import (
    CHECK_FOR_UPDATES_KEY,
    LICENSE_FILE_KEY,
    LICENSE_MANAGER_KEY,
    LOG_FILE_KEY,
)
from licensemangler.errors import SettingsPathError

# field name -> (directive key, label used in messages)
PATH_FIELDS: dict[str, tuple[str, str]] = {
    "license_file_path": (LICENSE_FILE_KEY, "license file"),
    "log_file_path": (LOG_FILE_KEY, "log file"),
    "license_manager_path": (LICENSE_MANAGER_KEY, "license manager"),
}


class Configuration(BaseModel):
    """Settings for the license manager shell.

    Defaults apply before any file is read. Path fields are either empty
    (unset) or name something that exists on the filesystem. Every setter
    reassigns, so the last directive in a file wins.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    check_for_updates_on_launch: bool = Field(
        True, alias=CHECK_FOR_UPDATES_KEY, description="Look for a newer release at start-up"
    )
    license_file_path: str = Field(
        "", alias=LICENSE_FILE_KEY, description="License file handed to the license manager"
    )
    log_file_path: str = Field(
        "", alias=LOG_FILE_KEY, description="Log file written by the license manager"
    )
    license_manager_path: str = Field(
        "", alias=LICENSE_MANAGER_KEY, description="License manager executable"
    )

    # ---- validators ----
    @field_validator("license_file_path", "log_file_path", "license_manager_path")
    @classmethod
    def validate_path_exists(cls, v: str) -> str:
        if v and not os.path.exists(v):
            raise ValueError(f"path does not exist: {v}")
        return v

    # ---- setters ----
    def set_license_file_path(self, path: str) -> None:
        """Point the configuration at a license file.

        Raises:
            SettingsPathError: If ``path`` does not exist
        """
        self._set_path("license_file_path", path)

    def set_log_file_path(self, path: str) -> None:
        """Point the configuration at a log file.

        Raises:
            SettingsPathError: If ``path`` does not exist
        """
        self._set_path("log_file_path", path)

    def set_license_manager_path(self, path: str) -> None:
        """Point the configuration at the license manager executable.

        Raises:
            SettingsPathError: If ``path`` does not exist
        """
        self._set_path("license_manager_path", path)

    def disable_update_check(self) -> None:
        self.check_for_updates_on_launch = False

    def _set_path(self, field: str, path: str) -> None:
        directive, label = PATH_FIELDS[field]
        # os.path.exists("") is False, so an empty value is rejected too
        if not os.path.exists(path):
            raise SettingsPathError(directive, path, label)
        setattr(self, field, path)

    # ---- serialisation ----
    def to_directives(self) -> list[str]:
        """Render the configuration as settings.txt lines.

        Unset paths are left out so that reading the lines back yields the
        same record.
        """
        flag = "true" if self.check_for_updates_on_launch else "false"
        lines = [f"{CHECK_FOR_UPDATES_KEY} = {flag}"]
        for field, (directive, _) in PATH_FIELDS.items():
            value = getattr(self, field)
            if value:
                lines.append(f'{directive} = "{value}"')
        return lines
