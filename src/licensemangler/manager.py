"""Facade for the external license manager process."""

from __future__ import annotations

import logging
from typing import Final

from licensemangler.errors import LicenseManagerUnavailableError
from licensemangler.settings import Configuration

logger: Final = logging.getLogger(__name__)


class LicenseManager:
    """Control surface for a license manager.

    Path setters update the shared Configuration. Process control is not
    available yet: ``start``, ``stop`` and ``status`` raise
    LicenseManagerUnavailableError.
    """

    def __init__(self, config: Configuration | None = None) -> None:
        self.config = config or Configuration()

    def set_license_file_path(self, path: str) -> None:
        self.config.set_license_file_path(path)
        logger.info("License file path set to %s", path)

    def set_log_file_path(self, path: str) -> None:
        self.config.set_log_file_path(path)
        logger.info("Log file path set to %s", path)

    def set_license_manager_path(self, path: str) -> None:
        self.config.set_license_manager_path(path)
        logger.info("License manager path set to %s", path)

    def start(self) -> None:
        raise LicenseManagerUnavailableError("start")

    def stop(self) -> None:
        raise LicenseManagerUnavailableError("stop")

    def status(self) -> str:
        raise LicenseManagerUnavailableError("check the status of")
