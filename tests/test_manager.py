from pathlib import Path

import pytest

from licensemangler.errors import LicenseManagerUnavailableError, SettingsPathError
from licensemangler.manager import LicenseManager
from licensemangler.settings import Configuration


def test_manager_creates_default_configuration() -> None:
    manager = LicenseManager()
    assert manager.config == Configuration()


def test_setters_update_shared_configuration(license_file: Path, log_file: Path) -> None:
    config = Configuration()
    manager = LicenseManager(config)
    manager.set_license_file_path(str(license_file))
    manager.set_log_file_path(str(log_file))
    manager.set_license_manager_path(str(license_file.parent))
    assert config.license_file_path == str(license_file)
    assert config.log_file_path == str(log_file)
    assert config.license_manager_path == str(license_file.parent)


def test_setter_rejects_missing_path(tmp_path: Path) -> None:
    manager = LicenseManager()
    with pytest.raises(SettingsPathError):
        manager.set_license_manager_path(str(tmp_path / "lmgrd"))
    assert manager.config.license_manager_path == ""


@pytest.mark.parametrize("action", ["start", "stop", "status"])
def test_process_control_is_unavailable(action: str) -> None:
    manager = LicenseManager()
    with pytest.raises(LicenseManagerUnavailableError):
        getattr(manager, action)()
