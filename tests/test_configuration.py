from pathlib import Path

import pytest
from pydantic import ValidationError

from licensemangler.errors import SettingsPathError
from licensemangler.settings import Configuration


def test_defaults() -> None:
    cfg = Configuration()
    assert cfg.check_for_updates_on_launch is True
    assert cfg.license_file_path == ""
    assert cfg.log_file_path == ""
    assert cfg.license_manager_path == ""


def test_accepts_directive_aliases(license_file: Path) -> None:
    cfg = Configuration.model_validate(
        {"checkForUpdatesOnLaunch": False, "licenseFilePath": str(license_file)}
    )
    assert cfg.check_for_updates_on_launch is False
    assert cfg.license_file_path == str(license_file)


def test_construction_rejects_missing_path(tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        Configuration(log_file_path=str(tmp_path / "missing.log"))


def test_assignment_is_validated(tmp_path: Path) -> None:
    cfg = Configuration()
    with pytest.raises(ValidationError):
        cfg.license_file_path = str(tmp_path / "missing.lic")
    assert cfg.license_file_path == ""


@pytest.mark.parametrize(
    "setter, field",
    [
        (Configuration.set_license_file_path, "license_file_path"),
        (Configuration.set_log_file_path, "log_file_path"),
        (Configuration.set_license_manager_path, "license_manager_path"),
    ],
)
def test_setters_store_existing_paths(setter, field: str, tmp_path: Path) -> None:
    cfg = Configuration()
    setter(cfg, str(tmp_path))
    assert getattr(cfg, field) == str(tmp_path)


def test_setter_raises_for_missing_path(tmp_path: Path) -> None:
    cfg = Configuration()
    missing = str(tmp_path / "missing.lic")
    with pytest.raises(SettingsPathError) as exc_info:
        cfg.set_license_file_path(missing)
    assert exc_info.value.path == missing
    assert exc_info.value.directive == "licenseFilePath"
    assert exc_info.value.label == "license file"


def test_setter_rejects_empty_path() -> None:
    with pytest.raises(SettingsPathError):
        Configuration().set_log_file_path("")


def test_last_write_wins(license_file: Path, log_file: Path) -> None:
    cfg = Configuration()
    cfg.set_license_file_path(str(license_file))
    cfg.set_license_file_path(str(log_file))
    assert cfg.license_file_path == str(log_file)


def test_to_directives_omits_unset_paths(license_file: Path) -> None:
    cfg = Configuration()
    cfg.disable_update_check()
    cfg.set_license_file_path(str(license_file))
    assert cfg.to_directives() == [
        "checkForUpdatesOnLaunch = false",
        f'licenseFilePath = "{license_file}"',
    ]
