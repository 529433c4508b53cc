from collections.abc import Callable
from pathlib import Path

import pytest

from licensemangler.constants import SETTINGS_FILENAME
from licensemangler.reporting import RecordingReporter


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def write_settings(tmp_path: Path) -> Callable[[str], Path]:
    """Write settings.txt into tmp_path and return the file path."""

    def _write(content: str) -> Path:
        path = tmp_path / SETTINGS_FILENAME
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def license_file(tmp_path: Path) -> Path:
    path = tmp_path / "license.lic"
    path.write_text("SERVER this_host ANY 27000\n")
    return path


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    path = tmp_path / "lmgrd.log"
    path.touch()
    return path
