from licensemangler.errors import (
    LicenseManagerUnavailableError,
    LicenseManglerError,
    SettingsError,
    SettingsPathError,
)


def test_settings_path_error_message_names_path() -> None:
    err = SettingsPathError("licenseFilePath", "/no/such/file", "license file")
    assert err.directive == "licenseFilePath"
    assert err.path == "/no/such/file"
    assert str(err) == (
        'The license file path you\'ve specified, "/no/such/file", does not exist. '
        "Please adjust your settings accordingly."
    )


def test_settings_path_error_label_defaults_to_directive() -> None:
    err = SettingsPathError("logFilePath", "/nope")
    assert err.label == "logFilePath"
    assert "logFilePath path" in str(err)


def test_error_hierarchy() -> None:
    assert issubclass(SettingsPathError, SettingsError)
    assert issubclass(SettingsError, LicenseManglerError)
    assert issubclass(LicenseManagerUnavailableError, LicenseManglerError)


def test_unavailable_error_keeps_action() -> None:
    err = LicenseManagerUnavailableError("start")
    assert err.action == "start"
    assert str(err).startswith("Cannot start the license manager")
