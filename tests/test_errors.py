from pathlib import Path

import pytest
from emusettings.errors import (
    MalformedLineError,
    SettingsFileError,
    SettingsNotFoundError,
    SettingsReadError,
    SettingsWriteError,
)


@pytest.mark.parametrize(
    "error, writing, expected_type",
    [
        (FileNotFoundError("gone"), False, SettingsNotFoundError),
        (FileNotFoundError("gone"), True, SettingsWriteError),
        (PermissionError("denied"), False, SettingsReadError),
        (PermissionError("denied"), True, SettingsWriteError),
        (OSError("io"), False, SettingsReadError),
    ],
)
def test_from_os_error_creates_expected_error(
    error: OSError, writing: bool, expected_type: type[SettingsFileError]
) -> None:
    path = Path("config.ini")
    err = SettingsFileError.from_os_error(error, path, writing=writing)
    assert isinstance(err, expected_type)
    assert err.path == path
    assert err.original_error is error
    assert str(err).endswith(": config.ini")


def test_settings_error_without_path() -> None:
    err = SettingsFileError("Something broke")
    assert str(err) == "Something broke"
    assert err.path is None


def test_malformed_line_message() -> None:
    err = MalformedLineError("oops", 3)
    assert isinstance(err, SettingsFileError)
    assert str(err) == 'Skipping invalid config line at line 3 "oops"'
    assert str(MalformedLineError("oops")) == 'Skipping invalid config line "oops"'
