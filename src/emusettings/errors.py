"""Exception classes for settings file handling.

Loading and saving never raise these to their callers; the loader and the
serializer build them to describe a failure in the log. Explicit checking
operations (such as validation) do raise them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SettingsFileError(Exception):
    """Error while reading, writing or parsing a settings file."""

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[BaseException] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            path: Settings file involved, when known
            original_error: The underlying exception that was caught
        """
        super().__init__(f"{message}: {path}" if path is not None else message)
        self.message: str = message
        self.path: Optional[Path] = path
        self.original_error: Optional[BaseException] = original_error

    @classmethod
    def from_os_error(
        cls, error: OSError, path: Path, writing: bool = False
    ) -> SettingsFileError:
        """Create an error from an OS-level failure.

        Args:
            error: The caught OSError
            path: Settings file being accessed
            writing: True when the failure happened while saving

        Returns:
            Appropriate SettingsFileError subclass
        """
        if isinstance(error, FileNotFoundError) and not writing:
            return SettingsNotFoundError("File not found", path, error)
        if writing:
            return SettingsWriteError(f"Error writing to file ({error})", path, error)
        return SettingsReadError(f"Error reading from file ({error})", path, error)


class SettingsNotFoundError(SettingsFileError):
    """Raised when the settings file does not exist."""

    pass


class SettingsReadError(SettingsFileError):
    """Raised when the settings file cannot be read."""

    pass


class SettingsWriteError(SettingsFileError):
    """Raised when the settings file cannot be written."""

    pass


class SettingsEncodingError(SettingsFileError):
    """Raised when text cannot be decoded from or encoded to UTF-8."""

    pass


class MalformedLineError(SettingsFileError):
    """Raised for a line that is neither a header nor a ``key=value`` pair."""

    def __init__(self, line: str, line_number: Optional[int] = None) -> None:
        """Initialize with the offending line.

        Args:
            line: Raw text of the line
            line_number: 1-based position in the file, when known
        """
        where = f" at line {line_number}" if line_number is not None else ""
        super().__init__(f'Skipping invalid config line{where} "{line}"')
        self.line: str = line
        self.line_number: Optional[int] = line_number
