"""Reading and writing INI-style settings files.

The format is line based::

    [SectionName]
    key1 = value1
    key2 = value2

Loading and saving never raise on I/O problems. Failures are reported to a
logger (the caller's, or this module's) and the caller gets a degraded but
valid result: an empty mapping from a failed load, a partial or missing
file from a failed save.
"""

from __future__ import annotations

import io
import logging
import re
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Final, Optional, TextIO

from pydantic import ValidationError

from emusettings.constants import FILE_ENCODING, FILE_READ_ENCODING
from emusettings.errors import (
    MalformedLineError,
    SettingsEncodingError,
    SettingsFileError,
)
from emusettings.settings.model import SectionMap, Setting, SettingSection
from emusettings.settings.values import parse_value

logger: Final = logging.getLogger(__name__)

_SECTION_HEADER: Final = re.compile(r"\[(.*)\]")


def section_name_from_header(line: str) -> Optional[str]:
    """Return the section name if ``line`` is a ``[header]``, else None."""
    match = _SECTION_HEADER.fullmatch(line)
    return match.group(1) if match else None


def parse_line(section: SettingSection, line: str, line_number: Optional[int] = None) -> Setting:
    """Convert one ``key = value`` line into a typed setting.

    Args:
        section: Section the line belongs to
        line: Raw line text without its line terminator
        line_number: 1-based position, used in error messages

    Returns:
        Setting with the key and value stripped and the value type inferred

    Raises:
        MalformedLineError: If the line does not contain exactly one ``=``,
            or does not make a valid setting
    """
    parts = line.split("=")
    if len(parts) != 2:
        raise MalformedLineError(line, line_number)

    key, value = parts[0].strip(), parts[1].strip()
    try:
        return Setting(key=key, section=section.name, value=parse_value(value))
    except ValidationError as exc:
        raise MalformedLineError(line, line_number) from exc


def _iter_lines(lines: Iterable[str]) -> Iterable[tuple[int, str]]:
    for number, line in enumerate(lines, start=1):
        yield number, line.rstrip("\r\n")


def _scan(lines: Iterable[str], on_malformed: Callable[[MalformedLineError], None]) -> SectionMap:
    """Build the section map, reporting each skipped line to ``on_malformed``."""
    sections: SectionMap = {}
    current: Optional[SettingSection] = None

    for number, line in _iter_lines(lines):
        name = section_name_from_header(line)
        if name is not None:
            try:
                current = SettingSection(name=name)
            except ValidationError:
                # Lines under an unusable header belong to no section
                current = None
                on_malformed(MalformedLineError(line, number))
                continue
            sections[name] = current
            continue
        if current is None:
            continue
        try:
            current.put_setting(parse_line(current, line, number))
        except MalformedLineError as err:
            on_malformed(err)

    return sections


def parse_settings(lines: Iterable[str], log: Optional[logging.Logger] = None) -> SectionMap:
    """Build the section map from lines of settings text.

    Malformed lines, blank ones included, are skipped with a warning. Lines
    before the first section header are ignored.
    """
    log = log or logger
    return _scan(lines, lambda err: log.warning("%s", err))


def load_settings(path: Path, log: Optional[logging.Logger] = None) -> SectionMap:
    """Read a settings file from disk.

    Args:
        path: Settings file to read
        log: Logger receiving warnings and errors (default: module logger)

    Returns:
        Mapping from section name to section; empty if the file is missing
        or cannot be read
    """
    log = log or logger
    try:
        with path.open("r", encoding=FILE_READ_ENCODING) as fh:
            sections = parse_settings(fh, log)
    except OSError as exc:
        log.error("[SettingsFile] %s", SettingsFileError.from_os_error(exc, path))
        return {}
    except UnicodeDecodeError as exc:
        err = SettingsEncodingError(f"Bad encoding ({exc.reason})", path, exc)
        log.error("[SettingsFile] %s", err)
        return {}

    log.debug("Loaded %d section(s) from %s", len(sections), path)
    return sections


def find_malformed_lines(path: Path) -> list[MalformedLineError]:
    """List every line of ``path`` that the loader would skip.

    Raises:
        SettingsFileError: If the file cannot be read or decoded
    """
    problems: list[MalformedLineError] = []
    try:
        with path.open("r", encoding=FILE_READ_ENCODING) as fh:
            _scan(fh, problems.append)
    except OSError as exc:
        raise SettingsFileError.from_os_error(exc, path) from exc
    except UnicodeDecodeError as exc:
        raise SettingsEncodingError(f"Bad encoding ({exc.reason})", path, exc) from exc
    return problems


def _write_section(out: TextIO, section: SettingSection) -> None:
    if section.is_empty:
        return

    out.write(f"[{section.name}]\n")
    for key in sorted(section.settings):
        setting = section.settings[key]
        text = setting.value_as_string()
        if text:
            out.write(f"{setting.key} = {text}\n")


def write_settings(out: TextIO, sections: SectionMap) -> None:
    """Write sections to an open text stream, sorted by name."""
    for name in sorted(sections):
        _write_section(out, sections[name])


def format_settings(sections: SectionMap) -> str:
    """Render sections as settings file text."""
    buffer = io.StringIO()
    write_settings(buffer, sections)
    return buffer.getvalue()


def save_settings(
    sections: SectionMap, path: Path, log: Optional[logging.Logger] = None
) -> bool:
    """Write sections to a settings file on disk.

    Sections and keys are written in lexicographic order; empty sections and
    settings whose text is empty are left out.

    Args:
        sections: Mapping from section name to section
        path: Settings file to (over)write
        log: Logger receiving errors (default: module logger)

    Returns:
        True if the whole file was written, False if the write was abandoned
    """
    log = log or logger
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=FILE_ENCODING, newline="\n") as fh:
            write_settings(fh, sections)
    except UnicodeEncodeError as exc:
        err = SettingsEncodingError(
            f"Bad encoding; please file a bug report ({exc.reason})", path, exc
        )
        log.error("[SettingsFile] %s", err)
        return False
    except OSError as exc:
        log.error("[SettingsFile] %s", SettingsFileError.from_os_error(exc, path, writing=True))
        return False

    log.debug("Saved %d section(s) to %s", len(sections), path)
    return True
