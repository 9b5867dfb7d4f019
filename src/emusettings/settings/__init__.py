"""Settings file model, reader and writer.

This package provides:
- Setting / SettingSection: the typed in-memory model
- load_settings / save_settings: the file reader and writer
- SettingsStore: sections bound to one file, for a settings UI
"""

from emusettings.settings.file import (
    find_malformed_lines,
    format_settings,
    load_settings,
    parse_settings,
    save_settings,
)
from emusettings.settings.model import SectionMap, Setting, SettingSection, SettingType
from emusettings.settings.store import SettingsStore
from emusettings.settings.values import SettingValue, format_value, parse_value

__all__ = [
    "SectionMap",
    "Setting",
    "SettingSection",
    "SettingType",
    "SettingValue",
    "SettingsStore",
    "find_malformed_lines",
    "format_settings",
    "format_value",
    "load_settings",
    "parse_settings",
    "parse_value",
    "save_settings",
]
