"""Settings store bound to a file on disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final, Optional

from emusettings.settings.file import format_settings, load_settings, save_settings
from emusettings.settings.model import SectionMap, Setting, SettingSection
from emusettings.settings.values import SettingValue

logger: Final = logging.getLogger(__name__)


class SettingsStore:
    """All sections of one settings file, as held by a settings UI.

    The store loads from and saves to a single path. Sections are created on
    first access through :meth:`section`; lookups through :meth:`get` never
    create anything.

    Examples:
        store = SettingsStore(paths.config_file)
        store.load()
        store.set_value("Renderer", "resolution_factor", 2)
        store.save()
    """

    def __init__(self, path: Path, log: Optional[logging.Logger] = None):
        """Initialize an empty store for ``path``."""
        self.path = path
        self.log = log or logger
        self.sections: SectionMap = {}

    def load(self) -> SectionMap:
        """Replace the in-memory sections with the file's contents."""
        self.sections = load_settings(self.path, self.log)
        return self.sections

    def save(self) -> bool:
        """Write the in-memory sections to the file."""
        return save_settings(self.sections, self.path, self.log)

    def section(self, name: str) -> SettingSection:
        """Return the named section, creating it if needed."""
        if name not in self.sections:
            self.sections[name] = SettingSection(name=name)
        return self.sections[name]

    def section_names(self) -> list[str]:
        return sorted(self.sections)

    def get(self, section: str, key: str) -> Optional[Setting]:
        found = self.sections.get(section)
        return found.get_setting(key) if found else None

    def get_value(
        self, section: str, key: str, default: Optional[SettingValue] = None
    ) -> Optional[SettingValue]:
        """Return a setting's value, or ``default`` when it is missing."""
        setting = self.get(section, key)
        return setting.value if setting else default

    def put(self, setting: Setting) -> None:
        self.section(setting.section).put_setting(setting)

    def set_value(self, section: str, key: str, value: SettingValue) -> Setting:
        """Store ``value`` under ``section``/``key`` and return the new setting.

        Raises:
            ValidationError: If the key, section or value cannot be written
                and read back unchanged
        """
        setting = Setting(key=key, section=section, value=value)
        self.put(setting)
        return setting

    def remove(self, section: str, key: str) -> Optional[Setting]:
        found = self.sections.get(section)
        return found.remove_setting(key) if found else None

    @property
    def is_empty(self) -> bool:
        """True when no section holds any setting."""
        return all(section.is_empty for section in self.sections.values())

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Plain nested dict of typed values, sorted like the saved file."""
        return {
            name: {
                key: self.sections[name].settings[key].value
                for key in sorted(self.sections[name].settings)
            }
            for name in sorted(self.sections)
            if not self.sections[name].is_empty
        }

    def __str__(self) -> str:
        return format_settings(self.sections)
