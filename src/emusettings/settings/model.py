"""In-memory model of a settings file: typed settings grouped in sections."""

from __future__ import annotations

from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from emusettings.settings.values import SettingValue, format_value, parse_value, to_float32

_LINE_BREAKS: Final = ("\r", "\n")
_SEPARATOR: Final = "="


def _has_line_break(text: str) -> bool:
    return any(ch in text for ch in _LINE_BREAKS)


def _check_section_name(name: str) -> str:
    if _has_line_break(name):
        raise ValueError("section name cannot contain line breaks")
    return name


class SettingType(Enum):
    """Variant tag of a setting value."""

    INT = "int"
    FLOAT = "float"
    BOOLEAN = "boolean"
    STRING = "string"


class Setting(BaseModel):
    """A single typed key/value pair belonging to a section.

    Settings are immutable. Values are validated strictly, so ``1`` stays an
    int, ``1.0`` a float and ``True`` a bool. Floats are narrowed to single
    precision. Keys and string values are limited to text that reads back
    unchanged from a ``key = value`` line.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    key: str = Field(..., description="Setting key, unique within its section")
    section: str = Field(..., description="Name of the owning section")
    value: SettingValue = Field(..., description="Typed setting value")

    # ---- validators ----
    @field_validator("key")
    @classmethod
    def validate_key(cls, v: str) -> str:
        if _SEPARATOR in v or _has_line_break(v):
            raise ValueError("key cannot contain '=' or line breaks")
        if v != v.strip():
            raise ValueError("key cannot have surrounding whitespace")
        return v

    @field_validator("section")
    @classmethod
    def validate_section(cls, v: str) -> str:
        return _check_section_name(v)

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: SettingValue) -> SettingValue:
        """Narrow floats and reject strings that would not load back as-is."""
        if isinstance(v, float):
            return to_float32(v)
        if not isinstance(v, str):
            return v
        if _SEPARATOR in v or _has_line_break(v):
            raise ValueError("string value cannot contain '=' or line breaks")
        if v != v.strip():
            raise ValueError("string value cannot have surrounding whitespace")
        if not isinstance(parse_value(v), str):
            raise ValueError(f"string value {v!r} would load back as another type")
        return v

    @model_validator(mode="after")
    def check_not_header(self) -> Setting:
        """Reject settings whose saved line would read as a ``[header]``."""
        if self.key.startswith("[") and self.value_as_string().endswith("]"):
            raise ValueError("setting would be written as a section header")
        return self

    # ---- convenience methods ----
    @property
    def kind(self) -> SettingType:
        """The variant tag of this setting's value."""
        # bool before int: bool is an int subclass
        if isinstance(self.value, bool):
            return SettingType.BOOLEAN
        if isinstance(self.value, int):
            return SettingType.INT
        if isinstance(self.value, float):
            return SettingType.FLOAT
        return SettingType.STRING

    def value_as_string(self) -> str:
        """Text written after ``key = `` when the setting is saved."""
        return format_value(self.value)


class SettingSection(BaseModel):
    """A named group of settings, written as a bracketed header."""

    name: str
    settings: dict[str, Setting] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _check_section_name(v)

    def put_setting(self, setting: Setting) -> None:
        """Add a setting, replacing any existing one with the same key."""
        self.settings[setting.key] = setting

    def get_setting(self, key: str) -> Optional[Setting]:
        return self.settings.get(key)

    def remove_setting(self, key: str) -> Optional[Setting]:
        """Remove and return the setting for ``key``, if present."""
        return self.settings.pop(key, None)

    @property
    def is_empty(self) -> bool:
        return not self.settings

    def __len__(self) -> int:
        return len(self.settings)


SectionMap = dict[str, SettingSection]
