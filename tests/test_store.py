from pathlib import Path

import pytest
from pydantic import ValidationError

from emusettings.settings.model import Setting, SettingType
from emusettings.settings.store import SettingsStore


def test_store_load_and_lookup(sample_ini: Path) -> None:
    store = SettingsStore(sample_ini)
    store.load()
    assert store.get_value("Renderer", "resolution_factor") == 2
    assert store.get_value("Renderer", "missing", default=5) == 5
    assert store.get("Nowhere", "key") is None
    assert "Nowhere" not in store.sections


def test_store_section_names_sorted(sample_ini: Path) -> None:
    store = SettingsStore(sample_ini)
    store.load()
    assert store.section_names() == ["Audio", "Core", "Layout", "Renderer"]


def test_store_set_value_creates_section(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "config.ini")
    setting = store.set_value("Layout", "layout_option", 2)
    assert setting.kind is SettingType.INT
    assert store.sections["Layout"].get_setting("layout_option") == setting


def test_store_put_uses_setting_section(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "config.ini")
    store.put(Setting(key="use_gles", section="Renderer", value=True))
    assert store.get_value("Renderer", "use_gles") is True


def test_store_remove(sample_ini: Path) -> None:
    store = SettingsStore(sample_ini)
    store.load()
    removed = store.remove("Core", "use_cpu_jit")
    assert removed is not None and removed.value is True
    assert store.remove("Core", "use_cpu_jit") is None
    assert store.remove("Nowhere", "x") is None


def test_store_is_empty(tmp_path: Path) -> None:
    store = SettingsStore(tmp_path / "missing.ini")
    store.load()
    assert store.is_empty
    store.section("Layout")
    assert store.is_empty
    store.set_value("Layout", "layout_option", 0)
    assert not store.is_empty


def test_store_save_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "config" / "config.ini"
    store = SettingsStore(path)
    store.set_value("Audio", "volume", 0.75)
    store.set_value("Audio", "output_engine", "auto")
    assert store.save()

    reloaded = SettingsStore(path)
    reloaded.load()
    assert reloaded.to_dict() == {"Audio": {"output_engine": "auto", "volume": 0.75}}


def test_store_to_dict_skips_empty_sections(sample_ini: Path) -> None:
    store = SettingsStore(sample_ini)
    store.load()
    data = store.to_dict()
    assert "Layout" not in data
    assert list(data) == ["Audio", "Core", "Renderer"]
    assert data["Core"] == {"use_cpu_jit": True}


def test_store_str_matches_saved_text(sample_ini: Path, tmp_path: Path) -> None:
    store = SettingsStore(sample_ini)
    store.load()
    store.path = tmp_path / "copy.ini"
    store.save()
    assert str(store) == store.path.read_text(encoding="utf-8")


@pytest.mark.parametrize(
    "section, key, value",
    [
        ("Audio", "output_device", "hw:card=0"),
        ("Audio", "output_device", "one\ntwo"),
        ("Audio", "output_device", "x\n[Core]"),
        ("Audio", "bad=key", 1),
        ("Audio\n[Core]", "volume", 1.0),
    ],
)
def test_store_rejects_values_that_would_not_reload(
    tmp_path: Path, section: str, key: str, value: object
) -> None:
    store = SettingsStore(tmp_path / "config.ini")
    with pytest.raises(ValidationError):
        store.set_value(section, key, value)  # type: ignore[arg-type]
    assert store.is_empty


def test_store_round_trip_keeps_every_accepted_value(tmp_path: Path) -> None:
    path = tmp_path / "config.ini"
    store = SettingsStore(path)
    store.set_value("Audio", "output_device", "hw:card:0")
    store.set_value("Audio", "volume", 0.1)
    store.set_value("Renderer", "bg_red", 3.14159265358979)
    store.set_value("System", "region_value", -1)
    store.set_value("Core", "use_cpu_jit", False)
    assert store.save()

    reloaded = SettingsStore(path)
    reloaded.load()
    assert reloaded.to_dict() == store.to_dict()
    assert path.read_text(encoding="utf-8").count("=") == 5
