"""Emulator settings CLI.

Command-line access to the settings file: inspecting, editing, validating
and exporting the typed values the settings UI reads and writes.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

import typer
import yaml
from pydantic import ValidationError

from emusettings.constants import section_for_key
from emusettings.errors import SettingsFileError
from emusettings.paths import SettingsPaths
from emusettings.settings import SettingsStore, find_malformed_lines, parse_value

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Emulator settings file CLI", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "emusettings.cli"

CONFIG_OPTION = typer.Option(
    None, "--config", "-c", dir_okay=False, help="Settings file (default: resolved from env)"
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
SECTION_ARGUMENT = typer.Argument(..., help="Section name, without brackets")
KEY_ARGUMENT = typer.Argument(..., help="Setting key")
VALUE_ARGUMENT = typer.Argument(..., help="Value; its type is inferred")
OUTPUT_OPTION = typer.Option(None, "--output", "-o", dir_okay=False, help="Write YAML here")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _open_store(config: Path | None, debug: bool) -> SettingsStore:
    """Resolve the settings file and load it into a store."""
    _configure_logging(debug)
    paths = SettingsPaths.resolve(config)
    logger.debug("Settings file: %s", paths.config_file)
    store = SettingsStore(paths.config_file)
    store.load()
    return store


def _save_or_exit(store: SettingsStore) -> None:
    if not store.save():
        typer.secho(f"Could not write {store.path}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command()
def show(config: Path | None = CONFIG_OPTION, debug: bool = DEBUG_OPTION) -> None:
    """Print the settings as they would be saved."""
    store = _open_store(config, debug)
    typer.echo(str(store), nl=False)


@app.command()
def sections(config: Path | None = CONFIG_OPTION, debug: bool = DEBUG_OPTION) -> None:
    """List sections and how many settings each holds."""
    store = _open_store(config, debug)
    for name in store.section_names():
        typer.echo(f"[{name}] {len(store.sections[name])}")


@app.command()
def get(
    section: str = SECTION_ARGUMENT,
    key: str = KEY_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Print one setting's value and type."""
    store = _open_store(config, debug)
    setting = store.get(section, key)
    if setting is None:
        typer.secho(f"No setting [{section}] {key}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{setting.value_as_string()} ({setting.kind.value})")


@app.command("set")
def set_(
    section: str = SECTION_ARGUMENT,
    key: str = KEY_ARGUMENT,
    value: str = VALUE_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Store a value, inferring its type, and save the file."""
    store = _open_store(config, debug)

    expected = section_for_key(key)
    if expected is not None and expected != section:
        logger.warning("Key %s normally lives in [%s], not [%s]", key, expected, section)

    try:
        setting = store.set_value(section, key, parse_value(value.strip()))
    except ValidationError as err:
        typer.secho("\nSetting error(s):", fg=typer.colors.RED, err=True)
        for e in err.errors():
            typer.secho(f"  • {e['msg']}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from err
    _save_or_exit(store)
    typer.echo(f"[{section}] {key} = {setting.value_as_string()} ({setting.kind.value})")


@app.command()
def unset(
    section: str = SECTION_ARGUMENT,
    key: str = KEY_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Remove a setting and save the file."""
    store = _open_store(config, debug)
    if store.remove(section, key) is None:
        typer.secho(f"No setting [{section}] {key}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    _save_or_exit(store)
    typer.echo(f"Removed [{section}] {key}")


@app.command()
def validate(file: Path, debug: bool = DEBUG_OPTION) -> None:
    """Report lines the loader would skip."""
    _configure_logging(debug)
    try:
        problems = find_malformed_lines(file)
    except SettingsFileError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    if problems:
        typer.secho("Malformed line(s):", fg=typer.colors.RED, err=True)
        for problem in problems:
            typer.secho(f"  • {problem.line_number}: {problem.line}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo("✅ Settings file valid")


@app.command()
def export(
    output: Path | None = OUTPUT_OPTION,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Dump the settings as YAML, keeping value types."""
    store = _open_store(config, debug)
    text = yaml.safe_dump(store.to_dict(), sort_keys=True, allow_unicode=True)
    if output is None:
        typer.echo(text, nl=False)
        return
    try:
        output.write_text(text, encoding="utf-8")
    except OSError as exc:
        typer.secho(f"Could not write {output}: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    typer.secho(f"Settings exported to {output}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
