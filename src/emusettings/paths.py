"""Location of the settings file on disk."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Final

from dotenv import load_dotenv

from emusettings.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    ENV_CONFIG_FILE,
    ENV_USER_DIR,
)

logger: Final = logging.getLogger(__name__)


@dataclass
class SettingsPaths:
    """User directory and the settings file inside it.

    The settings file lives at ``<user_dir>/config/config.ini`` unless an
    explicit file is given.
    """

    DEFAULT_USER_DIR: ClassVar[Path] = Path("~/.config/emusettings").expanduser()

    user_dir: Path
    config_dir: Path
    config_file: Path

    @classmethod
    def from_user_dir(cls, user_dir: Path) -> SettingsPaths:
        """Create paths from a user directory."""
        config_dir = user_dir / CONFIG_DIR_NAME
        return cls(
            user_dir=user_dir,
            config_dir=config_dir,
            config_file=config_dir / CONFIG_FILE_NAME,
        )

    @classmethod
    def from_config_file(cls, config_file: Path) -> SettingsPaths:
        """Create paths around an explicit settings file."""
        return cls(
            user_dir=config_file.parent.parent,
            config_dir=config_file.parent,
            config_file=config_file,
        )

    @classmethod
    def resolve(cls, path: Path | None = None) -> SettingsPaths:
        """Find the settings file to use.

        Args:
            path: Explicit settings file (optional)

        Returns:
            Paths built from, in order of preference: ``path``, the
            EMUSETTINGS_CONFIG variable, the EMUSETTINGS_USER_DIR variable,
            or the default user directory
        """
        if path is not None:
            return cls.from_config_file(path)

        # Pick up overrides from a .env file without clobbering the environment
        load_dotenv(override=False)

        env_file = os.environ.get(ENV_CONFIG_FILE)
        if env_file:
            logger.debug("Using settings file from %s: %s", ENV_CONFIG_FILE, env_file)
            return cls.from_config_file(Path(env_file).expanduser())

        env_dir = os.environ.get(ENV_USER_DIR)
        if env_dir:
            logger.debug("Using user directory from %s: %s", ENV_USER_DIR, env_dir)
            return cls.from_user_dir(Path(env_dir).expanduser())

        return cls.from_user_dir(cls.DEFAULT_USER_DIR)
