"""YAML settings for overriding the font directory table.

Example settings file::

    directories:
      linux:
        current_user: ~/.fonts
      macos:
        AllUsers: /Network/Library/Fonts
      windows:
        AllUsers: null   # drop the entry

Directory values may reference environment variables as ``%VAR%`` or
``${VAR}``; a bare ``$`` is part of the path. Platform and scope keys accept
any spelling understood by ``Platform.parse`` and ``Scope.parse``.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .directories import DEFAULT_DIRECTORIES
from .directories import FontDirectoryMap
from .directories import copy_directory_map
from .exceptions import FontSettingsFileError
from .exceptions import FontSettingsValidationError
from .models import Platform
from .models import Scope
from .utils import deep_merge

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FONT_LISTER_CONFIG"


def default_settings_path() -> Path:
    """Location of the user settings file.

    ``$FONT_LISTER_CONFIG`` wins when set; otherwise
    ``~/.config/font-lister/settings.yaml``.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "font-lister" / "settings.yaml"


def read_settings(path: Path) -> dict[str, Any] | None:
    """Read a YAML settings file.

    Args:
        path: Path to YAML file

    Returns:
        Dictionary from YAML, ``{}`` for an empty file, or None if the file
        doesn't exist

    Raises:
        FontSettingsFileError: If the file cannot be read or parsed
    """
    if not path.exists():
        logger.debug(f"No settings file at {path}")
        return None

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise FontSettingsFileError(f"Failed to read settings from {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FontSettingsValidationError(f"Settings in {path} must be a mapping, got {type(data).__name__}")
    return data


def _parse_overrides(raw: Any, source: Path) -> FontDirectoryMap:
    if not isinstance(raw, dict):
        raise FontSettingsValidationError(f"'directories' in {source} must be a mapping")

    overrides: dict[Platform, dict[Scope, Any]] = {}
    for platform_key, scopes in raw.items():
        try:
            plat = Platform.parse(platform_key)
        except ValueError as e:
            raise FontSettingsValidationError(f"{source}: {e}") from e
        if not isinstance(scopes, dict):
            raise FontSettingsValidationError(f"{source}: directories for '{platform_key}' must be a mapping")

        for scope_key, template in scopes.items():
            try:
                scope = Scope.parse(scope_key)
            except ValueError as e:
                raise FontSettingsValidationError(f"{source}: {e}") from e
            if template is not None and not isinstance(template, str):
                raise FontSettingsValidationError(
                    f"{source}: directory for {plat.value}/{scope.value} must be a string or null"
                )
            overrides.setdefault(plat, {})[scope] = template

    return overrides


def load_directory_map(path: Path | None = None, base: FontDirectoryMap | None = None) -> FontDirectoryMap:
    """Build the font directory table from defaults plus a settings file.

    An explicitly given ``path`` must exist. The default settings file is
    optional and the defaults apply when it is absent.

    Args:
        path: Settings file (default: ``default_settings_path()``)
        base: Table the overrides are layered on (default: DEFAULT_DIRECTORIES)

    Returns:
        New directory table; ``base`` is not modified

    Raises:
        FontSettingsFileError: If ``path`` is missing, or the file cannot be read or parsed
        FontSettingsValidationError: If the settings are malformed
    """
    if path is None:
        path = default_settings_path()
    elif not path.exists():
        raise FontSettingsFileError(f"Settings file not found: {path}")
    directories = copy_directory_map(base if base is not None else DEFAULT_DIRECTORIES)

    settings = read_settings(path)
    if not settings or settings.get("directories") is None:
        return directories

    overrides = _parse_overrides(settings["directories"], path)
    merged = deep_merge(directories, overrides)
    logger.info(f"Loaded font directory overrides from {path}")
    return merged
