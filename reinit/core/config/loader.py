"""
Configuration loader — merges reinit.yml with supplied defaults/overrides.

Layers, lowest precedence first:

    built-in defaults  <  ``defaults``  <  config file  <  ``overrides``

Hooks (``on_file_start`` / ``on_file_complete``) may be callables when
passed programmatically, or ``"package.module:function"`` import strings
(the only form a config file can express).
"""

from __future__ import annotations

import importlib
import json
import logging
from pathlib import Path
from typing import Any, Callable

import yaml
from pydantic import ValidationError

from reinit.core.errors import ConfigError
from reinit.core.models.config import ReinitConfig

logger = logging.getLogger(__name__)

# Searched in this order in each directory
CONFIG_FILE_NAMES = ("reinit.yml", "reinit.yaml", "reinit.json")

_HOOK_KEYS = ("on_file_start", "on_file_complete")

# camelCase keys accepted in files, mapped to field names
_KEY_ALIASES = {
    field.alias: name
    for name, field in ReinitConfig.model_fields.items()
    if field.alias
}


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for a reinit config file starting from ``start_dir``, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to the config file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        for name in CONFIG_FILE_NAMES:
            candidate = current / name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def _read_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading reinit config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        if path.suffix == ".json":
            data = json.loads(raw) if raw.strip() else {}
        else:
            data = yaml.safe_load(raw)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")

    # The file may wrap everything under a "reinit" key or be flat
    if isinstance(data.get("reinit"), dict):
        data = data["reinit"]

    return data


def _normalize(layer: dict[str, Any] | None) -> dict[str, Any]:
    """Map camelCase keys onto field names so layers merge key by key."""
    if not layer:
        return {}
    return {_KEY_ALIASES.get(key, key): value for key, value in layer.items()}


def import_hook(target: str) -> Callable[..., Any]:
    """Resolve ``"package.module:function"`` to a callable.

    Raises:
        ConfigError: If the module or attribute cannot be imported.
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(f"Hook must look like 'package.module:function', got {target!r}")

    try:
        module = importlib.import_module(module_name)
        hook = getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise ConfigError(f"Cannot import hook {target!r}: {e}") from e

    if not callable(hook):
        raise ConfigError(f"Hook {target!r} is not callable")
    return hook


def load_config(
    path: Path | None = None,
    *,
    defaults: dict[str, Any] | None = None,
    overrides: dict[str, Any] | None = None,
    search: bool = True,
) -> ReinitConfig:
    """Load and validate reinit configuration.

    Args:
        path: Explicit config file. If None, searches upward from cwd
            (unless ``search`` is False).
        defaults: Values below the config file.
        overrides: Values above the config file.
        search: Whether to look for a config file when ``path`` is None.

    Returns:
        Validated ReinitConfig.

    Raises:
        ConfigError: If the file is unreadable or the merged values invalid.
    """
    if path is None and search:
        path = find_config_file()

    merged: dict[str, Any] = {}
    merged.update(_normalize(defaults))
    if path is not None:
        merged.update(_normalize(_read_file(path)))
    merged.update(_normalize(overrides))

    for key in _HOOK_KEYS:
        if isinstance(merged.get(key), str):
            merged[key] = import_hook(merged[key])

    try:
        config = ReinitConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid reinit configuration: {e}") from e

    if path is not None:
        logger.info("Loaded reinit config from %s", path)
    return config
