"""Configuration loading, saving, and path resolution.

This module handles TOML-based configuration using stdlib tomllib (read)
and tomli-w (write).  The resource root (holding ``samples/`` and the
presets file) is resolved relative to the directory of the config file,
which defaults to the current working directory.
"""

from __future__ import annotations

import copy
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from sampleset.config.defaults import DEFAULT_CONFIG

_CONFIG_FILENAME = "config.toml"


def get_config_path() -> Path:
    """Return the path to config.toml in the current working directory.

    Returns:
        Path to config.toml (may not exist yet).

    Raises:
        OSError: If the working directory cannot be determined (for
            example because it was deleted).
    """
    return Path.cwd() / _CONFIG_FILENAME


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base, returning a new dict.

    Values in override take precedence.  Nested dicts are merged
    recursively; non-dict values are replaced entirely.
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from a TOML file.

    If the file does not exist, returns a deep copy of DEFAULT_CONFIG.
    Otherwise the file is merged onto the defaults so that missing keys
    are always present.

    Args:
        config_path: Path to the config file. Defaults to get_config_path().

    Returns:
        Configuration dictionary with all keys populated.

    Raises:
        tomllib.TOMLDecodeError: If the file exists but is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_path, "rb") as f:
        user_config = tomllib.load(f)

    return _deep_merge(DEFAULT_CONFIG, user_config)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration dictionary to a TOML file.

    Creates parent directories if they do not exist.

    Args:
        config: Configuration dictionary to save.
        config_path: Path to the config file. Defaults to get_config_path().
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)


def resolve_path(path_str: str, base_dir: Path | None = None) -> Path:
    """Resolve a configuration path string to an absolute Path.

    - Paths starting with ~ are expanded to the user's home directory.
    - Absolute paths are returned as-is.
    - Relative paths are resolved against base_dir (defaults to the
      directory of the config file).

    Args:
        path_str: A path string from configuration.
        base_dir: Base directory for relative paths.

    Returns:
        An absolute, resolved Path.
    """
    path = Path(path_str).expanduser()

    if path.is_absolute():
        return path.resolve()

    if base_dir is None:
        base_dir = get_config_path().parent

    return (base_dir / path).resolve()


def resolve_resource_root(config: dict[str, Any], config_path: Path) -> Path:
    """Return the resource root directory for *config*.

    The directory does not have to exist yet (it is created on the first
    preset write), but if something exists at that path it must be a
    directory.

    Raises:
        NotADirectoryError: If the resolved path exists and is a file.
    """
    root = resolve_path(config["paths"]["resources"], base_dir=config_path.parent)
    if root.exists() and not root.is_dir():
        raise NotADirectoryError(f"Resource root is not a directory: {root}")
    return root


def resolve_samples_root(config: dict[str, Any], resource_root: Path) -> Path:
    """Return the samples directory inside *resource_root*."""
    return resolve_path(config["paths"]["samples"], base_dir=resource_root)


def resolve_presets_path(config: dict[str, Any], resource_root: Path) -> Path:
    """Return the presets backing file inside *resource_root*."""
    return resolve_path(config["paths"]["presets"], base_dir=resource_root)
