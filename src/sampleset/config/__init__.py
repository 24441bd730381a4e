"""TOML configuration and resource path resolution.

Public API:
- DEFAULT_CONFIG: baseline configuration dict
- load_config / save_config: read and write ``config.toml``
- resolve_path / resolve_resource_root: turn config strings into paths
"""

from sampleset.config.defaults import DEFAULT_CONFIG
from sampleset.config.settings import (
    get_config_path,
    load_config,
    resolve_path,
    resolve_presets_path,
    resolve_resource_root,
    resolve_samples_root,
    save_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "get_config_path",
    "load_config",
    "resolve_path",
    "resolve_presets_path",
    "resolve_resource_root",
    "resolve_samples_root",
    "save_config",
]
