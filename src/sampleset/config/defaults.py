"""Default configuration values for Sample Set.

These defaults are used when no config.toml exists, and as fallback
values when loading a config file that is missing newer keys.

All paths are relative: ``resources`` to the directory holding the
config file, ``samples`` and ``presets`` to the resource root.
"""

DEFAULT_CONFIG: dict = {
    "paths": {
        "resources": "res",
        "samples": "samples",
        "presets": "presets.json",
    },
}
