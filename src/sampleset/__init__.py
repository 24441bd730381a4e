"""Sample Set - named 8-slot sample presets for SD-card sample players."""

__version__ = "0.1.0"
