"""Sample library discovery.

Public API:
- discover_samples: recursive walk returning sample base names
- find_duplicate_names: base names that appear more than once
"""

from sampleset.library.discovery import discover_samples, find_duplicate_names

__all__ = ["discover_samples", "find_duplicate_names"]
