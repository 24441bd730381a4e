"""Sample discovery by recursive directory walk.

A sample is identified by its base file name only.  The discovery
sequence is an indexable list that the selection builder resolves
operator-entered indices against; it is only meaningful for the
duration of the operation that produced it.

Design notes:
- ``os.walk`` with no ``onerror`` handler, so unreadable directories
  are skipped silently rather than aborting the walk.
- Directory and file names are sorted within each directory so that
  indices are repeatable between two runs on the same tree.
- Same-named files in different folders are both kept, each at its
  own index.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def discover_samples(root: Path) -> list[str]:
    """Recursively list the base names of all files under *root*.

    Args:
        root: Samples root directory.

    Returns:
        Base file names in walk order.  Empty if *root* is missing or
        is not a directory.
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug("Samples root %s does not exist, no samples found", root)
        return []

    found: list[str] = []
    for _dirpath, dirnames, filenames in os.walk(root):
        # Sorting in place also fixes the order os.walk descends in
        dirnames.sort()
        for filename in sorted(filenames):
            found.append(filename)

    logger.debug("Discovered %d samples under %s", len(found), root)
    return found


def find_duplicate_names(discovery: list[str]) -> list[str]:
    """Return base names that occur more than once in *discovery*.

    Same-named files in different subdirectories are indistinguishable
    once pushed, so the CLI warns about them.
    """
    seen: set[str] = set()
    duplicates: list[str] = []
    for name in discovery:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    return duplicates
