"""Preset store: one JSON file holding the whole preset collection.

Provides the pure collection transforms (:func:`append_set`,
:func:`remove_sets`, :func:`find_set`), the JSON codec, and
:class:`PresetStore`, which wraps every operation as
load -> transform -> save over the full collection.

The backing file is a top-level JSON array of
``{"name": ..., "samples": [...]}`` objects.  There is no cache: each
operation re-reads the file, so two processes writing at once can lose
an update (last writer wins).

Design notes:
- ``from __future__ import annotations`` for modern type hints.
- ``logging.getLogger(__name__)`` for module-level logger.
- Lenient load: a missing, unreadable, or malformed file is an empty
  collection.  Only absence is silent; everything else logs a warning.
- Atomic writes via temp file + ``os.replace`` (POSIX-atomic), with a
  best-effort ``.bak`` copy of the previous file.
- Write failures raise ``OSError`` to the caller.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path

from sampleset.presets.record import SampleSet

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pure collection transforms
# ---------------------------------------------------------------------------


def append_set(collection: list[SampleSet], record: SampleSet) -> list[SampleSet]:
    """Return a new collection with *record* appended at the end."""
    return [*collection, record]


def remove_sets(collection: list[SampleSet], name: str) -> list[SampleSet]:
    """Return a new collection without any record named *name*.

    Every match is removed, not just the first.
    """
    return [record for record in collection if record.name != name]


def find_set(collection: list[SampleSet], name: str) -> SampleSet | None:
    """Return the first record named *name*, or ``None``."""
    for record in collection:
        if record.name == name:
            return record
    return None


# ---------------------------------------------------------------------------
# JSON codec
# ---------------------------------------------------------------------------


def serialize_collection(collection: list[SampleSet]) -> str:
    """Encode a collection as the backing file's JSON text."""
    return json.dumps([record.to_dict() for record in collection], indent=2) + "\n"


def deserialize_collection(text: str) -> list[SampleSet]:
    """Decode backing file text into a collection.

    Raises:
        ValueError: If the text is not a JSON array of valid records.
    """
    try:
        raw = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise ValueError(f"Invalid preset JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise ValueError(f"Preset file must hold a list, got {type(raw).__name__}")

    collection: list[SampleSet] = []
    for position, entry in enumerate(raw):
        try:
            collection.append(SampleSet.from_dict(entry))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Malformed preset at position {position}: {exc}") from exc
    return collection


# ---------------------------------------------------------------------------
# Atomic file write
# ---------------------------------------------------------------------------


def _write_text_atomic(path: Path, text: str) -> None:
    """Write *text* to *path* atomically.

    Strategy:
    1. Backup existing file to ``<name>.bak`` (best effort).
    2. Write to a temp file in the same directory (same filesystem).
    3. ``os.replace(tmp_path, path)`` for atomic swap.
    4. Clean up temp file on failure.
    """
    if path.exists():
        backup_path = path.with_name(path.name + ".bak")
        try:
            shutil.copy2(path, backup_path)
        except OSError as exc:
            logger.debug("Could not back up %s: %s", path, exc)

    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


# ---------------------------------------------------------------------------
# PresetStore
# ---------------------------------------------------------------------------


class PresetStore:
    """Whole-collection persistence for sample set presets.

    Parameters
    ----------
    path : Path
        Backing JSON file.  It does not need to exist; it is created on
        the first write together with its parent directory.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> list[SampleSet]:
        """Read the full collection, or ``[]`` if it cannot be read.

        Never raises for a missing, unreadable, or corrupt file.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
            return deserialize_collection(text)
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            logger.warning(
                "Failed to load presets (%s), treating as empty: %s",
                self.path,
                exc,
            )
            return []

    def save(self, collection: list[SampleSet]) -> None:
        """Overwrite the backing file with *collection*.

        Raises
        ------
        OSError
            If the directory cannot be created or the file cannot be
            written.
        """
        _write_text_atomic(self.path, serialize_collection(collection))
        logger.debug("Saved %d presets to %s", len(collection), self.path)

    def add(self, record: SampleSet) -> list[SampleSet]:
        """Append *record* to the stored collection.

        Returns
        -------
        list[SampleSet]
            The collection as written.
        """
        collection = append_set(self.load(), record)
        self.save(collection)
        return collection

    def remove(self, name: str) -> int:
        """Remove every preset named *name*.

        Returns
        -------
        int
            Number of presets removed.  ``0`` is a successful no-op and
            leaves the file untouched.
        """
        collection = self.load()
        remaining = remove_sets(collection, name)
        removed = len(collection) - len(remaining)
        if removed:
            self.save(remaining)
        return removed

    def list(self) -> list[SampleSet]:
        """Return the stored collection in insertion order."""
        return self.load()

    def info(self, name: str) -> SampleSet | None:
        """Return the first preset named *name*, or ``None`` if absent."""
        return find_set(self.load(), name)
