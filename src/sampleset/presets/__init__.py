"""Sample set presets: record, store, and interactive selection.

Public API:
- SampleSet: dataclass for a single 8-slot preset
- PresetStore: whole-file load / save / add / remove / list / info
- build_set: turn a discovery list plus operator input into a SampleSet
"""

from sampleset.presets.record import EMPTY_SLOT, SLOT_COUNT, SampleSet
from sampleset.presets.selection import build_set, print_discovery, resolve_index
from sampleset.presets.store import (
    PresetStore,
    append_set,
    deserialize_collection,
    find_set,
    remove_sets,
    serialize_collection,
)

__all__ = [
    "EMPTY_SLOT",
    "SLOT_COUNT",
    "PresetStore",
    "SampleSet",
    "append_set",
    "build_set",
    "deserialize_collection",
    "find_set",
    "print_discovery",
    "remove_sets",
    "resolve_index",
    "serialize_collection",
]
