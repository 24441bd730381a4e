"""Interactive selection of the eight sample slots.

The operator sees the discovery sequence with indices, then enters one
index per slot.  Anything that does not resolve to a discovered sample
(non-numeric text, a negative number, an index past the end, or no
input at all) leaves the slot empty; selection never aborts halfway.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sampleset.presets.record import EMPTY_SLOT, SLOT_COUNT, SampleSet

logger = logging.getLogger(__name__)


def resolve_index(raw: str, discovery: list[str]) -> str:
    """Resolve one line of operator input to a sample name.

    Returns :data:`EMPTY_SLOT` if *raw* is not a non-negative integer or
    is out of range for *discovery*.
    """
    text = raw.strip()
    # Plain ASCII digits only: int() would also take "1_0", "-0" or "٣"
    if not (text.isascii() and text.isdigit()):
        return EMPTY_SLOT

    index = int(text)
    if index >= len(discovery):
        logger.debug("Index %d out of range for %d samples", index, len(discovery))
        return EMPTY_SLOT
    return discovery[index]


def print_discovery(console: Console, discovery: list[str]) -> None:
    """Print the index -> sample name mapping."""
    if not discovery:
        console.print("No samples found.")
        return

    table = Table(title="Samples")
    table.add_column("Index", justify="right", style="bold")
    table.add_column("Sample")
    for index, name in enumerate(discovery):
        table.add_row(str(index), escape(name))
    console.print(table)


def build_set(
    name: str,
    discovery: list[str],
    input_source: Iterable[str],
    console: Console | None = None,
) -> SampleSet:
    """Build a :class:`SampleSet` from operator input.

    Parameters
    ----------
    name : str
        Name for the new preset.
    discovery : list[str]
        Discovery sequence to resolve indices against.
    input_source : Iterable[str]
        Raw input lines, one per slot.  Only the first eight are read;
        if fewer are available the remaining slots stay empty.
    console : Console | None
        If given, the discovery list is printed before input is read.

    Returns
    -------
    SampleSet
        The new record.  Not persisted.
    """
    if console is not None:
        print_discovery(console, discovery)

    lines = iter(input_source)
    samples: list[str] = []
    for _slot in range(SLOT_COUNT):
        raw = next(lines, None)
        samples.append(EMPTY_SLOT if raw is None else resolve_index(raw, discovery))

    return SampleSet(name=name, samples=samples)
