"""The :class:`SampleSet` preset record.

A sample set is a name plus exactly :data:`SLOT_COUNT` sample slots.
An unselected slot holds the empty string, never ``None``.

Design notes:
- ``dataclasses.asdict`` for SampleSet -> dict serialization in JSON.
- Slot count and slot types are checked in ``__post_init__`` so an
  invalid record can never be constructed, whether from user input or
  from a loaded file.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

# Number of sample slots on the target device
SLOT_COUNT = 8

# Placeholder for an unselected slot
EMPTY_SLOT = ""


def _empty_slots() -> list[str]:
    return [EMPTY_SLOT] * SLOT_COUNT


@dataclass
class SampleSet:
    """A named set of sample references, one per device slot.

    Fields:
    - ``name``: Preset name.  Used as the lookup key, not unique.
    - ``samples``: Exactly eight sample base names; ``""`` marks an
      empty slot.
    """

    name: str
    samples: list[str] = field(default_factory=_empty_slots)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"Preset name must be a string, got {type(self.name).__name__}")
        self.samples = list(self.samples)
        if len(self.samples) != SLOT_COUNT:
            raise ValueError(
                f"A sample set needs exactly {SLOT_COUNT} slots, got {len(self.samples)}"
            )
        for slot in self.samples:
            if not isinstance(slot, str):
                raise TypeError(f"Sample slots must be strings, got {type(slot).__name__}")

    def filled_slots(self) -> int:
        """Return the number of slots holding a sample."""
        return sum(1 for slot in self.samples if slot != EMPTY_SLOT)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> SampleSet:
        """Build a record from its serialized form.

        Raises:
            KeyError: If ``name`` or ``samples`` is missing.
            TypeError / ValueError: If either field is malformed.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a preset object, got {type(data).__name__}")
        samples = data["samples"]
        if not isinstance(samples, list):
            raise TypeError("Preset samples must be a list")
        return cls(name=data["name"], samples=samples)
