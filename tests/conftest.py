"""Shared fixtures for Sample Set tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from sampleset.presets.record import SampleSet


def _make_set(name: str, *samples: str) -> SampleSet:
    """Build a SampleSet, padding *samples* with empty slots up to eight."""
    slots = list(samples) + [""] * (8 - len(samples))
    return SampleSet(name=name, samples=slots)


@pytest.fixture()
def make_set() -> Callable[..., SampleSet]:
    """Factory for SampleSets with only the leading slots given."""
    return _make_set


@pytest.fixture()
def presets_path(tmp_path: Path) -> Path:
    """Backing file path inside a resource root that does not exist yet."""
    return tmp_path / "res" / "presets.json"


@pytest.fixture()
def samples_root(tmp_path: Path) -> Path:
    """A small sample tree: two top-level files and one nested file."""
    root = tmp_path / "res" / "samples"
    (root / "drums").mkdir(parents=True)
    (root / "kick.wav").write_bytes(b"")
    (root / "snare.wav").write_bytes(b"")
    (root / "drums" / "hat.wav").write_bytes(b"")
    return root
