"""Tests for the ``sampleset`` command line via Typer's CliRunner."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from sampleset.cli import app
from sampleset.presets.record import SampleSet
from sampleset.presets.store import PresetStore

runner = CliRunner()


@pytest.fixture()
def config_path(tmp_path: Path) -> Path:
    """Config location whose directory holds the ``res`` resource root."""
    return tmp_path / "config.toml"


@pytest.fixture()
def store(tmp_path: Path) -> PresetStore:
    return PresetStore(tmp_path / "res" / "presets.json")


def _invoke(config_path: Path, *args: str, input: str | None = None):
    return runner.invoke(app, ["--config", str(config_path), *args], input=input)


class TestSamplesCommand:
    def test_json_lists_discovery_in_order(self, config_path: Path, samples_root: Path) -> None:
        result = _invoke(config_path, "samples", "--json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == ["kick.wav", "snare.wav", "hat.wav"]

    def test_missing_samples_root(self, config_path: Path) -> None:
        result = _invoke(config_path, "samples")
        assert result.exit_code == 0, result.output
        assert "No samples found" in result.output


class TestPresetCreate:
    def test_create_persists_selection(
        self, config_path: Path, samples_root: Path, store: PresetStore
    ) -> None:
        result = _invoke(
            config_path, "preset", "create", "kit",
            input="0\nx\n2\n99\n\n1\n1\n0\n",
        )
        assert result.exit_code == 0, result.output
        assert store.load() == [
            SampleSet(
                name="kit",
                samples=["kick.wav", "", "hat.wav", "", "", "snare.wav", "snare.wav", "kick.wav"],
            )
        ]

    def test_create_appends_to_existing(
        self, config_path: Path, samples_root: Path, store: PresetStore
    ) -> None:
        store.save([SampleSet(name="old")])
        result = _invoke(config_path, "preset", "create", "new", input="0\n" * 8)
        assert result.exit_code == 0, result.output
        assert [p.name for p in store.load()] == ["old", "new"]

    def test_create_with_early_end_of_input(
        self, config_path: Path, samples_root: Path, store: PresetStore
    ) -> None:
        result = _invoke(config_path, "preset", "create", "short", input="1\n")
        assert result.exit_code == 0, result.output
        assert store.load()[0].samples == ["snare.wav"] + [""] * 7

    def test_create_write_failure_exits_1(
        self, tmp_path: Path, config_path: Path, samples_root: Path
    ) -> None:
        config_path.write_text('[paths]\npresets = "blocked/presets.json"\n', encoding="utf-8")
        (tmp_path / "res" / "blocked").write_text("a file, not a folder", encoding="utf-8")

        result = _invoke(config_path, "preset", "create", "kit", input="0\n" * 8)
        assert result.exit_code == 1
        assert "Failed to save presets" in result.output


class TestPresetListAndInfo:
    def test_list_empty(self, config_path: Path) -> None:
        result = _invoke(config_path, "preset", "list")
        assert result.exit_code == 0, result.output
        assert "No presets found" in result.output

    def test_list_text(self, config_path: Path, store: PresetStore) -> None:
        store.save([SampleSet(name="kit", samples=["kick.wav"] + [""] * 7)])
        result = _invoke(config_path, "preset", "list")
        assert result.exit_code == 0, result.output
        assert "kit" in result.output
        assert "kick.wav" in result.output

    def test_list_json(self, config_path: Path, store: PresetStore) -> None:
        presets = [SampleSet(name="a"), SampleSet(name="b", samples=["x.wav"] * 8)]
        store.save(presets)
        result = _invoke(config_path, "preset", "list", "--json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == [p.to_dict() for p in presets]

    def test_list_with_corrupt_file(self, config_path: Path, store: PresetStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json", encoding="utf-8")
        result = _invoke(config_path, "preset", "list", "--json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == []

    def test_info_json(self, config_path: Path, store: PresetStore) -> None:
        preset = SampleSet(name="kit", samples=["kick.wav"] * 8)
        store.save([preset, SampleSet(name="kit")])
        result = _invoke(config_path, "preset", "info", "kit", "--json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == preset.to_dict()

    def test_info_text(self, config_path: Path, store: PresetStore) -> None:
        store.save([SampleSet(name="kit", samples=["kick.wav"] + [""] * 7)])
        result = _invoke(config_path, "preset", "info", "kit")
        assert result.exit_code == 0, result.output
        assert "1 of 8 slots filled" in result.output

    def test_info_not_found(self, config_path: Path) -> None:
        result = _invoke(config_path, "preset", "info", "ghost")
        assert result.exit_code == 2
        assert "Preset not found" in result.output


class TestPresetDelete:
    def test_delete_removes_all_matches(self, config_path: Path, store: PresetStore) -> None:
        store.save([SampleSet(name="x"), SampleSet(name="y"), SampleSet(name="x")])
        result = _invoke(config_path, "preset", "delete", "x", "--force")
        assert result.exit_code == 0, result.output
        assert store.load() == [SampleSet(name="y")]

    def test_delete_unknown_name_is_ok(self, config_path: Path, store: PresetStore) -> None:
        store.save([SampleSet(name="y")])
        result = _invoke(config_path, "preset", "delete", "x", "--force")
        assert result.exit_code == 0, result.output
        assert "No preset named x" in result.output
        assert store.load() == [SampleSet(name="y")]

    def test_delete_confirmation_declined(self, config_path: Path, store: PresetStore) -> None:
        store.save([SampleSet(name="x")])
        result = _invoke(config_path, "preset", "delete", "x", input="n\n")
        assert result.exit_code == 1
        assert store.load() == [SampleSet(name="x")]

    def test_delete_confirmation_accepted(self, config_path: Path, store: PresetStore) -> None:
        store.save([SampleSet(name="x")])
        result = _invoke(config_path, "preset", "delete", "x", input="y\n")
        assert result.exit_code == 0, result.output
        assert store.load() == []


class TestCreateCommand:
    def test_create_does_not_persist(
        self, config_path: Path, samples_root: Path, store: PresetStore
    ) -> None:
        result = _invoke(config_path, "create", "--name", "live", input="2\n" * 8)
        assert result.exit_code == 0, result.output
        assert "hat.wav" in result.output
        assert not store.path.exists()


class TestEnvironmentErrors:
    def test_resource_root_is_a_file(self, tmp_path: Path, config_path: Path) -> None:
        (tmp_path / "res").write_text("not a directory", encoding="utf-8")
        result = _invoke(config_path, "preset", "list")
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_config(self, config_path: Path) -> None:
        config_path.write_text("[paths\n", encoding="utf-8")
        result = _invoke(config_path, "preset", "list")
        assert result.exit_code == 1
        assert "Error" in result.output
