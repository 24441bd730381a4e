"""``sampleset preset`` commands -- list, info, create, and delete presets.

Design notes:
- ``Console(stderr=True)`` for all Rich output (tables/status to stderr).
- ``print()`` for machine-readable output to stdout (JSON data).
- Every command goes through ``bootstrap_or_exit`` so config and
  resource root errors exit 1 with a message.
"""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.markup import escape

app = typer.Typer(no_args_is_help=True)


def _open_store(console: Console):
    """Return ``(store, config, resource_root)`` for the configured presets file."""
    from sampleset.cli import bootstrap_or_exit
    from sampleset.config.settings import resolve_presets_path
    from sampleset.presets.store import PresetStore

    app_config, _config_path, resource_root = bootstrap_or_exit(console)
    store = PresetStore(resolve_presets_path(app_config, resource_root))
    return store, app_config, resource_root


# ---------------------------------------------------------------------------
# list command
# ---------------------------------------------------------------------------


@app.command("list")
def list_presets(
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON to stdout"
    ),
) -> None:
    """List available presets."""
    console = Console(stderr=True)
    store, _app_config, _resource_root = _open_store(console)

    presets = store.list()

    if json_output:
        print(json.dumps([p.to_dict() for p in presets], indent=2))
        return

    if not presets:
        console.print("No presets found.")
        return

    for preset in presets:
        console.print(
            f"[bold]{escape(preset.name)}[/bold]: {escape(json.dumps(preset.samples))}"
        )


# ---------------------------------------------------------------------------
# info command
# ---------------------------------------------------------------------------


@app.command("info")
def preset_info(
    name: str = typer.Argument(..., help="Preset name"),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON to stdout"
    ),
) -> None:
    """Display info about a preset."""
    from sampleset.cli.samples import show_set

    console = Console(stderr=True)
    store, _app_config, _resource_root = _open_store(console)

    preset = store.info(name)
    if preset is None:
        console.print(f"[red]Error:[/red] Preset not found: {escape(name)}")
        raise SystemExit(2)

    if json_output:
        print(json.dumps(preset.to_dict(), indent=2))
        return

    show_set(console, preset)
    console.print(f"{preset.filled_slots()} of {len(preset.samples)} slots filled")


# ---------------------------------------------------------------------------
# create command
# ---------------------------------------------------------------------------


@app.command("create")
def create_preset(
    name: str = typer.Argument(..., help="Preset name"),
) -> None:
    """Create a new preset from interactively chosen samples."""
    from sampleset.cli.samples import discover_or_warn, prompt_indices, show_set
    from sampleset.config.settings import resolve_samples_root
    from sampleset.presets.selection import build_set

    console = Console(stderr=True)
    store, app_config, resource_root = _open_store(console)
    samples_root = resolve_samples_root(app_config, resource_root)

    discovery = discover_or_warn(console, samples_root)
    preset = build_set(name, discovery, prompt_indices(console), console=console)

    try:
        store.add(preset)
    except OSError as e:
        console.print(f"[red]Error:[/red] Failed to save presets: {escape(str(e))}")
        raise SystemExit(1)

    show_set(console, preset)
    console.print(f"[green]Saved:[/green] {escape(preset.name)}")


# ---------------------------------------------------------------------------
# delete command
# ---------------------------------------------------------------------------


@app.command("delete")
def delete_preset(
    name: str = typer.Argument(..., help="Preset name"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Skip confirmation"
    ),
) -> None:
    """Delete every preset with the given name."""
    console = Console(stderr=True)
    store, _app_config, _resource_root = _open_store(console)

    if not force:
        typer.confirm(f"Delete all presets named '{name}'?", abort=True)

    try:
        removed = store.remove(name)
    except OSError as e:
        console.print(f"[red]Error:[/red] Failed to save presets: {escape(str(e))}")
        raise SystemExit(1)

    if removed:
        console.print(f"[green]Deleted:[/green] {removed} preset(s) named {escape(name)}")
    else:
        console.print(f"No preset named {escape(name)}")
