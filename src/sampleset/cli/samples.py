"""``sampleset samples`` and ``sampleset create`` commands.

``samples`` prints the discovery sequence with the indices that
``create`` and ``preset create`` prompt for.  ``create`` builds a set
interactively and shows it without saving it; pushing to a device is
not supported.

Design notes:
- ``Console(stderr=True)`` for all Rich output (tables/prompts to stderr).
- ``print()`` for machine-readable output to stdout (JSON data).
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from sampleset.presets.record import SLOT_COUNT, SampleSet


def prompt_indices(console: Console) -> Iterator[str]:
    """Yield one raw index per slot, read interactively.

    Stops early at end of input; the remaining slots are left empty by
    the selection builder.
    """
    for slot in range(1, SLOT_COUNT + 1):
        try:
            yield Prompt.ask(
                f"Slot {slot} index",
                console=console,
                default="",
                show_default=False,
            )
        except EOFError:
            return


def discover_or_warn(console: Console, samples_root: Path) -> list[str]:
    """Discover samples, warning about an empty library or name clashes."""
    from sampleset.library.discovery import discover_samples, find_duplicate_names

    discovery = discover_samples(samples_root)
    if not discovery:
        console.print(f"[yellow]Warning:[/yellow] no samples found in {escape(str(samples_root))}")
    for name in find_duplicate_names(discovery):
        console.print(
            f"[yellow]Warning:[/yellow] '{escape(name)}' exists in more than one folder"
        )
    return discovery


def show_set(console: Console, sample_set: SampleSet) -> None:
    """Print a sample set as a slot table inside a panel."""
    from rich.panel import Panel
    from rich.table import Table

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Slot", style="bold", justify="right")
    table.add_column("Sample")
    for slot, sample in enumerate(sample_set.samples, start=1):
        table.add_row(str(slot), escape(sample) if sample else "[dim](empty)[/dim]")

    console.print(Panel(table, title=f"[bold]{escape(sample_set.name)}[/bold]", expand=False))


# ---------------------------------------------------------------------------
# samples command
# ---------------------------------------------------------------------------


def list_samples(
    json_output: bool = typer.Option(
        False, "--json", help="Output the sample list as JSON to stdout"
    ),
) -> None:
    """List discoverable samples with their selection indices."""
    from sampleset.cli import bootstrap_or_exit
    from sampleset.config.settings import resolve_samples_root
    from sampleset.library.discovery import discover_samples
    from sampleset.presets.selection import print_discovery

    console = Console(stderr=True)
    app_config, _config_path, resource_root = bootstrap_or_exit(console)
    samples_root = resolve_samples_root(app_config, resource_root)

    discovery = discover_samples(samples_root)

    if json_output:
        print(json.dumps(discovery, indent=2))
        return

    print_discovery(console, discovery)


# ---------------------------------------------------------------------------
# create command
# ---------------------------------------------------------------------------


def create_set(
    name: str = typer.Option("untitled", "--name", help="Name for the set"),
) -> None:
    """Build a sample set interactively and show it (not saved)."""
    from sampleset.cli import bootstrap_or_exit
    from sampleset.config.settings import resolve_samples_root
    from sampleset.presets.selection import build_set

    console = Console(stderr=True)
    app_config, _config_path, resource_root = bootstrap_or_exit(console)
    samples_root = resolve_samples_root(app_config, resource_root)

    discovery = discover_or_warn(console, samples_root)
    sample_set = build_set(name, discovery, prompt_indices(console), console=console)

    show_set(console, sample_set)
    console.print(
        "Pushing to a device is not supported; "
        "use [bold]preset create[/bold] to save this selection."
    )
