"""CLI entry point for Sample Set.

Provides the ``sampleset`` command with subcommands: samples, create,
and preset (list, info, create, delete).

Public API:
- app: The Typer application instance
- main: Entry point callable (same as app, used by pyproject.toml console_script)
- bootstrap: Shared config + resource root loader for all commands
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

# ---------------------------------------------------------------------------
# Typer app
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="sampleset",
    help="Sample Set - build and manage 8-slot sample presets",
    no_args_is_help=True,
    add_completion=False,
)

# ---------------------------------------------------------------------------
# Module-level shared state (populated by the callback, read by subcommands)
# ---------------------------------------------------------------------------

_cli_state: dict = {}


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG with ``--verbose``, else WARNING."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    root_logger = logging.getLogger()
    if not any(isinstance(h, logging.StreamHandler) for h in root_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        ))
        root_logger.addHandler(handler)
    logging.getLogger("sampleset").setLevel(log_level)


# ---------------------------------------------------------------------------
# Bootstrap helpers
# ---------------------------------------------------------------------------


def bootstrap(config_path: Path | None = None) -> tuple:
    """Load config and locate the resource root.  Shared by all commands.

    Returns
    -------
    tuple of (config_dict, config_path, resource_root)

    Raises
    ------
    OSError
        If the working directory cannot be determined or the resource
        root is not a directory.
    tomllib.TOMLDecodeError
        If the config file is not valid TOML.
    """
    from sampleset.config.settings import (
        get_config_path,
        load_config,
        resolve_resource_root,
    )

    path = config_path or get_config_path()
    config = load_config(path)
    resource_root = resolve_resource_root(config, path)
    return config, path, resource_root


def bootstrap_or_exit(console) -> tuple:
    """Run :func:`bootstrap` with the global ``--config``; exit 1 on failure."""
    try:
        return bootstrap(_cli_state.get("config"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# App-level callback (runs before any subcommand)
# ---------------------------------------------------------------------------


@app.callback()
def _main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Config file path (default: config.toml in the working directory)",
    ),
) -> None:
    """Sample Set - build and manage 8-slot sample presets."""
    _cli_state["verbose"] = verbose
    _cli_state["config"] = config
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# Register commands
# ---------------------------------------------------------------------------

from sampleset.cli.preset import app as preset_app  # noqa: E402
from sampleset.cli.samples import create_set, list_samples  # noqa: E402

app.command("samples")(list_samples)
app.command("create")(create_set)
app.add_typer(preset_app, name="preset", help="Modify, list, and view presets")

# ---------------------------------------------------------------------------
# Entry point callable
# ---------------------------------------------------------------------------

main = app

__all__ = ["app", "main", "bootstrap"]
