"""CLI commands for pinning applications and showing the Dock."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
import yaml
from result import Err, Ok

from dockpin.bundle import BundleError, load_application
from dockpin.dock import (
    DockConfiguration,
    DockError,
    DockPreferencesStore,
    DockTile,
    KillallRestarter,
    RestartError,
    default_preferences_path,
)
from dockpin.dock.models import tile_kind_tag
from dockpin.pin import pin_application
from dockpin.settings import settings


class OutputFormat(str, Enum):
    """Output formats for `show` and `inspect`."""

    YAML = "yaml"
    JSON = "json"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]
PreferencesOption = Annotated[
    Path | None,
    typer.Option(
        "--preferences",
        "-p",
        help="Dock preferences plist (defaults to ~/Library/Preferences/com.apple.dock.plist).",
    ),
]
BundleArgument = Annotated[Path, typer.Argument(help="Path to an .app bundle.")]


def register(app: typer.Typer) -> None:
    app.command("add")(add)
    app.command("show")(show)
    app.command("inspect")(inspect)


def add(
    bundle: BundleArgument,
    no_restart: Annotated[bool, typer.Option("--no-restart", help="Do not restart the Dock afterwards.")] = False,
    preferences: PreferencesOption = None,
) -> None:
    """Append an application to the Dock."""
    store = DockPreferencesStore(_resolve_preferences_path(preferences))
    restarter = None if no_restart else KillallRestarter(settings.dock.process_name, settings.dock.restart_command)

    match pin_application(bundle, store, restarter):
        case Ok(tile):
            typer.secho(f"Added '{tile.metadata.display_name}' to the Dock", fg=typer.colors.GREEN)
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)


def show(
    format: FormatOption = OutputFormat.YAML,
    preferences: PreferencesOption = None,
) -> None:
    """Print the applications and other tiles currently in the Dock."""
    store = DockPreferencesStore(_resolve_preferences_path(preferences))

    match store.read():
        case Ok(config):
            typer.echo(_format_payload(_summarize(config), format))
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)


def inspect(
    bundle: BundleArgument,
    format: FormatOption = OutputFormat.YAML,
) -> None:
    """Print the name and identifier resolved for an application bundle."""
    match load_application(bundle):
        case Ok(application):
            typer.echo(_format_payload(application.model_dump(mode="json"), format))
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)


def _resolve_preferences_path(preferences: Path | None) -> Path:
    return preferences or settings.dock.preferences_path or default_preferences_path()


def _summarize(config: DockConfiguration) -> dict[str, object]:
    return {
        "persistent-apps": _summarize_tiles(config.applications),
        "persistent-others": _summarize_tiles(config.others),
    }


def _summarize_tiles(tiles: list[DockTile] | None) -> list[dict[str, object]] | None:
    if tiles is None:
        return None
    return [
        {
            "kind": tile_kind_tag(tile.kind),
            "label": tile.metadata.display_name,
            "bundle_id": tile.metadata.bundle_id,
            "url": tile.metadata.location.url if tile.metadata.location else None,
        }
        for tile in tiles
    ]


def _format_payload(payload: dict[str, object], format: OutputFormat) -> str:
    if format is OutputFormat.JSON:
        return json.dumps(payload, indent=2)
    return yaml.safe_dump(payload, sort_keys=False)


def _handle_error(error: BundleError | DockError | RestartError) -> None:
    message = error.message
    field = getattr(error, "field", None)
    if field is not None and field not in message:
        message = f"{message} ({field})"

    typer.secho(message, err=True, fg=typer.colors.RED)
