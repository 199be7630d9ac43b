"""Pin an application bundle to the Dock."""

from __future__ import annotations

from pathlib import Path

from result import Ok, Result

from dockpin.bundle import Application, BundleError, load_application
from dockpin.common import create_logger
from dockpin.dock import DockConfiguration, DockError, DockPreferencesStore, DockRestarter, DockTile, RestartError

logger = create_logger("pin")

type PinError = BundleError | DockError | RestartError


def pin_application(
    bundle_path: Path | str,
    store: DockPreferencesStore,
    restarter: DockRestarter | None = None,
) -> Result[DockTile, PinError]:
    """Append `bundle_path` to the Dock stored in `store`.

    The Dock is restarted only after the preferences were written. The first
    error stops the sequence and is returned as is.
    """
    logger.info("Pinning application", bundle=str(bundle_path), preferences=str(store.path))

    return (
        load_application(bundle_path)
        .and_then(lambda application: _append_and_write(application, store))
        .and_then(lambda tile: _restart(tile, restarter))
        .inspect(lambda tile: logger.success("Application pinned", label=tile.metadata.display_name))
        .inspect_err(lambda error: logger.error("Failed to pin application", error=error.message))
    )


def _append_and_write(application: Application, store: DockPreferencesStore) -> Result[DockTile, PinError]:
    def append(config: DockConfiguration) -> Result[DockTile, DockError]:
        tile = config.add_application(application)
        return store.write(config).map(lambda _: tile)

    return store.read().and_then(append)


def _restart(tile: DockTile, restarter: DockRestarter | None) -> Result[DockTile, PinError]:
    if restarter is None:
        return Ok(tile)
    return restarter().map(lambda _: tile)
