"""Dock preferences model, codec, storage and restart."""

from .codec import load_dock, serialize_dock
from .models import (
    FILE_URL_TYPE,
    DockConfiguration,
    DockError,
    DockMalformedError,
    DockReadError,
    DockSerializationError,
    DockTile,
    DockWriteError,
    FileLocation,
    TileData,
    TileKind,
    UnknownTileKind,
)
from .restart import DockRestarter, KillallRestarter, RestartCommandNotFoundError, RestartError, RestartFailedError
from .store import DockPreferencesStore, default_preferences_path

__all__ = [
    "FILE_URL_TYPE",
    "DockConfiguration",
    "DockError",
    "DockMalformedError",
    "DockPreferencesStore",
    "DockReadError",
    "DockRestarter",
    "DockSerializationError",
    "DockTile",
    "DockWriteError",
    "FileLocation",
    "KillallRestarter",
    "RestartCommandNotFoundError",
    "RestartError",
    "RestartFailedError",
    "TileData",
    "TileKind",
    "UnknownTileKind",
    "default_preferences_path",
    "load_dock",
    "serialize_dock",
]
