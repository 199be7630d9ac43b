"""File-backed access to the user's Dock preferences."""

from __future__ import annotations

from pathlib import Path

from result import Err, Ok, Result

from dockpin.common import create_logger
from dockpin.utils.plist import PlistFormat

from .codec import load_dock, serialize_dock
from .models import DockConfiguration, DockError, DockReadError, DockWriteError

logger = create_logger("dock.store")

DOCK_PREFERENCES_RELATIVE_PATH = Path("Library") / "Preferences" / "com.apple.dock.plist"


def default_preferences_path(home: Path | None = None) -> Path:
    return (home or Path.home()) / DOCK_PREFERENCES_RELATIVE_PATH


class DockPreferencesStore:
    """Reads and writes a Dock preferences plist at a fixed path."""

    def __init__(self, path: Path, *, fmt: PlistFormat = PlistFormat.BINARY) -> None:
        self._path = path
        self._fmt = fmt

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> Result[DockConfiguration, DockError]:
        if not self._path.exists():
            return Err(DockReadError(path=self._path, message=f"Dock plist not found at {self._path}"))

        try:
            data = self._path.read_bytes()
        except OSError as e:
            return Err(DockReadError(path=self._path, message=f"Failed to open Dock plist at {self._path}: {e}"))

        return load_dock(data, source=self._path)

    def write(self, config: DockConfiguration) -> Result[None, DockError]:
        return serialize_dock(config, self._fmt, destination=self._path).and_then(self._write_bytes)

    def _write_bytes(self, data: bytes) -> Result[None, DockError]:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(data)
        except OSError as e:
            return Err(DockWriteError(path=self._path, message=f"Failed to write Dock plist at {self._path}: {e}"))

        logger.debug("Dock plist written", path=str(self._path), size=len(data))
        return Ok(None)
