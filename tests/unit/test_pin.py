from __future__ import annotations

import plistlib
from pathlib import Path

import pytest
from result import Err, Ok, Result, is_err, is_ok

from dockpin.bundle import InvalidBundleError
from dockpin.dock import DockMalformedError, DockPreferencesStore, RestartError, TileKind
from dockpin.pin import pin_application


class _RecordingRestarter:
    def __init__(self, result: Result[None, RestartError] | None = None) -> None:
        self.calls = 0
        self._result = result or Ok(None)

    def __call__(self) -> Result[None, RestartError]:
        self.calls += 1
        return self._result


def _make_bundle(root: Path, name: str, info: dict[str, object]) -> Path:
    bundle = root / name
    (bundle / "Contents").mkdir(parents=True)
    (bundle / "Contents" / "Info.plist").write_bytes(plistlib.dumps(info))
    return bundle


@pytest.fixture
def bundle(tmp_path: Path) -> Path:
    return _make_bundle(
        tmp_path / "Applications",
        "Foo.app",
        {"CFBundleIdentifier": "com.example.Foo", "CFBundleDisplayName": "Foo App"},
    )


@pytest.fixture
def preferences(tmp_path: Path) -> Path:
    path = tmp_path / "com.apple.dock.plist"
    path.write_bytes(plistlib.dumps({"persistent-others": [], "tilesize": 48}, fmt=plistlib.FMT_BINARY))
    return path


def test_pin_appends_writes_and_restarts(bundle: Path, preferences: Path) -> None:
    restarter = _RecordingRestarter()

    result = pin_application(bundle, DockPreferencesStore(preferences), restarter)

    assert is_ok(result)
    tile = result.unwrap()
    assert tile.kind is TileKind.FILE
    assert restarter.calls == 1
    assert plistlib.loads(preferences.read_bytes()) == {
        "persistent-apps": [
            {
                "tile-data": {
                    "file-data": {"_CFURLString": f"file://{bundle}", "_CFURLStringType": 15},
                    "file-label": "Foo App",
                    "bundle-identifier": "com.example.Foo",
                },
                "tile-type": "file-tile",
            }
        ],
        "persistent-others": [],
        "tilesize": 48,
    }


def test_pin_without_restarter_only_writes(bundle: Path, preferences: Path) -> None:
    result = pin_application(bundle, DockPreferencesStore(preferences))

    assert is_ok(result)
    assert len(plistlib.loads(preferences.read_bytes())["persistent-apps"]) == 1


def test_pin_twice_adds_two_tiles(bundle: Path, preferences: Path) -> None:
    store = DockPreferencesStore(preferences)

    pin_application(bundle, store)
    pin_application(bundle, store)

    apps = plistlib.loads(preferences.read_bytes())["persistent-apps"]
    assert len(apps) == 2
    assert apps[0] == apps[1]


def test_pin_stops_on_bundle_error(tmp_path: Path, preferences: Path) -> None:
    before = preferences.read_bytes()
    restarter = _RecordingRestarter()

    result = pin_application(tmp_path / "Missing.app", DockPreferencesStore(preferences), restarter)

    assert is_err(result)
    assert isinstance(result.err_value, InvalidBundleError)
    assert restarter.calls == 0
    assert preferences.read_bytes() == before


def test_pin_leaves_malformed_preferences_alone(bundle: Path, preferences: Path) -> None:
    preferences.write_bytes(plistlib.dumps({"persistent-apps": "broken"}))
    before = preferences.read_bytes()
    restarter = _RecordingRestarter()

    result = pin_application(bundle, DockPreferencesStore(preferences), restarter)

    assert is_err(result)
    assert isinstance(result.err_value, DockMalformedError)
    assert restarter.calls == 0
    assert preferences.read_bytes() == before


def test_pin_returns_restart_error_after_writing(bundle: Path, preferences: Path) -> None:
    restarter = _RecordingRestarter(Err(RestartError(command="killall", message="boom")))

    result = pin_application(bundle, DockPreferencesStore(preferences), restarter)

    assert is_err(result)
    assert result.err_value.message == "boom"
    assert len(plistlib.loads(preferences.read_bytes())["persistent-apps"]) == 1
