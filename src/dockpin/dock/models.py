"""Pydantic models for the Dock preferences document (com.apple.dock.plist).

Every model keeps keys it does not declare (`extra="allow"`) and writes them
back after the declared ones, so a load/serialize cycle does not lose the
parts of the document dockpin never looks at. A field set to `None` is a key
that is absent from the document; plists have no null, so `None` fields are
dropped on serialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator, StrictInt, StrictStr

from dockpin.bundle import Application
from dockpin.utils.types import PlistDict

FILE_URL_TYPE = 15


class TileKind(str, Enum):
    """Tile types dockpin recognises."""

    FILE = "file-tile"
    DIRECTORY = "directory-tile"
    SPACER = "spacer-tile"


@dataclass(frozen=True)
class UnknownTileKind:
    """Any other tile type, kept verbatim so it is written back unchanged."""

    tag: str


def parse_tile_kind(value: object) -> TileKind | UnknownTileKind:
    if isinstance(value, TileKind | UnknownTileKind):
        return value
    if not isinstance(value, str):
        raise ValueError("tile-type must be a string")
    try:
        return TileKind(value)
    except ValueError:
        return UnknownTileKind(tag=value)


def tile_kind_tag(kind: TileKind | UnknownTileKind) -> str:
    return kind.value if isinstance(kind, TileKind) else kind.tag


TileKindField = Annotated[
    TileKind | UnknownTileKind,
    PlainValidator(parse_tile_kind),
    PlainSerializer(tile_kind_tag, return_type=str),
]


class _PlistModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class FileLocation(_PlistModel):
    """`file-data`: where a tile points on disk."""

    url: StrictStr = Field(alias="_CFURLString")
    url_type: StrictInt = Field(alias="_CFURLStringType")

    @classmethod
    def for_path(cls, path: Path) -> FileLocation:
        return cls(url=f"file://{path}", url_type=FILE_URL_TYPE)


class TileData(_PlistModel):
    """`tile-data`: label, bundle identifier and location of a tile."""

    location: FileLocation | None = Field(default=None, alias="file-data")
    display_name: StrictStr | None = Field(default=None, alias="file-label")
    bundle_id: StrictStr | None = Field(default=None, alias="bundle-identifier")


class DockTile(_PlistModel):
    """One entry of `persistent-apps` or `persistent-others`."""

    metadata: TileData = Field(alias="tile-data")
    kind: TileKindField = Field(alias="tile-type")

    @classmethod
    def for_application(cls, application: Application) -> DockTile:
        return cls(
            kind=TileKind.FILE,
            metadata=TileData(
                location=FileLocation.for_path(application.path),
                display_name=application.display_name,
                bundle_id=application.bundle_id,
            ),
        )


class DockConfiguration(_PlistModel):
    """The Dock preferences document.

    `applications` and `others` are `None` when the key is missing from the
    document, which is different from an empty list.
    """

    applications: list[DockTile] | None = Field(default=None, alias="persistent-apps")
    others: list[DockTile] | None = Field(default=None, alias="persistent-others")

    def add_application(self, application: Application) -> DockTile:
        """Append a tile for `application` to the end of `persistent-apps`.

        A missing `persistent-apps` key is created. Already pinned applications
        are not detected, so pinning twice yields two identical tiles.
        """
        tile = DockTile.for_application(application)
        if self.applications is None:
            self.applications = []
        self.applications.append(tile)
        return tile

    def to_plist(self) -> PlistDict:
        return self.model_dump(by_alias=True, exclude_none=True)


class DockError(BaseModel):
    """Base Dock preferences error."""

    model_config = ConfigDict(extra="forbid")

    message: str


class DockMalformedError(DockError):
    """The preferences document could not be decoded or does not match the schema."""

    path: Path | None = None
    field: str | None = None


class DockSerializationError(DockError):
    """The configuration could not be encoded as a plist."""

    path: Path | None = None


class DockReadError(DockError):
    """The preferences file could not be read."""

    path: Path


class DockWriteError(DockError):
    """The preferences file could not be written."""

    path: Path
