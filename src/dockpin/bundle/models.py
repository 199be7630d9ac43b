"""Application bundle record and bundle error models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from dockpin.utils.types import NonEmptyString

BUNDLE_EXTENSION = ".app"
DESCRIPTOR_RELATIVE_PATH = Path("Contents") / "Info.plist"


class Application(BaseModel):
    """An application bundle on disk, resolved from its Info.plist."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Path
    display_name: NonEmptyString
    bundle_id: NonEmptyString


class InfoPlist(BaseModel):
    """The Info.plist keys dockpin reads; everything else is ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    bundle_identifier: StrictStr | None = Field(default=None, alias="CFBundleIdentifier")
    bundle_display_name: StrictStr | None = Field(default=None, alias="CFBundleDisplayName")
    bundle_name: StrictStr | None = Field(default=None, alias="CFBundleName")


class BundleError(BaseModel):
    """Base bundle error."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


class InvalidBundleError(BundleError):
    """Path is missing or does not carry the `.app` extension."""


class DescriptorUnreadableError(BundleError):
    """Info.plist could not be opened or read."""

    descriptor_path: Path


class DescriptorMalformedError(BundleError):
    """Info.plist could not be decoded or has a key of the wrong type."""

    descriptor_path: Path
    field: str | None = None


class MissingDisplayNameError(BundleError):
    """No display name could be resolved for the bundle."""


class MissingBundleIdError(BundleError):
    """Info.plist has no CFBundleIdentifier."""

    field: str = "CFBundleIdentifier"
