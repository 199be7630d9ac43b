"""Read an `.app` bundle's Info.plist into an `Application` record."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
from result import Err, Ok, Result

from dockpin.common import create_logger
from dockpin.utils.plist import PLIST_DECODE_ERRORS, loads_plist
from dockpin.utils.validation import first_error_field, format_validation_error

from .models import (
    BUNDLE_EXTENSION,
    DESCRIPTOR_RELATIVE_PATH,
    Application,
    BundleError,
    DescriptorMalformedError,
    DescriptorUnreadableError,
    InfoPlist,
    InvalidBundleError,
    MissingBundleIdError,
    MissingDisplayNameError,
)

logger = create_logger("bundle.reader")


def load_application(path: Path | str) -> Result[Application, BundleError]:
    """Build an `Application` from the bundle at `path`.

    The display name falls back from CFBundleDisplayName to CFBundleName to the
    bundle's file name without the `.app` extension. CFBundleIdentifier is
    required. Nothing is written; on failure no partial record is produced.
    """
    bundle_path = Path(path).expanduser().absolute()
    logger.debug("Loading application bundle", path=str(bundle_path))

    if not bundle_path.exists() or bundle_path.suffix != BUNDLE_EXTENSION:
        return Err(
            InvalidBundleError(
                path=bundle_path,
                message=f"Invalid macOS application bundle path: {bundle_path}",
            )
        )

    return _read_info_plist(bundle_path).and_then(lambda info: _build_application(bundle_path, info))


def display_name_candidates(info: InfoPlist, bundle_path: Path) -> list[str | None]:
    """Display name sources in priority order."""
    return [
        info.bundle_display_name,
        info.bundle_name,
        _strip_bundle_extension(bundle_path.name),
    ]


def resolve_display_name(candidates: list[str | None]) -> str | None:
    """Return the first candidate that is present and non-empty."""
    return next((candidate for candidate in candidates if candidate), None)


def _read_info_plist(bundle_path: Path) -> Result[InfoPlist, BundleError]:
    descriptor_path = bundle_path / DESCRIPTOR_RELATIVE_PATH

    try:
        raw_bytes = descriptor_path.read_bytes()
    except OSError as exc:
        logger.error("Info.plist unreadable", path=str(descriptor_path), error=str(exc))
        return Err(
            DescriptorUnreadableError(
                path=bundle_path,
                descriptor_path=descriptor_path,
                message=f"Failed to open Info.plist at {descriptor_path}: {exc}",
            )
        )

    try:
        data = loads_plist(raw_bytes)
    except PLIST_DECODE_ERRORS as exc:
        logger.error("Info.plist malformed", path=str(descriptor_path), error=str(exc))
        return Err(
            DescriptorMalformedError(
                path=bundle_path,
                descriptor_path=descriptor_path,
                message=f"Failed to parse Info.plist at {descriptor_path}: {exc}",
            )
        )

    if not isinstance(data, dict):
        return Err(
            DescriptorMalformedError(
                path=bundle_path,
                descriptor_path=descriptor_path,
                message=f"Info.plist root must be a dictionary: {descriptor_path}",
            )
        )

    try:
        return Ok(InfoPlist.model_validate(data))
    except ValidationError as exc:
        field = first_error_field(exc)
        return Err(
            DescriptorMalformedError(
                path=bundle_path,
                descriptor_path=descriptor_path,
                field=field,
                message=f"{format_validation_error('Info.plist', exc)} (key {field} in {descriptor_path})",
            )
        )


def _build_application(bundle_path: Path, info: InfoPlist) -> Result[Application, BundleError]:
    display_name = resolve_display_name(display_name_candidates(info, bundle_path))
    # The file name stem is never empty for a path that passed the `.app` suffix check.
    if display_name is None:
        return Err(
            MissingDisplayNameError(
                path=bundle_path,
                message=f"No display name found in Info.plist for app bundle at {bundle_path}",
            )
        )

    if not info.bundle_identifier:
        return Err(
            MissingBundleIdError(
                path=bundle_path,
                message=f"No bundle identifier found in Info.plist for app bundle at {bundle_path}",
            )
        )

    application = Application(path=bundle_path, display_name=display_name, bundle_id=info.bundle_identifier)
    logger.debug("Application loaded", bundle_id=application.bundle_id, display_name=application.display_name)
    return Ok(application)


def _strip_bundle_extension(name: str) -> str:
    return name.removesuffix(BUNDLE_EXTENSION)
