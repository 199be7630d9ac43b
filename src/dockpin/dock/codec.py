"""Decode and encode Dock preferences documents."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError
from result import Err, Ok, Result

from dockpin.common import create_logger
from dockpin.utils.plist import PLIST_DECODE_ERRORS, PlistFormat, dumps_plist, loads_plist
from dockpin.utils.validation import first_error_field

from .models import DockConfiguration, DockError, DockMalformedError, DockSerializationError

logger = create_logger("dock.codec")


def load_dock(data: bytes, *, source: Path | None = None) -> Result[DockConfiguration, DockError]:
    """Decode XML or binary plist bytes into a `DockConfiguration`.

    A document that fails to decode or does not match the schema is rejected
    as a whole; nothing is patched up.
    """
    where = f" at {source}" if source else ""

    try:
        raw = loads_plist(data)
    except PLIST_DECODE_ERRORS as exc:
        logger.error("Dock plist decode failed", path=str(source), error=str(exc))
        return Err(DockMalformedError(path=source, message=f"Failed to parse Dock plist{where}: {exc}"))

    if not isinstance(raw, dict):
        return Err(DockMalformedError(path=source, message=f"Dock plist root must be a dictionary{where}"))

    try:
        config = DockConfiguration.model_validate(raw)
    except ValidationError as exc:
        field = first_error_field(exc)
        detail = exc.errors()[0].get("msg", str(exc))
        logger.error("Dock plist schema mismatch", path=str(source), field=field, error=detail)
        return Err(
            DockMalformedError(
                path=source,
                field=field,
                message=f"Invalid Dock plist{where}: {field}: {detail}",
            )
        )

    logger.debug(
        "Dock plist loaded",
        path=str(source),
        applications=len(config.applications) if config.applications is not None else None,
        others=len(config.others) if config.others is not None else None,
    )
    return Ok(config)


def serialize_dock(
    config: DockConfiguration,
    fmt: PlistFormat = PlistFormat.BINARY,
    *,
    destination: Path | None = None,
) -> Result[bytes, DockError]:
    where = f" for {destination}" if destination else ""

    try:
        return Ok(dumps_plist(config.to_plist(), fmt))
    except (TypeError, ValueError, OverflowError, PydanticSerializationError) as exc:
        logger.error("Dock plist encode failed", path=str(destination), error=str(exc))
        return Err(
            DockSerializationError(
                path=destination,
                message=f"Failed to serialize Dock configuration{where}: {exc}",
            )
        )
