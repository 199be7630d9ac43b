"""Thin plistlib helpers shared by the bundle reader and the Dock codec."""

from __future__ import annotations

import plistlib
from enum import Enum
from xml.parsers.expat import ExpatError

from .types import PlistValue

# plistlib.InvalidFileException is a ValueError; the XML parser lets ExpatError through.
# An unparsable <date> raises AttributeError from plistlib._date_from_string (failed regex match).
PLIST_DECODE_ERRORS: tuple[type[Exception], ...] = (ValueError, ExpatError, AttributeError)


class PlistFormat(str, Enum):
    """On-disk plist encodings."""

    XML = "xml"
    BINARY = "binary"

    def to_plistlib(self) -> plistlib.PlistFormat:
        return plistlib.FMT_XML if self is PlistFormat.XML else plistlib.FMT_BINARY


def loads_plist(data: bytes) -> PlistValue:
    """Decode XML or binary plist bytes (the format is detected from the header)."""
    return plistlib.loads(data)


def dumps_plist(value: PlistValue, fmt: PlistFormat = PlistFormat.BINARY) -> bytes:
    return plistlib.dumps(value, fmt=fmt.to_plistlib(), sort_keys=False)
