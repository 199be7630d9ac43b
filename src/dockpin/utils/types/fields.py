"""Reusable Pydantic field annotations."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import Field, StrictStr

type PlistValue = dict[str, PlistValue] | list[PlistValue] | str | bytes | int | float | bool | datetime
type PlistDict = dict[str, PlistValue]

NonEmptyString = Annotated[StrictStr, Field(min_length=1, frozen=True)]

__all__ = [
    "NonEmptyString",
    "PlistDict",
    "PlistValue",
]
