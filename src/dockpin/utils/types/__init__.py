"""Utilities for reusable typed field annotations."""

from .fields import NonEmptyString, PlistDict, PlistValue

__all__ = [
    "NonEmptyString",
    "PlistDict",
    "PlistValue",
]
