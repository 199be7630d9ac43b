"""Application bundle reading."""

from .models import (
    Application,
    BundleError,
    DescriptorMalformedError,
    DescriptorUnreadableError,
    InfoPlist,
    InvalidBundleError,
    MissingBundleIdError,
    MissingDisplayNameError,
)
from .reader import display_name_candidates, load_application, resolve_display_name

__all__ = [
    "Application",
    "BundleError",
    "DescriptorMalformedError",
    "DescriptorUnreadableError",
    "InfoPlist",
    "InvalidBundleError",
    "MissingBundleIdError",
    "MissingDisplayNameError",
    "display_name_candidates",
    "load_application",
    "resolve_display_name",
]
