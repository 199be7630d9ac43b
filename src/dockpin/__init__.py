"""dockpin - pin macOS application bundles to the Dock.

By default, dockpin's internal logging is disabled when used as a library.
Library users can enable logging by calling dockpin.enable_logging().
"""

from dockpin.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
