"""Exception hierarchy for hersheytext.

Only the boundary functions (``render_svg``, ``render_array`` and
``FontCatalog.register_outline_font``) catch these; everything below them
raises freely.
"""

from __future__ import annotations


class HersheyTextError(Exception):
    """Base class for all hersheytext errors."""


class FontParseError(HersheyTextError):
    """Raised when outline font source data cannot be read."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class InvalidOptionsError(HersheyTextError):
    """Raised when render options are malformed or a required key is missing."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class ConfigError(HersheyTextError):
    """Raised when a configuration file cannot be loaded."""
