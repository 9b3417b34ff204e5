"""
Error types for theme resolution and normalization.
"""

from __future__ import annotations


class ThemeError(Exception):
    """Base exception for all theme errors."""

    def __init__(self, message: str, path: str | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the override path if available."""
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class UnknownPresetError(ThemeError):
    """
    Raised when a theme selector does not name a built-in preset.

    Examples:
    - Typo in a preset name ("drak")
    - Preset removed from the catalog
    """

    def __init__(self, selector: str, available: list[str]):
        self.selector = selector
        self.available = list(available)
        super().__init__(
            f"Unknown theme preset '{selector}'. Available presets: {', '.join(self.available)}"
        )


class InvalidOverrideShapeError(ThemeError):
    """
    Raised when a theme override has the wrong shape or type.

    Examples:
    - Override that is neither a mapping, a preset name, nor None
    - Group (colors/syntax/font) that is not a mapping
    - Syntax role that is neither a string nor a mapping with "color"
    - Unknown role names or non-string values
    """

    pass
