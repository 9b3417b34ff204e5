"""
Theme specification types.
"""

from .theme import (
    NORMAL_FONT_STYLE,
    StandardizedTheme,
    SyntaxColors,
    SyntaxStyle,
    ThemeColors,
    ThemeFont,
    ThemeSpec,
    TokenMap,
)

__all__ = [
    "NORMAL_FONT_STYLE",
    "StandardizedTheme",
    "SyntaxColors",
    "SyntaxStyle",
    "ThemeColors",
    "ThemeFont",
    "ThemeSpec",
    "TokenMap",
]
