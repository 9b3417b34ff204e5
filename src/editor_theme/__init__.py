"""
Theme normalization for a code-editor UI toolkit.

Turns a preset name or a partial theme override into a canonical theme
with a content id, and flattens canonical themes into token maps for a
CSS-variable-driven styling engine.
"""

from editor_theme.errors import InvalidOverrideShapeError, ThemeError, UnknownPresetError
from editor_theme.specs.theme import (
    NORMAL_FONT_STYLE,
    StandardizedTheme,
    SyntaxColors,
    SyntaxStyle,
    ThemeColors,
    ThemeFont,
    ThemeSpec,
    TokenMap,
)
from editor_theme.themes import (
    DARK_THEME,
    DEFAULT_THEME_NAME,
    LIGHT_THEME,
    canonicalize_syntax_color,
    compute_theme_id,
    get_theme_preset,
    group_tokens,
    list_theme_presets,
    resolve_preset,
    standardize_stitches_theme,
    standardize_theme,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Errors
    "ThemeError",
    "UnknownPresetError",
    "InvalidOverrideShapeError",
    # Types
    "NORMAL_FONT_STYLE",
    "StandardizedTheme",
    "SyntaxColors",
    "SyntaxStyle",
    "ThemeColors",
    "ThemeFont",
    "ThemeSpec",
    "TokenMap",
    # Presets
    "DEFAULT_THEME_NAME",
    "LIGHT_THEME",
    "DARK_THEME",
    "get_theme_preset",
    "list_theme_presets",
    "resolve_preset",
    # Normalization and tokens
    "standardize_theme",
    "canonicalize_syntax_color",
    "compute_theme_id",
    "standardize_stitches_theme",
    "group_tokens",
]
