"""
Theme system.

Usage:
    from editor_theme.themes import (
        resolve_preset,
        standardize_stitches_theme,
        standardize_theme,
    )

    # Resolve a built-in preset
    result = standardize_theme("dark")

    # Merge a partial override onto the default preset
    result = standardize_theme({"colors": {"accent": "blue"}})

    # Flatten for the styling engine, keyed by result.id
    tokens = standardize_stitches_theme(result.theme)
"""

from .presets import (
    AQUA_BLUE_THEME,
    DARK_THEME,
    DEFAULT_THEME_NAME,
    GITHUB_LIGHT_THEME,
    LIGHT_THEME,
    MONOKAI_PRO_THEME,
    NIGHT_OWL_THEME,
    SANDPACK_DARK_THEME,
    get_theme_preset,
    list_theme_presets,
    resolve_preset,
)
from .resolver import canonicalize_syntax_color, compute_theme_id, standardize_theme
from .token_compiler import group_tokens, standardize_stitches_theme

__all__ = [
    # Presets
    "DEFAULT_THEME_NAME",
    "LIGHT_THEME",
    "DARK_THEME",
    "SANDPACK_DARK_THEME",
    "GITHUB_LIGHT_THEME",
    "NIGHT_OWL_THEME",
    "AQUA_BLUE_THEME",
    "MONOKAI_PRO_THEME",
    "get_theme_preset",
    "list_theme_presets",
    "resolve_preset",
    # Normalization
    "standardize_theme",
    "canonicalize_syntax_color",
    "compute_theme_id",
    # Tokens
    "standardize_stitches_theme",
    "group_tokens",
]
