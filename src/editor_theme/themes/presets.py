"""
Theme presets.

Defines the built-in themes that can be selected by name. Each preset is a
complete, canonical ThemeSpec. Preset names are part of the public
interface: consumers pass them as string literals.
"""

from __future__ import annotations

import logging

from editor_theme.errors import InvalidOverrideShapeError, UnknownPresetError
from editor_theme.specs.theme import (
    NORMAL_FONT_STYLE,
    SyntaxColors,
    SyntaxStyle,
    ThemeColors,
    ThemeFont,
    ThemeSpec,
)

logger = logging.getLogger(__name__)

DEFAULT_THEME_NAME = "light"

DEFAULT_BODY_FONT = (
    '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Oxygen, Ubuntu, '
    'Cantarell, "Fira Sans", "Droid Sans", "Helvetica Neue", sans-serif'
)
DEFAULT_MONO_FONT = (
    '"Fira Mono", "DejaVu Sans Mono", Menlo, Consolas, "Liberation Mono", '
    'Monaco, "Lucida Console", monospace'
)

_DEFAULT_FONT = ThemeFont(
    body=DEFAULT_BODY_FONT,
    mono=DEFAULT_MONO_FONT,
    size="13px",
    lineHeight="20px",
)


def _style(color: str, font_style: str = NORMAL_FONT_STYLE) -> SyntaxStyle:
    return SyntaxStyle(color=color, fontStyle=font_style)


# =============================================================================
# Light Theme (default)
# =============================================================================

LIGHT_THEME = ThemeSpec(
    colors=ThemeColors(
        activeText="#1f2933",
        defaultText="#757678",
        inactiveText="#e4e7eb",
        activeBackground="#e4e7eb",
        defaultBackground="#f8f9fb",
        inputBackground="#ffffff",
        accent="#64d2ff",
        errorBackground="#ffcdca",
        errorForeground="#811e18",
    ),
    syntax=SyntaxColors(
        plain=_style("#151515"),
        comment=_style("#999999", "italic"),
        keyword=_style("#7c5ae3"),
        tag=_style("#0971f1"),
        punctuation=_style("#3b3b3b"),
        definition=_style("#85a600"),
        property=_style("#3b3b3b"),
        static=_style("#3b3b3b"),
        string=_style("#2e6bd0"),
    ),
    font=_DEFAULT_FONT,
)

# =============================================================================
# Dark Theme
# =============================================================================

DARK_THEME = ThemeSpec(
    colors=ThemeColors(
        activeText="#ffffff",
        defaultText="#999999",
        inactiveText="#343434",
        activeBackground="#343434",
        defaultBackground="#040404",
        inputBackground="#242424",
        accent="#6caedd",
        errorBackground="#ffcdca",
        errorForeground="#811e18",
    ),
    syntax=SyntaxColors(
        plain=_style("#ffffff"),
        comment=_style("#757575", "italic"),
        keyword=_style("#77b7d7"),
        tag=_style("#dfab5c"),
        punctuation=_style("#ffffff"),
        definition=_style("#86d9ca"),
        property=_style("#77b7d7"),
        static=_style("#c64640"),
        string=_style("#977cdc"),
    ),
    font=_DEFAULT_FONT,
)

# =============================================================================
# Sandpack Dark Theme
# =============================================================================

SANDPACK_DARK_THEME = ThemeSpec(
    colors=ThemeColors(
        activeText="#90e86f",
        defaultText="#808080",
        inactiveText="#2e2e2e",
        activeBackground="#2e2e2e",
        defaultBackground="#151515",
        inputBackground="#2e2e2e",
        accent="#90e86f",
        errorBackground="#332121",
        errorForeground="#ff453a",
    ),
    syntax=SyntaxColors(
        plain=_style("#f0fdaf"),
        comment=_style("#757575", "italic"),
        keyword=_style("#e5fd78"),
        tag=_style("#f0fdaf"),
        punctuation=_style("#ffffff"),
        definition=_style("#eeeeee"),
        property=_style("#90e86f"),
        static=_style("#ffffff"),
        string=_style("#dafecf"),
    ),
    font=_DEFAULT_FONT,
)

# =============================================================================
# GitHub Light Theme
# =============================================================================

GITHUB_LIGHT_THEME = ThemeSpec(
    colors=ThemeColors(
        activeText="#24292e",
        defaultText="#959da5",
        inactiveText="#e4e7eb",
        activeBackground="#e4e7eb",
        defaultBackground="#ffffff",
        inputBackground="#ffffff",
        accent="#c8c8fa",
        errorBackground="#ffcdca",
        errorForeground="#811e18",
    ),
    syntax=SyntaxColors(
        plain=_style("#24292e"),
        comment=_style("#6a737d"),
        keyword=_style("#d73a49"),
        tag=_style("#22863a"),
        punctuation=_style("#24292e"),
        definition=_style("#6f42c1"),
        property=_style("#005cc5"),
        static=_style("#032f62"),
        string=_style("#032f62"),
    ),
    font=_DEFAULT_FONT,
)

# =============================================================================
# Night Owl Theme
# =============================================================================

NIGHT_OWL_THEME = ThemeSpec(
    colors=ThemeColors(
        activeText="rgb(197, 228, 253)",
        defaultText="rgb(90, 125, 155)",
        inactiveText="rgb(40, 60, 80)",
        activeBackground="rgb(11, 41, 66)",
        defaultBackground="#011627",
        inputBackground="rgb(11, 41, 66)",
        accent="#c792ea",
        errorBackground="#3b1e2a",
        errorForeground="#ef5350",
    ),
    syntax=SyntaxColors(
        plain=_style("#d6deeb"),
        comment=_style("#999999", "italic"),
        keyword=_style("#c792ea", "italic"),
        tag=_style("#7fdbca"),
        punctuation=_style("#7fdbca"),
        definition=_style("#82aaff"),
        property=_style("#addb67", "italic"),
        static=_style("#f78c6c"),
        string=_style("#ecc48d"),
    ),
    font=_DEFAULT_FONT,
)

# =============================================================================
# Aqua Blue Theme
# =============================================================================

AQUA_BLUE_THEME = ThemeSpec(
    colors=ThemeColors(
        activeText="#1f2933",
        defaultText="#737373",
        inactiveText="#e4e7eb",
        activeBackground="#e4e7eb",
        defaultBackground="#f8f9fb",
        inputBackground="#ffffff",
        accent="#6caedd",
        errorBackground="#ffcdca",
        errorForeground="#811e18",
    ),
    syntax=SyntaxColors(
        plain=_style("#1f2933"),
        comment=_style("#a7b6c2", "italic"),
        keyword=_style("#1a56db"),
        tag=_style("#1a56db"),
        punctuation=_style("#394b59"),
        definition=_style("#a23dad"),
        property=_style("#2b6cb0"),
        static=_style("#1a56db"),
        string=_style("#1992d4"),
    ),
    font=_DEFAULT_FONT,
)

# =============================================================================
# Monokai Pro Theme
# =============================================================================

MONOKAI_PRO_THEME = ThemeSpec(
    colors=ThemeColors(
        activeText="#fcfcfa",
        defaultText="#939293",
        inactiveText="#5b595c",
        activeBackground="#403e41",
        defaultBackground="#2d2a2e",
        inputBackground="#403e41",
        accent="#ffd866",
        errorBackground="#ffcdca",
        errorForeground="#811e18",
    ),
    syntax=SyntaxColors(
        plain=_style("#fcfcfa"),
        comment=_style("#757575", "italic"),
        keyword=_style("#ff6188"),
        tag=_style("#ff6188"),
        punctuation=_style("#939293"),
        definition=_style("#a9dc76"),
        property=_style("#78dce8", "italic"),
        static=_style("#ab9df2"),
        string=_style("#ffd866"),
    ),
    font=_DEFAULT_FONT,
)

# =============================================================================
# Theme Registry
# =============================================================================

_THEME_PRESETS: dict[str, ThemeSpec] = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
    "sandpack-dark": SANDPACK_DARK_THEME,
    "github-light": GITHUB_LIGHT_THEME,
    "night-owl": NIGHT_OWL_THEME,
    "aqua-blue": AQUA_BLUE_THEME,
    "monokai-pro": MONOKAI_PRO_THEME,
}


def get_theme_preset(name: str) -> ThemeSpec | None:
    """
    Get a theme preset by name.

    Args:
        name: Theme preset name ("light", "dark", ...)

    Returns:
        ThemeSpec if found, None otherwise
    """
    return _THEME_PRESETS.get(name)


def list_theme_presets() -> list[str]:
    """
    List available theme preset names.

    Returns:
        List of preset names
    """
    return list(_THEME_PRESETS.keys())


def resolve_preset(selector: str | None = None) -> ThemeSpec:
    """
    Resolve a theme selector to a built-in preset.

    Args:
        selector: Preset name, or None for the default preset

    Returns:
        The preset's ThemeSpec

    Raises:
        UnknownPresetError: If the name is not in the catalog
        InvalidOverrideShapeError: If the selector is not a string
    """
    if selector is None:
        selector = DEFAULT_THEME_NAME
    elif not isinstance(selector, str):
        raise InvalidOverrideShapeError(
            f"Preset selector must be a string, got {type(selector).__name__}"
        )

    theme = get_theme_preset(selector)
    if theme is None:
        raise UnknownPresetError(selector, list_theme_presets())

    logger.debug(f"Resolved theme preset '{selector}'")
    return theme
