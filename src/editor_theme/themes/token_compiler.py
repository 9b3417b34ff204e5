"""
Token compiler for canonical themes.

Flattens a ThemeSpec into the category-qualified token map registered by
the CSS-in-JS styling engine:

    colors-accent            -> "#64d2ff"
    syntax-keyword-color     -> "#7c5ae3"
    syntax-keyword-fontStyle -> "normal"
    font-size                -> "13px"
"""

from __future__ import annotations

import logging

from editor_theme.specs.theme import ThemeSpec, TokenMap

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = "-"


def token_key(*parts: str) -> str:
    """Join a category and role path into a token key."""
    return TOKEN_SEPARATOR.join(parts)


def standardize_stitches_theme(theme: ThemeSpec) -> TokenMap:
    """
    Convert a canonical theme to a flat token map.

    Emits one token per color role, two per syntax role (color and
    fontStyle) and one per font field. Values are passed through unchanged,
    including empty font families.

    Args:
        theme: Canonical theme from ``standardize_theme``

    Returns:
        Token key -> value mapping
    """
    if not isinstance(theme, ThemeSpec):
        raise TypeError(
            f"Expected a canonical ThemeSpec, got {type(theme).__name__}; "
            "normalize it with standardize_theme() first"
        )

    data = theme.to_override()
    tokens: TokenMap = {}

    for role, color in data["colors"].items():
        tokens[token_key("colors", role)] = color

    for role, style in data["syntax"].items():
        tokens[token_key("syntax", role, "color")] = style["color"]
        tokens[token_key("syntax", role, "fontStyle")] = style["fontStyle"]

    for field, value in data["font"].items():
        tokens[token_key("font", field)] = value

    logger.debug(f"Compiled {len(tokens)} theme tokens")
    return tokens


def group_tokens(tokens: TokenMap) -> dict[str, dict[str, str]]:
    """
    Regroup a flat token map by category.

    ``{"colors-accent": "blue"}`` becomes ``{"colors": {"accent": "blue"}}``.
    """
    grouped: dict[str, dict[str, str]] = {}
    for key, value in tokens.items():
        category, _, name = key.partition(TOKEN_SEPARATOR)
        grouped.setdefault(category, {})[name] = value
    return grouped
