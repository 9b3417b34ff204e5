"""
Theme resolver.

Resolves the final theme by merging:
1. Base preset (the default preset, or the one named by ``base``)
2. User override (partial colors/syntax/font, highest precedence)

and derives a content-based id that consumers use as a memoization key.
"""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from editor_theme.errors import InvalidOverrideShapeError
from editor_theme.specs.theme import (
    NORMAL_FONT_STYLE,
    StandardizedTheme,
    SyntaxStyle,
    ThemeSpec,
)

from .presets import resolve_preset

logger = logging.getLogger(__name__)

THEME_GROUPS = ("colors", "syntax", "font")

THEME_ID_PREFIX = "sp-"
THEME_ID_LENGTH = 32


def standardize_theme(
    input_theme: str | Mapping[str, Any] | ThemeSpec | None = None,
    *,
    base: str | None = None,
) -> StandardizedTheme:
    """
    Normalize a theme selector or partial override into a canonical theme.

    Args:
        input_theme: Preset name, partial override mapping, full ThemeSpec,
            or None for the base preset
        base: Preset the override is merged onto (default preset when None).
            Only valid with an override or None.

    Returns:
        StandardizedTheme with the canonical theme and its content id

    Raises:
        UnknownPresetError: If a preset name is not in the catalog
        InvalidOverrideShapeError: If the input has the wrong shape
    """
    if isinstance(input_theme, str):
        if base is not None:
            raise InvalidOverrideShapeError(
                "A preset name cannot be combined with a base preset; "
                "pass an override mapping instead"
            )
        theme = resolve_preset(input_theme)
    elif input_theme is None:
        theme = resolve_preset(base)
    elif isinstance(input_theme, ThemeSpec):
        theme = _merge_theme(resolve_preset(base), input_theme.to_override())
    elif isinstance(input_theme, Mapping):
        theme = _merge_theme(resolve_preset(base), input_theme)
    else:
        raise InvalidOverrideShapeError(
            "Theme must be a preset name, an override mapping or None, "
            f"got {type(input_theme).__name__}"
        )

    theme_id = compute_theme_id(theme)
    logger.debug(f"Standardized theme {theme_id}")
    return StandardizedTheme(theme=theme, id=theme_id)


def canonicalize_syntax_color(value: Any, role: str | None = None) -> SyntaxStyle:
    """
    Expand a syntax color to its explicit ``{color, fontStyle}`` form.

    Accepts a bare color string, a mapping with a ``color`` key and an
    optional ``fontStyle``, or an existing SyntaxStyle.

    Args:
        value: Syntax color in shorthand or explicit form
        role: Syntax role name, used in error paths

    Returns:
        Canonical SyntaxStyle

    Raises:
        InvalidOverrideShapeError: If the value has neither form
    """
    path = f"syntax.{role}" if role else "syntax"

    if isinstance(value, SyntaxStyle):
        return value
    if isinstance(value, str):
        return SyntaxStyle(color=value, fontStyle=NORMAL_FONT_STYLE)
    if isinstance(value, Mapping) and "color" in value:
        data = dict(value)
        # Missing and explicit None both mean "no style"
        for key in ("fontStyle", "font_style"):
            if key in data and data[key] is None:
                del data[key]
        try:
            return SyntaxStyle.model_validate(data)
        except ValidationError as e:
            raise InvalidOverrideShapeError(f"Invalid syntax color: {e}", path=path) from e

    raise InvalidOverrideShapeError(
        "Syntax color must be a string or a mapping with a 'color' key, "
        f"got {type(value).__name__}",
        path=path,
    )


def compute_theme_id(theme: ThemeSpec) -> str:
    """
    Compute the content id of a canonical theme.

    The id is a hash of the key-sorted JSON serialization, so it does not
    depend on key insertion order and changes with any value.
    """
    json_str = json.dumps(theme.to_override(), sort_keys=True, separators=(",", ":"))
    digest = hashlib.sha256(json_str.encode("utf-8")).hexdigest()[:THEME_ID_LENGTH]
    return f"{THEME_ID_PREFIX}{digest}"


def _merge_theme(base: ThemeSpec, override: Mapping[str, Any]) -> ThemeSpec:
    """
    Merge an override into a base theme.

    Groups merge per key; syntax roles are canonicalized before they
    replace the base value. None at any level means "keep the base value".
    """
    unknown = [key for key in override if key not in THEME_GROUPS]
    if unknown:
        raise InvalidOverrideShapeError(
            f"Unknown theme group(s): {', '.join(map(str, unknown))}. "
            f"Expected: {', '.join(THEME_GROUPS)}"
        )

    merged = base.to_override()

    for group in THEME_GROUPS:
        values = override.get(group)
        if values is None:
            continue
        if not isinstance(values, Mapping):
            raise InvalidOverrideShapeError(
                f"Expected a mapping, got {type(values).__name__}", path=group
            )

        for role, value in values.items():
            if value is None:
                continue
            if group == "syntax":
                value = canonicalize_syntax_color(value, role).model_dump(by_alias=True)
            merged[group][_alias_for(group, role)] = value

        logger.debug(f"Merged {len(values)} override value(s) into '{group}'")

    try:
        return ThemeSpec.model_validate(merged)
    except ValidationError as e:
        raise InvalidOverrideShapeError(f"Invalid theme override: {e}") from e


def _alias_for(group: str, role: Any) -> Any:
    """Map a snake_case role name onto the camelCase key used in ``merged``."""
    model = ThemeSpec.model_fields[group].annotation
    field = model.model_fields.get(role) if isinstance(role, str) else None
    if field is not None and field.alias:
        return field.alias
    return role
