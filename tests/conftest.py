"""Shared pytest fixtures for theme tests."""

from typing import Any

import pytest


@pytest.fixture
def full_override() -> dict[str, Any]:
    """Return an override that sets every color, syntax and font field."""
    return {
        "colors": {
            "activeText": "red",
            "defaultText": "red",
            "inactiveText": "red",
            "activeBackground": "red",
            "defaultBackground": "red",
            "inputBackground": "red",
            "accent": "red",
            "errorBackground": "red",
            "errorForeground": "red",
        },
        "syntax": {
            "plain": {"color": "blue", "fontStyle": "italic"},
            "comment": "blue",
            "keyword": "blue",
            "tag": "blue",
            "punctuation": "blue",
            "definition": {"color": "green", "fontStyle": "italic"},
            "property": "blue",
            "static": "blue",
            "string": "blue",
        },
        "font": {
            "body": "",
            "mono": "",
            "size": "14px",
            "lineHeight": "1.4",
        },
    }
