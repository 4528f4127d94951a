"""Unit tests for core/styles.py"""

import pytest
from pydantic import ValidationError

from richmd.core.styles import THEMES, RenderStyle, get_theme


def test_default_heading_tables():
    """Default heading sizes shrink with level and fall back to the body size."""
    style = RenderStyle()
    assert [style.heading_size(n) for n in (1, 2, 3, 4)] == [24, 20, 17, 15]
    assert style.heading_weight(1) == "bold"
    assert style.heading_weight(4) == "medium"
    assert style.heading_size(9) == style.font_size


def test_get_theme_known():
    """Every registered theme is reachable by name."""
    for name in THEMES:
        assert get_theme(name).name == name


def test_get_theme_unknown():
    """Unknown theme names raise KeyError."""
    with pytest.raises(KeyError, match="Unknown theme"):
        get_theme("neon")


def test_font_size_lower_bound():
    """Font sizes below 8px are rejected."""
    with pytest.raises(ValidationError):
        RenderStyle(font_size=4)
