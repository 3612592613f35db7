"""Turn textual key combinations into compact glyph strings."""

from __future__ import annotations

from orbitkeys.glyphs import KeyGlyph

# Applied in order; earlier entries take precedence over later, shorter ones.
_REPLACEMENTS: tuple[tuple[str, KeyGlyph], ...] = (
    ("Ctrl+", KeyGlyph.CTRL),
    ("Shift+", KeyGlyph.SHIFT),
    ("Alt+", KeyGlyph.ALT),
    ("Super+", KeyGlyph.SUPER),
    ("Tab", KeyGlyph.TAB),
    ("Enter", KeyGlyph.ENTER),
    ("Esc", KeyGlyph.ESCAPE),
    ("Escape", KeyGlyph.ESCAPE),
    ("Backspace", KeyGlyph.BACKSPACE),
    ("Arrows", KeyGlyph.ARROWS),
    ("Arrow", KeyGlyph.ARROWS),
    ("Left", KeyGlyph.LEFT),
    ("Right", KeyGlyph.RIGHT),
    ("Up", KeyGlyph.UP),
    ("Down", KeyGlyph.DOWN),
    ("Plus", KeyGlyph.PLUS),
    ("Minus", KeyGlyph.MINUS),
    ("Space", KeyGlyph.SPACE),
    ("Ctrl", KeyGlyph.CTRL),
    ("Shift", KeyGlyph.SHIFT),
    ("Alt", KeyGlyph.ALT),
    ("Super", KeyGlyph.SUPER),
)


def pretty_keys(raw: str) -> str:
    """Replace key names in *raw* with their glyph symbols."""
    text = raw
    for needle, glyph in _REPLACEMENTS:
        text = text.replace(needle, glyph.symbol)
    return text