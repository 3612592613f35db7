"""Key glyphs: compact symbols and readable labels for common keys."""

from __future__ import annotations

from enum import Enum


class KeyGlyph(Enum):
    """A key that is drawn as a symbol, paired with its text label."""

    CTRL = ("⌃", "Ctrl")
    SHIFT = ("⇧", "Shift")
    ALT = ("⎇", "Alt")
    SUPER = ("⌘", "Super")
    TAB = ("⇥", "Tab")
    ENTER = ("↵", "Enter")
    ESCAPE = ("⎋", "Esc")
    BACKSPACE = ("⌫", "Backspace")
    LEFT = ("←", "Left")
    RIGHT = ("→", "Right")
    UP = ("↑", "Up")
    DOWN = ("↓", "Down")
    ARROWS = ("↕↔", "Arrows")
    PLUS = ("+", "Plus")
    MINUS = ("−", "Minus")
    SPACE = ("␣", "Space")

    @property
    def symbol(self) -> str:
        """The visual symbol shown for this key."""
        return self.value[0]

    @property
    def label(self) -> str:
        """The text label for this key."""
        return self.value[1]

    def __str__(self) -> str:
        return self.symbol


_LEGEND = (
    KeyGlyph.SUPER,
    KeyGlyph.CTRL,
    KeyGlyph.ALT,
    KeyGlyph.SHIFT,
    KeyGlyph.TAB,
    KeyGlyph.ENTER,
    KeyGlyph.ESCAPE,
    KeyGlyph.BACKSPACE,
    KeyGlyph.SPACE,
    KeyGlyph.ARROWS,
)


def legend() -> tuple[KeyGlyph, ...]:
    """The glyphs shown in the on-screen legend, in display order."""
    return _LEGEND