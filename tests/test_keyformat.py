from orbitkeys.glyphs import KeyGlyph
from orbitkeys.keyformat import pretty_keys


def test_modifier_with_plus_is_collapsed():
    assert pretty_keys("Ctrl+C") == KeyGlyph.CTRL.symbol + "C"


def test_multiple_modifiers():
    expected = KeyGlyph.CTRL.symbol + KeyGlyph.SHIFT.symbol + "T"
    assert pretty_keys("Ctrl+Shift+T") == expected


def test_super_and_alt():
    expected = KeyGlyph.SUPER.symbol + KeyGlyph.ALT.symbol + KeyGlyph.TAB.symbol
    assert pretty_keys("Super+Alt+Tab") == expected


def test_arrows_plural_uses_cluster_glyph():
    expected = KeyGlyph.CTRL.symbol + KeyGlyph.ARROWS.symbol
    assert pretty_keys("Ctrl+Arrows") == expected


def test_arrow_singular_uses_cluster_glyph():
    assert pretty_keys("Arrow") == KeyGlyph.ARROWS.symbol


def test_directionals():
    result = pretty_keys("Left Right Up Down")
    assert result == " ".join(
        g.symbol for g in (KeyGlyph.LEFT, KeyGlyph.RIGHT, KeyGlyph.UP, KeyGlyph.DOWN)
    )


def test_modifier_without_plus_fallback():
    assert pretty_keys("Shift") == KeyGlyph.SHIFT.symbol


def test_esc_and_plus_minus_space():
    assert pretty_keys("Esc") == KeyGlyph.ESCAPE.symbol
    assert pretty_keys("Minus") == KeyGlyph.MINUS.symbol
    assert pretty_keys("Space") == KeyGlyph.SPACE.symbol
    assert pretty_keys("Plus") == KeyGlyph.PLUS.symbol


def test_escape_matches_esc_first():
    # "Esc" is replaced before "Escape" is considered.
    assert pretty_keys("Escape") == KeyGlyph.ESCAPE.symbol + "ape"


def test_plain_text_untouched():
    assert pretty_keys("F5") == "F5"
    assert pretty_keys("") == ""