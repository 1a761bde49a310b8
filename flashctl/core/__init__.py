# flashctl/core/__init__.py
from .core import (
    Console,
    PATTERN,
    GLYPHS,
    DEFAULT_GLYPH,
    SOS_UNITS,
    SOS_PAUSE,
    SOS_SEQUENCE,
    BRIGHTNESS_STEPS,
    BAR_WIDTH_MAX,
    LINE_WIDTH,
    RULE_WIDTH,
    bar_width,
    glyph_for,
    format_bar,
    clear_console_screen,
)

__all__ = [
    "Console",
    "PATTERN",
    "GLYPHS",
    "DEFAULT_GLYPH",
    "SOS_UNITS",
    "SOS_PAUSE",
    "SOS_SEQUENCE",
    "BRIGHTNESS_STEPS",
    "BAR_WIDTH_MAX",
    "LINE_WIDTH",
    "RULE_WIDTH",
    "bar_width",
    "glyph_for",
    "format_bar",
    "clear_console_screen",
    "run_sequence",
]


def __getattr__(name):
    # Lazy so "import flashctl.core" does not load the pattern registry.
    if name == "run_sequence":
        from .sequence import run_sequence

        return run_sequence
    raise AttributeError(name)
