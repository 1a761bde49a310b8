# flashctl/core/core.py
from __future__ import annotations

import logging
import os
import subprocess
import sys
from types import MappingProxyType, SimpleNamespace
from typing import Optional, TextIO, Tuple

log = logging.getLogger(__name__)

LINE_WIDTH = 80  # header rules and the OFF line clear
RULE_WIDTH = 70  # status banner rules
BAR_WIDTH_MAX = 60  # glyphs at 100%

LABEL_PREFIX = "[LIGHT] "

# Display selectors; a pattern only decides which glyph is drawn.
PATTERN = SimpleNamespace(
    OFF="OFF",
    STEADY_BRIGHT="STEADY_BRIGHT",
    STROBE_FLASH="STROBE_FLASH",
    EMERGENCY_FLASH="EMERGENCY_FLASH",
    VARIABLE_BRIGHTNESS="VARIABLE_BRIGHTNESS",
)

GLYPHS = MappingProxyType(
    {
        PATTERN.STEADY_BRIGHT: "█",  # full block
        PATTERN.VARIABLE_BRIGHTNESS: "█",
        PATTERN.STROBE_FLASH: "▓",  # dark shade
        PATTERN.EMERGENCY_FLASH: "▒",  # medium shade
    }
)
DEFAULT_GLYPH = "░"  # light shade

# SOS unit -> flash seconds; every flash is followed by SOS_PAUSE.
SOS_UNITS = MappingProxyType({"SHORT": 0.300, "LONG": 0.800})
SOS_PAUSE = 0.200
SOS_SEQUENCE: Tuple[str, ...] = ("SHORT",) * 3 + ("LONG",) * 3 + ("SHORT",) * 3

# (label, percent), lowest first
BRIGHTNESS_STEPS: Tuple[Tuple[str, int], ...] = (
    ("LOW", 25),
    ("MEDIUM", 50),
    ("HIGH", 75),
    ("MAXIMUM", 100),
)


def bar_width(intensity: int) -> int:
    if not 0 <= intensity <= 100:
        raise ValueError("intensity must be in 0..100")
    return intensity * BAR_WIDTH_MAX // 100


def glyph_for(pattern: str) -> str:
    return GLYPHS.get(pattern, DEFAULT_GLYPH)


def format_bar(pattern: str, intensity: int) -> str:
    """Return the bar text for a lit pattern, without any line control."""
    return f"{LABEL_PREFIX}{glyph_for(pattern) * bar_width(intensity)} [{intensity}%]"


def clear_console_screen(stream: Optional[TextIO] = None) -> None:
    """Run the platform screen-clear command when writing to a terminal."""
    stream = stream if stream is not None else sys.stdout
    if not _isatty(stream):
        return
    stream.flush()
    cmd = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(cmd, shell=os.name == "nt", check=False)
    except OSError as e:
        log.debug("screen clear unavailable: %s", e)


def _isatty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Console:
    """Writes illumination bars and status banners to one text stream.

    With ``overwrite`` the bar redraws in place using a carriage return.
    Without it (redirected output) every bar is its own line and OFF
    writes nothing.
    """

    def __init__(self, stream: Optional[TextIO] = None, *, overwrite: Optional[bool] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.overwrite = _isatty(self.stream) if overwrite is None else overwrite

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self.stream.flush()

    def write(self, text: str):
        self.stream.write(text)

    def line(self, text: str = ""):
        self.stream.write(text + "\n")

    def rule(self, char: str = "-", width: int = RULE_WIDTH):
        self.line(char * width)

    def render(self, pattern: str, intensity: int):
        if pattern == PATTERN.OFF:
            if self.overwrite:
                self.write(" " * LINE_WIDTH + "\r")
            self.stream.flush()
            return
        bar = format_bar(pattern, intensity)
        if self.overwrite:
            self.write("\r" + bar)
        else:
            self.line(bar)
        self.stream.flush()

    def status(self, mode: str, power: int):
        self.line()
        self.rule()
        self.line(f"OPERATIONAL MODE: {mode}")
        self.line(f"Power Level: {power}%")
        self.line("Status: ACTIVE")
        self.rule()

    def clear_screen(self):
        if self.overwrite:
            clear_console_screen(self.stream)
