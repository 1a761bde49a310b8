# flashctl/core/sequence.py  (LIBRARY — no CLI concerns)
from __future__ import annotations

import logging
import time
from typing import Optional

from .core import LINE_WIDTH, Console

log = logging.getLogger(__name__)

INIT_SETTLE = 1.0  # seconds after the init block


def display_program_header(console: Console) -> None:
    console.clear_screen()
    console.rule("=", LINE_WIDTH)
    console.line("              PROFESSIONAL CONSOLE FLASHLIGHT APPLICATION")
    console.line("                        Active Illumination System")
    console.rule("=", LINE_WIDTH)
    console.line("Application provides console-based illumination, strobe patterns,")
    console.line("and emergency signaling through dynamic screen brightness control.")
    console.rule("=", LINE_WIDTH)
    console.line()


def initialize_flashlight_system(console: Console, sleep=time.sleep) -> None:
    console.line("FLASHLIGHT SYSTEM INITIALIZATION:")
    console.line("Console Display Engine: Active")
    console.line("Illumination Processor: Operational")
    console.line("Pattern Generator: Ready")
    console.line("Emergency Protocols: Loaded")
    console.line("System Status: READY FOR OPERATION")
    console.rule()
    console.line()
    sleep(INIT_SETTLE)


def process_flashlight_operations(console: Console, sleep=time.sleep) -> None:
    """Run every registered phase once, in order, with its numbered title."""
    from flashctl.patterns import get_title, list_patterns, run_pattern

    console.line("INITIATING FLASHLIGHT OPERATION SEQUENCE...")
    console.line()
    for number, name in enumerate(list_patterns(), start=1):
        if number > 1:
            console.line()
        console.line(f"Phase {number}: {get_title(name)}")
        log.debug("phase %d: %s", number, name)
        run_pattern(name, console=console, sleep=sleep)


def display_program_termination(console: Console) -> None:
    console.line()
    console.line()
    console.rule("=", LINE_WIDTH)
    console.line("               FLASHLIGHT APPLICATION OPERATION COMPLETED")
    console.line("                        All Systems Deactivated")
    console.rule("=", LINE_WIDTH)
    console.line("Flashlight functionality demonstration completed successfully.")
    console.line("Console illumination system has been properly shut down.")
    console.line("Program terminated with successful operational status.")
    console.rule("=", LINE_WIDTH)


def run_sequence(console: Optional[Console] = None, sleep=time.sleep) -> int:
    """Header, init, the four phases, termination. Always returns 0."""
    with (console or Console()) as con:
        display_program_header(con)
        initialize_flashlight_system(con, sleep)
        process_flashlight_operations(con, sleep)
        display_program_termination(con)
    return 0
