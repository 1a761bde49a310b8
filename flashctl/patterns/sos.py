"""
SOS distress signal: three short, three long, three short flashes.
The table lives in flashctl.core and is never parameterized.
"""

import logging
import time

from flashctl.core import Console, PATTERN, SOS_PAUSE, SOS_SEQUENCE, SOS_UNITS

log = logging.getLogger(__name__)

TITLE = "Emergency Signal Pattern"


def run(*, console: Console, sleep=time.sleep):
    log.debug("sos: %d units", len(SOS_SEQUENCE))
    console.status("EMERGENCY SIGNAL - SOS PATTERN", 100)
    for unit in SOS_SEQUENCE:
        console.render(PATTERN.EMERGENCY_FLASH, 100)
        console.line(f"SOS SIGNAL: {unit} FLASH")
        sleep(SOS_UNITS[unit])

        console.render(PATTERN.OFF, 0)
        console.line("Signal pause...")
        sleep(SOS_PAUSE)
    console.line("Emergency SOS signal pattern completed.")
