"""
Strobe pattern: short full-power flashes separated by a dark interval.
Every flash keeps its pause, including the last one.
"""

import logging
import time

from flashctl.core import Console, PATTERN

log = logging.getLogger(__name__)

TITLE = "Strobe Light Pattern"
_FLASH_COUNT = 8
_INTERVAL = 0.500  # dark time after each flash
_FLASH_ON = 0.200


def run(
    *,
    console: Console,
    sleep=time.sleep,
    flash_count: int = _FLASH_COUNT,
    interval: float = _INTERVAL,
):
    log.debug("strobe: %d flashes, %.3fs interval", flash_count, interval)
    console.status("STROBE LIGHT PATTERN", 100)
    for flash in range(1, flash_count + 1):
        console.render(PATTERN.STROBE_FLASH, 100)
        console.line(f"FLASH {flash}/{flash_count} - HIGH INTENSITY")
        sleep(_FLASH_ON)

        console.render(PATTERN.OFF, 0)
        console.line("Flash interval pause...")
        sleep(interval)
    console.line("Strobe light pattern sequence completed.")
