# Steady full-power light, one bar per second.
import logging
import time

from flashctl.core import Console, PATTERN

log = logging.getLogger(__name__)

TITLE = "Continuous Illumination Mode"
_DURATION = 3  # steps
_TICK = 1.0


def run(*, console: Console, sleep=time.sleep, duration: int = _DURATION):
    log.debug("continuous illumination for %d steps", duration)
    console.status("CONTINUOUS ILLUMINATION", 100)
    for step in range(1, duration + 1):
        console.render(PATTERN.STEADY_BRIGHT, 100)
        console.line(f"Illumination Active - Duration: {step}/{duration} seconds")
        sleep(_TICK)
    console.render(PATTERN.OFF, 0)
    console.line("Continuous illumination mode completed.")
