# Walk the fixed brightness steps from LOW to MAXIMUM.
import logging
import time

from flashctl.core import BRIGHTNESS_STEPS, Console, PATTERN

log = logging.getLogger(__name__)

TITLE = "Brightness Level Demonstration"
_HOLD = 1.5  # seconds per step


def run(*, console: Console, sleep=time.sleep):
    log.debug("brightness sweep over %d steps", len(BRIGHTNESS_STEPS))
    console.status("BRIGHTNESS LEVEL CONTROL", 0)
    for label, pct in BRIGHTNESS_STEPS:
        console.status(f"BRIGHTNESS: {label}", pct)
        console.render(PATTERN.VARIABLE_BRIGHTNESS, pct)
        console.line(f"Brightness Level: {label} ({pct}%)")
        sleep(_HOLD)
    console.render(PATTERN.OFF, 0)
    console.line("Brightness demonstration completed.")
