# flashctl/cli/run.py
"""
CLI: run the console flashlight demonstration.
Examples:
  flashctl
  python -m flashctl
"""
from __future__ import annotations

import argparse
import logging
from textwrap import dedent

from flashctl.core import run_sequence
from flashctl.patterns import list_patterns

log = logging.getLogger(__name__)


def parse_args(argv=None):
    """Return (namespace, ignored). Nothing is accepted and nothing is rejected."""
    epilog = dedent(
        """\
        Phases (always in this order):
          {names}

        Notes:
          • There are no options; every run is the same fixed sequence.
          • When output is redirected, bars are printed one per line.
        """
    ).format(names=", ".join(list_patterns()))
    p = argparse.ArgumentParser(
        prog="flashctl",
        description="Simulate a flashlight on the text console.",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    return p.parse_known_args(argv)


def main(argv=None):
    logging.basicConfig(level=logging.WARNING, format="[flashctl] %(levelname)s %(message)s")
    _, ignored = parse_args(argv)
    if ignored:
        log.debug("ignoring arguments: %s", " ".join(ignored))
    try:
        return run_sequence()
    except KeyboardInterrupt:
        log.debug("interrupted, stopping")
        print()
        return 0
    except BrokenPipeError as e:
        log.debug("stdout closed: %s", e)
        raise SystemExit("[flashctl] console closed, stopping") from e
