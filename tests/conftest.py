"""
Shared fixtures: an in-memory console and a sleep recorder so phases run instantly.
"""

import io

import pytest

from flashctl.core import Console


class SleepRecorder:
    """Stands in for time.sleep and remembers every requested delay."""

    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)

    @property
    def total(self):
        return sum(self.calls)


@pytest.fixture
def sleep():
    return SleepRecorder()


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def console(stream):
    """Terminal-style console: bars redraw in place."""
    return Console(stream, overwrite=True)


@pytest.fixture
def plain_console(stream):
    """Redirected-output console: one bar per line."""
    return Console(stream, overwrite=False)
