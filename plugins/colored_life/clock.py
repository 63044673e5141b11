"""
Time Sources

The engine gates stepping on elapsed milliseconds. A clock is any
zero-argument callable returning the current time as an int number of
milliseconds, so tests can drive the gate without waiting on real time.
"""

import time


class SystemClock:
    """Monotonic milliseconds; never jumps back when the system time is set."""

    def __call__(self):
        return int(time.monotonic() * 1000)


class ManualClock:
    """Hand-driven clock for tests and headless replays.

    Example:
        clock = ManualClock(5000)
        clock.advance(250)
        clock()  # 5250
    """

    def __init__(self, start=0):
        self.now = int(start)

    def __call__(self):
        return self.now

    def advance(self, ms):
        """Move time forward by ms milliseconds. Returns the new time."""
        self.now += int(ms)
        return self.now

    def set(self, ms):
        self.now = int(ms)
