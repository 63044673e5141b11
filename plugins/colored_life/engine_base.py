"""
Abstract Base Class for Timed Cellular Automaton Engines

Engines own an integer color grid and advance it one generation per
step(). Stepping in real time goes through try_step(), which only
advances once the configured interval has elapsed on the engine's
clock, so callers can poll every frame without changing the rate.
"""

from abc import ABC, abstractmethod
import numpy as np

from .cells import Color, COLONY_COLORS
from .clock import SystemClock


DEFAULT_INTERVAL_MS = 1000


class CAEngine(ABC):
    """Base class for cellular automaton engines."""

    engine_name = ""   # e.g. "colored_life"
    engine_label = ""  # e.g. "Colored Life"

    def __init__(self, size=200, clock=None, rng=None):
        """
        Args:
            size: Grid side length (must be >= 1)
            clock: Callable returning current time in ms (default: wall clock)
            rng: Generator-like object with integers(high), int seed,
                or None for fresh entropy
        """
        if size < 1:
            raise ValueError(f"size must be a positive integer, got {size}")
        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int8)
        self.clock = clock if clock is not None else SystemClock()
        if rng is None or isinstance(rng, (int, np.integer)):
            self.rng = np.random.default_rng(rng)
        else:
            self.rng = rng

        self.update_interval = DEFAULT_INTERVAL_MS
        # Back-dated one interval so the first try_step() advances at once
        self.last_update_time = self.clock() - self.update_interval - 1

    @abstractmethod
    def step(self):
        """Advance one generation unconditionally. Returns the grid."""

    def step_n(self, n):
        """Advance n generations, ignoring the time gate. Returns final grid."""
        for _ in range(n):
            self.step()
        return self.grid

    def try_step(self):
        """Advance one generation if the update interval has elapsed.

        Returns:
            True if a generation was computed, False otherwise
        """
        now = self.clock()
        if now - self.last_update_time > self.update_interval:
            self.step()
            self.last_update_time = now
            return True
        return False

    def set_update_speed(self, steps_per_second):
        """Set the rate in generations per second.

        The interval truncates (1000 // steps_per_second). Callers must
        pass steps_per_second >= 1; zero raises ZeroDivisionError.
        """
        self.update_interval = 1000 // steps_per_second

    @property
    def steps_per_second(self):
        return 1000 // max(1, self.update_interval)

    @abstractmethod
    def set_params(self, **params):
        """Update engine parameters."""

    @abstractmethod
    def get_params(self):
        """Return dict of current parameter values."""

    @abstractmethod
    def seed(self, seed_type="colonies", **kwargs):
        """Seed the grid based on type string."""

    def clear(self):
        """Kill every cell."""
        self.grid[:] = Color.NONE

    @property
    def stats(self):
        """Return current population statistics."""
        alive = int(np.count_nonzero(self.grid))
        result = {
            "alive": alive,
            "alive_pct": alive / self.grid.size * 100,
        }
        for color in COLONY_COLORS:
            result[color.name.lower()] = int((self.grid == color).sum())
        return result
