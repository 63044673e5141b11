"""
Cell Types for Colored Life

A cell is either dead (no color) or alive with one of four colony
colors. Colors are stored in the grid as their integer values, so a
whole generation is a single int8 array where 0 means dead.
"""

import enum
from dataclasses import dataclass


class Color(enum.IntEnum):
    NONE = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    ORANGE = 4


# Seeding order and the order tallies are kept in
COLONY_COLORS = (Color.RED, Color.GREEN, Color.BLUE, Color.ORANGE)


@dataclass(frozen=True)
class Position:
    x: int
    y: int


@dataclass(frozen=True)
class Cell:
    is_alive: bool
    color: Color = Color.NONE

    def __post_init__(self):
        if self.is_alive == (self.color == Color.NONE):
            raise ValueError(f"Inconsistent cell: is_alive={self.is_alive}, color={self.color!r}")

    @classmethod
    def dead(cls):
        return cls(False, Color.NONE)

    @classmethod
    def from_value(cls, value):
        """Build a Cell from a raw grid value (0 = dead)."""
        color = Color(int(value))
        return cls(color != Color.NONE, color)
