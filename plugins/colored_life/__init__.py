"""Colored Life: a toroidal, four-colony Game of Life on a real-time clock."""

from .cells import Cell, Color, COLONY_COLORS, Position
from .clock import ManualClock, SystemClock
from .controls import MAX_SPEED, MIN_SPEED, SpeedControl
from .engine import SimulationEngine, choose_birth_color, neighbor_coords, wrap
from .engine_base import CAEngine, DEFAULT_INTERVAL_MS
from .simulator import Simulator

__all__ = [
    "CAEngine", "Cell", "Color", "COLONY_COLORS", "DEFAULT_INTERVAL_MS",
    "ManualClock", "MAX_SPEED", "MIN_SPEED", "Position", "SimulationEngine",
    "Simulator", "SpeedControl", "SystemClock", "choose_birth_color",
    "neighbor_coords", "wrap",
]
