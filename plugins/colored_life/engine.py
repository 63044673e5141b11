"""
Colored Life Engine - Conway's Game of Life with Colony Colors

Standard B3/S23 rules on a torus, extended with color inheritance:
- Live cells with 2 or 3 live neighbors survive and keep their color
- Dead cells with exactly 3 live neighbors are born, taking the color
  most common among those neighbors (ties broken uniformly at random)
- Everything else dies or stays dead

The grid starts with four small colonies, one per color, dropped at
random positions.
"""

import numpy as np

from .cells import Cell, Color, COLONY_COLORS, Position
from .engine_base import CAEngine


# (dx, dy) offsets of the five cells in a seeded colony
COLONY_OFFSETS = ((-1, 0), (0, -1), (0, 0), (0, 1), (1, 1))

NEIGHBOR_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


def wrap(size, x, y):
    """Wrap coordinates at most one grid length onto the torus."""
    if x < 0:
        x += size
    elif x > size - 1:
        x -= size
    if y < 0:
        y += size
    elif y > size - 1:
        y -= size
    return x, y


def neighbor_coords(size, x, y):
    """Return the 8 wrapped (x, y) neighbors of a cell, row by row."""
    return [wrap(size, x + dx, y + dy) for dx, dy in NEIGHBOR_OFFSETS]


def _count_neighbors_moore(mask):
    """Count Moore neighborhood (8 neighbors) using np.roll with periodic boundaries."""
    mask = mask.astype(np.int8)
    n = np.zeros_like(mask)
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dy == 0 and dx == 0:
                continue
            n += np.roll(np.roll(mask, dy, axis=0), dx, axis=1)
    return n


def choose_birth_color(tally, rng):
    """Pick a newborn's color from its neighbor color tally.

    Every color whose count equals the maximum is a candidate, and one
    candidate is drawn uniformly. With three parents the only possible
    tie is one parent of each of three colors.

    Args:
        tally: Counts in COLONY_COLORS order (red, green, blue, orange)
        rng: numpy Generator used for the tie-break
    """
    tally = np.asarray(tally)
    candidates = np.flatnonzero(tally == tally.max())
    if len(candidates) == 1:
        return COLONY_COLORS[candidates[0]]
    return COLONY_COLORS[candidates[rng.integers(len(candidates))]]


class SimulationEngine(CAEngine):

    engine_name = "colored_life"
    engine_label = "Colored Life"

    def __init__(self, field_size=200, clock=None, rng=None,
                 seed_colonies=True):
        """
        Args:
            field_size: Grid side length (positive)
            clock: Callable returning current time in ms
            rng: numpy Generator or int seed for seeding and tie-breaks
            seed_colonies: Drop the four starting colonies (False = empty grid)
        """
        super().__init__(field_size, clock=clock, rng=rng)
        if seed_colonies:
            self._seed_colonies()

    @property
    def field_size(self):
        return self.size

    def step(self):
        """Advance one generation.

        Reads only from the current grid and writes into a fresh one,
        so no cell sees a neighbor already updated this generation.
        """
        grid = self.grid
        alive = grid != Color.NONE
        neighbors = _count_neighbors_moore(alive)

        new_grid = np.zeros_like(grid)
        survive = alive & ((neighbors == 2) | (neighbors == 3))
        new_grid[survive] = grid[survive]

        born = ~alive & (neighbors == 3)
        if born.any():
            # (size, size, 4) per-color neighbor tallies
            tallies = np.stack(
                [_count_neighbors_moore(grid == c) for c in COLONY_COLORS],
                axis=-1,
            )
            born_tallies = tallies[born]
            best = born_tallies.max(axis=1, keepdims=True)
            is_best = born_tallies == best
            colors = np.asarray(COLONY_COLORS, dtype=np.int8)[
                np.argmax(is_best, axis=1)
            ]
            # Only ties need the rng; drawn in row-major order
            for i in np.flatnonzero(is_best.sum(axis=1) > 1):
                colors[i] = choose_birth_color(born_tallies[i], self.rng)
            new_grid[born] = colors

        self.grid = new_grid
        return self.grid

    def get_cells(self):
        """Return live cells as a fresh list of (Position, Cell), y-major."""
        ys, xs = np.nonzero(self.grid)
        return [
            (Position(int(x), int(y)), Cell(True, Color(int(self.grid[y, x]))))
            for y, x in zip(ys, xs)
        ]

    def get_cell(self, x, y):
        return Cell.from_value(self.grid[y % self.size, x % self.size])

    def set_cell(self, x, y, color):
        """Set one cell. Color.NONE kills it. Coordinates wrap."""
        self.grid[y % self.size, x % self.size] = Color(color)

    def place(self, pattern, x, y, color):
        """Stamp a pattern of (dx, dy) offsets around (x, y) in one color."""
        for dx, dy in pattern:
            self.set_cell(x + dx, y + dy, color)

    def _seed_colonies(self):
        """Drop one colony per color; later colonies overwrite earlier ones."""
        for color in COLONY_COLORS:
            y_sel = int(self.rng.integers(self.size))
            x_sel = int(self.rng.integers(self.size))
            for dx, dy in COLONY_OFFSETS:
                x_abs, y_abs = wrap(self.size, x_sel + dx, y_sel + dy)
                self.grid[y_abs, x_abs] = color

    def seed(self, seed_type="colonies", **kwargs):
        if seed_type == "colonies":
            self.clear()
            self._seed_colonies()
        elif seed_type == "empty":
            self.clear()
        else:
            raise ValueError(f"Unknown seed type: {seed_type}")

    def set_params(self, steps_per_second=None, **_kw):
        if steps_per_second is not None:
            self.set_update_speed(steps_per_second)

    def get_params(self):
        return {
            "field_size": self.size,
            "steps_per_second": self.steps_per_second,
            "update_interval": self.update_interval,
        }
