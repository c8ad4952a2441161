"""World owns the grid of cells and advances it one generation at a time."""

import random

from core.errors import LocationOccupied
from internal.logging import get_logger
from simulation.entities import Cell
from simulation.state import NextState

# Moore neighbourhood, excluding the cell itself
DIRECTIONS = (
    (-1, 1), (0, 1), (1, 1),     # above
    (-1, 0),         (1, 0),     # sides
    (-1, -1), (0, -1), (1, -1),  # below
)


class World:
    """Conway's Game of Life on a fixed grid.

    ``width`` and ``height`` are inclusive bounds, so the board holds
    ``(width + 1) * (height + 1)`` cells covering ``[0, width] x [0, height]``.
    """

    def __init__(self, width, height, rng=None, alive_probability=0.2):
        if width < 0 or height < 0:
            raise ValueError(f"world dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.generation = 0
        self._rng = rng or random.Random()
        self._cells = {}
        self._log = get_logger()

        self._populate_cells(alive_probability)
        self._prepopulate_neighbours()
        self._log.info("world created", width=width, height=height, cells=len(self._cells),
                       population=self.population)

    @property
    def population(self):
        return sum(1 for cell in self._cells.values() if cell.alive)

    def cells(self):
        return iter(self._cells.values())

    def cell_at(self, x, y):
        return self._cells.get((x, y))

    def neighbours_around(self, cell):
        if cell.neighbours is None:
            neighbours = []
            for dx, dy in DIRECTIONS:
                neighbour = self.cell_at(cell.x + dx, cell.y + dy)
                if neighbour is not None:
                    neighbours.append(neighbour)
            cell.neighbours = tuple(neighbours)
        return cell.neighbours

    def alive_neighbours_around(self, cell):
        alive_neighbours = 0
        for neighbour in self.neighbours_around(cell):
            if neighbour.alive:
                alive_neighbours += 1
        return alive_neighbours

    def tick(self):
        """Advance one generation.

        Every next state is decided from the current board before any cell
        changes, then all of them are applied together.
        """
        for cell in self._cells.values():
            alive_neighbours = self.alive_neighbours_around(cell)
            if not cell.alive and alive_neighbours == 3:
                cell.next_state = NextState.ALIVE
            elif alive_neighbours < 2 or alive_neighbours > 3:
                cell.next_state = NextState.DEAD
            else:
                cell.next_state = NextState.UNSET

        for cell in self._cells.values():
            if cell.next_state is NextState.ALIVE:
                cell.alive = True
            elif cell.next_state is NextState.DEAD:
                cell.alive = False

        self.generation += 1
        self._log.debug("world tick", generation=self.generation)

    def render(self):
        rendering = []
        for y in range(self.height + 1):
            for x in range(self.width + 1):
                rendering.append(self._cells[(x, y)].to_char())
            rendering.append("\n")
        return "".join(rendering)

    def clear(self):
        for cell in self._cells.values():
            cell.alive = False

    def set_alive(self, coords):
        # all lookups happen before any cell changes
        cells = [self._cells[(x, y)] for x, y in coords]
        for cell in cells:
            cell.alive = True

    def _populate_cells(self, alive_probability):
        for y in range(self.height + 1):
            for x in range(self.width + 1):
                self._add_cell(x, y, self._rng.random() <= alive_probability)

    def _prepopulate_neighbours(self):
        for cell in self._cells.values():
            self.neighbours_around(cell)

    def _add_cell(self, x, y, alive=False):
        if (x, y) in self._cells:
            raise LocationOccupied(x, y)
        cell = Cell(x, y, alive)
        self._cells[(x, y)] = cell
        return cell
