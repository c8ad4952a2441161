from simulation.state import NextState

ALIVE_CHAR = "o"
DEAD_CHAR = " "

class Cell:
    """A single grid position.

    ``neighbours`` stays None until the owning World computes it, then holds
    a tuple of the adjacent cells for the rest of the cell's life.
    """

    __slots__ = ("x", "y", "alive", "next_state", "neighbours")

    def __init__(self, x, y, alive=False):
        self.x = x
        self.y = y
        self.alive = alive
        self.next_state = NextState.UNSET
        self.neighbours = None

    def to_char(self):
        return ALIVE_CHAR if self.alive else DEAD_CHAR

    def __repr__(self):
        return f"Cell(x={self.x}, y={self.y}, alive={self.alive})"
