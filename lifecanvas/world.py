"""
The cell world: a bounded grid of cells that lives by the rules of Conway's Game of Life.
"""

__all__ = ["CellWorld"]

import numpy as np

from ._coreutils import check_positive_int


class CellWorld:
    """A world of cells, evolving by the classic rules of Conway's Game of Life.

    The cells are stored in a flat array of ``width * height`` unsigned bytes,
    where a cell at ``(x, y)`` lives at index ``y * width + x``. A value of 1
    means alive, 0 means dead.

    The world owns two such buffers. A step reads from the current buffer and
    writes into the other one, after which the roles of the buffers are
    swapped. No memory is allocated per step.

    The world is bounded, and the outermost ring of cells is not evaluated:
    after each step, the cells on the border are dead. This makes the world
    deviate from the infinite-plane rules near its edges.

    Arguments:
        width (int): the number of cells in the horizontal direction. Must be >= 1.
        height (int): the number of cells in the vertical direction. Must be >= 1.
    """

    def __init__(self, width, height):
        self._width = check_positive_int("CellWorld width", width)
        self._height = check_positive_int("CellWorld height", height)
        n_cells = self._width * self._height
        self._buffers = (np.zeros(n_cells, np.uint8), np.zeros(n_cells, np.uint8))
        self._current = 0
        self._population = 0

        # Scratch space for the neighbour count of the interior cells
        inner_shape = max(0, self._height - 2), max(0, self._width - 2)
        self._neighbours = np.zeros(inner_shape, np.uint8)

    def __repr__(self):
        return f"<CellWorld {self._width}x{self._height} with population {self._population} at {hex(id(self))}>"

    @property
    def width(self):
        """The number of cells in the horizontal direction."""
        return self._width

    @property
    def height(self):
        """The number of cells in the vertical direction."""
        return self._height

    @property
    def population(self):
        """The number of live cells in the interior of the world.

        Updated by ``step()``, ``randomize()`` and ``clear()``.
        """
        return self._population

    @property
    def cells(self):
        """A read-only view of the current (flat) cell buffer."""
        view = self._buffers[self._current].view()
        view.flags.writeable = False
        return view

    def as_array(self):
        """Get a read-only view of the current cells, with shape ``(height, width)``."""
        view = self._buffers[self._current].reshape(self._height, self._width)
        view.flags.writeable = False
        return view

    def _grid(self, index):
        return self._buffers[index].reshape(self._height, self._width)

    def _index(self, x, y):
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Cell ({x}, {y}) is outside of the {self._width}x{self._height} world."
            )
        return int(y) * self._width + int(x)

    def get_cell(self, x, y):
        """Get the state of the cell at ``(x, y)``: 1 for alive, 0 for dead."""
        return int(self._buffers[self._current][self._index(x, y)])

    def set_cell(self, x, y, alive=True):
        """Set the state of the cell at ``(x, y)``.

        This is intended to place patterns. The population is not updated until
        the next step.
        """
        self._buffers[self._current][self._index(x, y)] = 1 if alive else 0

    def clear(self):
        """Kill all cells."""
        for buffer in self._buffers:
            buffer.fill(0)
        self._population = 0

    def randomize(self, rng=None):
        """Give each cell an independent 50% chance of being alive.

        The current buffer is overwritten in place. The ``rng`` can be a
        ``numpy.random.Generator``, a seed, or None for fresh entropy.
        """
        rng = np.random.default_rng(rng)
        self._buffers[1 - self._current].fill(0)
        current = self._buffers[self._current]
        current[:] = rng.integers(0, 2, current.size, dtype=np.uint8)
        self._population = int(np.count_nonzero(self._grid(self._current)[1:-1, 1:-1]))

    def step(self):
        """Compute the next generation, and return its population.

        Only interior cells are evaluated. A dead cell with exactly three live
        neighbours comes alive. A live cell with two or three live neighbours
        stays alive. All other cells die, including all cells on the border.
        """
        src = self._grid(self._current)
        dst = self._grid(1 - self._current)
        dst.fill(0)

        if self._width >= 3 and self._height >= 3:
            # Sum the eight shifted views of the grid, one for each neighbour
            neighbours = self._neighbours
            neighbours.fill(0)
            h, w = self._height, self._width
            for dy in (0, 1, 2):
                for dx in (0, 1, 2):
                    if dy == 1 and dx == 1:
                        continue
                    np.add(neighbours, src[dy : h - 2 + dy, dx : w - 2 + dx], out=neighbours)

            inner = src[1:-1, 1:-1]
            births = neighbours == 3
            survivals = (inner == 1) & (neighbours == 2)
            dst[1:-1, 1:-1] = births | survivals
            self._population = int(np.count_nonzero(dst[1:-1, 1:-1]))
        else:
            # No interior to evaluate
            self._population = 0

        # Exchange buffers: the freshly written buffer becomes the current one
        self._current = 1 - self._current
        return self._population
