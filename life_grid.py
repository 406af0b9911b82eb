import numpy as np


class Grid:
    """Square toroidal Game of Life board with double buffering.

    Cells live in two boolean arrays of the same shape. step() reads only
    from the current array and writes into the next one, then copies the
    result back, so every neighbour count sees the pre-step state.
    """

    def __init__(self, size):
        if not isinstance(size, int) or size < 1:
            raise ValueError(f"Grid size must be a positive integer, "
                             f"got {size!r}")
        self._cells = np.zeros((size, size), dtype=np.bool_)
        self._next = np.zeros_like(self._cells)
        self.generation = 0

    @property
    def size(self):
        return self._cells.shape[0]

    @property
    def cells(self):
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def initialize_randomly(self, probability):
        """Make every cell alive with given probability (in %)."""
        if not 0 <= probability <= 100:
            raise ValueError(f"Probability must be between 0 and 100, "
                             f"got {probability!r}")
        rows, cols = self._cells.shape
        self._cells[:] = np.random.rand(rows, cols) < probability / 100
        self._next[:] = False
        self.generation = 0

    def count_alive_neighbors(self, r, c):
        rows, cols = self._cells.shape
        live_neighbors = 0
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue  # omit cell itself
                rr = (r + dr) % rows  # row index with modulo wrapping (torus topology)
                cc = (c + dc) % cols  # cell index with modulo wrapping
                live_neighbors += int(self._cells[rr, cc])
        return live_neighbors

    def step(self):
        rows, cols = self._cells.shape

        for r in range(rows):
            for c in range(cols):
                live_neighbors = self.count_alive_neighbors(r, c)
                if self._cells[r, c]:
                    # Living cell survives, if it has 2 or 3 neighbors
                    self._next[r, c] = live_neighbors in (2, 3)
                else:
                    # Dead cell reborn, if it has exactly 3 neighbours
                    self._next[r, c] = live_neighbors == 3

        np.copyto(self._cells, self._next)
        self.generation += 1

    def is_alive(self, r, c):
        return bool(self._cells[r, c])

    def set_alive(self, r, c, alive=True):
        self._cells[r, c] = alive

    def population(self):
        return int(np.count_nonzero(self._cells))
