"""Toroidal Game of Life universe.

The universe owns its dimensions and a BitGrid. Each generation is computed
from the current grid into a fresh copy which replaces the old grid only once
every cell has been visited, so all cells update simultaneously.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from lifesim.core.bitgrid import BitGrid
from lifesim.core.cell import Cell
from lifesim.core.exceptions import GridBoundsError, GridSizeError
from lifesim.core.templates import Point, TemplateRegistry, get_template
from lifesim.utils.consts import ALIVE_CHAR, DEAD_CHAR, GridDefaults

if TYPE_CHECKING:
    from lifesim.utils.config_loader import LifeConfig

logger = logging.getLogger(__name__)


def next_state(cell: Cell, live_neighbors: int) -> Cell:
    """Apply the B3/S23 rule to a single cell."""
    if cell is Cell.ALIVE and live_neighbors < 2:
        return Cell.DEAD
    if cell is Cell.ALIVE and live_neighbors in (2, 3):
        return Cell.ALIVE
    if cell is Cell.ALIVE and live_neighbors > 3:
        return Cell.DEAD
    if cell is Cell.DEAD and live_neighbors == 3:
        return Cell.ALIVE
    return cell


def _validate_dimension(dimension: str, value: int) -> None:
    if value < 1:
        raise GridSizeError(dimension, value)


class Universe:
    """A width x height grid of cells with wrap-around edges."""

    def __init__(
        self,
        width: int = GridDefaults.WIDTH,
        height: int = GridDefaults.HEIGHT,
        templates: Optional[TemplateRegistry] = None,
    ):
        _validate_dimension("width", width)
        _validate_dimension("height", height)
        self._width = width
        self._height = height
        # None means "use the global registry at lookup time"
        self._templates = templates
        self._cells = BitGrid.with_capacity(width * height)

    @classmethod
    def from_config(
        cls, config: LifeConfig, templates: Optional[TemplateRegistry] = None
    ) -> Universe:
        """Build a universe sized and seeded from a loaded configuration."""
        universe = cls(config.universe.width, config.universe.height, templates)
        if config.universe.template:
            universe.set_template(config.universe.template)
        return universe

    # ==========================================================
    # Dimensions
    # ==========================================================

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_width(self, width: int) -> None:
        """Change the width. Destroys all current cell state."""
        _validate_dimension("width", width)
        self._width = width
        self.reset_cells()

    def set_height(self, height: int) -> None:
        """Change the height. Destroys all current cell state."""
        _validate_dimension("height", height)
        self._height = height
        self.reset_cells()

    def reset_cells(self) -> None:
        """Reallocate the grid at the current size with every cell dead."""
        self._cells = BitGrid.with_capacity(self._width * self._height)
        logger.debug("Universe reset to %dx%d", self._width, self._height)

    # ==========================================================
    # Indexing and neighbors
    # ==========================================================

    def get_index(self, row: int, col: int) -> int:
        return row * self._width + col

    def live_neighbor_count(self, row: int, col: int) -> int:
        """Count live cells among the 8 wrapped neighbors of (row, col)."""
        count = 0
        for delta_row in (self._height - 1, 0, 1):
            for delta_col in (self._width - 1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                neighbor_row = (row + delta_row) % self._height
                neighbor_col = (col + delta_col) % self._width
                idx = self.get_index(neighbor_row, neighbor_col)
                count += self._cells.contains(idx)
        return count

    # ==========================================================
    # Simulation
    # ==========================================================

    def tick(self) -> None:
        """Advance the universe by one generation."""
        next_cells = self._cells.clone()

        for row in range(self._height):
            for col in range(self._width):
                idx = self.get_index(row, col)
                cell = Cell.ALIVE if self._cells.contains(idx) else Cell.DEAD
                live_neighbors = self.live_neighbor_count(row, col)
                next_cells.set(idx, next_state(cell, live_neighbors))

        self._cells = next_cells

    # ==========================================================
    # Seeding
    # ==========================================================

    def set_template(self, name: str) -> None:
        """Clear the grid and seed it with a named template.

        Unknown names are not an error; the grid is simply left empty.
        """
        self.reset_cells()
        if self._templates is not None:
            points = self._templates.get(name)
        else:
            points = get_template(name)

        if points is None:
            logger.debug("No template named %r, universe left empty", name)
            return

        self.set_cells(points)
        logger.debug("Seeded template %r with %d cells", name, len(points))

    def set_cells(self, cells: Iterable[Point]) -> None:
        """Mark each (row, col) alive, keeping existing live cells.

        All coordinates are checked before any cell is written.
        """
        indices = []
        for row, col in cells:
            if not (0 <= row < self._height and 0 <= col < self._width):
                raise GridBoundsError(
                    self.get_index(row, col),
                    len(self._cells),
                    details={"row": row, "col": col},
                )
            indices.append(self.get_index(row, col))

        for idx in indices:
            self._cells.set(idx, Cell.ALIVE)

    # ==========================================================
    # Inspection
    # ==========================================================

    def get_cells(self) -> BitGrid:
        """Current grid, not a copy. Treat as read-only."""
        return self._cells

    def live_cells(self) -> list[Point]:
        """Coordinates of every live cell in row-major order."""
        return [divmod(idx, self._width) for idx in self._cells.ones()]

    @property
    def population(self) -> int:
        return self._cells.count_ones()

    def render(self, alive: str = ALIVE_CHAR, dead: str = DEAD_CHAR) -> str:
        """Render one text line per row, one character per cell."""
        lines = []
        for row in range(self._height):
            line = "".join(
                alive if self._cells.contains(self.get_index(row, col)) else dead
                for col in range(self._width)
            )
            lines.append(line + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()
