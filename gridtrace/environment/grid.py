"""Grid Store: the owner of per-cell solidity and visibility state.

Cells are handed out and taken in by value. ``get`` returns a deep copy and
``set`` stores a deep copy, so a caller mutating a ``Cell`` it holds can never
reach into the store. Rendering code and game logic rely on that isolation.

Out-of-range coordinates read as empty space (a default ``Cell``) and writes
to them are dropped, unless the grid was built with ``strict=True``.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from ..schemas import Cell, Coordinate, Rect
from ..tracer import TraceSignal, trace_circle, trace_fov, trace_line


class GridBoundsError(IndexError):
    """Raised by a strict grid when ``get``/``set`` fall outside its bounds."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) is outside grid bounds {width}x{height}")
        self.x = x
        self.y = y


class Grid:
    """Fixed-size 2-D array of cells addressed by ``(x, y)``.

    Attributes:
        width: Number of columns (X dimension), read-only
        height: Number of rows (Y dimension), read-only
        strict: Raise ``GridBoundsError`` on out-of-range ``get``/``set``
            instead of treating the outside as empty space. Bulk fills and
            field-of-view updates always clip silently.

    The size only changes through ``resize()``, which reallocates every cell.
    """

    def __init__(self, width: int, height: int, *, strict: bool = False):
        """
        Initialize a grid of default cells.

        Raises:
            ValueError: If dimensions are not positive
        """
        self.strict = strict
        self._width = 0
        self._height = 0
        self._cells: List[Cell] = []
        self._allocate(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _allocate(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive: {width}x{height}")
        self._width = width
        self._height = height
        self._cells = [Cell() for _ in range(width * height)]

    # --- Bounds ---
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_passable(self, x: int, y: int) -> bool:
        """True if ``(x, y)`` is inside the grid and not solid."""
        return self.in_bounds(x, y) and not self._cells[y * self.width + x].solid

    def neighbors4(self, x: int, y: int) -> Iterator[Coordinate]:
        """Yield in-bounds orthogonal neighbors: right, left, down, up."""
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if self.in_bounds(nx, ny):
                yield nx, ny

    # --- Cell access ---
    def get(self, x: int, y: int) -> Cell:
        """Return a copy of the cell at ``(x, y)``; outside the grid, a default cell."""
        if self.strict and not self.in_bounds(x, y):
            raise GridBoundsError(x, y, self.width, self.height)
        return self._read(x, y)

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Store a copy of ``cell`` at ``(x, y)``; outside the grid this is a no-op."""
        if self.strict and not self.in_bounds(x, y):
            raise GridBoundsError(x, y, self.width, self.height)
        self._write(x, y, cell)

    def _read(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            return Cell()
        return self._cells[y * self.width + x].copy_cell()

    def _write(self, x: int, y: int, cell: Cell) -> None:
        if cell is None or not self.in_bounds(x, y):
            return
        self._cells[y * self.width + x] = cell.copy_cell()

    def cells(self) -> Iterator[Tuple[Coordinate, Cell]]:
        """Yield ``((x, y), cell copy)`` for every cell, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y), self._read(x, y)

    # --- Lifecycle ---
    def clear(self) -> None:
        """Reset every cell to the default (non-solid, invisible) cell."""
        self._cells = [Cell() for _ in range(self.width * self.height)]

    def resize(self, width: int, height: int) -> None:
        """Reallocate to ``width`` x ``height``. Previous contents are discarded."""
        self._allocate(width, height)

    # --- Bulk writers ---
    def fill_line(self, start: Coordinate, end: Coordinate, cell: Cell) -> None:
        def write(point: Coordinate) -> TraceSignal:
            self._write(point[0], point[1], cell)
            return TraceSignal.CONTINUE

        trace_line(start, end, write)

    def fill_rect(self, rect: Rect, cell: Cell) -> None:
        for x, y in rect.points():
            self._write(x, y, cell)

    def fill_circle(self, center: Coordinate, radius: int, cell: Cell) -> None:
        """Write ``cell`` along the traced outline of a circle (not its interior)."""

        def write(point: Coordinate) -> TraceSignal:
            self._write(point[0], point[1], cell)
            return TraceSignal.CONTINUE

        trace_circle(center, radius, write)

    # --- Visibility ---
    def show_all(self) -> None:
        self._set_all_visible(True)

    def hide_all(self) -> None:
        self._set_all_visible(False)

    def _set_all_visible(self, visible: bool) -> None:
        for y in range(self.height):
            for x in range(self.width):
                cell = self._read(x, y)
                cell.visible = visible
                self._write(x, y, cell)

    def update_fov(self, origin: Coordinate, radius: int, *, reset: bool = False) -> None:
        """Mark cells visible from ``origin`` within ``radius``.

        Each ray marks the cells it crosses visible and stops at the first
        solid cell, which is itself marked visible. Cells behind an occluder
        stay as they were unless another ray reaches them.

        Visibility only accumulates: cells seen by an earlier call stay
        visible. Pass ``reset=True`` (or call ``hide_all()`` first) when the
        result must reflect the current origin alone.
        """
        if reset:
            self.hide_all()

        def reveal(point: Coordinate) -> TraceSignal:
            x, y = point
            cell = self._read(x, y)
            cell.visible = True
            self._write(x, y, cell)
            if cell.solid:
                return TraceSignal.STOP
            return TraceSignal.CONTINUE

        trace_fov(origin, radius, reveal)

    def __str__(self) -> str:
        return f"Grid({self.width}x{self.height})"

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, strict={self.strict})"
