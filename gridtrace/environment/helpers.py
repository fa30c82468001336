"""Utilities built on top of the Grid Store and the pathfinder."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..schemas import Cell, Coordinate, Glyph
from .grid import Grid
from .pathfinding import find_path


def validate_grid_move(
    grid: Grid,
    current_pos: Coordinate | List[int],
    target_pos: Coordinate | List[int],
    *,
    max_distance: Optional[int] = None,
) -> bool:
    """Validate whether something at current_pos can walk to target_pos.

    Checks four constraints:
    1. Target position is within grid bounds
    2. Target position is passable (not solid)
    3. A path exists from current to target (respecting solid cells)
    4. Optional: path length <= max_distance (single-turn movement limit)

    Args:
        grid: The grid holding solidity data
        current_pos: Current (x, y) position (tuple or list)
        target_pos: Desired (x, y) destination (tuple or list)
        max_distance: Optional maximum number of steps (e.g., 1 for single-step moves)

    Returns:
        True if the move is valid and reachable, False otherwise
    """
    # Normalize to tuples so coordinates compare equal to path entries
    current = (int(current_pos[0]), int(current_pos[1]))
    target = (int(target_pos[0]), int(target_pos[1]))

    if not grid.in_bounds(*target):
        return False

    if not grid.is_passable(*target):
        return False

    path = find_path(grid, current, target)
    if path is None:
        return False

    # Path includes both endpoints, so steps = len - 1
    if max_distance is not None and len(path) - 1 > max_distance:
        return False

    return True


def visible_cells(grid: Grid) -> List[Coordinate]:
    """Return the coordinates of every visible cell, row by row."""
    return [pos for pos, cell in grid.cells() if cell.visible]


def _cell_character(cell: Cell, symbols: Dict[bool, str]) -> str:
    payload = cell.payload
    if isinstance(payload, Glyph) and payload.character.strip():
        return payload.character[0]
    # Payloads without a printable glyph fall back to a solidity symbol.
    return symbols[cell.solid]


_DEFAULT_SOLIDITY_SYMBOLS: Dict[bool, str] = {
    True: "#",
    False: ".",
}


def render_ascii_window(
    grid: Grid,
    center: Optional[Coordinate] = None,
    *,
    radius: Optional[int] = None,
    hidden: str = " ",
    symbols: Optional[Dict[bool, str]] = None,
) -> str:
    """Render visible cells as text, one line per row with ``y = 0`` on top.

    Visible cells print their glyph character, or ``#``/``.`` for solid/open
    cells whose payload has no printable glyph. Hidden cells print ``hidden``.
    Without ``center`` the whole grid is rendered; with it, only the square
    window of ``radius`` around ``center`` clipped to the grid.

    Suitable for debug views and test assertions where a quick human-readable
    snapshot of what has been seen helps.
    """
    mapping = {**_DEFAULT_SOLIDITY_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    min_x, max_x, min_y, max_y = _window_bounds(grid, center, radius)

    lines: List[str] = []
    for y in range(min_y, max_y + 1):
        row_chars: List[str] = []
        for x in range(min_x, max_x + 1):
            cell = grid.get(x, y)
            row_chars.append(_cell_character(cell, mapping) if cell.visible else hidden)
        lines.append("".join(row_chars))

    return "\n".join(lines)


def _window_bounds(
    grid: Grid,
    center: Optional[Coordinate],
    radius: Optional[int],
) -> Tuple[int, int, int, int]:
    if center is None:
        return 0, grid.width - 1, 0, grid.height - 1

    radius = max(int(radius or 0), 0)
    cx, cy = center
    return (
        max(0, cx - radius),
        min(grid.width - 1, cx + radius),
        max(0, cy - radius),
        min(grid.height - 1, cy + radius),
    )
