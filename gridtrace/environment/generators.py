"""Map generators that populate a ``Grid`` through its public writers.

All generators take an optional ``seed`` so maps can be reproduced in tests.
Every generated cell is visible; callers wanting fog call ``hide_all()``.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Dict, Optional, Tuple

from ..schemas import Cell, Glyph, Rect
from .grid import Grid

WALL_COLOR = (0x55, 0x55, 0x55)
FLOOR_COLOR = (0xAA, 0xAA, 0xAA)
DOOR_COLOR = (0xAA, 0x55, 0x00)


class TileKind(Enum):
    FLOOR = "floor"
    WALL = "wall"
    OPEN_DOOR = "open_door"
    CLOSED_DOOR = "closed_door"
    DOORWAY = "doorway"


# kind -> (character, color, solid). Doors are passable in this simple model.
TILE_STYLES: Dict[TileKind, Tuple[str, Tuple[int, int, int], bool]] = {
    TileKind.FLOOR: (".", FLOOR_COLOR, False),
    TileKind.WALL: ("#", WALL_COLOR, True),
    TileKind.OPEN_DOOR: ("/", DOOR_COLOR, False),
    TileKind.CLOSED_DOOR: ("+", DOOR_COLOR, False),
    TileKind.DOORWAY: (".", DOOR_COLOR, False),
}


def make_tile(kind: TileKind, *, visible: bool = True) -> Cell:
    """Build a cell styled for ``kind``."""
    character, color, solid = TILE_STYLES[kind]
    return Cell(visible=visible, solid=solid, payload=Glyph(character=character, front_color=color))


def generate_scatter(width: int, height: int, *, seed: Optional[int] = None) -> Grid:
    """Fill every cell with a uniformly random tile kind.

    The corners ``(0, 0)`` and ``(width - 1, height - 1)`` are forced open so a
    path query between them at least starts and ends on passable ground.
    """
    rng = random.Random(seed)
    grid = Grid(width, height)
    kinds = list(TileKind)

    for y in range(height):
        for x in range(width):
            grid.set(x, y, make_tile(rng.choice(kinds)))

    for x, y in ((0, 0), (width - 1, height - 1)):
        grid.set(x, y, make_tile(TileKind.FLOOR))

    return grid


def generate_rooms_and_tunnels(
    width: int,
    height: int,
    *,
    rooms: int = 8,
    tunnels: int = 10,
    seed: Optional[int] = None,
) -> Grid:
    """Carve random rectangular rooms and straight tunnels out of solid rock.

    Rooms are 4-7 cells wide and 3-5 tall; tunnels join random interior points
    with ``fill_line``. Connectivity between rooms is likely but not guaranteed.
    """
    rng = random.Random(seed)
    grid = Grid(width, height)
    wall = make_tile(TileKind.WALL)
    floor = make_tile(TileKind.FLOOR)

    grid.fill_rect(Rect(x=0, y=0, width=width, height=height), wall)

    for _ in range(rooms):
        room = Rect(
            x=rng.randint(2, max(2, width - 11)),
            y=rng.randint(2, max(2, height - 9)),
            width=rng.randint(4, 7),
            height=rng.randint(3, 5),
        )
        grid.fill_rect(room, floor)

    for _ in range(tunnels):
        start = (rng.randint(1, max(1, width - 2)), rng.randint(1, max(1, height - 2)))
        end = (rng.randint(1, max(1, width - 2)), rng.randint(1, max(1, height - 2)))
        grid.fill_line(start, end, floor)

    return grid


def generate_shelter(width: int, height: int) -> Grid:
    """Deterministic walled hall: a one-cell wall border around open floor."""
    grid = Grid(width, height)
    grid.fill_rect(Rect(x=0, y=0, width=width, height=height), make_tile(TileKind.WALL))
    grid.fill_rect(Rect(x=1, y=1, width=width - 2, height=height - 2), make_tile(TileKind.FLOOR))
    return grid
