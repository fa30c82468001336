"""Grid Store, path search and map utilities for gridtrace."""

from .grid import Grid, GridBoundsError
from .pathfinding import PathNode, find_path, manhattan_distance, trace_path
from .helpers import (
    render_ascii_window,
    validate_grid_move,
    visible_cells,
)
from .generators import (
    TileKind,
    generate_rooms_and_tunnels,
    generate_scatter,
    generate_shelter,
    make_tile,
)

__all__ = [
    "Grid",
    "GridBoundsError",
    "PathNode",
    "find_path",
    "trace_path",
    "manhattan_distance",
    "render_ascii_window",
    "validate_grid_move",
    "visible_cells",
    "TileKind",
    "make_tile",
    "generate_scatter",
    "generate_rooms_and_tunnels",
    "generate_shelter",
]
