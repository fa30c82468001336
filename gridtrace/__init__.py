"""
gridtrace - grid tracing and visibility engine.

Walk a 2-D integer lattice to produce lines, circles, field-of-view sets and
shortest paths, on top of a Grid Store that tracks per-cell solidity and
visibility.

Pure and synchronous: no file I/O, no threads, no global state beyond
``Config``. Cells are values; nothing mutable escapes the Grid Store.
"""

__version__ = "0.1.0"

# Core value types
from .schemas import Cell, Coordinate, Glyph, Rect

# Tracing
from .tracer import (
    TraceSignal,
    Visitor,
    trace_circle,
    trace_fov,
    trace_line,
)

# Grid Store and path search
from .environment import (
    Grid,
    GridBoundsError,
    find_path,
    trace_path,
    render_ascii_window,
    validate_grid_move,
    visible_cells,
    TileKind,
    make_tile,
    generate_scatter,
    generate_rooms_and_tunnels,
    generate_shelter,
)

from .config import Config

__all__ = [
    # Value types
    "Cell",
    "Coordinate",
    "Glyph",
    "Rect",
    # Tracing
    "TraceSignal",
    "Visitor",
    "trace_line",
    "trace_circle",
    "trace_fov",
    # Grid Store
    "Grid",
    "GridBoundsError",
    # Path search
    "find_path",
    "trace_path",
    # Utilities
    "render_ascii_window",
    "validate_grid_move",
    "visible_cells",
    # Generators
    "TileKind",
    "make_tile",
    "generate_scatter",
    "generate_rooms_and_tunnels",
    "generate_shelter",
    # Configuration
    "Config",
]
