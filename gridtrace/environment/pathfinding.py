"""A* path search over a ``Grid``'s passability.

Four-connected movement with unit step cost and a Manhattan heuristic, which
is admissible and consistent for that movement model, so returned paths are
shortest.

The open set is a flat list in insertion order, re-scanned for the lowest
``cost + estimate`` on every iteration. The first-inserted node wins a tie,
which keeps path shapes deterministic. Nodes live in an arena list and refer to
their parent by index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Set

from ..logging_utils import debug_enabled, log_error, log_search, log_success
from ..schemas import Coordinate
from ..tracer import TraceSignal, Visitor, offer
from .grid import Grid

STEP_COST = 1


@dataclass
class PathNode:
    """Search node. ``parent`` indexes into the search's node arena."""

    position: Coordinate
    cost_from_start: int
    parent: Optional[int]
    heuristic_estimate: int

    @property
    def estimate_full_cost(self) -> int:
        return self.cost_from_start + self.heuristic_estimate


def manhattan_distance(a: Coordinate, b: Coordinate) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _reconstruct(arena: List[PathNode], index: int) -> List[Coordinate]:
    path: List[Coordinate] = []
    current: Optional[int] = index
    while current is not None:
        node = arena[current]
        path.append(node.position)
        current = node.parent
    path.reverse()
    return path


def find_path(grid: Grid, start: Coordinate, goal: Coordinate) -> Optional[List[Coordinate]]:
    """Return the shortest 4-connected path from ``start`` to ``goal``.

    The path includes both endpoints, start first. Returns None when the goal
    cannot be reached; this function never raises for unreachable, solid or
    out-of-range goals.

    Neighbors are expanded right, left, down, up. A neighbor that is outside
    the grid or solid is skipped; one already expanded is never reopened; one
    already waiting in the open set is reparented in place when the new route
    is strictly cheaper, without moving it in the scan order.
    """
    arena: List[PathNode] = [PathNode(start, 0, None, manhattan_distance(start, goal))]
    open_set: List[int] = [0]
    closed: Set[Coordinate] = set()
    expanded = 0

    while open_set:
        # min() keeps the first of equal keys, giving the insertion-order tie-break.
        best = min(range(len(open_set)), key=lambda i: arena[open_set[i]].estimate_full_cost)
        current_index = open_set[best]
        current = arena[current_index]

        if current.position == goal:
            path = _reconstruct(arena, current_index)
            if debug_enabled("DEBUG_PATH"):
                log_success(
                    f"[Path] {start} -> {goal}: {len(path) - 1} steps, {expanded} nodes expanded"
                )
            return path

        del open_set[best]
        closed.add(current.position)
        expanded += 1

        for neighbor in grid.neighbors4(*current.position):
            if not grid.is_passable(*neighbor) or neighbor in closed:
                continue

            cost = current.cost_from_start + STEP_COST
            existing = next((i for i in open_set if arena[i].position == neighbor), None)
            if existing is None:
                arena.append(PathNode(neighbor, cost, current_index, manhattan_distance(neighbor, goal)))
                open_set.append(len(arena) - 1)
            elif arena[existing].cost_from_start > cost:
                arena[existing].cost_from_start = cost
                arena[existing].parent = current_index

        if debug_enabled("DEBUG_PATH"):
            log_search(f"[Path] expanded {current.position} open={len(open_set)}")

    if debug_enabled("DEBUG_PATH"):
        log_error(f"[Path] {start} -> {goal}: unreachable after {expanded} expansions")
    return None


def trace_path(
    grid: Grid,
    start: Coordinate,
    goal: Coordinate,
    visitor: Optional[Visitor] = None,
) -> List[Coordinate]:
    """Find a path and offer each of its coordinates to ``visitor``.

    Returns an empty list when no path exists. A STOP signal only ends the
    offering loop; the full path is returned regardless.
    """
    path = find_path(grid, start, goal)
    if path is None:
        return []

    for point in path:
        if offer(visitor, point) is TraceSignal.STOP:
            break

    return path
