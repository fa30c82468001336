"""Field-of-view tracing by radial ray casting."""

from __future__ import annotations

from typing import List, Optional

from ..config import Config
from ..logging_utils import debug_enabled, log_trace
from ..schemas import Coordinate
from .shapes import ring_points, trace_line
from .signals import TraceSignal, Visitor, VisitedSet, offer


def trace_fov(
    center: Coordinate,
    radius: int,
    visitor: Optional[Visitor] = None,
) -> List[Coordinate]:
    """Return every coordinate reached by rays cast from ``center``.

    ``center`` is offered first; if the visitor stops on it no rays are cast and
    the result is empty. Afterwards ``radius * Config.FOV_RAYS_PER_RADIUS`` rays
    are walked with ``trace_line`` towards points on the circle of ``radius``.

    The visited set is shared by all rays: a cell already seen by an earlier ray
    is skipped silently and the ray walks on through it. A STOP from ``visitor``
    halts the current ray only, and the stopping cell is not recorded, so a
    later ray reaching the same cell offers it again and is stopped there too.
    That is how occluders keep blocking every ray that hits them.
    """
    visited = VisitedSet()

    if offer(visitor, center) is TraceSignal.STOP:
        return visited.to_list()
    visited.add(center)

    def ray_visitor(point: Coordinate) -> TraceSignal:
        if point in visited:
            return TraceSignal.CONTINUE
        if offer(visitor, point) is TraceSignal.STOP:
            return TraceSignal.STOP
        visited.add(point)
        return TraceSignal.CONTINUE

    rays = max(radius, 0) * Config.FOV_RAYS_PER_RADIUS
    for endpoint in ring_points(center, radius, rays):
        trace_line(center, endpoint, ray_visitor)

    if debug_enabled("DEBUG_FOV"):
        log_trace(f"[FOV] origin={center} radius={radius} rays={rays} visited={len(visited)}")

    return visited.to_list()
