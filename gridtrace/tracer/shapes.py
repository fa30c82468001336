"""Line and circle tracing on the integer lattice."""

from __future__ import annotations

import math
from typing import Iterator, List, Optional

from ..config import Config
from ..schemas import Coordinate
from .signals import TraceSignal, Visitor, VisitedSet, offer


def ring_points(center: Coordinate, radius: int, samples: int) -> Iterator[Coordinate]:
    """Yield ``samples`` points spaced evenly over a full turn around ``center``.

    Offsets are ``radius * cos`` / ``radius * sin`` rounded half-to-even, so
    consecutive samples may land on the same cell. Callers deduplicate.
    """
    if samples <= 0:
        return
    cx, cy = center
    step = 2.0 * math.pi / samples
    for t in range(samples):
        angle = t * step
        yield cx + round(radius * math.cos(angle)), cy + round(radius * math.sin(angle))


def trace_line(
    start: Coordinate,
    end: Coordinate,
    visitor: Optional[Visitor] = None,
) -> List[Coordinate]:
    """Return the Bresenham line from ``start`` to ``end`` inclusive.

    Every new point is offered to ``visitor`` before it is recorded. A STOP
    signal ends the walk and leaves that point out of the result.

    Both error updates read the error value from before the step and are
    evaluated independently, which decides where the diagonal steps fall on
    ties. Changing either comparison changes line shapes.
    """
    x0, y0 = start
    x1, y1 = end

    if (x0, y0) == (x1, y1):
        # Nothing to abort on a single point, so the signal is not consulted.
        offer(visitor, (x0, y0))
        return [(x0, y0)]

    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    # Halve toward zero, as the reference lines were produced with.
    error = dx // 2 if dx > dy else -(dy // 2)

    visited = VisitedSet()
    while True:
        point = (x0, y0)
        if point not in visited:
            if offer(visitor, point) is TraceSignal.STOP:
                break
            visited.add(point)

        if point == (x1, y1):
            break

        error2 = error
        if error2 > -dx:
            error -= dy
            x0 += sx
        if error2 < dy:
            error += dx
            y0 += sy

    return visited.to_list()


def trace_circle(
    center: Coordinate,
    radius: int,
    visitor: Optional[Visitor] = None,
) -> List[Coordinate]:
    """Return an approximate circle outline around ``center``.

    Samples ``radius * Config.CIRCLE_SAMPLES_PER_RADIUS`` angles. This is not a
    midpoint rasterizer: small circles can have gaps between samples.
    Non-positive radii produce an empty outline.
    """
    if radius <= 0:
        return []

    visited = VisitedSet()
    for point in ring_points(center, radius, radius * Config.CIRCLE_SAMPLES_PER_RADIUS):
        if point in visited:
            continue
        if offer(visitor, point) is TraceSignal.STOP:
            break
        visited.add(point)

    return visited.to_list()
