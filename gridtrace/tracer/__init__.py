"""Stateless trace algorithms for gridtrace.

Lines, circles and field-of-view sets are produced by walking the integer
lattice and offering every new coordinate to an optional visitor.

``trace_path`` is implemented next to the Grid Store in
``gridtrace.environment.pathfinding`` because it needs a passability oracle.
It is re-exported here lazily; ``environment.grid`` imports this package, so
an eager import would be circular.
"""

from .signals import TraceSignal, Visitor, VisitedSet, offer
from .shapes import ring_points, trace_circle, trace_line
from .fov import trace_fov

__all__ = [
    "TraceSignal",
    "Visitor",
    "VisitedSet",
    "offer",
    "ring_points",
    "trace_line",
    "trace_circle",
    "trace_fov",
    "trace_path",
]


def __getattr__(name):
    if name == "trace_path":
        from ..environment.pathfinding import trace_path

        return trace_path
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
