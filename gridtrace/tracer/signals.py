"""Visitor protocol shared by every trace algorithm.

Each newly generated coordinate is offered to an optional visitor, which may
ask the tracer to keep going or to stop. Returning ``None`` is treated as
``TraceSignal.CONTINUE`` so simple lambdas and bound setters work unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterator, List, Optional, Set

from ..schemas import Coordinate


class TraceSignal(Enum):
    """Control signal returned by a visitor."""

    CONTINUE = "continue"
    # Reserved for visitors that want to flag a point without stopping.
    # Tracers currently treat it exactly like CONTINUE.
    SPECIAL = "special"
    STOP = "stop"


Visitor = Callable[[Coordinate], Optional[TraceSignal]]


def offer(visitor: Optional[Visitor], point: Coordinate) -> TraceSignal:
    """Offer ``point`` to ``visitor`` and normalize the answer."""
    if visitor is None:
        return TraceSignal.CONTINUE
    signal = visitor(point)
    if signal is None:
        return TraceSignal.CONTINUE
    return signal


class VisitedSet:
    """Insertion-ordered coordinate set with O(1) membership checks."""

    def __init__(self) -> None:
        self._order: List[Coordinate] = []
        self._seen: Set[Coordinate] = set()

    def __contains__(self, point: object) -> bool:
        return point in self._seen

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._order)

    def add(self, point: Coordinate) -> None:
        if point in self._seen:
            return
        self._seen.add(point)
        self._order.append(point)

    def to_list(self) -> List[Coordinate]:
        return list(self._order)
