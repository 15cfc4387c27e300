"""Cycle classification for functional graphs.

Every vertex of a functional graph eventually reaches exactly one cycle.
This module computes, in a single linear pass, which cycle each vertex
reaches and how many edges separate it from that cycle.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

__all__ = ["CycleClassification", "classify_cycles"]

logger = logging.getLogger(__name__)


class _VertexState(IntEnum):
    """Traversal state stored per vertex in a flat bytearray."""

    UNVISITED = 0
    VISITING = 1  # On the path buffer of the current walk
    VISITED = 2  # Cycle id and tail length assigned


@dataclass(frozen=True, slots=True)
class CycleClassification:
    """Result of classify_cycles.

    Cycle records are parallel tuples indexed by a dense internal cycle id;
    vertex records are parallel tuples indexed by vertex.

    Attributes:
        representatives: Minimum vertex of each cycle, by cycle id
        lengths: Number of vertices on each cycle, by cycle id (always >= 1)
        cycle_ids: Cycle id reached by each vertex
        tail_lengths: Edges from each vertex to its cycle (0 on the cycle)
    """

    representatives: tuple[int, ...]
    lengths: tuple[int, ...]
    cycle_ids: tuple[int, ...]
    tail_lengths: tuple[int, ...]

    @property
    def cycle_count(self) -> int:
        """Number of distinct cycles."""
        return len(self.representatives)


def classify_cycles(successors: Sequence[int]) -> CycleClassification:
    """Partition the vertices of a functional graph by the cycle they reach.

    Walks forward from each unvisited vertex in ascending order, pushing
    vertices onto a path buffer until the walk meets a vertex that is not
    unvisited. Meeting a vertex of the current walk closes a new cycle;
    meeting a finished vertex merges into already classified territory. The
    remaining path is then unwound, each vertex one edge further from the
    cycle than its successor.

    Every vertex moves UNVISITED -> VISITING -> VISITED exactly once.

    Args:
        successors: ``successors[v]`` is the out-neighbor of ``v``; every
            value must lie in ``0..len(successors)``

    Returns:
        CycleClassification with cycles in discovery order

    Complexity:
        Time: O(n)
        Space: O(n) for the state array and path buffer

    Example:
        >>> result = classify_cycles([1, 2, 3, 1, 2])
        >>> result.representatives, result.lengths
        ((1,), (3,))
        >>> result.tail_lengths
        (1, 0, 0, 0, 1)
    """
    count = len(successors)
    representatives: list[int] = []
    lengths: list[int] = []
    cycle_ids = [-1] * count
    tail_lengths = [-1] * count
    states = bytearray(count)

    for start in range(count):
        if states[start] != _VertexState.UNVISITED:
            continue

        path: list[int] = []
        vertex = start
        while states[vertex] == _VertexState.UNVISITED:
            path.append(vertex)
            states[vertex] = _VertexState.VISITING
            vertex = successors[vertex]
        end = vertex

        if states[end] == _VertexState.VISITING:
            # end lies on the current path: everything from end onward is a new cycle.
            cycle_id = len(representatives)
            representative = end
            length = 0
            while True:
                member = path.pop()
                states[member] = _VertexState.VISITED
                cycle_ids[member] = cycle_id
                tail_lengths[member] = 0
                representative = min(representative, member)
                length += 1
                if member == end:
                    break
            representatives.append(representative)
            lengths.append(length)
            tail = 0
        else:
            cycle_id = cycle_ids[end]
            tail = tail_lengths[end]

        while path:
            member = path.pop()
            states[member] = _VertexState.VISITED
            tail += 1
            cycle_ids[member] = cycle_id
            tail_lengths[member] = tail

    logger.debug("Classified %d vertices into %d cycles", count, len(representatives))
    return CycleClassification(
        representatives=tuple(representatives),
        lengths=tuple(lengths),
        cycle_ids=tuple(cycle_ids),
        tail_lengths=tuple(tail_lengths),
    )
