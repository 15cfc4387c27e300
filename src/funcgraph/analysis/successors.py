"""Successor table construction.

Evaluates a transition function once per vertex, in ascending vertex order,
into the dense immutable table every other analysis pass reads.

Python 3.13+.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable

from funcgraph.constants import MAX_VERTEX_COUNT
from funcgraph.diagnostics import TransitionRangeError, VertexCountError
from funcgraph.diagnostics.templates import ErrorTemplate

__all__ = ["build_successor_table", "check_vertex_count"]

logger = logging.getLogger(__name__)


def check_vertex_count(count: int, limit: int = MAX_VERTEX_COUNT) -> int:
    """Validate a vertex count and return it as a plain int.

    Args:
        count: Requested number of vertices
        limit: Largest accepted count

    Returns:
        The count, normalized through ``operator.index``

    Raises:
        VertexCountError: If count is negative or exceeds limit
        TypeError: If count is not an integer
    """
    count = operator.index(count)
    if count < 0:
        raise VertexCountError(ErrorTemplate.vertex_count_negative(count), count=count)
    if count > limit:
        raise VertexCountError(
            ErrorTemplate.vertex_count_too_large(count, limit), count=count
        )
    return count


def build_successor_table(
    count: int,
    transition: Callable[[int], int],
    *,
    validate: bool = True,
) -> tuple[int, ...]:
    """Evaluate ``transition`` on every vertex ``0..count``.

    The transition function is called exactly once per vertex, in ascending
    order. With ``validate`` enabled, every output is checked to be an
    integer in ``0..count`` and the build fails fast on the first bad one.

    Args:
        count: Number of vertices (already validated by check_vertex_count)
        transition: Deterministic single-argument transition function
        validate: Check each output (default: True)

    Returns:
        Tuple where index ``v`` holds the successor of ``v``

    Raises:
        TransitionRangeError: If validate is True and an output is not an
            integer or lies outside ``0..count``

    Example:
        >>> build_successor_table(4, lambda v: (v + 1) % 4)
        (1, 2, 3, 0)
    """
    if not validate:
        logger.debug("Building %d successors without range validation", count)
        return tuple(map(transition, range(count)))

    table: list[int] = []
    for vertex in range(count):
        value = transition(vertex)
        # bool is an int subclass; reject it explicitly.
        if isinstance(value, bool):
            raise TransitionRangeError(
                ErrorTemplate.transition_not_integer(vertex, value),
                vertex=vertex,
                value=value,
            )
        try:
            succ = operator.index(value)
        except TypeError:
            raise TransitionRangeError(
                ErrorTemplate.transition_not_integer(vertex, value),
                vertex=vertex,
                value=value,
            ) from None
        if not 0 <= succ < count:
            raise TransitionRangeError(
                ErrorTemplate.transition_out_of_range(vertex, succ, count),
                vertex=vertex,
                value=succ,
            )
        table.append(succ)

    logger.debug("Built successor table for %d vertices", count)
    return tuple(table)
