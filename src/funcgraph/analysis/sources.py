"""Source vertex detection.

A source is a vertex with no incoming edge: a generator state that can
only ever be a seed, never the result of a step.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["SourceSet", "find_sources"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourceSet:
    """Vertices with in-degree zero.

    Attributes:
        sources: Source vertices in ascending order
        flags: ``flags[v]`` is True iff ``v`` is a source
    """

    sources: tuple[int, ...]
    flags: tuple[bool, ...]

    @property
    def count(self) -> int:
        """Number of source vertices."""
        return len(self.sources)

    def __contains__(self, vertex: object) -> bool:
        if not isinstance(vertex, int) or isinstance(vertex, bool):
            return False
        return 0 <= vertex < len(self.flags) and self.flags[vertex]


def find_sources(successors: Sequence[int]) -> SourceSet:
    """Find every vertex that never appears in the successor table.

    Args:
        successors: ``successors[v]`` is the out-neighbor of ``v``

    Returns:
        SourceSet with ascending sources

    Example:
        >>> find_sources([1, 2, 3, 1, 2]).sources
        (0, 4)
    """
    flags = [True] * len(successors)
    for succ in successors:
        flags[succ] = False

    sources = tuple(vertex for vertex, is_source in enumerate(flags) if is_source)
    logger.debug("Found %d sources among %d vertices", len(sources), len(flags))
    return SourceSet(sources=sources, flags=tuple(flags))
