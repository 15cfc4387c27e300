"""Immutable functional graph with precomputed cycle structure.

A functional graph has vertices ``0..n`` and exactly one outgoing edge per
vertex. FunctionalGraph evaluates the transition function once, classifies
every vertex by the cycle it reaches, finds the source vertices, and then
answers queries from those tables only.

Thread Safety:
    Construction runs to completion before the object is visible. Afterwards
    nothing can be written, so concurrent reads need no locking.

Python 3.13+.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import NoReturn, final

from funcgraph.analysis import (
    CycleClassification,
    SourceSet,
    build_successor_table,
    check_vertex_count,
    classify_cycles,
    find_sources,
)
from funcgraph.config import DEFAULT_CONFIG, GraphConfig
from funcgraph.diagnostics import DiagnosticCode, StepCountError, VertexIndexError
from funcgraph.diagnostics.templates import ErrorTemplate
from funcgraph.enums import CycleOrder
from funcgraph.integrity import (
    ImmutabilityViolationError,
    IntegrityCheckFailedError,
    IntegrityContext,
)

__all__ = ["FunctionalGraph", "VertexPath", "build_graph"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class VertexPath:
    """Walk from a vertex until its cycle has been traversed once.

    Lazy and restartable: every ``iter()`` starts a fresh walk over the
    shared successor table. The first vertex is ``start`` itself and each
    cycle vertex appears exactly once. Paths compare and hash by the
    vertices they yield, whichever graph they came from.

    Attributes:
        start: First vertex of the walk
        length: Number of vertices yielded (tail length + cycle length)
    """

    start: int
    length: int
    _successors: tuple[int, ...] = field(repr=False)

    def __iter__(self) -> Iterator[int]:
        successors = self._successors
        vertex = self.start
        for _ in range(self.length):
            yield vertex
            vertex = successors[vertex]

    def __len__(self) -> int:
        return self.length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VertexPath):
            return NotImplemented
        return self.length == other.length and tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash(tuple(self))


@final
class FunctionalGraph:
    """Functional graph over vertices ``0..n``, analyzed at construction.

    Each cycle is identified by its representative, the smallest vertex on
    it. The transition function must map ``0..n`` into ``0..n`` and be
    deterministic; by default out-of-range output raises TransitionRangeError.

    Example:
        >>> graph = FunctionalGraph(5, [1, 2, 3, 1, 2].__getitem__)
        >>> graph.cycle_count(), list(graph.cycles()), graph.cycle_len_of(0)
        (1, [1], 3)
        >>> list(graph.path_from(4))
        [4, 2, 3, 1]
        >>> list(graph.sources())
        [0, 4]
    """

    __slots__ = (
        "_classification",
        "_config",
        "_count",
        "_cycle_listing",
        "_frozen",
        "_sources",
        "_successors",
    )

    _classification: CycleClassification
    _config: GraphConfig
    _count: int
    _cycle_listing: tuple[int, ...]
    _frozen: bool
    _sources: SourceSet
    _successors: tuple[int, ...]

    def __init__(
        self,
        n: int,
        transition: Callable[[int], int],
        *,
        config: GraphConfig | None = None,
    ) -> None:
        """Build the graph and all of its tables.

        Args:
            n: Number of vertices
            transition: Deterministic function mapping ``0..n`` into ``0..n``;
                called exactly once per vertex in ascending order
            config: Construction options (default: GraphConfig())

        Raises:
            VertexCountError: If n is negative or above config.max_vertex_count
            TransitionRangeError: If validation is enabled and the transition
                function returns an invalid vertex
        """
        config = config if config is not None else DEFAULT_CONFIG
        count = check_vertex_count(n, config.max_vertex_count)
        if not config.validate_transitions:
            logger.warning(
                "Transition validation disabled for %d vertices; "
                "out-of-range output is undefined behavior",
                count,
            )
        successors = build_successor_table(
            count, transition, validate=config.validate_transitions
        )

        if config.parallel_sources:
            with ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="funcgraph-sources"
            ) as pool:
                logger.debug("Finding sources on worker thread")
                pending = pool.submit(find_sources, successors)
                classification = classify_cycles(successors)
                sources = pending.result()
        else:
            classification = classify_cycles(successors)
            sources = find_sources(successors)

        if config.cycle_order == CycleOrder.REPRESENTATIVE:
            cycle_listing = tuple(sorted(classification.representatives))
        else:
            cycle_listing = classification.representatives

        object.__setattr__(self, "_config", config)
        object.__setattr__(self, "_count", count)
        object.__setattr__(self, "_successors", successors)
        object.__setattr__(self, "_classification", classification)
        object.__setattr__(self, "_sources", sources)
        object.__setattr__(self, "_cycle_listing", cycle_listing)
        object.__setattr__(self, "_frozen", True)

        logger.info(
            "Built functional graph: %d vertices, %d cycles, %d sources",
            count,
            classification.cycle_count,
            sources.count,
        )

    @classmethod
    def from_successors(
        cls,
        successors: Iterable[int],
        *,
        config: GraphConfig | None = None,
    ) -> FunctionalGraph:
        """Build a graph from an explicit successor list.

        Args:
            successors: ``successors[v]`` is the out-neighbor of ``v``
            config: Construction options (default: GraphConfig())

        Returns:
            New FunctionalGraph with ``len(successors)`` vertices
        """
        table = tuple(successors)
        return cls(len(table), table.__getitem__, config=config)

    def __setattr__(self, name: str, value: object) -> None:
        """Reject all attribute mutations.

        Raises:
            ImmutabilityViolationError: Always, once construction finished
        """
        if getattr(self, "_frozen", False):
            msg = f"Cannot modify FunctionalGraph attribute: {name}"
            raise ImmutabilityViolationError(
                msg, IntegrityContext(component="graph", operation="mutate", key=name)
            )
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Reject all attribute deletions.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"Cannot delete FunctionalGraph attribute: {name}"
        raise ImmutabilityViolationError(
            msg, IntegrityContext(component="graph", operation="delete", key=name)
        )

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return (
            f"FunctionalGraph(n={self._count}, cycles={self._classification.cycle_count}, "
            f"sources={self._sources.count})"
        )

    def _check_vertex(self, vertex: int) -> int:
        if isinstance(vertex, bool):
            raise VertexIndexError(ErrorTemplate.vertex_not_integer(vertex), vertex=vertex)
        try:
            index = operator.index(vertex)
        except TypeError:
            raise VertexIndexError(
                ErrorTemplate.vertex_not_integer(vertex), vertex=vertex
            ) from None
        if not 0 <= index < self._count:
            raise VertexIndexError(
                ErrorTemplate.vertex_out_of_range(index, self._count), vertex=index
            )
        return index

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def config(self) -> GraphConfig:
        """Configuration the graph was built with."""
        return self._config

    @property
    def successors(self) -> tuple[int, ...]:
        """The full successor table."""
        return self._successors

    def node_count(self) -> int:
        """Number of vertices, which equals the number of edges."""
        return self._count

    def succ(self, v: int) -> int:
        """Vertex reached from ``v`` by following one edge."""
        return self._successors[self._check_vertex(v)]

    def kth_succ(self, v: int, k: int) -> int:
        """Vertex reached from ``v`` by following ``k`` edges.

        Laps around the cycle are skipped with a modulo, so the walk is at
        most tail length + cycle length steps however large ``k`` is.

        Raises:
            VertexIndexError: If v is not a vertex
            StepCountError: If k is negative or not an integer
        """
        vertex = self._check_vertex(v)
        if isinstance(k, bool):
            raise StepCountError(ErrorTemplate.step_count_not_integer(k), steps=k)
        try:
            k = operator.index(k)
        except TypeError:
            raise StepCountError(ErrorTemplate.step_count_not_integer(k), steps=k) from None
        if k < 0:
            raise StepCountError(ErrorTemplate.step_count_negative(k), steps=k)

        tail = self._classification.tail_lengths[vertex]
        if k >= tail:
            k = tail + (k - tail) % self.cycle_len_of(vertex)

        successors = self._successors
        for _ in range(k):
            vertex = successors[vertex]
        return vertex

    def path_from(self, v: int) -> VertexPath:
        """Walk from ``v`` through its tail and once around its cycle.

        The returned sequence has ``noncycle_len_of(v) + cycle_len_of(v)``
        vertices, starts with ``v`` and stops one edge before repeating.
        """
        vertex = self._check_vertex(v)
        length = self._classification.tail_lengths[vertex] + self.cycle_len_of(vertex)
        return VertexPath(vertex, length, self._successors)

    # ------------------------------------------------------------------
    # Cycles
    # ------------------------------------------------------------------

    def cycle_count(self) -> int:
        """Number of cycles, which equals the number of weakly connected components."""
        return self._classification.cycle_count

    def cycles(self) -> Iterator[int]:
        """Representatives of all cycles, in the configured CycleOrder."""
        return iter(self._cycle_listing)

    def cycle_of(self, v: int) -> int:
        """Representative of the cycle that ``v`` reaches."""
        cycle_id = self._classification.cycle_ids[self._check_vertex(v)]
        return self._classification.representatives[cycle_id]

    def cycle_len_of(self, v: int) -> int:
        """Number of vertices on the cycle that ``v`` reaches."""
        cycle_id = self._classification.cycle_ids[self._check_vertex(v)]
        return self._classification.lengths[cycle_id]

    def noncycle_len_of(self, v: int) -> int:
        """Edges from ``v`` to its cycle (0 when ``v`` is on the cycle)."""
        return self._classification.tail_lengths[self._check_vertex(v)]

    def on_cycle(self, v: int) -> bool:
        """True if ``v`` lies on a cycle."""
        return self.noncycle_len_of(v) == 0

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    def source_count(self) -> int:
        """Number of vertices with no incoming edge."""
        return self._sources.count

    def sources(self) -> Iterator[int]:
        """All source vertices in ascending order."""
        return iter(self._sources.sources)

    def is_source(self, v: int) -> bool:
        """True if no vertex has ``v`` as its successor."""
        return self._sources.flags[self._check_vertex(v)]

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------

    def verify(self) -> None:
        """Re-check the classification tables against the successor table.

        Raises:
            IntegrityCheckFailedError: On the first violated invariant; the
                context key names the DiagnosticCode of the failed check
        """
        count = self._count
        successors = self._successors
        result = self._classification
        representatives = result.representatives
        lengths = result.lengths
        cycle_ids = result.cycle_ids
        tails = result.tail_lengths

        vertex_tables = (len(successors), len(cycle_ids), len(tails), len(self._sources.flags))
        if any(size != count for size in vertex_tables) or len(lengths) != len(representatives):
            _fail(
                DiagnosticCode.TABLE_LENGTH_MISMATCH,
                "Table sizes disagree with vertex count",
                expected=str(count),
                actual=str(vertex_tables),
            )

        members = [0] * len(representatives)
        in_degree = [0] * count
        for vertex in range(count):
            succ = successors[vertex]
            in_degree[succ] += 1
            cycle_id = cycle_ids[vertex]
            if cycle_ids[succ] != cycle_id:
                _fail(
                    DiagnosticCode.TAIL_LENGTH_INCONSISTENT,
                    "Vertex and successor reach different cycles",
                    vertex=vertex,
                    expected=str(cycle_id),
                    actual=str(cycle_ids[succ]),
                )
            expected_tail = max(tails[vertex] - 1, 0)
            if tails[succ] != expected_tail:
                _fail(
                    DiagnosticCode.TAIL_LENGTH_INCONSISTENT,
                    "Successor tail length is not one less",
                    vertex=vertex,
                    expected=str(expected_tail),
                    actual=str(tails[succ]),
                )
            if tails[vertex] == 0:
                members[cycle_id] += 1
                if representatives[cycle_id] > vertex:
                    _fail(
                        DiagnosticCode.REPRESENTATIVE_NOT_MINIMAL,
                        "Cycle member is smaller than its representative",
                        vertex=vertex,
                        expected=f"<= {vertex}",
                        actual=str(representatives[cycle_id]),
                    )

        for cycle_id, representative in enumerate(representatives):
            if tails[representative] != 0 or cycle_ids[representative] != cycle_id:
                _fail(
                    DiagnosticCode.REPRESENTATIVE_OFF_CYCLE,
                    "Representative is not on its own cycle",
                    vertex=representative,
                )
            if members[cycle_id] != lengths[cycle_id]:
                _fail(
                    DiagnosticCode.CYCLE_PARTITION_MISMATCH,
                    "Cycle length disagrees with its member count",
                    vertex=representative,
                    expected=str(lengths[cycle_id]),
                    actual=str(members[cycle_id]),
                )

        for vertex in range(count):
            if self._sources.flags[vertex] != (in_degree[vertex] == 0):
                _fail(
                    DiagnosticCode.SOURCE_FLAG_MISMATCH,
                    "Source flag disagrees with in-degree",
                    vertex=vertex,
                    expected=str(in_degree[vertex] == 0),
                    actual=str(self._sources.flags[vertex]),
                )

        logger.debug("Verified functional graph with %d vertices", count)


def _fail(
    code: DiagnosticCode,
    message: str,
    *,
    vertex: int | None = None,
    expected: str | None = None,
    actual: str | None = None,
) -> NoReturn:
    raise IntegrityCheckFailedError(
        message,
        IntegrityContext(
            component="graph",
            operation="verify",
            key=code.name,
            expected=expected,
            actual=actual,
            vertex=vertex,
        ),
    )


def build_graph(
    n: int,
    transition: Callable[[int], int],
    *,
    config: GraphConfig | None = None,
) -> FunctionalGraph:
    """Factory for FunctionalGraph.

    Args:
        n: Number of vertices
        transition: Deterministic function mapping ``0..n`` into ``0..n``
        config: Construction options (default: GraphConfig())

    Returns:
        Fully analyzed, immutable FunctionalGraph
    """
    return FunctionalGraph(n, transition, config=config)
