"""Property-based tests for FunctionalGraph queries."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from funcgraph import CycleOrder, FunctionalGraph, GraphConfig
from tests.helpers.oracle import naive_kth, naive_sources, naive_vertex
from tests.strategies import step_counts, successor_tables, table_with_vertex


class TestCycleMembershipProperties:
    """Every vertex reaches exactly one cycle."""

    @given(case=table_with_vertex())
    def test_walk_returns_to_tail_boundary(self, case: tuple[list[int], int]) -> None:
        """PROPERTY: tail steps then cycle_len steps returns to the boundary vertex."""
        successors, vertex = case
        graph = FunctionalGraph.from_successors(successors)
        boundary = naive_kth(successors, vertex, graph.noncycle_len_of(vertex))
        assert graph.on_cycle(boundary)
        assert naive_kth(successors, boundary, graph.cycle_len_of(vertex)) == boundary

    @given(case=table_with_vertex())
    def test_boundary_not_reached_earlier(self, case: tuple[list[int], int]) -> None:
        """PROPERTY: Vertices before the tail boundary are all off-cycle."""
        successors, vertex = case
        graph = FunctionalGraph.from_successors(successors)
        current = vertex
        for _ in range(graph.noncycle_len_of(vertex)):
            assert not graph.on_cycle(current)
            current = successors[current]

    @given(successors=successor_tables())
    def test_representative_is_minimum(self, successors: list[int]) -> None:
        """PROPERTY: Representative <= every member of its cycle."""
        graph = FunctionalGraph.from_successors(successors)
        for vertex in range(len(successors)):
            if graph.on_cycle(vertex):
                assert graph.cycle_of(vertex) <= vertex

    @given(successors=successor_tables())
    def test_partition_sums_to_vertex_count(self, successors: list[int]) -> None:
        """PROPERTY: sum(cycle lengths) + count(tail > 0) == n."""
        graph = FunctionalGraph.from_successors(successors)
        cycle_total = sum(graph.cycle_len_of(r) for r in graph.cycles())
        tail_total = sum(1 for v in range(len(successors)) if graph.noncycle_len_of(v) > 0)
        assert cycle_total + tail_total == graph.node_count()

    @given(successors=successor_tables())
    def test_matches_naive_analysis(self, successors: list[int]) -> None:
        """PROPERTY: Queries agree with an independent naive walk."""
        graph = FunctionalGraph.from_successors(successors)
        for vertex in range(len(successors)):
            expected = naive_vertex(successors, vertex)
            assert graph.noncycle_len_of(vertex) == expected.tail_length
            assert graph.cycle_of(vertex) == expected.representative
            assert graph.cycle_len_of(vertex) == len(expected.cycle)

    @given(successors=successor_tables())
    def test_verify_accepts_every_constructed_graph(self, successors: list[int]) -> None:
        """PROPERTY: Freshly built tables always pass verification."""
        FunctionalGraph.from_successors(successors).verify()


class TestKthSuccessorProperties:
    """k-th successor with lap skipping."""

    @given(case=table_with_vertex(max_nodes=25), k=st.integers(min_value=0, max_value=200))
    def test_matches_naive_stepping(self, case: tuple[list[int], int], k: int) -> None:
        """PROPERTY: kth_succ equals stepping k times."""
        successors, vertex = case
        graph = FunctionalGraph.from_successors(successors)
        assert graph.kth_succ(vertex, k) == naive_kth(successors, vertex, k)

    @given(case=table_with_vertex(), k=step_counts)
    def test_large_k_reduces_by_cycle_length(self, case: tuple[list[int], int], k: int) -> None:
        """PROPERTY: Adding whole laps past the tail does not change the result."""
        successors, vertex = case
        graph = FunctionalGraph.from_successors(successors)
        tail = graph.noncycle_len_of(vertex)
        lap = graph.cycle_len_of(vertex)
        k = max(k, tail)
        assert graph.kth_succ(vertex, k) == graph.kth_succ(vertex, k + lap * 3_000_000_000)

    @given(case=table_with_vertex())
    def test_huge_k_lands_on_cycle(self, case: tuple[list[int], int]) -> None:
        """PROPERTY: k far beyond n always ends on the vertex's cycle."""
        successors, vertex = case
        graph = FunctionalGraph.from_successors(successors)
        target = graph.kth_succ(vertex, 3 * 10**9)
        assert graph.on_cycle(target)
        assert graph.cycle_of(target) == graph.cycle_of(vertex)


class TestPathProperties:
    """path_from sequences."""

    @given(case=table_with_vertex())
    def test_length_and_uniqueness(self, case: tuple[list[int], int]) -> None:
        """PROPERTY: Path has tail + cycle vertices, all distinct, following successors."""
        successors, vertex = case
        graph = FunctionalGraph.from_successors(successors)
        path = list(graph.path_from(vertex))
        assert len(path) == graph.noncycle_len_of(vertex) + graph.cycle_len_of(vertex)
        assert len(set(path)) == len(path)
        assert path[0] == vertex
        for current, following in zip(path, path[1:], strict=False):
            assert successors[current] == following
        # One more step closes the loop onto the first cycle vertex.
        assert successors[path[-1]] == path[graph.noncycle_len_of(vertex)]


class TestSourceProperties:
    """Source accessors."""

    @given(successors=successor_tables())
    def test_source_iff_not_in_image(self, successors: list[int]) -> None:
        """PROPERTY: is_source(v) iff v never appears in the successor table."""
        graph = FunctionalGraph.from_successors(successors)
        expected = naive_sources(successors)
        assert list(graph.sources()) == expected
        assert graph.source_count() == len(expected)
        for vertex in range(len(successors)):
            assert graph.is_source(vertex) == (vertex in expected)


class TestDeterminismProperties:
    """Construction is a pure function of (n, f)."""

    @given(successors=successor_tables())
    @settings(max_examples=100)
    def test_rebuild_identical(self, successors: list[int]) -> None:
        """PROPERTY: Building twice yields identical observable tables."""
        first = FunctionalGraph.from_successors(successors)
        second = FunctionalGraph.from_successors(successors)
        vertices = range(len(successors))
        assert list(first.cycles()) == list(second.cycles())
        assert [first.cycle_of(v) for v in vertices] == [second.cycle_of(v) for v in vertices]
        assert [first.noncycle_len_of(v) for v in vertices] == [
            second.noncycle_len_of(v) for v in vertices
        ]
        assert list(first.sources()) == list(second.sources())

    @given(successors=successor_tables())
    @settings(max_examples=100)
    def test_cycle_orders_hold_same_cycles(self, successors: list[int]) -> None:
        """PROPERTY: Representative order is the sorted discovery order."""
        discovery = FunctionalGraph.from_successors(successors)
        by_repr = FunctionalGraph.from_successors(
            successors, config=GraphConfig(cycle_order=CycleOrder.REPRESENTATIVE)
        )
        assert list(by_repr.cycles()) == sorted(discovery.cycles())
