"""Construction configuration for FunctionalGraph.

Provides a single frozen dataclass that encapsulates every construction
parameter, so FunctionalGraph and the retro generator helpers share one
typed object instead of repeating keyword arguments.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from funcgraph.constants import MAX_VERTEX_COUNT
from funcgraph.enums import CycleOrder

__all__ = ["DEFAULT_CONFIG", "GraphConfig"]


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Immutable configuration for FunctionalGraph construction.

    All fields have sensible defaults; ``GraphConfig()`` with no arguments
    produces the standard behavior.

    Attributes:
        validate_transitions: Raise TransitionRangeError when the transition
            function returns a non-int or a value outside ``0..n``
            (default: True). When False, such output is undefined behavior.
        parallel_sources: Run the source finder on a worker thread while the
            cycle classifier runs (default: False).
        cycle_order: Order of FunctionalGraph.cycles() (default: discovery).
        max_vertex_count: Largest vertex count accepted (default: 2**26).

    Example:
        >>> from funcgraph import FunctionalGraph, GraphConfig
        >>> from funcgraph.enums import CycleOrder
        >>> config = GraphConfig(cycle_order=CycleOrder.REPRESENTATIVE)
        >>> graph = FunctionalGraph(4, lambda v: 3 - v, config=config)
        >>> list(graph.cycles())
        [0, 1]
    """

    validate_transitions: bool = True
    parallel_sources: bool = False
    cycle_order: CycleOrder = CycleOrder.DISCOVERY
    max_vertex_count: int = MAX_VERTEX_COUNT

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_vertex_count is not positive or cycle_order
                is not a CycleOrder value.
        """
        if self.max_vertex_count <= 0:
            msg = "max_vertex_count must be positive"
            raise ValueError(msg)
        # Accept plain strings ("representative") by normalizing to the enum.
        try:
            order = CycleOrder(self.cycle_order)
        except ValueError:
            msg = f"cycle_order must be one of {[o.value for o in CycleOrder]}"
            raise ValueError(msg) from None
        object.__setattr__(self, "cycle_order", order)


DEFAULT_CONFIG = GraphConfig()
