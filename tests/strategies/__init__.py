"""Hypothesis strategies for funcgraph property-based testing.

Usage:
    from tests.strategies import successor_tables, table_with_vertex
    from tests.strategies.graph import rho_tables

Event-Emitting Strategies (HypoFuzz-Optimized):
    - successor_tables: Emits ``strategy=graph_{topology}``
"""

from .graph import (
    permutation_tables,
    rho_tables,
    step_counts,
    successor_tables,
    table_with_vertex,
)

__all__ = [
    "permutation_tables",
    "rho_tables",
    "step_counts",
    "successor_tables",
    "table_with_vertex",
]
