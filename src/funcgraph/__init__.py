"""funcgraph - Cycle structure of functional graphs.

Maps the state space of a deterministic transition function on ``0..n``:
which cycle every state falls into, how far it is from that cycle, and
which states can never be reached. Built for exhaustively surveying small
pseudo-random generators such as the 16-bit generators of retro games.

Public API:
    FunctionalGraph - Immutable graph analyzed at construction
    build_graph - Factory for FunctionalGraph
    GraphConfig - Construction options
    CycleOrder - Order of FunctionalGraph.cycles()

Exceptions:
    FunctionalGraphError - Base exception class
    GraphConstructionError - Construction failed (vertex count, transition range)
    GraphQueryError - Invalid query arguments (vertex id, step count)

Submodules:
    funcgraph.analysis - Successor table, cycle classifier, source finder
    funcgraph.rng - Retro game generator transition functions
    funcgraph.report - Survey summaries and rendering
    funcgraph.diagnostics - Error types and diagnostic formatting
    funcgraph.integrity - System-failure exceptions
"""

from .config import GraphConfig
from .diagnostics import (
    FunctionalGraphError,
    GraphConstructionError,
    GraphQueryError,
    StepCountError,
    TransitionRangeError,
    VertexCountError,
    VertexIndexError,
)
from .enums import CycleOrder
from .graph import FunctionalGraph, VertexPath, build_graph

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("funcgraph")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CycleOrder",
    "FunctionalGraph",
    "FunctionalGraphError",
    "GraphConfig",
    "GraphConstructionError",
    "GraphQueryError",
    "StepCountError",
    "TransitionRangeError",
    "VertexCountError",
    "VertexIndexError",
    "VertexPath",
    "__version__",
    "build_graph",
]
