"""Diagnostic system for funcgraph errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FunctionalGraphError,
    GraphConstructionError,
    GraphQueryError,
    StepCountError,
    TransitionRangeError,
    VertexCountError,
    VertexIndexError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FunctionalGraphError",
    "GraphConstructionError",
    "GraphQueryError",
    "OutputFormat",
    "StepCountError",
    "TransitionRangeError",
    "VertexCountError",
    "VertexIndexError",
]
