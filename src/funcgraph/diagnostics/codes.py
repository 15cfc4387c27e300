"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Construction errors (vertex count, transition function)
        2000-2999: Query errors (vertex ids, step counts)
        3000-3999: Integrity errors (table verification)
    """

    # Construction errors (1000-1999)
    VERTEX_COUNT_NEGATIVE = 1001
    VERTEX_COUNT_TOO_LARGE = 1002
    TRANSITION_OUT_OF_RANGE = 1003
    TRANSITION_NOT_INTEGER = 1004

    # Query errors (2000-2999)
    VERTEX_OUT_OF_RANGE = 2001
    STEP_COUNT_NEGATIVE = 2002
    VERTEX_NOT_INTEGER = 2003
    STEP_COUNT_NOT_INTEGER = 2004

    # Integrity errors (3000-3999)
    TABLE_LENGTH_MISMATCH = 3001
    REPRESENTATIVE_NOT_MINIMAL = 3002
    TAIL_LENGTH_INCONSISTENT = 3003
    CYCLE_PARTITION_MISMATCH = 3004
    SOURCE_FLAG_MISMATCH = 3005
    REPRESENTATIVE_OFF_CYCLE = 3006


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        vertex: Vertex id involved in the error (None if not applicable)
        value: Offending value, e.g. a transition output or step count
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    vertex: int | None = None
    value: object = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[TRANSITION_OUT_OF_RANGE]: Transition f(3) = 9 is outside 0..5
              --> vertex 3
              = value: 9
              = help: The transition function must map 0..n into 0..n

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
