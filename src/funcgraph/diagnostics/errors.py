"""funcgraph exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "FunctionalGraphError",
    "GraphConstructionError",
    "GraphQueryError",
    "StepCountError",
    "TransitionRangeError",
    "VertexCountError",
    "VertexIndexError",
]


class FunctionalGraphError(Exception):
    """Base exception for all funcgraph errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize FunctionalGraphError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GraphConstructionError(FunctionalGraphError):
    """Construction of a FunctionalGraph failed.

    No partially built graph is ever returned.
    """


class VertexCountError(GraphConstructionError, ValueError):
    """Vertex count is negative or exceeds the configured maximum."""

    def __init__(self, message: str | Diagnostic, *, count: int = 0) -> None:
        """Initialize VertexCountError.

        Args:
            message: Error message string OR Diagnostic object
            count: The rejected vertex count
        """
        super().__init__(message)
        self.count = count


class TransitionRangeError(GraphConstructionError, ValueError):
    """Transition function returned a value outside ``0..n``.

    Raised during the successor table build when validation is enabled.
    Non-integer results (including bool) are reported the same way.

    Attributes:
        vertex: The input vertex
        value: The value the transition function returned for it
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        vertex: int = 0,
        value: object = None,
    ) -> None:
        """Initialize TransitionRangeError.

        Args:
            message: Error message string OR Diagnostic object
            vertex: The input vertex
            value: The offending transition output
        """
        super().__init__(message)
        self.vertex = vertex
        self.value = value


class GraphQueryError(FunctionalGraphError):
    """Query against a constructed graph received invalid arguments."""


class VertexIndexError(GraphQueryError, IndexError):
    """Vertex id is outside ``0..n`` or is not an integer.

    Attributes:
        vertex: The rejected vertex id
    """

    def __init__(self, message: str | Diagnostic, *, vertex: object = 0) -> None:
        """Initialize VertexIndexError.

        Args:
            message: Error message string OR Diagnostic object
            vertex: The rejected vertex id
        """
        super().__init__(message)
        self.vertex = vertex


class StepCountError(GraphQueryError, ValueError):
    """Step count passed to kth_succ is negative or not an integer.

    Attributes:
        steps: The rejected step count
    """

    def __init__(self, message: str | Diagnostic, *, steps: object = 0) -> None:
        """Initialize StepCountError.

        Args:
            message: Error message string OR Diagnostic object
            steps: The rejected step count
        """
        super().__init__(message)
        self.steps = steps
