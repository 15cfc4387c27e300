"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    _DOCS_FUNCTIONAL_GRAPH = "https://en.wikipedia.org/wiki/Pseudoforest"

    @staticmethod
    def vertex_count_negative(count: int) -> Diagnostic:
        """Vertex count below zero.

        Args:
            count: The rejected vertex count

        Returns:
            Diagnostic for VERTEX_COUNT_NEGATIVE
        """
        return Diagnostic(
            code=DiagnosticCode.VERTEX_COUNT_NEGATIVE,
            message=f"Vertex count must be >= 0, got {count}",
            hint="Pass the size of the state space, e.g. 0x10000 for a 16-bit generator",
            value=count,
        )

    @staticmethod
    def vertex_count_too_large(count: int, limit: int) -> Diagnostic:
        """Vertex count above GraphConfig.max_vertex_count.

        Args:
            count: The rejected vertex count
            limit: The configured maximum

        Returns:
            Diagnostic for VERTEX_COUNT_TOO_LARGE
        """
        return Diagnostic(
            code=DiagnosticCode.VERTEX_COUNT_TOO_LARGE,
            message=f"Vertex count {count} exceeds the configured maximum {limit}",
            hint="Raise GraphConfig.max_vertex_count if the state space really is this large",
            value=count,
        )

    @staticmethod
    def transition_out_of_range(vertex: int, value: int, count: int) -> Diagnostic:
        """Transition function output outside 0..n.

        Args:
            vertex: Input vertex
            value: Value returned by the transition function
            count: Vertex count n

        Returns:
            Diagnostic for TRANSITION_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.TRANSITION_OUT_OF_RANGE,
            message=f"Transition f({vertex}) = {value} is outside 0..{count}",
            hint="The transition function must map 0..n into 0..n; check bit width and wraparound",
            help_url=ErrorTemplate._DOCS_FUNCTIONAL_GRAPH,
            vertex=vertex,
            value=value,
        )

    @staticmethod
    def transition_not_integer(vertex: int, value: object) -> Diagnostic:
        """Transition function output is not an int.

        Args:
            vertex: Input vertex
            value: Value returned by the transition function

        Returns:
            Diagnostic for TRANSITION_NOT_INTEGER
        """
        return Diagnostic(
            code=DiagnosticCode.TRANSITION_NOT_INTEGER,
            message=f"Transition f({vertex}) returned {type(value).__name__}, expected int",
            hint="Return a plain int vertex id from the transition function",
            help_url=ErrorTemplate._DOCS_FUNCTIONAL_GRAPH,
            vertex=vertex,
            value=value,
        )

    @staticmethod
    def vertex_out_of_range(vertex: int, count: int) -> Diagnostic:
        """Query vertex outside 0..n.

        Args:
            vertex: The rejected vertex id
            count: Vertex count n

        Returns:
            Diagnostic for VERTEX_OUT_OF_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.VERTEX_OUT_OF_RANGE,
            message=f"Vertex {vertex} is outside 0..{count}",
            hint="Vertex ids run from 0 to node_count() - 1",
            vertex=vertex,
        )

    @staticmethod
    def step_count_negative(steps: int) -> Diagnostic:
        """Negative step count passed to kth_succ.

        Args:
            steps: The rejected step count

        Returns:
            Diagnostic for STEP_COUNT_NEGATIVE
        """
        return Diagnostic(
            code=DiagnosticCode.STEP_COUNT_NEGATIVE,
            message=f"Step count must be >= 0, got {steps}",
            hint="Functional graphs have no predecessor function; only forward steps exist",
            value=steps,
        )

    @staticmethod
    def vertex_not_integer(vertex: object) -> Diagnostic:
        """Query vertex is not an int (bool included).

        Args:
            vertex: The rejected vertex id

        Returns:
            Diagnostic for VERTEX_NOT_INTEGER
        """
        return Diagnostic(
            code=DiagnosticCode.VERTEX_NOT_INTEGER,
            message=f"Vertex id must be an int, got {type(vertex).__name__}",
            hint="Vertex ids run from 0 to node_count() - 1",
            value=vertex,
        )

    @staticmethod
    def step_count_not_integer(steps: object) -> Diagnostic:
        """Step count passed to kth_succ is not an int (bool included).

        Args:
            steps: The rejected step count

        Returns:
            Diagnostic for STEP_COUNT_NOT_INTEGER
        """
        return Diagnostic(
            code=DiagnosticCode.STEP_COUNT_NOT_INTEGER,
            message=f"Step count must be an int, got {type(steps).__name__}",
            value=steps,
        )
