"""Diagnostic formatting service.

Centralizes diagnostic output formatting.
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.vertex_out_of_range(7, 5)))
        VERTEX_OUT_OF_RANGE: Vertex 7 is outside 0..5
    """

    output_format: OutputFormat = OutputFormat.RUST

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[VERTEX_OUT_OF_RANGE]: Vertex 7 is outside 0..5
              --> vertex 7
              = help: Vertex ids run from 0 to node_count() - 1
        """
        severity = "warning" if diagnostic.severity == "warning" else "error"
        parts = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.vertex is not None:
            parts.append(f"  --> vertex {diagnostic.vertex}")

        if diagnostic.value is not None:
            parts.append(f"  = value: {diagnostic.value!r}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format."""
        return f"{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "STEP_COUNT_NEGATIVE", "code_value": 2002, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.vertex is not None:
            data["vertex"] = diagnostic.vertex

        # Transition outputs may be arbitrary objects; always emit their repr.
        if diagnostic.value is not None:
            data["value"] = repr(diagnostic.value)

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)
