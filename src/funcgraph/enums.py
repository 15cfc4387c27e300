"""Enumerations for funcgraph type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class CycleOrder(StrEnum):
    """Order in which FunctionalGraph.cycles() lists representatives.

    StrEnum provides automatic string conversion: str(CycleOrder.DISCOVERY) == "discovery"
    """

    DISCOVERY = "discovery"
    """Order in which the classifier first closed each cycle."""

    REPRESENTATIVE = "representative"
    """Ascending order of cycle representative."""


class ReportFormat(StrEnum):
    """Output format for graph summaries.

    StrEnum provides automatic string conversion: str(ReportFormat.TEXT) == "text"
    """

    TEXT = "text"
    """Human-readable block, one field per line."""

    JSON = "json"
    """JSON document for tooling integration."""
