"""Summaries of analyzed functional graphs.

Condenses a FunctionalGraph into the figures a state-space survey reports
(node count, cycles with their lengths, sources) and renders them either as
a human-readable block with locale-aware number grouping or as JSON.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal

from funcgraph.constants import DEFAULT_REPORT_LOCALE
from funcgraph.enums import ReportFormat

if TYPE_CHECKING:
    from funcgraph.graph import FunctionalGraph

__all__ = [
    "CycleSummary",
    "GraphSummary",
    "format_summary",
    "summarize",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CycleSummary:
    """One cycle of a graph.

    Attributes:
        representative: Smallest vertex on the cycle
        length: Number of vertices on the cycle
    """

    representative: int
    length: int


@dataclass(frozen=True, slots=True)
class GraphSummary:
    """Survey figures for one graph.

    Attributes:
        name: Label shown in the report header
        node_count: Number of vertices
        cycles: Cycles in the graph's CycleOrder
        source_count: Number of vertices with no incoming edge
        sources: Source vertices, ascending
    """

    name: str
    node_count: int
    cycles: tuple[CycleSummary, ...]
    source_count: int
    sources: tuple[int, ...]

    @property
    def cycle_count(self) -> int:
        """Number of cycles."""
        return len(self.cycles)


def summarize(graph: FunctionalGraph, name: str) -> GraphSummary:
    """Collect the survey figures of ``graph`` under ``name``."""
    return GraphSummary(
        name=name,
        node_count=graph.node_count(),
        cycles=tuple(
            CycleSummary(representative, graph.cycle_len_of(representative))
            for representative in graph.cycles()
        ),
        source_count=graph.source_count(),
        sources=tuple(graph.sources()),
    )


def _resolve_locale(locale_code: str) -> Locale:
    """Parse a BCP-47 or POSIX locale code, falling back to en_US."""
    try:
        return Locale.parse(locale_code.replace("-", "_"))
    except UnknownLocaleError as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s",
            locale_code,
            e,
            DEFAULT_REPORT_LOCALE,
        )
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s",
            locale_code,
            e,
            DEFAULT_REPORT_LOCALE,
        )
    return Locale.parse(DEFAULT_REPORT_LOCALE)


def format_summary(
    summary: GraphSummary,
    *,
    locale: str = DEFAULT_REPORT_LOCALE,
    output_format: ReportFormat = ReportFormat.TEXT,
) -> str:
    """Render a summary.

    Counts and cycle lengths are grouped per the locale's CLDR rules; vertex
    ids are printed as plain integers. JSON output ignores ``locale``.

    Args:
        summary: Figures to render
        locale: Locale code for number grouping (default: en_US)
        output_format: TEXT block or JSON document

    Returns:
        Rendered report without a trailing newline

    Example:
        >>> from funcgraph import FunctionalGraph
        >>> graph = FunctionalGraph.from_successors([1, 2, 3, 1, 2])
        >>> print(format_summary(summarize(graph, "demo")))
        [demo]
        node count: 5
        cycle count: 1
        cycle 0:
          repr: 1
          len: 3
        source count: 2
        sources: [0, 4]
    """
    if output_format == ReportFormat.JSON:
        return json.dumps(
            {
                "name": summary.name,
                "node_count": summary.node_count,
                "cycle_count": summary.cycle_count,
                "cycles": [
                    {"representative": c.representative, "length": c.length}
                    for c in summary.cycles
                ],
                "source_count": summary.source_count,
                "sources": list(summary.sources),
            },
            ensure_ascii=False,
        )

    babel_locale = _resolve_locale(locale)

    def number(value: int) -> str:
        return str(format_decimal(value, locale=babel_locale))

    lines = [
        f"[{summary.name}]",
        f"node count: {number(summary.node_count)}",
        f"cycle count: {number(summary.cycle_count)}",
    ]
    for index, cycle in enumerate(summary.cycles):
        lines.append(f"cycle {index}:")
        lines.append(f"  repr: {cycle.representative}")
        lines.append(f"  len: {number(cycle.length)}")
    lines.append(f"source count: {number(summary.source_count)}")
    lines.append(f"sources: {list(summary.sources)}")
    return "\n".join(lines)
