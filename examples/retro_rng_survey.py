"""Survey the state spaces of four retro game random number generators.

Builds the functional graph of each 16-bit generator over all 65536 states
and prints its cycles and unreachable states.

Usage:
    python examples/retro_rng_survey.py [LOCALE] [--json]

LOCALE controls digit grouping of counts (default: en_US).
"""

import sys

from funcgraph.enums import ReportFormat
from funcgraph.report import format_summary, summarize
from funcgraph.rng import RETRO_GENERATORS, u16_graph

args = [arg for arg in sys.argv[1:] if arg != "--json"]
locale = args[0] if args else "en_US"
output_format = ReportFormat.JSON if "--json" in sys.argv[1:] else ReportFormat.TEXT

for name, step in RETRO_GENERATORS.items():
    graph = u16_graph(step)
    print(format_summary(summarize(graph, name), locale=locale, output_format=output_format))
    print()
