"""Analysis passes over functional graph successor tables.

Provides the three construction passes: successor table build, cycle
classification, and source detection. Each pass is a plain function
returning an immutable value.

Python 3.13+.
"""

from .cycles import CycleClassification, classify_cycles
from .sources import SourceSet, find_sources
from .successors import build_successor_table, check_vertex_count

__all__ = [
    "CycleClassification",
    "SourceSet",
    "build_successor_table",
    "check_vertex_count",
    "classify_cycles",
    "find_sources",
]
