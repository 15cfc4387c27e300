"""Shared constants for funcgraph.

Constants are grouped by domain:
- Size limits: Upper bound on vertex counts accepted at construction
- State spaces: Widths of the bundled retro generator state spaces
- Reporting: Defaults for summary rendering

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Size limits
    "MAX_VERTEX_COUNT",
    # State spaces
    "U8_MASK",
    "U16_MASK",
    "U16_STATE_COUNT",
    # Reporting
    "DEFAULT_REPORT_LOCALE",
]

# ============================================================================
# SIZE LIMITS
# ============================================================================

# Every table is a dense Python sequence of length n, so a handful of tables
# at 2**26 entries already costs several GiB. Larger requests are almost
# certainly a mistyped bit width (e.g. 2**32 instead of 2**16).
MAX_VERTEX_COUNT: int = 1 << 26

# ============================================================================
# STATE SPACES
# ============================================================================

U8_MASK: int = 0xFF
U16_MASK: int = 0xFFFF

# Number of states of a 16-bit generator (vertices 0x0000..0xFFFF).
U16_STATE_COUNT: int = 0x10000

# ============================================================================
# REPORTING
# ============================================================================

# Locale for number formatting in reports; also the fallback for unknown locales.
DEFAULT_REPORT_LOCALE: str = "en_US"
