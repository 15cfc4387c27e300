"""Transition functions of 16-bit retro game pseudo-random generators.

Each generator is a deterministic map on its 16-bit state, so its whole
state space is a functional graph on ``0..0x10000``. ``u16_graph`` builds
that graph for any of them.

All arithmetic wraps at 16 bits (8 bits for the split-byte generator).

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from funcgraph.config import GraphConfig
from funcgraph.constants import U8_MASK, U16_MASK, U16_STATE_COUNT
from funcgraph.graph import FunctionalGraph

__all__ = [
    "RETRO_GENERATORS",
    "crc_update",
    "dq1_rng",
    "dq2_rng",
    "u16_graph",
    "wiz3_rng_use",
    "wiz3_rng_wait",
]

_CRC16_CCITT_POLY = 0x1021


def dq1_rng(r: int) -> int:
    """Dragon Quest (Famicom): linear congruential step ``r * 771 + 129``."""
    return (r * 771 + 129) & U16_MASK


def crc_update(crc: int) -> int:
    """One byte of the CRC-16/CCITT update used by Dragon Quest II.

    The register is seeded with ``crc ^ 0xFF00`` and shifted left eight
    times, folding in the polynomial whenever a set bit is shifted out.
    """
    reg = crc ^ 0xFF00
    for _ in range(8):
        carry = reg & 0x8000
        reg = (reg << 1) & U16_MASK
        if carry:
            reg ^= _CRC16_CCITT_POLY
    return reg


def dq2_rng(r: int) -> int:
    """Dragon Quest II (Famicom): two CRC updates per step."""
    return crc_update(crc_update(r))


def wiz3_rng_use(r: int) -> int:
    """Wizardry III (Famicom), update applied when a random number is drawn."""
    return (r * 257 + 1) & U16_MASK


def wiz3_rng_wait(r: int) -> int:
    """Wizardry III (Famicom), update applied every frame while idle.

    The low byte counts up by one; the high byte steps ``hi * 5 + 1``.
    """
    lo = ((r & U8_MASK) + 1) & U8_MASK
    hi = ((r >> 8) * 5 + 1) & U8_MASK
    return lo | (hi << 8)


# Report order of the survey script.
RETRO_GENERATORS: Mapping[str, Callable[[int], int]] = MappingProxyType(
    {
        "DQ1 RNG": dq1_rng,
        "DQ2 RNG": dq2_rng,
        "Wiz3 RNG (use)": wiz3_rng_use,
        "Wiz3 RNG (wait)": wiz3_rng_wait,
    }
)


def u16_graph(
    transition: Callable[[int], int],
    *,
    config: GraphConfig | None = None,
) -> FunctionalGraph:
    """Map the full 16-bit state space of a generator.

    Args:
        transition: State update on ``0..0x10000``
        config: Construction options (default: GraphConfig())

    Returns:
        FunctionalGraph with 65536 vertices

    Example:
        >>> graph = u16_graph(wiz3_rng_use)
        >>> graph.cycle_count(), graph.source_count()
        (1, 0)
    """
    return FunctionalGraph(U16_STATE_COUNT, transition, config=config)
