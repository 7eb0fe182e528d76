"""
CardSet algebra — 52-bit integer masks, one bit per card.

Bit layout (suit-major, rank ascending within a suit):
  bit = 13 * suit + rank     suit 0–3 = C D H S, rank 0–12 = 2 … A

Union, intersection and difference are the native ``|``, ``&`` and ``& ~``
operators on plain ints.  This module adds the pieces Python does not give
for free: a fixed-universe complement, population count and uniform
selection of a single set bit.
"""
from __future__ import annotations
import random
from typing import Iterator

FULL_DECK = (1 << 52) - 1
EMPTY = 0

# Partial-sum masks for the 2/4/8/16/32-bit counting decomposition
_M1 = 0x5555555555555555
_M2 = 0x3333333333333333
_M4 = 0x0F0F0F0F0F0F0F0F
_M8 = 0x00FF00FF00FF00FF
_M16 = 0x0000FFFF0000FFFF


class CardSetInvariantError(RuntimeError):
    """A selected card was not a member of the set it was drawn from."""

    def __init__(self, source: int, selected: int, detail: str = "") -> None:
        self.source = source
        self.selected = selected
        msg = f"got {selected:#x} from {source:#x}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


def _partial_counts(v: int) -> tuple[int, int, int, int, int]:
    """Return the per-2/4/8/16/32-bit population counts of *v*."""
    a = v - ((v >> 1) & _M1)
    b = (a & _M2) + ((a >> 2) & _M2)
    c = (b + (b >> 4)) & _M4
    d = (c + (c >> 8)) & _M8
    e = (d + (d >> 16)) & _M16
    return a, b, c, d, e


def popcount(v: int) -> int:
    """Number of cards in the set (0 for the empty set)."""
    if not v:
        return 0
    e = _partial_counts(v)[4]
    return (e + (e >> 32)) & 127


def complement(v: int) -> int:
    """Every card of the 52-card universe that is not in *v*."""
    return FULL_DECK ^ (v & FULL_DECK)


def is_single(v: int) -> bool:
    """True if *v* holds exactly one card."""
    return v != 0 and v & (v - 1) == 0


def lowest_bit(v: int) -> int:
    return v & -v


def iter_bits(v: int) -> Iterator[int]:
    """Yield each card of *v* as a single-bit mask, lowest bit first."""
    while v:
        bit = v & -v
        yield bit
        v ^= bit


def random_bit(v: int, rng: random.Random) -> int:
    """
    Pick one card of *v* uniformly at random, returned as a single-bit mask.

    Draws an ordinal in [0, popcount(v)) and walks back down the counting
    decomposition: at each level, if the ordinal is not inside the lower
    half, skip that half (add its width to the offset, subtract its count).
    Returns EMPTY for the empty set.
    """
    if not v:
        return EMPTY
    a, b, c, d, e = _partial_counts(v)
    total = (e + (e >> 32)) & 127
    r = rng.randrange(total)
    s = 0

    t = e & 0xFFFF
    if r >= t:
        s += 32
        r -= t
    t = (d >> s) & 0xFF
    if r >= t:
        s += 16
        r -= t
    t = (c >> s) & 0xF
    if r >= t:
        s += 8
        r -= t
    t = (b >> s) & 0xF
    if r >= t:
        s += 4
        r -= t
    t = (a >> s) & 0x3
    if r >= t:
        s += 2
        r -= t
    t = (v >> s) & 1
    if r >= t:
        s += 1

    bit = 1 << s
    if not bit & v:
        raise CardSetInvariantError(v, bit, "random_bit descent")
    return bit
