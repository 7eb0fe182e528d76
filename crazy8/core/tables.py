"""
Static CardSet tables, built once at import time and never mutated.

  SUITS[i]    all 13 cards of suit i (C, D, H, S)
  RANKS[r]    the 4 cards of rank r (2 … A)
  EIGHTS      RANKS[6], the wild rank
  MATCH[c]    legal responses to single card c: its suit, its rank and
              every eight; an eight (e.g. the start card) allows anything
"""
from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from crazy8.core.card import Rank, Suit
from crazy8.core.cardset import iter_bits, FULL_DECK


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...], int, Dict[int, int]]:
    suits = tuple(s.mask for s in Suit)
    ranks = tuple(r.mask for r in Rank)
    eights = ranks[Rank.EIGHT.value]

    match: Dict[int, int] = {}
    for card in iter_bits(FULL_DECK):
        mask = eights
        for suit_mask in suits:
            # a wild unlocks every suit, anything else only its own
            if card & suit_mask or card & eights:
                mask |= suit_mask
        for rank_mask in ranks:
            if card & rank_mask:
                mask |= rank_mask
        match[card] = mask
    return suits, ranks, eights, match


SUITS, RANKS, EIGHTS, _match = _build_tables()
MATCH: Mapping[int, int] = MappingProxyType(_match)
del _match
