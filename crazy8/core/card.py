"""Suit and Rank definitions, card names and CardSet formatting."""
from __future__ import annotations
from enum import Enum
from typing import Dict, List

from crazy8.core.cardset import iter_bits, lowest_bit

RANK_CHARS = "23456789TJQKA"
SUIT_CHARS = "CDHS"


class Suit(Enum):
    def __new__(cls, symbol: str, index: int):
        obj = object.__new__(cls)
        obj._value_ = symbol
        obj.index = index
        obj.mask = 0x1FFF << (13 * index)
        return obj

    CLUBS = ("C", 0)
    DIAMONDS = ("D", 1)
    HEARTS = ("H", 2)
    SPADES = ("S", 3)

    @property
    def symbol(self) -> str:
        return self._value_

    def __str__(self) -> str:
        return self._value_


class Rank(Enum):
    def __new__(cls, index: int, symbol: str):
        obj = object.__new__(cls)
        obj._value_ = index
        obj.symbol = symbol
        obj.mask = 0x0008004002001 << index  # one bit per suit
        return obj

    TWO   = (0,  "2")
    THREE = (1,  "3")
    FOUR  = (2,  "4")
    FIVE  = (3,  "5")
    SIX   = (4,  "6")
    SEVEN = (5,  "7")
    EIGHT = (6,  "8")
    NINE  = (7,  "9")
    TEN   = (8,  "T")
    JACK  = (9,  "J")
    QUEEN = (10, "Q")
    KING  = (11, "K")
    ACE   = (12, "A")

    def __str__(self) -> str:
        return self.symbol


def card_bit(rank: Rank, suit: Suit) -> int:
    """Single-bit mask for one card."""
    return 1 << (13 * suit.index + rank.value)


def _build_names() -> Dict[int, str]:
    names: Dict[int, str] = {}
    for suit in Suit:
        for rank in Rank:
            names[card_bit(rank, suit)] = f"{rank}{suit}"
    return names


# single-bit mask → two-character label, e.g. 1 << 6 → "8C"
CARD_NAMES: Dict[int, str] = _build_names()
_CARDS_BY_NAME: Dict[str, int] = {name: bit for bit, name in CARD_NAMES.items()}


def card_name(card: int) -> str:
    """Label of a single card, e.g. 'QH'."""
    try:
        return CARD_NAMES[card]
    except KeyError:
        raise ValueError(f"Not a single card: {card:#x}") from None


def suit_name(suit_mask: int) -> str:
    """Suit letter of the lowest card in *suit_mask* (used for wild announcements)."""
    return card_name(lowest_bit(suit_mask))[1:]


def cards_to_string(cards: int) -> str:
    """
    Format a CardSet as space-separated suit groups, spades first.
    Each group is the suit letter followed by its ranks, ace-high:
        "SAK4 H9 C8"
    """
    groups: List[str] = []
    for suit in reversed(list(Suit)):
        held = cards & suit.mask
        if not held:
            continue
        ranks = [card_name(bit)[0] for bit in iter_bits(held)]
        groups.append(suit.symbol + "".join(reversed(ranks)))
    return " ".join(groups)


def parse_cards(text: str) -> int:
    """Build a CardSet from names like 'AS 8C th'. Raises ValueError on unknown names."""
    mask = 0
    for token in text.split():
        key = token.upper()
        if key not in _CARDS_BY_NAME:
            raise ValueError(f"Unknown card: {token!r}")
        mask |= _CARDS_BY_NAME[key]
    return mask
