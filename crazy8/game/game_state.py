"""GameState dataclass, its read-only StateView, and GameOutcome / GameResult."""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from crazy8.core.cardset import FULL_DECK, EMPTY


class GameOutcome(Enum):
    WIN = "win"
    QUIT = "quit"   # stall cap reached, game abandoned


@dataclass
class GameState:
    """
    Everything one game mutates.  Every card is in exactly one of
    deck, discard or a hand at each turn boundary.
    """
    players: int = 4
    deck: int = FULL_DECK
    discard: int = EMPTY
    last_discard: int = EMPTY   # most recent play, kept out of reshuffles
    last_play: int = EMPTY      # legal-response mask, not a card location
    hands: List[int] = field(default_factory=list)
    active: int = 0
    turn: int = 0
    reshuffles: int = 0

    def __post_init__(self) -> None:
        if not self.hands:
            self.hands = [EMPTY] * self.players


class StateView:
    """Read-only window onto a live GameState, handed to observers."""
    __slots__ = ("_state",)

    def __init__(self, state: GameState) -> None:
        object.__setattr__(self, "_state", state)

    def __setattr__(self, name: str, value) -> None:
        raise AttributeError(f"StateView is read-only: cannot set {name!r}")

    @property
    def players(self) -> int:
        return self._state.players

    @property
    def deck(self) -> int:
        return self._state.deck

    @property
    def discard(self) -> int:
        return self._state.discard

    @property
    def last_discard(self) -> int:
        return self._state.last_discard

    @property
    def last_play(self) -> int:
        return self._state.last_play

    @property
    def hands(self) -> Tuple[int, ...]:
        return tuple(self._state.hands)

    @property
    def active(self) -> int:
        return self._state.active

    @property
    def turn(self) -> int:
        return self._state.turn

    @property
    def reshuffles(self) -> int:
        return self._state.reshuffles


@dataclass
class GameResult:
    outcome: GameOutcome
    turns: int
    reshuffles: int
    winner: Optional[int] = None

    @property
    def is_win(self) -> bool:
        return self.outcome == GameOutcome.WIN
