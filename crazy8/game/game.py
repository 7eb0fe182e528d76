"""
CrazyEightsGame — plays one game to completion on a fresh GameState.

Per turn:
  awaiting play → (draw until something matches) → play one card
  → (eight: choose wild suit) → advance → win | stall | next turn
"""
from __future__ import annotations
import logging
import random
from typing import Any, Optional

from crazy8.core.cardset import is_single, popcount, random_bit
from crazy8.core.tables import EIGHTS, SUITS
from crazy8.game.deck import discard_card, draw
from crazy8.game.game_state import GameOutcome, GameResult, GameState, StateView

logger = logging.getLogger(__name__)

DEFAULT_PLAYERS = 4
DEFAULT_HAND_SIZE = 5
DEFAULT_STALL_CAP = 10000


def choose_card(eligible: int, rng: random.Random) -> int:
    """
    Pick one card out of the playable set.
    Keep eights back when anything else will do; otherwise pick at random.
    """
    if is_single(eligible):
        return eligible
    if eligible & ~EIGHTS:
        eligible &= ~EIGHTS
    if is_single(eligible):
        return eligible
    return random_bit(eligible, rng)


def choose_suit(hand: int) -> int:
    """Suit mask the hand holds most of; ties go to the first suit in C, D, H, S order."""
    best = SUITS[0]
    big = 0
    for mask in SUITS:
        count = popcount(hand & mask)
        if count > big:
            big = count
            best = mask
    return best


class CrazyEightsGame:
    """
    One game of Crazy Eights between ``players`` computer players.

    ``logger`` is any object exposing some of the hooks in
    ``crazy8.game.logger``; ``rng`` supplies every random choice.
    """

    def __init__(
        self,
        logger: Any = None,
        rng: Optional[random.Random] = None,
        players: int = DEFAULT_PLAYERS,
        hand_size: int = DEFAULT_HAND_SIZE,
        stall_cap: int = DEFAULT_STALL_CAP,
    ) -> None:
        self.observer = logger
        self.rng = rng or random.Random()
        self.players = players
        self.hand_size = hand_size
        self.stall_cap = stall_cap
        self.state = GameState(players=players)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def deal(self) -> None:
        """Fresh state, ``hand_size`` cards each round-robin, then the start card."""
        self.state = GameState(players=self.players)
        self._emit("bind", StateView(self.state))
        state = self.state
        for _ in range(self.hand_size):
            for player in range(self.players):
                state.hands[player] |= draw(state, self.rng)
        discard_card(state, draw(state, self.rng))
        logger.debug("Dealt %d cards to %d players, %d left in deck",
                     self.hand_size, self.players, popcount(state.deck))
        self._emit("start", state.last_discard)

    # ------------------------------------------------------------------
    # Turn transition
    # ------------------------------------------------------------------

    def take_turn(self) -> None:
        """Active player draws until able to play, plays one card, and play passes on."""
        state = self.state
        player = state.active

        eligible = state.last_play & state.hands[player]
        while not eligible:
            card = draw(state, self.rng)
            self._emit("draw", player, card)
            state.hands[player] |= card
            eligible = state.last_play & state.hands[player]

        card = choose_card(eligible, self.rng)
        state.hands[player] &= ~card
        discard_card(state, card)
        self._emit("play", player, card)

        if card & EIGHTS:
            suit = choose_suit(state.hands[player])
            state.last_play = EIGHTS | suit
            self._emit("wild", suit)

        state.active = (player + 1) % self.players

    def play(self) -> GameResult:
        """Deal and run turns until someone goes out or the stall cap is passed."""
        self.deal()
        state = self.state
        while True:
            self.take_turn()
            if not state.hands[state.active]:
                self._emit("win", state.active, state.turn, state.reshuffles)
                return GameResult(GameOutcome.WIN, state.turn, state.reshuffles, state.active)
            if state.turn > self.stall_cap:
                logger.debug("Abandoning game after %d turns", state.turn)
                self._emit("quit", StateView(state))
                return GameResult(GameOutcome.QUIT, state.turn, state.reshuffles)
            state.turn += 1

    # ------------------------------------------------------------------
    # Observer dispatch
    # ------------------------------------------------------------------

    def _emit(self, hook: str, *args: Any) -> None:
        """Call ``hook`` on the logger if it has one.  Observers can't stop the game."""
        fn = getattr(self.observer, hook, None)
        if fn is None:
            return
        try:
            fn(*args)
        except Exception:
            logger.exception("Logger hook %r failed", hook)
