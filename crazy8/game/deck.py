"""Draw pile and discard pile operations on a GameState."""
from __future__ import annotations
import logging
import random

from crazy8.core.cardset import CardSetInvariantError, random_bit
from crazy8.core.tables import MATCH
from crazy8.game.game_state import GameState

logger = logging.getLogger(__name__)


def reshuffle(state: GameState) -> None:
    """
    Turn the discard pile back into the deck.  The most recent discard
    stays on the table so it can't be redealt straight away.
    """
    state.deck = state.discard & ~state.last_discard
    state.discard = state.last_discard
    state.reshuffles += 1
    logger.debug("Reshuffle #%d on turn %d: deck=%#x", state.reshuffles, state.turn, state.deck)


def draw(state: GameState, rng: random.Random) -> int:
    """Take one random card from the deck, reshuffling first if it is empty."""
    if not state.deck:
        reshuffle(state)
    bit = random_bit(state.deck, rng)
    if not bit & state.deck:
        raise CardSetInvariantError(state.deck, bit, "draw")
    state.deck &= ~bit
    return bit


def discard_card(state: GameState, card: int) -> None:
    """Put a played card face-up; it decides what the next player may play."""
    state.discard |= card
    state.last_discard = card
    state.last_play = MATCH[card]
