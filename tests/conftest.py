"""Shared fixtures for all tests."""
import random

import pytest

from crazy8.core.cardset import FULL_DECK
from crazy8.game.game_state import GameState


@pytest.fixture
def rng():
    """Seeded generator so every test run sees the same cards."""
    return random.Random(1234)


def assert_cards_conserved(state: GameState) -> None:
    """Every card is in exactly one of deck, discard or a hand."""
    places = [state.deck, state.discard] + list(state.hands)
    seen = 0
    for mask in places:
        assert mask & seen == 0, f"card in two places: {mask & seen:#x}"
        seen |= mask
    assert seen == FULL_DECK, f"cards missing: {FULL_DECK ^ seen:#x}"
    assert state.last_discard & ~state.discard == 0


@pytest.fixture
def check_conserved():
    return assert_cards_conserved
