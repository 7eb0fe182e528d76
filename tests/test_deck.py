"""Unit tests for deck.py — draw, reshuffle and discard."""
import pytest

import crazy8.game.deck as deck_module
from crazy8.core.card import parse_cards
from crazy8.core.cardset import EMPTY, FULL_DECK, CardSetInvariantError, is_single, popcount
from crazy8.core.tables import MATCH
from crazy8.game.deck import discard_card, draw, reshuffle
from crazy8.game.game_state import GameState


class TestDraw:
    def test_draw_removes_one_card(self, rng):
        state = GameState()
        card = draw(state, rng)
        assert is_single(card)
        assert card & state.deck == 0
        assert popcount(state.deck) == 51

    def test_draw_whole_deck_without_repeats(self, rng):
        state = GameState()
        drawn = 0
        for _ in range(52):
            card = draw(state, rng)
            assert card & drawn == 0
            drawn |= card
        assert drawn == FULL_DECK
        assert state.deck == EMPTY
        assert state.reshuffles == 0

    def test_same_seed_same_order(self):
        import random
        a, b = GameState(), GameState()
        ra, rb = random.Random(7), random.Random(7)
        assert [draw(a, ra) for _ in range(20)] == [draw(b, rb) for _ in range(20)]

    def test_selection_outside_deck_is_fatal(self, rng, monkeypatch):
        state = GameState(deck=parse_cards("2C 3C"))
        monkeypatch.setattr(deck_module, "random_bit", lambda v, r: parse_cards("AS"))
        with pytest.raises(CardSetInvariantError) as exc:
            draw(state, rng)
        assert exc.value.source == parse_cards("2C 3C")
        assert exc.value.selected == parse_cards("AS")


class TestReshuffle:
    def test_empty_deck_recycles_discard_except_last(self, rng):
        state = GameState(
            deck=EMPTY,
            discard=parse_cards("2C 3C 4C"),
            last_discard=parse_cards("4C"),
        )
        card = draw(state, rng)
        assert state.reshuffles == 1
        assert state.discard == parse_cards("4C")
        assert card in (parse_cards("2C"), parse_cards("3C"))
        assert state.deck | card == parse_cards("2C 3C")
        assert state.deck & card == 0

    def test_last_discard_never_recirculates(self, rng):
        state = GameState(
            deck=EMPTY,
            discard=parse_cards("9S JS"),
            last_discard=parse_cards("JS"),
        )
        assert draw(state, rng) == parse_cards("9S")
        assert state.deck == EMPTY
        assert state.discard == parse_cards("JS")

    def test_reshuffle_only_when_empty(self, rng):
        state = GameState(deck=parse_cards("5D"), discard=parse_cards("2C 3C"),
                          last_discard=parse_cards("3C"))
        assert draw(state, rng) == parse_cards("5D")
        assert state.reshuffles == 0
        assert state.discard == parse_cards("2C 3C")

    def test_nothing_left_to_draw_is_fatal(self, rng):
        state = GameState(deck=EMPTY, discard=parse_cards("7H"), last_discard=parse_cards("7H"))
        with pytest.raises(CardSetInvariantError):
            draw(state, rng)
        assert state.reshuffles == 1

    def test_reshuffle_direct(self):
        state = GameState(deck=EMPTY, discard=parse_cards("2H 3H 4H"),
                          last_discard=parse_cards("2H"))
        reshuffle(state)
        assert state.deck == parse_cards("3H 4H")
        assert state.discard == parse_cards("2H")


class TestDiscard:
    def test_discard_sets_last_play(self):
        state = GameState(deck=FULL_DECK & ~parse_cards("KD"))
        card = parse_cards("KD")
        discard_card(state, card)
        assert state.discard == card
        assert state.last_discard == card
        assert state.last_play == MATCH[card]

    def test_discard_accumulates(self):
        state = GameState()
        discard_card(state, parse_cards("2C"))
        discard_card(state, parse_cards("2D"))
        assert state.discard == parse_cards("2C 2D")
        assert state.last_discard == parse_cards("2D")
