"""
Game observers.

The engine calls these hooks synchronously at fixed points of a game:

  bind(view)                       read-only StateView of the new game, before dealing
  start(card)                      start card turned face-up
  draw(player, card)               player forced to draw
  play(player, card)               player plays a card
  wild(suit)                       an eight was played; suit mask chosen
  win(player, turns, reshuffles)   player emptied their hand
  quit(view)                       stall cap reached, game abandoned

Any object may serve as a logger; hooks it doesn't define are skipped.
Return values are ignored.  The StateView tracks the live game but cannot
change it.
"""
from __future__ import annotations
import logging
from typing import List, Optional

from crazy8.core.card import card_name, cards_to_string, suit_name
from crazy8.core.cardset import popcount
from crazy8.game.game_state import StateView
from crazy8.models.events import GameEvent

HOOKS = ("bind", "start", "draw", "play", "wild", "win", "quit")


class GameLogger:
    """Base observer: every hook is a no-op."""

    def bind(self, state: StateView) -> None:
        """Receives a read-only view of each new game before the deal."""

    def start(self, card: int) -> None:
        pass

    def draw(self, player: int, card: int) -> None:
        pass

    def play(self, player: int, card: int) -> None:
        pass

    def wild(self, suit: int) -> None:
        pass

    def win(self, player: int, turns: int, reshuffles: int) -> None:
        pass

    def quit(self, state: StateView) -> None:
        pass


class ConsoleLogger(GameLogger):
    """Writes one line per event through the ``crazy8.console`` logger."""

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self.log = log or logging.getLogger("crazy8.console")
        self.state: Optional[StateView] = None

    def bind(self, state: StateView) -> None:
        """Called by the engine before dealing so draws can report the deck size."""
        self.state = state

    def start(self, card: int) -> None:
        self.log.info("Game start: %s", card_name(card))

    def draw(self, player: int, card: int) -> None:
        if self.state is not None:
            self.log.info("Player %d draws %s (%d left)",
                          player, card_name(card), popcount(self.state.deck))
        else:
            self.log.info("Player %d draws %s", player, card_name(card))

    def play(self, player: int, card: int) -> None:
        self.log.info("Player %d plays %s", player, card_name(card))

    def wild(self, suit: int) -> None:
        self.log.info("Wild: %s", suit_name(suit))

    def win(self, player: int, turns: int, reshuffles: int) -> None:
        self.log.info("Player %d wins after %d turns, %d reshuffles", player, turns, reshuffles)

    def quit(self, state: StateView) -> None:
        hands = ", ".join(cards_to_string(h) for h in state.hands)
        self.log.info("Quit\n  Deck: %s\n  Discard: %s\n  Hands: %s",
                      cards_to_string(state.deck), cards_to_string(state.discard), hands)


class RecordingLogger(GameLogger):
    """Keeps every event as a GameEvent, card masks rendered as names."""

    def __init__(self) -> None:
        self.events: List[GameEvent] = []

    def _record(self, event_type: str, **payload) -> None:
        self.events.append(GameEvent(type=event_type, payload=payload))

    def start(self, card: int) -> None:
        self._record("start", card=card_name(card))

    def draw(self, player: int, card: int) -> None:
        self._record("draw", player=player, card=card_name(card))

    def play(self, player: int, card: int) -> None:
        self._record("play", player=player, card=card_name(card))

    def wild(self, suit: int) -> None:
        self._record("wild", suit=suit_name(suit))

    def win(self, player: int, turns: int, reshuffles: int) -> None:
        self._record("win", player=player, turns=turns, reshuffles=reshuffles)

    def quit(self, state: StateView) -> None:
        self._record(
            "quit",
            turn=state.turn,
            deck=cards_to_string(state.deck),
            discard=cards_to_string(state.discard),
            hands=[cards_to_string(h) for h in state.hands],
        )

    def types(self) -> List[str]:
        return [e.type for e in self.events]
