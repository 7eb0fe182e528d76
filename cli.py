#!/usr/bin/env python3
"""
CLI for the Crazy Eights simulator.

Usage:
    python cli.py                        # 10,000 games, 4 players, print game length stats
    python cli.py --games 500 --seed 1   # reproducible smaller batch
    python cli.py --histogram            # also print the turn-length histogram
    python cli.py --watch                # play one game, print every event
    python cli.py --trace --seed 3       # play one game, print events as JSON lines
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

from pydantic import ValidationError

from crazy8.core.card import card_name, cards_to_string, suit_name
from crazy8.core.cardset import CardSetInvariantError, popcount
from crazy8.game.game import CrazyEightsGame
from crazy8.game.game_state import StateView
from crazy8.game.logger import GameLogger, RecordingLogger
from crazy8.models.config import SimulationConfig
from crazy8.sim.driver import run_simulation


# -- ANSI colors ---------------------------------------------------------------

RESET  = "\033[0m"
BOLD   = "\033[1m"
DIM    = "\033[2m"
RED    = "\033[91m"
GREEN  = "\033[92m"
YELLOW = "\033[93m"
BLUE   = "\033[94m"
CYAN   = "\033[96m"
WHITE  = "\033[97m"

SUIT_SYMBOLS = {"C": "♣", "D": "♦", "H": "♥", "S": "♠"}
SUIT_COLORS  = {"C": GREEN, "D": BLUE, "H": RED, "S": WHITE}


def fmt_card(card: int) -> str:
    """Pretty-print a single card mask, e.g. QH → colored 'Q♥'."""
    name = card_name(card)
    rank, suit_ch = name[0], name[1]
    return f"{SUIT_COLORS[suit_ch]}{BOLD}{rank}{SUIT_SYMBOLS[suit_ch]}{RESET}"


def fmt_suit(suit: int) -> str:
    suit_ch = suit_name(suit)
    return f"{SUIT_COLORS[suit_ch]}{BOLD}{SUIT_SYMBOLS[suit_ch]}{RESET}"


def print_divider(label: str = "") -> None:
    if label:
        print(f"\n{DIM}{'─' * 20} {BOLD}{WHITE}{label} {DIM}{'─' * 20}{RESET}")
    else:
        print(f"{DIM}{'─' * 60}{RESET}")


# -- Watch mode ----------------------------------------------------------------

class PrettyLogger(GameLogger):
    """Prints a colored line for every event of a single game."""

    def __init__(self) -> None:
        self.state: Optional[StateView] = None

    def bind(self, state: StateView) -> None:
        self.state = state

    def start(self, card: int) -> None:
        print_divider("GAME START")
        for player, hand in enumerate(self.state.hands):
            print(f"  Player {player}: {cards_to_string(hand)}")
        print(f"\n  Start card: {fmt_card(card)}\n")

    def draw(self, player: int, card: int) -> None:
        left = popcount(self.state.deck)
        print(f"  {DIM}Player {player} draws {RESET}{fmt_card(card)}{DIM} ({left} left){RESET}")

    def play(self, player: int, card: int) -> None:
        print(f"  {CYAN}>{RESET} Player {player} plays {fmt_card(card)}")

    def wild(self, suit: int) -> None:
        print(f"    {YELLOW}Wild:{RESET} {fmt_suit(suit)}")

    def win(self, player: int, turns: int, reshuffles: int) -> None:
        print(f"\n  {GREEN}{BOLD}Player {player} wins{RESET} after {turns} turns, "
              f"{reshuffles} reshuffles\n")

    def quit(self, state: StateView) -> None:
        print(f"\n  {RED}{BOLD}Quit{RESET} after {state.turn} turns")
        print(f"    Deck:    {cards_to_string(state.deck)}")
        print(f"    Discard: {cards_to_string(state.discard)}")
        print(f"    Hands:   {', '.join(cards_to_string(h) for h in state.hands)}\n")


def _single_game(config: SimulationConfig, logger) -> None:
    game = CrazyEightsGame(
        logger=logger,
        rng=random.Random(config.seed),
        players=config.players,
        hand_size=config.hand_size,
        stall_cap=config.stall_cap,
    )
    game.play()


# -- Entry point ---------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Crazy Eights simulator — CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
examples:
  python cli.py                          10,000 games, summary line
  python cli.py --games 1000 --seed 42   reproducible batch
  python cli.py --histogram              add turn-length histogram
  python cli.py --watch --seed 7         watch one game
  python cli.py --trace                  one game as JSON events
""",
    )
    parser.add_argument("--games", type=int, default=10000, help="games to simulate (default: 10000)")
    parser.add_argument("--players", type=int, default=4, help="players per game (default: 4)")
    parser.add_argument("--hand-size", type=int, default=5, help="cards dealt to each player (default: 5)")
    parser.add_argument("--stall-cap", type=int, default=10000,
                        help="abandon a game after this many turns (default: 10000)")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--histogram", action="store_true", help="print the turn-length histogram")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--watch", action="store_true", help="play a single game and print each event")
    mode.add_argument("--trace", action="store_true", help="play a single game and print JSON events")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SimulationConfig(
            games=args.games,
            players=args.players,
            hand_size=args.hand_size,
            stall_cap=args.stall_cap,
            seed=args.seed,
        )
    except ValidationError as e:
        print(f"{RED}Invalid settings:{RESET}\n{e}", file=sys.stderr)
        return 2

    try:
        if args.watch:
            _single_game(config, PrettyLogger())
            return 0
        if args.trace:
            recorder = RecordingLogger()
            _single_game(config, recorder)
            for event in recorder.events:
                print(event.model_dump_json())
            return 0

        stats = run_simulation(config)
    except CardSetInvariantError as e:
        print(f"{RED}{BOLD}Internal error:{RESET} {e}", file=sys.stderr)
        return 1

    if args.histogram:
        print_divider("TURNS")
        for line in stats.histogram_lines():
            print(line)
        print()
    print(stats.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
