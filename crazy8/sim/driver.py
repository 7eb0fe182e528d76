"""
Simulation driver — runs many independent games and aggregates their length.

    stats = run_simulation(SimulationConfig(games=1000, seed=7))
    print(stats.summary())
"""
from __future__ import annotations
import logging
import math
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, List, Optional

from crazy8.game.game import CrazyEightsGame
from crazy8.game.game_state import StateView
from crazy8.game.logger import GameLogger
from crazy8.models.config import SimulationConfig

logger = logging.getLogger(__name__)


@dataclass
class SimulationStats:
    """Turn-length tallies over a batch of games."""
    histogram: Counter = field(default_factory=Counter)  # turns → games
    wins: int = 0
    quits: int = 0
    total: int = 0      # sum of turns over won games
    total_sq: int = 0   # sum of squared turns over won games

    def record_win(self, turns: int) -> None:
        self.histogram[turns] += 1
        self.wins += 1
        self.total += turns
        self.total_sq += turns * turns

    def record_quit(self) -> None:
        self.quits += 1

    @property
    def games(self) -> int:
        return self.wins + self.quits

    @property
    def mean(self) -> float:
        return self.total / self.wins if self.wins else 0.0

    @property
    def variance(self) -> float:
        if not self.wins:
            return 0.0
        # clamp float noise below zero
        return max(self.total_sq / self.wins - self.mean ** 2, 0.0)

    @property
    def stddev(self) -> float:
        return math.sqrt(self.variance)

    @property
    def quit_rate(self) -> float:
        return self.quits / self.games if self.games else 0.0

    def summary(self) -> str:
        return f"Game length: {self.mean} ± {self.stddev} ({self.quit_rate} quit)"

    def histogram_lines(self) -> List[str]:
        """One row per turn count from the shortest won game up: ``'  12 ****'``."""
        if not self.histogram:
            return []
        lo, hi = min(self.histogram), max(self.histogram)
        return [f"{turns:4d} {'*' * self.histogram[turns]}" for turns in range(lo, hi + 1)]


class StatsLogger(GameLogger):
    """Feeds win/quit hooks into a SimulationStats."""

    def __init__(self, stats: Optional[SimulationStats] = None) -> None:
        self.stats = stats if stats is not None else SimulationStats()

    def win(self, player: int, turns: int, reshuffles: int) -> None:
        self.stats.record_win(turns)

    def quit(self, state: StateView) -> None:
        self.stats.record_quit()


class _Fanout:
    """Forwards each hook to several observers, skipping ones that lack it."""

    def __init__(self, *observers: Any) -> None:
        self._observers = [o for o in observers if o is not None]

    def __getattr__(self, hook: str):
        targets = [getattr(o, hook) for o in self._observers if hasattr(o, hook)]
        if not targets:
            raise AttributeError(hook)

        def call(*args: Any) -> None:
            for fn in targets:
                fn(*args)
        return call


def run_simulation(config: Optional[SimulationConfig] = None,
                   observer: Any = None) -> SimulationStats:
    """
    Play ``config.games`` games, each on its own GameState, and return the
    aggregated statistics.  ``observer`` additionally observes every game.
    """
    config = config or SimulationConfig()
    rng = random.Random(config.seed)
    stats_logger = StatsLogger()
    hooks = _Fanout(stats_logger, observer) if observer is not None else stats_logger

    logger.info("Simulating %d games (%d players, %d cards each, seed=%s)",
                config.games, config.players, config.hand_size, config.seed)
    for _ in range(config.games):
        game = CrazyEightsGame(
            logger=hooks,
            rng=rng,
            players=config.players,
            hand_size=config.hand_size,
            stall_cap=config.stall_cap,
        )
        game.play()

    stats = stats_logger.stats
    logger.info("Finished %d games: %d won, %d abandoned",
                stats.games, stats.wins, stats.quits)
    return stats
