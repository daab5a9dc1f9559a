"""
Berra's Casino - Game Hub

The navigation shell: one engine instance per game for the lifetime of
the hub. Opening a game resets it; going back to the hub leaves every
engine as it was.
"""

from __future__ import annotations

import logging
import random

from src.config.settings import Settings, get_settings
from src.engine.base import GameEngine
from src.engine.blackjack import BlackjackEngine
from src.engine.outcomes import GameKind, OutcomeEmitter
from src.engine.scheduler import DisplayScheduler, ImmediateScheduler
from src.engine.slots import SlotsEngine
from src.engine.yatzy import YatzyEngine

logger = logging.getLogger(__name__)


class GameHub:
    """Navigation between the blackjack, yatzy and slots engines."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        rng: random.Random | None = None,
        scheduler: DisplayScheduler | None = None,
        emitter: OutcomeEmitter | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.scheduler = scheduler or ImmediateScheduler()
        self.emitter = emitter or OutcomeEmitter()
        # One generator per engine; play in one game never shifts another's draws.
        seeds = rng or random.Random()

        self._engines: dict[GameKind, GameEngine] = {
            GameKind.BLACKJACK: BlackjackEngine(
                settings.blackjack_starting_chips,
                rescue_delay=settings.blackjack_rescue_delay,
                rng=random.Random(seeds.getrandbits(64)),
                scheduler=self.scheduler,
                emitter=self.emitter,
            ),
            GameKind.YATZY: YatzyEngine(
                rng=random.Random(seeds.getrandbits(64)),
                scheduler=self.scheduler,
                emitter=self.emitter,
            ),
            GameKind.SLOTS: SlotsEngine(
                settings.slots_starting_credits,
                bet_step=settings.slots_bet_step,
                min_bet=settings.slots_min_bet,
                max_bet=settings.slots_max_bet,
                rescue_delay=settings.slots_rescue_delay,
                reel_stop_delays=settings.slots_reel_stop_delays,
                rng=random.Random(seeds.getrandbits(64)),
                scheduler=self.scheduler,
                emitter=self.emitter,
            ),
        }
        self._current: GameKind | None = None

    @staticmethod
    def _parse(game: GameKind | str) -> GameKind:
        try:
            return GameKind(game)
        except ValueError:
            raise ValueError(
                f"Unknown game {game!r}. Must be one of {[g.value for g in GameKind]}."
            ) from None

    @property
    def current_game(self) -> GameKind | None:
        return self._current

    @property
    def current_engine(self) -> GameEngine | None:
        if self._current is None:
            return None
        return self._engines[self._current]

    @property
    def blackjack(self) -> BlackjackEngine:
        return self._engines[GameKind.BLACKJACK]

    @property
    def yatzy(self) -> YatzyEngine:
        return self._engines[GameKind.YATZY]

    @property
    def slots(self) -> SlotsEngine:
        return self._engines[GameKind.SLOTS]

    def engine(self, game: GameKind | str) -> GameEngine:
        """Engine for a game, without resetting it."""
        return self._engines[self._parse(game)]

    def show_game(self, game: GameKind | str) -> GameEngine:
        """Open a game with a fresh session.

        Returns:
            The engine now on screen
        """
        kind = self._parse(game)
        engine = self._engines[kind]
        engine.reset()
        self._current = kind
        logger.info("Opened %s", kind.value)
        return engine

    def show_hub(self) -> None:
        """Return to the game picker."""
        if self._current is not None:
            logger.info("Closed %s", self._current.value)
        self._current = None
