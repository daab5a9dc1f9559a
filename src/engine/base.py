"""
Berra's Casino - Game Engine Base Class

Shared plumbing for the three mini-game engines. Each engine owns one
immutable state snapshot at a time; actions build a complete new snapshot
and commit it, or reject and leave the old one in place. Rejection is
never an exception: invalid actions are silent no-ops that return None.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Generic, TypeVar

from src.engine.outcomes import GameKind, OutcomeEmitter, OutcomeEvent, OutcomeKind
from src.engine.scheduler import DisplayScheduler, ImmediateScheduler

logger = logging.getLogger(__name__)

StateT = TypeVar("StateT")


class GameEngine(Generic[StateT]):
    """
    Base class for a single game session.

    Attributes:
        GAME: Which mini-game this engine plays
        rng: Source of randomness (inject a seeded Random for tests)
        scheduler: Where display-delayed callbacks are sent
        emitter: Where outcome events are published
    """

    GAME: GameKind

    def __init__(
        self,
        initial_state: StateT,
        *,
        rng: random.Random | None = None,
        scheduler: DisplayScheduler | None = None,
        emitter: OutcomeEmitter | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.scheduler = scheduler or ImmediateScheduler()
        self.emitter = emitter or OutcomeEmitter()
        self._state = initial_state
        self._last_outcome: OutcomeEvent | None = None
        # Bumped on every reset so stale display callbacks do nothing.
        self._epoch = 0

    @property
    def state(self) -> StateT:
        """Current immutable snapshot."""
        return self._state

    @property
    def last_outcome(self) -> OutcomeEvent | None:
        """The most recent outcome event, if any round has concluded."""
        return self._last_outcome

    def _commit(self, new_state: StateT) -> StateT:
        self._state = new_state
        return new_state

    def _reject(self, action: str, reason: str) -> None:
        logger.debug("%s.%s rejected: %s", self.GAME.value, action, reason)
        return None

    def _emit(
        self,
        kind: OutcomeKind,
        amount: int = 0,
        message: str = "",
        label: str | None = None,
    ) -> OutcomeEvent:
        event = OutcomeEvent(
            game=self.GAME, kind=kind, amount=amount, label=label, message=message
        )
        self._last_outcome = event
        self.emitter.emit(event)
        return event

    def _restart(self, initial_state: StateT) -> StateT:
        """Replace the whole state and invalidate pending display callbacks."""
        self._epoch += 1
        self._last_outcome = None
        return self._commit(initial_state)

    def _schedule(self, delay: float, callback: Callable[[], None]) -> None:
        """Schedule a display callback that is dropped if the game restarts first."""
        epoch = self._epoch

        def guarded() -> None:
            if epoch != self._epoch:
                logger.debug("%s: skipping stale display callback", self.GAME.value)
                return
            callback()

        self.scheduler.call_later(delay, guarded)
