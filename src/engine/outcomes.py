"""
Berra's Casino - Outcome Events

Terminal events emitted when a round or game concludes, and the small
subscription hub the UI layer listens on.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class GameKind(Enum):
    """The mini-games available in the hub."""

    BLACKJACK = "blackjack"
    YATZY = "yatzy"
    SLOTS = "slots"


class OutcomeKind(Enum):
    """How a round or game concluded."""

    WIN = "win"
    LOSE = "lose"
    PUSH = "push"
    BLACKJACK = "blackjack"
    GAME_OVER = "game_over"
    RESCUE = "rescue"


class OutcomeEvent(BaseModel):
    """Payload delivered to outcome subscribers.

    ``amount`` is the number of credits paid back to the player for
    betting games, the final score for GAME_OVER and the restored stake
    for RESCUE.
    """

    game: GameKind
    kind: OutcomeKind
    amount: int = 0
    label: str | None = None
    message: str = ""

    model_config = {"frozen": True}


OutcomeCallback = Callable[[OutcomeEvent], None]


class OutcomeEmitter:
    """Fan-out of outcome events to registered callbacks."""

    def __init__(self) -> None:
        self._subscribers: list[OutcomeCallback] = []

    def subscribe(self, callback: OutcomeCallback) -> Callable[[], None]:
        """Register a callback.

        Returns:
            A function that removes the subscription when called
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self, event: OutcomeEvent) -> None:
        """Deliver an event to every subscriber in registration order."""
        logger.info("%s %s: %s", event.game.value, event.kind.value, event.message)
        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception as e:
                logger.error(
                    f"Error in outcome handler for {event.game.value}: {e}", exc_info=True
                )
