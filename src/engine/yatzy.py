"""
Berra's Casino - Yatzy Engine

Solitaire Yatzy: five dice, up to three rolls per turn, 13 categories.

Turn flow:
    - Roll (up to 3 times), holding any dice between rolls
    - Lock the dice into an open category (at least one roll required)
    - Dice, holds and roll counter reset for the next turn
    - The game ends when all 13 categories are locked
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import ClassVar

from src.engine.base import GameEngine
from src.engine.outcomes import GameKind, OutcomeEmitter, OutcomeKind
from src.engine.scheduler import DisplayScheduler
from src.engine.validators import validate_dice_values, validate_held_mask
from src.engine.yatzy_rules import BonusCalculator, Category, CategoryRuleSet

logger = logging.getLogger(__name__)

NUM_DICE = 5
ROLLS_PER_TURN = 3
DEFAULT_DICE = (1,) * NUM_DICE
NO_HOLDS = (False,) * NUM_DICE


@dataclass(frozen=True)
class YatzyState:
    """
    Complete state of a Yatzy game.

    Attributes:
        dice: Current face values of the five dice
        held: One flag per die; held dice are skipped by the next roll
        rolls_left: Rolls remaining this turn (3 at the start of a turn)
        scores: Locked (category, score) pairs in the order they were played
        game_over: True once all 13 categories are locked
        final_score: Total frozen at game over
    """
    dice: tuple[int, ...] = DEFAULT_DICE
    held: tuple[bool, ...] = NO_HOLDS
    rolls_left: int = ROLLS_PER_TURN
    scores: tuple[tuple[Category, int], ...] = ()
    game_over: bool = False
    final_score: int | None = None

    def __post_init__(self) -> None:
        """Validate dice, holds and the roll counter."""
        validate_dice_values(self.dice, count=NUM_DICE)
        validate_held_mask(self.held, NUM_DICE)
        if not (0 <= self.rolls_left <= ROLLS_PER_TURN):
            raise ValueError(
                f"rolls_left must be between 0 and {ROLLS_PER_TURN}, got {self.rolls_left}."
            )
        locked = [category for category, _ in self.scores]
        if len(locked) != len(set(locked)):
            raise ValueError("A category can only be locked once.")

    @property
    def scoreboard(self) -> dict[Category, int]:
        """Locked scores keyed by category, in play order."""
        return dict(self.scores)

    @property
    def has_rolled(self) -> bool:
        return self.rolls_left < ROLLS_PER_TURN

    def is_locked(self, category: Category) -> bool:
        return any(locked == category for locked, _ in self.scores)


class YatzyEngine(GameEngine[YatzyState]):
    """Yatzy game for one player session."""

    GAME = GameKind.YATZY
    FACES: ClassVar[int] = 6

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        scheduler: DisplayScheduler | None = None,
        emitter: OutcomeEmitter | None = None,
    ) -> None:
        super().__init__(YatzyState(), rng=rng, scheduler=scheduler, emitter=emitter)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def upper_total(self) -> int:
        return BonusCalculator.upper_total(self._state.scoreboard)

    @property
    def upper_bonus(self) -> int:
        return BonusCalculator.upper_bonus(self._state.scoreboard)

    @property
    def total_score(self) -> int:
        return BonusCalculator.total(self._state.scoreboard)

    @property
    def available_categories(self) -> tuple[Category, ...]:
        """Open categories in scorecard order."""
        return tuple(c for c in Category if not self._state.is_locked(c))

    def potential_scores(self) -> dict[Category, int]:
        """What the current dice would score in each open category."""
        dice = self._state.dice
        return {c: CategoryRuleSet.score(c, dice) for c in self.available_categories}

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def roll(self) -> YatzyState | None:
        """Re-roll every die that is not held."""
        state = self._state
        if state.game_over:
            return self._reject("roll", "game over")
        if state.rolls_left <= 0:
            return self._reject("roll", "no rolls left this turn")

        dice = tuple(
            value if held else self.rng.randint(1, self.FACES)
            for value, held in zip(state.dice, state.held)
        )
        return self._commit(replace(state, dice=dice, rolls_left=state.rolls_left - 1))

    def toggle_hold(self, index: int) -> YatzyState | None:
        """Flip the held flag of one die."""
        state = self._state
        if state.game_over:
            return self._reject("toggle_hold", "game over")
        if not state.has_rolled:
            return self._reject("toggle_hold", "roll before holding dice")
        if not isinstance(index, int) or isinstance(index, bool) or not (0 <= index < NUM_DICE):
            return self._reject("toggle_hold", f"no die at index {index!r}")

        held = list(state.held)
        held[index] = not held[index]
        return self._commit(replace(state, held=tuple(held)))

    def select_category(self, key: Category | str) -> YatzyState | None:
        """Lock the current dice into a category and start the next turn."""
        state = self._state
        category = Category.parse(key)
        if category is None:
            return self._reject("select_category", f"unknown category {key!r}")
        if state.game_over:
            return self._reject("select_category", "game over")
        if state.is_locked(category):
            return self._reject("select_category", f"{category.value} already locked")
        if not state.has_rolled:
            return self._reject("select_category", "roll before scoring")

        points = CategoryRuleSet.score(category, state.dice)
        scores = state.scores + ((category, points),)
        state = replace(
            state,
            dice=DEFAULT_DICE,
            held=NO_HOLDS,
            rolls_left=ROLLS_PER_TURN,
            scores=scores,
        )
        logger.debug("Locked %s for %d", category.value, points)

        if len(scores) == len(Category):
            final = BonusCalculator.total(dict(scores))
            state = self._commit(replace(state, game_over=True, final_score=final))
            self._emit(
                OutcomeKind.GAME_OVER,
                amount=final,
                message=f"Game over! Final score: {final}",
            )
            return state
        return self._commit(state)

    def reset(self) -> YatzyState:
        """Start a new game with an empty scorecard."""
        return self._restart(YatzyState())
