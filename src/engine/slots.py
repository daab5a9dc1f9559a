"""
Berra's Casino - Slot Machine Engine

Three-reel slot machine with an adjustable bet.

Spin flow:
    - The bet is debited and three symbols are drawn at once
    - Winnings are credited immediately; the outcome is final at spin time
    - Reel stops are only a display concern and are scheduled afterwards
    - A player who can no longer cover the minimum bet is restaked
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar

from src.engine.base import GameEngine
from src.engine.outcomes import GameKind, OutcomeEmitter, OutcomeKind
from src.engine.scheduler import DisplayScheduler
from src.engine.slots_rules import SYMBOLS, Payout, PayoutEvaluator, Symbol, WeightedSymbolDrawer
from src.engine.validators import validate_credits

logger = logging.getLogger(__name__)

NUM_REELS = 3


class BetDirection(Enum):
    """Bet adjustment buttons."""
    INCREASE = "increase"
    DECREASE = "decrease"


@dataclass(frozen=True)
class SlotsState:
    """
    Complete state of the slot machine.

    Attributes:
        credits: Player's balance
        bet: Credits wagered per spin
        reels: Symbol index showing on each reel
        spinning: True while a spin is being settled
        revealed: How many reels have visibly stopped since the last spin
        last_payout: Result of the most recent spin
        table: Symbol table the reel indices refer to
    """
    credits: int
    bet: int
    reels: tuple[int, ...] = (0,) * NUM_REELS
    spinning: bool = False
    revealed: int = NUM_REELS
    last_payout: Payout | None = None
    table: tuple[Symbol, ...] = field(default=SYMBOLS, repr=False)

    def __post_init__(self) -> None:
        validate_credits(self.credits)
        if len(self.reels) != NUM_REELS:
            raise ValueError(f"Exactly {NUM_REELS} reels required, got {len(self.reels)}.")
        for i, index in enumerate(self.reels):
            if not (0 <= index < len(self.table)):
                raise ValueError(f"Reel {i} shows unknown symbol index {index}.")

    @property
    def symbols(self) -> tuple[Symbol, ...]:
        return tuple(self.table[i] for i in self.reels)

    @property
    def can_spin(self) -> bool:
        return not self.spinning and self.credits >= self.bet


class SlotsEngine(GameEngine[SlotsState]):
    """Slot machine for one player session."""

    GAME = GameKind.SLOTS
    STARTING_CREDITS: ClassVar[int] = 1000
    BET_STEP: ClassVar[int] = 10
    MIN_BET: ClassVar[int] = 10
    MAX_BET: ClassVar[int] = 100
    RESCUE_DELAY: ClassVar[float] = 1.5
    REEL_STOP_DELAYS: ClassVar[tuple[float, ...]] = (0.6, 1.0, 1.4)

    def __init__(
        self,
        starting_credits: int = STARTING_CREDITS,
        *,
        bet_step: int = BET_STEP,
        min_bet: int = MIN_BET,
        max_bet: int = MAX_BET,
        rescue_delay: float = RESCUE_DELAY,
        reel_stop_delays: tuple[float, ...] = REEL_STOP_DELAYS,
        drawer: WeightedSymbolDrawer | None = None,
        rng: random.Random | None = None,
        scheduler: DisplayScheduler | None = None,
        emitter: OutcomeEmitter | None = None,
    ) -> None:
        if not (0 < min_bet <= max_bet):
            raise ValueError(f"Bet range [{min_bet}, {max_bet}] is empty.")
        if len(reel_stop_delays) != NUM_REELS:
            raise ValueError(f"Need one stop delay per reel, got {len(reel_stop_delays)}.")
        self.starting_credits = validate_credits(starting_credits, "Starting credits")
        self.bet_step = bet_step
        self.min_bet = min_bet
        self.max_bet = max_bet
        self.rescue_delay = rescue_delay
        self.reel_stop_delays = tuple(reel_stop_delays)
        self.drawer = drawer or WeightedSymbolDrawer()
        self._spins = 0
        super().__init__(self._initial_state(), rng=rng, scheduler=scheduler, emitter=emitter)

    def _initial_state(self) -> SlotsState:
        return SlotsState(
            credits=self.starting_credits, bet=self.min_bet, table=self.drawer.symbols
        )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def change_bet(self, direction: BetDirection | str) -> SlotsState | None:
        """Raise or lower the bet by one step."""
        state = self._state
        if state.spinning:
            return self._reject("change_bet", "reels are spinning")
        try:
            direction = BetDirection(direction)
        except ValueError:
            return self._reject("change_bet", f"unknown direction {direction!r}")

        if direction == BetDirection.INCREASE:
            if state.bet >= self.max_bet or state.bet >= state.credits:
                return self._reject("change_bet", "bet already at the limit")
            return self._commit(replace(state, bet=state.bet + self.bet_step))

        if state.bet <= self.min_bet:
            return self._reject("change_bet", "bet already at the minimum")
        return self._commit(replace(state, bet=state.bet - self.bet_step))

    def spin(self) -> SlotsState | None:
        """Debit the bet, draw three symbols and pay out."""
        state = self._state
        if not state.can_spin:
            return self._reject("spin", f"cannot spin {state.bet} with {state.credits} credits")

        state = replace(state, credits=state.credits - state.bet, spinning=True, revealed=0)
        reels = self.drawer.draw_reels(self.rng, NUM_REELS)
        payout = PayoutEvaluator.evaluate(reels, state.bet, self.drawer.symbols)
        state = self._commit(
            replace(
                state,
                credits=state.credits + payout.amount,
                reels=reels,
                spinning=False,
                last_payout=payout,
            )
        )

        if payout.is_win:
            self._emit(
                OutcomeKind.WIN,
                amount=payout.amount,
                label=payout.label,
                message=f"{payout.label} - Won ${payout.amount}!",
            )
        else:
            self._emit(OutcomeKind.LOSE, message="Try again!")

        self._spins += 1
        for reel, delay in enumerate(self.reel_stop_delays, start=1):
            self._schedule(delay, lambda spin=self._spins, count=reel: self._reveal(spin, count))

        self._apply_bankroll_floor()
        return self._state

    def reset(self) -> SlotsState:
        """Back to the starting credits and minimum bet."""
        return self._restart(self._initial_state())

    # ------------------------------------------------------------------
    # Bankroll
    # ------------------------------------------------------------------

    def _apply_bankroll_floor(self) -> None:
        state = self._state
        needs_rescue = False
        if 0 < state.credits < state.bet:
            # With fewer credits than one step this still yields min_bet,
            # which exceeds the balance until the rescue lands.
            affordable = (state.credits // self.bet_step) * self.bet_step or self.min_bet
            self._commit(replace(state, bet=min(state.bet, affordable)))
            needs_rescue = state.credits < self.min_bet
        elif state.credits <= 0:
            needs_rescue = True

        if needs_rescue:
            logger.info("Credits exhausted; restaking in %.1fs", self.rescue_delay)
            self._schedule(self.rescue_delay, self._rescue)

    def _reveal(self, spin: int, count: int) -> None:
        state = self._state
        if spin == self._spins and state.revealed < count:
            self._commit(replace(state, revealed=count))

    def _rescue(self) -> None:
        self._commit(replace(self._state, credits=self.starting_credits, bet=self.min_bet))
        self._emit(
            OutcomeKind.RESCUE,
            amount=self.starting_credits,
            message="Out of credits! Have some more...",
        )
