"""
Berra's Casino - Blackjack Engine

Single-player blackjack against a dealer who stands on 17.

Round flow:
    - BETTING: stack chips onto the bet, or clear it back
    - deal: fresh shuffled deck, two cards each, dealer hole card hidden
    - Naturals resolve immediately (push / 3:2 blackjack / dealer wins)
    - PLAYING: hit, stand or double down
    - ENDED: payout settled, start a new round

Payouts (chips returned to the bankroll):
    - Win: bet x 2
    - Blackjack: floor(bet x 2.5)
    - Push: bet
    - Loss: nothing (bet was debited when placed)

A player who ends a round with no chips is restaked after a display delay.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar

from src.engine.base import GameEngine
from src.engine.cards import Card, Hand, HandEvaluator, build_deck
from src.engine.outcomes import GameKind, OutcomeEmitter, OutcomeKind
from src.engine.scheduler import DisplayScheduler
from src.engine.validators import is_valid_wager, validate_credits

logger = logging.getLogger(__name__)


class RoundPhase(Enum):
    """Phases of a blackjack round."""
    BETTING = "betting"
    PLAYING = "playing"
    ENDED = "ended"


@dataclass(frozen=True)
class BlackjackState:
    """
    Complete state of the blackjack table.

    Attributes:
        chips: Bankroll not currently wagered
        bet: Chips wagered on the current round
        phase: Current round phase
        player_hand: Player's cards in deal order
        dealer_hand: Dealer's cards; index 0 is the hole card
        deck: Undealt cards for this round; draws come off the end
        dealer_hidden: Whether the hole card is still face down
    """
    chips: int
    bet: int = 0
    phase: RoundPhase = RoundPhase.BETTING
    player_hand: Hand = field(default_factory=tuple)
    dealer_hand: Hand = field(default_factory=tuple)
    deck: tuple[Card, ...] = field(default_factory=tuple)
    dealer_hidden: bool = True

    def __post_init__(self) -> None:
        validate_credits(self.chips, "Chips")
        validate_credits(self.bet, "Bet")

    @property
    def player_value(self) -> int:
        return HandEvaluator.value(self.player_hand)

    @property
    def dealer_value(self) -> int:
        return HandEvaluator.value(self.dealer_hand)

    @property
    def dealer_visible_value(self) -> int | None:
        """Dealer total as the table shows it: just the up-card while the hole card is hidden."""
        if not self.dealer_hand:
            return None
        if self.dealer_hidden and len(self.dealer_hand) > 1:
            return HandEvaluator.card_value(self.dealer_hand[1])
        return self.dealer_value

    @property
    def can_deal(self) -> bool:
        return self.phase == RoundPhase.BETTING and self.bet > 0

    @property
    def can_double(self) -> bool:
        return (
            self.phase == RoundPhase.PLAYING
            and len(self.player_hand) == 2
            and self.chips >= self.bet
        )


def _draw(deck: tuple[Card, ...]) -> tuple[Card, tuple[Card, ...]]:
    """Take the last card of the deck."""
    return deck[-1], deck[:-1]


class BlackjackEngine(GameEngine[BlackjackState]):
    """Blackjack table for one player session."""

    GAME = GameKind.BLACKJACK
    STARTING_CHIPS: ClassVar[int] = 1000
    DEALER_STANDS_ON: ClassVar[int] = 17
    RESCUE_DELAY: ClassVar[float] = 2.0

    def __init__(
        self,
        starting_chips: int = STARTING_CHIPS,
        *,
        rescue_delay: float = RESCUE_DELAY,
        rng: random.Random | None = None,
        scheduler: DisplayScheduler | None = None,
        emitter: OutcomeEmitter | None = None,
    ) -> None:
        self.starting_chips = validate_credits(starting_chips, "Starting chips")
        self.rescue_delay = rescue_delay
        super().__init__(
            BlackjackState(chips=self.starting_chips),
            rng=rng,
            scheduler=scheduler,
            emitter=emitter,
        )

    # ------------------------------------------------------------------
    # Betting
    # ------------------------------------------------------------------

    def place_bet(self, amount: int) -> BlackjackState | None:
        """Move chips from the bankroll onto the bet."""
        state = self._state
        if state.phase != RoundPhase.BETTING:
            return self._reject("place_bet", f"phase is {state.phase.value}")
        if not is_valid_wager(amount, state.chips):
            return self._reject("place_bet", f"cannot wager {amount!r} with {state.chips} chips")
        return self._commit(replace(state, chips=state.chips - amount, bet=state.bet + amount))

    def clear_bet(self) -> BlackjackState | None:
        """Return the whole bet to the bankroll."""
        state = self._state
        if state.phase != RoundPhase.BETTING:
            return self._reject("clear_bet", f"phase is {state.phase.value}")
        return self._commit(replace(state, chips=state.chips + state.bet, bet=0))

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def deal(self) -> BlackjackState | None:
        """Shuffle a fresh deck and deal two cards to each side."""
        state = self._state
        if not state.can_deal:
            return self._reject("deal", "no bet placed or not betting")

        deck = build_deck(self.rng)
        player: list[Card] = []
        dealer: list[Card] = []
        for hand in (player, player, dealer, dealer):
            card, deck = _draw(deck)
            hand.append(card)

        state = replace(
            state,
            phase=RoundPhase.PLAYING,
            player_hand=tuple(player),
            dealer_hand=tuple(dealer),
            deck=deck,
            dealer_hidden=True,
        )

        player_natural = HandEvaluator.is_natural(state.player_hand)
        dealer_natural = HandEvaluator.is_natural(state.dealer_hand)
        if player_natural and dealer_natural:
            return self._finish(state, OutcomeKind.PUSH, "Both Blackjack! Push.")
        if player_natural:
            return self._finish(state, OutcomeKind.BLACKJACK, "Blackjack! You win 3:2!")
        if dealer_natural:
            return self._finish(state, OutcomeKind.LOSE, "Dealer Blackjack! You lose.")
        return self._commit(state)

    def hit(self) -> BlackjackState | None:
        """Draw one card; bust loses, 21 stands automatically."""
        state = self._state
        if state.phase != RoundPhase.PLAYING:
            return self._reject("hit", f"phase is {state.phase.value}")

        card, deck = _draw(state.deck)
        state = replace(state, player_hand=state.player_hand + (card,), deck=deck)

        value = state.player_value
        if value > HandEvaluator.BLACKJACK:
            return self._finish(state, OutcomeKind.LOSE, "Bust! You lose.")
        if value == HandEvaluator.BLACKJACK:
            return self._play_dealer(state)
        return self._commit(state)

    def stand(self) -> BlackjackState | None:
        """Reveal the hole card, play out the dealer and settle."""
        state = self._state
        if state.phase != RoundPhase.PLAYING:
            return self._reject("stand", f"phase is {state.phase.value}")
        return self._play_dealer(state)

    def double(self) -> BlackjackState | None:
        """Double the bet, take exactly one card, then stand."""
        state = self._state
        if not state.can_double:
            return self._reject("double", "needs two cards in play and chips to cover the bet")

        card, deck = _draw(state.deck)
        state = replace(
            state,
            chips=state.chips - state.bet,
            bet=state.bet * 2,
            player_hand=state.player_hand + (card,),
            deck=deck,
        )
        if HandEvaluator.is_bust(state.player_hand):
            return self._finish(state, OutcomeKind.LOSE, "Bust! You lose.")
        return self._play_dealer(state)

    def new_round(self) -> BlackjackState | None:
        """Clear the table and go back to betting."""
        state = self._state
        if state.phase != RoundPhase.ENDED:
            return self._reject("new_round", f"phase is {state.phase.value}")
        return self._commit(
            replace(
                state,
                phase=RoundPhase.BETTING,
                player_hand=(),
                dealer_hand=(),
                deck=(),
                dealer_hidden=True,
            )
        )

    def reset(self) -> BlackjackState:
        """Start over with the starting stake."""
        return self._restart(BlackjackState(chips=self.starting_chips))

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _play_dealer(self, state: BlackjackState) -> BlackjackState:
        dealer = state.dealer_hand
        deck = state.deck
        while HandEvaluator.value(dealer) < self.DEALER_STANDS_ON:
            card, deck = _draw(deck)
            dealer = dealer + (card,)
        state = replace(state, dealer_hand=dealer, deck=deck)

        player_value = state.player_value
        dealer_value = state.dealer_value
        if dealer_value > HandEvaluator.BLACKJACK:
            return self._finish(state, OutcomeKind.WIN, "Dealer busts! You win!")
        if dealer_value > player_value:
            return self._finish(
                state, OutcomeKind.LOSE, f"Dealer wins {dealer_value} to {player_value}."
            )
        if player_value > dealer_value:
            return self._finish(
                state, OutcomeKind.WIN, f"You win {player_value} to {dealer_value}!"
            )
        return self._finish(state, OutcomeKind.PUSH, f"Push! Both have {player_value}.")

    @staticmethod
    def payout(kind: OutcomeKind, bet: int) -> int:
        """Chips returned to the bankroll for a settled bet."""
        if kind == OutcomeKind.WIN:
            return bet * 2
        if kind == OutcomeKind.BLACKJACK:
            return bet * 5 // 2
        if kind == OutcomeKind.PUSH:
            return bet
        return 0

    def _finish(self, state: BlackjackState, kind: OutcomeKind, message: str) -> BlackjackState:
        returned = self.payout(kind, state.bet)
        state = self._commit(
            replace(
                state,
                chips=state.chips + returned,
                bet=0,
                phase=RoundPhase.ENDED,
                dealer_hidden=False,
            )
        )
        self._emit(kind, amount=returned, message=message)

        if state.chips <= 0:
            logger.info("Bankroll empty; restaking in %.1fs", self.rescue_delay)
            self._schedule(self.rescue_delay, self._rescue)
        return self._state

    def _rescue(self) -> None:
        self._commit(replace(self._state, chips=self.starting_chips))
        self._emit(
            OutcomeKind.RESCUE,
            amount=self.starting_chips,
            message="You're out of chips! Starting fresh...",
        )
