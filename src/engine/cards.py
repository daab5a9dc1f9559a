"""
Berra's Casino - Cards and Hand Evaluation

Playing cards, the 52-card deck, and the blackjack hand evaluator.

Hand values:
    - 2-10 count face value
    - J, Q, K count 10
    - A counts 11, dropping to 1 one ace at a time while the hand is over 21
"""

import random
from dataclasses import dataclass
from typing import ClassVar, Sequence

RANKS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")
SUITS = ("♠", "♥", "♦", "♣")
RED_SUITS = frozenset({"♥", "♦"})


@dataclass(frozen=True)
class Card:
    """
    Immutable playing card.

    Attributes:
        rank: One of A, 2-10, J, Q, K
        suit: One of ♠ ♥ ♦ ♣
    """
    rank: str
    suit: str

    def __post_init__(self) -> None:
        """Validate rank and suit."""
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank {self.rank!r}. Must be one of {', '.join(RANKS)}.")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit {self.suit!r}. Must be one of {' '.join(SUITS)}.")

    @property
    def is_ace(self) -> bool:
        return self.rank == "A"

    @property
    def is_red(self) -> bool:
        return self.suit in RED_SUITS

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"


Hand = tuple[Card, ...]


def build_deck(rng: random.Random | None = None) -> tuple[Card, ...]:
    """
    Build a freshly shuffled 52-card deck.

    Args:
        rng: Random source for the shuffle (None = unshuffled, suit-major order)

    Returns:
        Tuple of 52 unique cards; draws are taken from the end
    """
    cards = [Card(rank, suit) for suit in SUITS for rank in RANKS]
    if rng is not None:
        rng.shuffle(cards)
    return tuple(cards)


class HandEvaluator:
    """Stateless blackjack hand arithmetic."""

    BLACKJACK: ClassVar[int] = 21
    ACE_HIGH: ClassVar[int] = 11
    ACE_REDUCTION: ClassVar[int] = 10
    FACE_VALUE: ClassVar[int] = 10

    @classmethod
    def card_value(cls, card: Card) -> int:
        """Value of a single card, counting an ace as 11."""
        if card.rank in ("J", "Q", "K"):
            return cls.FACE_VALUE
        if card.is_ace:
            return cls.ACE_HIGH
        return int(card.rank)

    @classmethod
    def value(cls, hand: Sequence[Card]) -> int:
        """
        Best blackjack total for a hand.

        Every ace starts at 11; while the total is over 21 and an ace is
        still counted high, one ace is re-counted as 1.

        Args:
            hand: Cards in the hand

        Returns:
            Hand total
        """
        total = 0
        soft_aces = 0
        for card in hand:
            total += cls.card_value(card)
            if card.is_ace:
                soft_aces += 1

        while total > cls.BLACKJACK and soft_aces > 0:
            total -= cls.ACE_REDUCTION
            soft_aces -= 1

        return total

    @classmethod
    def is_natural(cls, hand: Sequence[Card]) -> bool:
        """True for a two-card 21."""
        return len(hand) == 2 and cls.value(hand) == cls.BLACKJACK

    @classmethod
    def is_bust(cls, hand: Sequence[Card]) -> bool:
        return cls.value(hand) > cls.BLACKJACK
