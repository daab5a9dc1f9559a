"""
Berra's Casino - Slot Machine Symbols and Payouts

Seven weighted reel symbols; rarer symbols pay more.

Payout rules, first match wins:
    1. Three of a kind: bet x symbol payout
    2. First two reels match: floor(bet x payout x 0.2)
    3. Last two reels match: same, using that pair's symbol
    4. Any 7 on the line: bet x 2
    5. Two or more cherries anywhere: bet x 1

Rules 4 and 5 find the seven and the cherry by symbol name, so they
follow whatever table the reels were drawn from.
"""

import random
from dataclasses import dataclass
from typing import ClassVar, Sequence

from src.engine.validators import validate_weights


@dataclass(frozen=True)
class Symbol:
    """
    A reel symbol.

    Attributes:
        glyph: What the reel shows
        name: Plain-text name
        weight: Relative draw frequency
        payout: Bet multiplier for three of a kind
    """
    glyph: str
    name: str
    weight: int
    payout: int

    def __str__(self) -> str:
        return self.glyph


SYMBOLS: tuple[Symbol, ...] = (
    Symbol("🍒", "cherry", 25, 2),
    Symbol("🍋", "lemon", 20, 3),
    Symbol("🍊", "orange", 18, 4),
    Symbol("🍇", "grape", 15, 6),
    Symbol("⭐", "star", 12, 10),
    Symbol("7️⃣", "seven", 7, 25),
    Symbol("💎", "diamond", 3, 50),
)

CHERRY = "cherry"
SEVEN = "seven"


def find_symbol(symbols: Sequence[Symbol], name: str) -> int | None:
    """Index of the symbol called ``name`` in a table, or None if absent."""
    for index, symbol in enumerate(symbols):
        if symbol.name == name:
            return index
    return None


@dataclass(frozen=True)
class Payout:
    """
    Result of evaluating a spin.

    Attributes:
        amount: Credits won (0 for a losing spin)
        label: Winning combination, e.g. "3x 🍒" (None when nothing hit)
    """
    amount: int = 0
    label: str | None = None

    @property
    def is_win(self) -> bool:
        return self.amount > 0


class WeightedSymbolDrawer:
    """Draws symbol indices with probability proportional to weight."""

    TOTAL_WEIGHT: ClassVar[int] = 100

    def __init__(self, symbols: Sequence[Symbol] = SYMBOLS) -> None:
        self.symbols = tuple(symbols)
        self.weights = validate_weights(
            [s.weight for s in self.symbols], expected_total=self.TOTAL_WEIGHT
        )
        self.total_weight = sum(self.weights)

    def draw(self, rng: random.Random) -> int:
        """
        Draw one symbol index.

        A uniform value in [0, total) has each weight subtracted in symbol
        order; the symbol that takes the remainder to zero or below wins.

        Args:
            rng: Random source

        Returns:
            Index into the symbol table
        """
        remainder = rng.random() * self.total_weight
        for index, weight in enumerate(self.weights):
            remainder -= weight
            if remainder <= 0:
                return index
        return 0

    def draw_reels(self, rng: random.Random, count: int = 3) -> tuple[int, ...]:
        return tuple(self.draw(rng) for _ in range(count))


class PayoutEvaluator:
    """Stateless payout rules for a three-reel line."""

    # A matching pair pays a fifth of the three-of-a-kind rate.
    PAIR_DIVISOR: ClassVar[int] = 5
    ANY_SEVEN_MULTIPLIER: ClassVar[int] = 2
    TWO_CHERRY_MULTIPLIER: ClassVar[int] = 1

    @classmethod
    def evaluate(
        cls,
        reels: Sequence[int],
        bet: int,
        symbols: Sequence[Symbol] = SYMBOLS,
    ) -> Payout:
        """
        Evaluate a spin.

        Args:
            reels: Three symbol indices, left to right
            bet: Credits wagered on the spin
            symbols: Symbol table the indices refer to

        Returns:
            Payout with the amount won and the winning combination
        """
        if len(reels) != 3:
            raise ValueError(f"Exactly 3 reels required, got {len(reels)}.")
        left, middle, right = reels

        if left == middle == right:
            symbol = symbols[left]
            return Payout(bet * symbol.payout, f"3x {symbol}")
        if left == middle or middle == right:
            symbol = symbols[middle]
            return Payout(bet * symbol.payout // cls.PAIR_DIVISOR, f"2x {symbol}")

        # Tables without a seven or a cherry simply skip those rules.
        seven = find_symbol(symbols, SEVEN)
        if seven is not None and seven in reels:
            return Payout(bet * cls.ANY_SEVEN_MULTIPLIER, "Lucky 7!")
        cherry = find_symbol(symbols, CHERRY)
        if cherry is not None and list(reels).count(cherry) >= 2:
            return Payout(bet * cls.TWO_CHERRY_MULTIPLIER, f"2x {symbols[cherry]}")
        return Payout()
