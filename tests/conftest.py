"""
Berra's Casino - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random
from typing import Callable, Iterable, Sequence

import pytest

from src.engine.cards import Card
from src.engine.outcomes import OutcomeEmitter, OutcomeEvent
from src.engine.scheduler import ManualScheduler


# =============================================================================
# DETERMINISTIC RANDOMNESS
# =============================================================================

class StackedDeckRandom(random.Random):
    """Random whose shuffle puts chosen cards on top of the deck.

    ``draws`` lists cards in the order they will be dealt: player, player,
    dealer, dealer, then every later hit or dealer draw.
    """

    def __init__(self, draws: Sequence[Card]) -> None:
        super().__init__(0)
        self.draws = list(draws)

    def shuffle(self, x: list) -> None:
        rest = [card for card in x if card not in self.draws]
        x[:] = rest + list(reversed(self.draws))


class ScriptedRandom(random.Random):
    """Random that replays fixed integer and float sequences."""

    def __init__(self, ints: Iterable[int] = (), floats: Iterable[float] = ()) -> None:
        super().__init__(0)
        self._ints = iter(ints)
        self._floats = iter(floats)

    def randint(self, a: int, b: int) -> int:
        value = next(self._ints)
        assert a <= value <= b
        return value

    def random(self) -> float:
        return next(self._floats)


def cards(*specs: str) -> tuple[Card, ...]:
    """Build cards from short strings such as "A♠" or "10♥"."""
    return tuple(Card(spec[:-1], spec[-1]) for spec in specs)


@pytest.fixture
def make_hand() -> Callable[..., tuple[Card, ...]]:
    """Factory turning short strings into a tuple of cards."""
    return cards


@pytest.fixture
def stacked_rng()-> Callable[..., StackedDeckRandom]:
    """Factory for a deck shuffler that deals the given cards first."""
    def _make(*specs: str) -> StackedDeckRandom:
        return StackedDeckRandom(cards(*specs))
    return _make


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory for a Random replaying scripted values."""
    return ScriptedRandom


# =============================================================================
# EVENTS AND SCHEDULING
# =============================================================================

@pytest.fixture
def emitter() -> OutcomeEmitter:
    return OutcomeEmitter()


@pytest.fixture
def outcomes(emitter: OutcomeEmitter) -> list[OutcomeEvent]:
    """Every outcome event published on the shared emitter."""
    received: list[OutcomeEvent] = []
    emitter.subscribe(received.append)
    return received


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    return ManualScheduler()


# =============================================================================
# YATZY SCORING TEST DATA
# =============================================================================

@pytest.fixture
def yatzy_scoring_rolls() -> dict[str, tuple[tuple[int, ...], str, int]]:
    """
    Dice patterns with an expected category score.

    Returns:
        Dict mapping name to (dice_values, category_key, expected_points)
    """
    return {
        "ones": ((1, 1, 2, 3, 1), "ones", 3),
        "sixes": ((6, 6, 6, 2, 6), "sixes", 24),
        "no_fours": ((1, 2, 3, 5, 6), "fours", 0),
        "three_of_kind": ((2, 2, 3, 3, 3), "three_of_kind", 13),
        "three_of_kind_miss": ((1, 2, 3, 3, 5), "three_of_kind", 0),
        "four_of_kind": ((4, 4, 4, 4, 1), "four_of_kind", 17),
        "four_of_kind_from_yahtzee": ((5, 5, 5, 5, 5), "four_of_kind", 25),
        "full_house": ((2, 2, 3, 3, 3), "full_house", 25),
        "full_house_yahtzee_is_not": ((5, 5, 5, 5, 5), "full_house", 0),
        "small_straight_low": ((1, 2, 3, 4, 6), "small_straight", 30),
        "small_straight_dupes": ((3, 4, 4, 5, 6), "small_straight", 30),
        "small_straight_miss": ((1, 2, 4, 5, 6), "small_straight", 0),
        "large_straight_low": ((5, 3, 1, 4, 2), "large_straight", 40),
        "large_straight_high": ((2, 3, 4, 5, 6), "large_straight", 40),
        "large_straight_miss": ((1, 2, 3, 4, 6), "large_straight", 0),
        "yahtzee": ((3, 3, 3, 3, 3), "yahtzee", 50),
        "yahtzee_miss": ((3, 3, 3, 3, 2), "yahtzee", 0),
        "chance": ((1, 2, 3, 4, 6), "chance", 16),
    }
