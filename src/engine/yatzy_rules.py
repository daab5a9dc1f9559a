"""
Berra's Casino - Yatzy Scoring Rules

The 13 scoring categories and the upper-section bonus. All methods are
stateless class methods operating on immutable dice tuples.

Upper section:
    - Ones..Sixes: sum of the dice showing that face

Lower section:
    - Three / Four of a Kind: sum of all dice if enough dice match
    - Full House (3 + 2): 25
    - Small Straight (four in a row): 30
    - Large Straight (five in a row): 40
    - Yahtzee (five of a kind): 50
    - Chance: sum of all dice

Bonus: +35 when the locked upper-section scores reach 63.
"""

from collections import Counter
from enum import Enum
from typing import ClassVar, Mapping, Sequence


class Section(Enum):
    """Scorecard sections."""
    UPPER = "upper"
    LOWER = "lower"


class Category(Enum):
    """Scoring categories, in scorecard order."""
    ONES = "ones"
    TWOS = "twos"
    THREES = "threes"
    FOURS = "fours"
    FIVES = "fives"
    SIXES = "sixes"
    THREE_OF_KIND = "three_of_kind"
    FOUR_OF_KIND = "four_of_kind"
    FULL_HOUSE = "full_house"
    SMALL_STRAIGHT = "small_straight"
    LARGE_STRAIGHT = "large_straight"
    YAHTZEE = "yahtzee"
    CHANCE = "chance"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def section(self) -> Section:
        return Section.UPPER if self in _UPPER_FACES else Section.LOWER

    @classmethod
    def parse(cls, key: "Category | str") -> "Category | None":
        """Look up a category by enum member or key string; None if unknown."""
        if isinstance(key, Category):
            return key
        try:
            return cls(key)
        except ValueError:
            return None


_UPPER_FACES: dict[Category, int] = {
    Category.ONES: 1,
    Category.TWOS: 2,
    Category.THREES: 3,
    Category.FOURS: 4,
    Category.FIVES: 5,
    Category.SIXES: 6,
}

_DISPLAY_NAMES: dict[Category, str] = {
    Category.ONES: "Ones",
    Category.TWOS: "Twos",
    Category.THREES: "Threes",
    Category.FOURS: "Fours",
    Category.FIVES: "Fives",
    Category.SIXES: "Sixes",
    Category.THREE_OF_KIND: "Three of a Kind",
    Category.FOUR_OF_KIND: "Four of a Kind",
    Category.FULL_HOUSE: "Full House",
    Category.SMALL_STRAIGHT: "Small Straight",
    Category.LARGE_STRAIGHT: "Large Straight",
    Category.YAHTZEE: "Yahtzee",
    Category.CHANCE: "Chance",
}

UPPER_CATEGORIES = tuple(_UPPER_FACES)
LOWER_CATEGORIES = tuple(c for c in Category if c not in _UPPER_FACES)


class CategoryRuleSet:
    """Stateless scoring for the 13 categories."""

    FULL_HOUSE_POINTS: ClassVar[int] = 25
    SMALL_STRAIGHT_POINTS: ClassVar[int] = 30
    LARGE_STRAIGHT_POINTS: ClassVar[int] = 40
    YAHTZEE_POINTS: ClassVar[int] = 50

    SMALL_STRAIGHTS: ClassVar[tuple[frozenset[int], ...]] = (
        frozenset({1, 2, 3, 4}),
        frozenset({2, 3, 4, 5}),
        frozenset({3, 4, 5, 6}),
    )
    LARGE_STRAIGHTS: ClassVar[tuple[tuple[int, ...], ...]] = (
        (1, 2, 3, 4, 5),
        (2, 3, 4, 5, 6),
    )

    @classmethod
    def sum_of_face(cls, dice: Sequence[int], face: int) -> int:
        return sum(d for d in dice if d == face)

    @classmethod
    def has_n_of_kind(cls, dice: Sequence[int], n: int) -> bool:
        """True if at least n dice share a value."""
        return any(count >= n for count in Counter(dice).values())

    @classmethod
    def is_full_house(cls, dice: Sequence[int]) -> bool:
        counts = sorted(Counter(dice).values())
        return 3 in counts and 2 in counts

    @classmethod
    def is_small_straight(cls, dice: Sequence[int]) -> bool:
        distinct = set(dice)
        return any(run <= distinct for run in cls.SMALL_STRAIGHTS)

    @classmethod
    def is_large_straight(cls, dice: Sequence[int]) -> bool:
        return tuple(sorted(dice)) in cls.LARGE_STRAIGHTS

    @classmethod
    def score(cls, category: Category, dice: Sequence[int]) -> int:
        """
        Score dice in a single category.

        Args:
            category: Category to score
            dice: Five dice values

        Returns:
            Points the dice would lock in that category
        """
        if category in _UPPER_FACES:
            return cls.sum_of_face(dice, _UPPER_FACES[category])

        if category == Category.THREE_OF_KIND:
            return sum(dice) if cls.has_n_of_kind(dice, 3) else 0
        if category == Category.FOUR_OF_KIND:
            return sum(dice) if cls.has_n_of_kind(dice, 4) else 0
        if category == Category.FULL_HOUSE:
            return cls.FULL_HOUSE_POINTS if cls.is_full_house(dice) else 0
        if category == Category.SMALL_STRAIGHT:
            return cls.SMALL_STRAIGHT_POINTS if cls.is_small_straight(dice) else 0
        if category == Category.LARGE_STRAIGHT:
            return cls.LARGE_STRAIGHT_POINTS if cls.is_large_straight(dice) else 0
        if category == Category.YAHTZEE:
            return cls.YAHTZEE_POINTS if cls.has_n_of_kind(dice, 5) else 0
        if category == Category.CHANCE:
            return sum(dice)

        raise ValueError(f"Unknown category {category!r}")

    @classmethod
    def score_all(cls, dice: Sequence[int]) -> dict[Category, int]:
        """Potential score for every category, in scorecard order."""
        return {category: cls.score(category, dice) for category in Category}


class BonusCalculator:
    """Upper-section bonus and game totals, recomputed from locked scores."""

    UPPER_BONUS_THRESHOLD: ClassVar[int] = 63
    UPPER_BONUS: ClassVar[int] = 35

    @classmethod
    def upper_total(cls, scores: Mapping[Category, int]) -> int:
        """Sum of locked upper-section scores; unlocked categories count 0."""
        return sum(scores.get(category, 0) for category in UPPER_CATEGORIES)

    @classmethod
    def upper_bonus(cls, scores: Mapping[Category, int]) -> int:
        if cls.upper_total(scores) >= cls.UPPER_BONUS_THRESHOLD:
            return cls.UPPER_BONUS
        return 0

    @classmethod
    def total(cls, scores: Mapping[Category, int]) -> int:
        """All locked scores plus the upper bonus."""
        return sum(scores.values()) + cls.upper_bonus(scores)
