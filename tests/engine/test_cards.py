"""
Berra's Casino - Card Tests

Tests for cards, deck building and blackjack hand evaluation.
"""

import random

import pytest

from src.engine.cards import RANKS, SUITS, Card, HandEvaluator, build_deck


class TestCard:
    """Tests for the Card value object."""

    def test_valid_card(self):
        card = Card("10", "♥")
        assert card.rank == "10"
        assert card.suit == "♥"
        assert str(card) == "10♥"

    def test_invalid_rank(self):
        with pytest.raises(ValueError, match="Invalid rank"):
            Card("1", "♠")

    def test_invalid_suit(self):
        with pytest.raises(ValueError, match="Invalid suit"):
            Card("A", "x")

    def test_is_ace(self):
        assert Card("A", "♣").is_ace
        assert not Card("K", "♣").is_ace

    @pytest.mark.parametrize("suit,red", [("♥", True), ("♦", True), ("♠", False), ("♣", False)])
    def test_is_red(self, suit, red):
        assert Card("7", suit).is_red is red

    def test_cards_are_immutable(self):
        card = Card("Q", "♦")
        with pytest.raises(AttributeError):
            card.rank = "K"


class TestBuildDeck:
    """Tests for build_deck()."""

    def test_has_52_unique_cards(self):
        deck = build_deck(random.Random(1))
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_covers_every_rank_and_suit(self):
        deck = build_deck()
        assert {(c.rank, c.suit) for c in deck} == {(r, s) for r in RANKS for s in SUITS}

    def test_unshuffled_order_is_suit_major(self):
        deck = build_deck()
        assert deck[0] == Card("A", "♠")
        assert deck[12] == Card("K", "♠")
        assert deck[-1] == Card("K", "♣")

    def test_same_seed_same_order(self):
        assert build_deck(random.Random(42)) == build_deck(random.Random(42))

    def test_shuffle_changes_order(self):
        assert build_deck(random.Random(7)) != build_deck()


class TestHandValue:
    """Tests for HandEvaluator.value()."""

    def test_empty_hand(self):
        assert HandEvaluator.value(()) == 0

    def test_faces_count_ten(self, make_hand):
        assert HandEvaluator.value(make_hand("K♠", "Q♥")) == 20
        assert HandEvaluator.value(make_hand("J♦", "5♣")) == 15

    def test_soft_ace(self, make_hand):
        assert HandEvaluator.value(make_hand("A♠", "6♥")) == 17

    def test_two_aces_and_nine(self, make_hand):
        assert HandEvaluator.value(make_hand("A♠", "A♥", "9♣")) == 21

    def test_three_aces_and_eight(self, make_hand):
        """Only as many aces as needed drop to 1."""
        assert HandEvaluator.value(make_hand("A♠", "A♥", "A♦", "8♣")) == 21

    def test_ace_goes_hard_when_needed(self, make_hand):
        assert HandEvaluator.value(make_hand("A♠", "6♥", "9♣")) == 16

    def test_bust_without_aces(self, make_hand):
        assert HandEvaluator.value(make_hand("K♠", "Q♥", "5♣")) == 25

    def test_four_aces(self, make_hand):
        assert HandEvaluator.value(make_hand("A♠", "A♥", "A♦", "A♣")) == 14

    @pytest.mark.parametrize("rank,expected", [("A", 11), ("2", 2), ("10", 10), ("J", 10), ("K", 10)])
    def test_card_value(self, rank, expected):
        assert HandEvaluator.card_value(Card(rank, "♠")) == expected


class TestNaturalAndBust:
    """Tests for is_natural() and is_bust()."""

    def test_ace_king_is_natural(self, make_hand):
        assert HandEvaluator.is_natural(make_hand("A♠", "K♥")) is True

    def test_three_card_21_is_not_natural(self, make_hand):
        assert HandEvaluator.is_natural(make_hand("A♠", "5♥", "5♣")) is False

    def test_twenty_is_not_natural(self, make_hand):
        assert HandEvaluator.is_natural(make_hand("K♠", "Q♥")) is False

    def test_bust(self, make_hand):
        assert HandEvaluator.is_bust(make_hand("K♠", "Q♥", "2♣")) is True
        assert HandEvaluator.is_bust(make_hand("K♠", "A♥", "K♣")) is False
