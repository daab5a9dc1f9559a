"""
Berra's Casino - Outcome Event Tests

Tests for outcome events and the outcome emitter.
"""

import logging
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from src.engine.outcomes import GameKind, OutcomeEmitter, OutcomeEvent, OutcomeKind


# ── OutcomeKind / GameKind ─────────────────────────────────────────────

class TestEnums:
    def test_all_outcomes_defined(self):
        expected = {"WIN", "LOSE", "PUSH", "BLACKJACK", "GAME_OVER", "RESCUE"}
        assert {k.name for k in OutcomeKind} == expected

    def test_game_kinds(self):
        assert {g.value for g in GameKind} == {"blackjack", "yatzy", "slots"}


# ── OutcomeEvent ───────────────────────────────────────────────────────

class TestOutcomeEvent:
    def test_minimal_event(self):
        event = OutcomeEvent(game=GameKind.SLOTS, kind=OutcomeKind.LOSE)
        assert event.amount == 0
        assert event.label is None
        assert event.message == ""

    def test_accepts_enum_values(self):
        event = OutcomeEvent(game="yatzy", kind="game_over", amount=250)
        assert event.game is GameKind.YATZY
        assert event.kind is OutcomeKind.GAME_OVER

    def test_is_frozen(self):
        event = OutcomeEvent(game=GameKind.BLACKJACK, kind=OutcomeKind.WIN, amount=200)
        with pytest.raises(ValidationError):
            event.amount = 0

    def test_rejects_unknown_kind(self):
        with pytest.raises(ValidationError):
            OutcomeEvent(game=GameKind.BLACKJACK, kind="jackpot")


# ── OutcomeEmitter ─────────────────────────────────────────────────────

@pytest.fixture
def event():
    return OutcomeEvent(game=GameKind.BLACKJACK, kind=OutcomeKind.PUSH, amount=100)


class TestOutcomeEmitter:
    def test_delivers_to_subscribers(self, event):
        emitter = OutcomeEmitter()
        first, second = MagicMock(), MagicMock()
        emitter.subscribe(first)
        emitter.subscribe(second)

        emitter.emit(event)

        first.assert_called_once_with(event)
        second.assert_called_once_with(event)

    def test_unsubscribe(self, event):
        emitter = OutcomeEmitter()
        callback = MagicMock()
        unsubscribe = emitter.subscribe(callback)
        assert emitter.subscriber_count == 1

        unsubscribe()
        unsubscribe()
        emitter.emit(event)

        callback.assert_not_called()
        assert emitter.subscriber_count == 0

    def test_failing_subscriber_is_logged(self, event, caplog):
        emitter = OutcomeEmitter()
        after = MagicMock()
        emitter.subscribe(MagicMock(side_effect=RuntimeError("redraw failed")))
        emitter.subscribe(after)

        with caplog.at_level(logging.ERROR, logger="src.engine.outcomes"):
            emitter.emit(event)

        after.assert_called_once_with(event)
        assert "redraw failed" in caplog.text

    def test_emit_without_subscribers(self, event):
        OutcomeEmitter().emit(event)
