"""
Berra's Casino Game Engines.

Pure Python game logic with zero UI dependencies.
Handles card and dice rules, reel payouts, round state and bankrolls.
"""

from src.engine.base import GameEngine
from src.engine.blackjack import BlackjackEngine, BlackjackState, RoundPhase
from src.engine.cards import Card, HandEvaluator, build_deck
from src.engine.outcomes import GameKind, OutcomeEmitter, OutcomeEvent, OutcomeKind
from src.engine.scheduler import DisplayScheduler, ImmediateScheduler, ManualScheduler
from src.engine.slots import BetDirection, SlotsEngine, SlotsState
from src.engine.slots_rules import SYMBOLS, Payout, PayoutEvaluator, Symbol, WeightedSymbolDrawer
from src.engine.yatzy import YatzyEngine, YatzyState
from src.engine.yatzy_rules import BonusCalculator, Category, CategoryRuleSet, Section

__all__ = [
    # Data Classes
    "BlackjackState",
    "Card",
    "OutcomeEvent",
    "Payout",
    "SlotsState",
    "Symbol",
    "YatzyState",
    # Enums
    "BetDirection",
    "Category",
    "GameKind",
    "OutcomeKind",
    "RoundPhase",
    "Section",
    # Rules
    "BonusCalculator",
    "CategoryRuleSet",
    "HandEvaluator",
    "PayoutEvaluator",
    "SYMBOLS",
    "WeightedSymbolDrawer",
    "build_deck",
    # Engines
    "BlackjackEngine",
    "GameEngine",
    "SlotsEngine",
    "YatzyEngine",
    # Plumbing
    "DisplayScheduler",
    "ImmediateScheduler",
    "ManualScheduler",
    "OutcomeEmitter",
]
