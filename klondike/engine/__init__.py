"""
Klondike Game Engine.

Pure Python game logic with zero UI/config dependencies.
Handles deck building, shuffling, the deal and move legality.
"""

from klondike.engine.base import (
    Card,
    Color,
    EmptyTableauRule,
    Rank,
    RecycleOrder,
    RuleSet,
    Suit,
)
from klondike.engine.commands import (
    WASTE,
    Command,
    DrawFromStock,
    MoveTableauToTableau,
    MoveToFoundation,
    Source,
)
from klondike.engine.deal import deal, deal_new_game
from klondike.engine.deck import build_deck, shuffle, shuffled_deck
from klondike.engine.moves import KlondikeEngine, MoveResult, RejectReason
from klondike.engine.state import GameState
from klondike.engine.validators import InvalidDeckError

__all__ = [
    # Data Classes
    "Card",
    "GameState",
    "MoveResult",
    "RuleSet",
    # Enums
    "Color",
    "EmptyTableauRule",
    "Rank",
    "RecycleOrder",
    "RejectReason",
    "Source",
    "Suit",
    # Commands
    "Command",
    "DrawFromStock",
    "MoveTableauToTableau",
    "MoveToFoundation",
    "WASTE",
    # Deck & deal
    "build_deck",
    "deal",
    "deal_new_game",
    "shuffle",
    "shuffled_deck",
    # Engines
    "KlondikeEngine",
    # Errors
    "InvalidDeckError",
]
