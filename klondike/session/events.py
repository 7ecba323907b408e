"""
Klondike - Session Event Definitions

Event types and payloads sent to the view layer after each command.
"""

from dataclasses import dataclass
from enum import Enum, auto

from klondike.engine.commands import (
    Command,
    DrawFromStock,
    MoveTableauToTableau,
    MoveToFoundation,
)
from klondike.engine.moves import MoveResult, RejectReason
from klondike.engine.state import GameState


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    CARD_DRAWN = auto()
    STOCK_RECYCLED = auto()
    CARD_TO_FOUNDATION = auto()
    CARD_TO_TABLEAU = auto()
    MOVE_REJECTED = auto()


@dataclass
class EventPayload:
    """Wrapper for event data delivered to subscribers."""

    event: GameEvent
    state: GameState
    command: Command | None = None
    reason: RejectReason | None = None


def classify_move(before: GameState, command: Command, result: MoveResult) -> GameEvent:
    """Determine the game event produced by applying a command."""
    if not result.accepted:
        return GameEvent.MOVE_REJECTED

    if isinstance(command, DrawFromStock):
        if before.stock:
            return GameEvent.CARD_DRAWN
        return GameEvent.STOCK_RECYCLED
    if isinstance(command, MoveToFoundation):
        return GameEvent.CARD_TO_FOUNDATION
    if isinstance(command, MoveTableauToTableau):
        return GameEvent.CARD_TO_TABLEAU

    raise TypeError(f"Unknown command type {type(command).__name__}.")
