"""
Klondike Game Session.

Game state container and the events it publishes to the view layer.
"""

from klondike.session.events import EventPayload, GameEvent, classify_move
from klondike.session.manager import GameSession

__all__ = [
    "EventPayload",
    "GameEvent",
    "GameSession",
    "classify_move",
]
