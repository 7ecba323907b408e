"""
Klondike solitaire rule engine.

Deck building, dealing and move legality for a single-player Klondike
game, plus a session container and render-ready views for a UI layer.
"""

from klondike.api import (
    draw_from_stock,
    move_tableau_to_tableau,
    move_to_foundation,
    new_game,
)

__all__ = [
    "draw_from_stock",
    "move_tableau_to_tableau",
    "move_to_foundation",
    "new_game",
]
