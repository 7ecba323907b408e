"""
Klondike - In-process API

State-in, state-out functions for a UI layer that keeps the snapshot
itself. Rejected moves return the state they were given.
"""

from klondike.config.settings import get_settings
from klondike.engine.base import RuleSet
from klondike.engine.commands import PileRef
from klondike.engine.deal import deal_new_game
from klondike.engine.moves import KlondikeEngine
from klondike.engine.state import GameState


def _rules(rules: RuleSet | None) -> RuleSet:
    return rules if rules is not None else get_settings().rules()


def new_game(seed: int | None = None) -> GameState:
    """Shuffle and deal a new game (seed falls back to the configured one)."""
    if seed is None:
        seed = get_settings().seed
    return deal_new_game(seed)


def draw_from_stock(state: GameState, rules: RuleSet | None = None) -> GameState:
    return KlondikeEngine.draw_from_stock(state, _rules(rules)).state


def move_to_foundation(state: GameState, source: PileRef) -> GameState:
    return KlondikeEngine.move_to_foundation(state, source).state


def move_tableau_to_tableau(
    state: GameState,
    from_index: int,
    to_index: int,
    rules: RuleSet | None = None,
) -> GameState:
    return KlondikeEngine.move_tableau_to_tableau(state, from_index, to_index, _rules(rules)).state
