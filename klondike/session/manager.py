"""
Klondike - Game Session

Holds the current game snapshot, routes typed commands through the move
engine and notifies subscribers (the view layer) after every command.
"""

from __future__ import annotations

import logging
import random
from typing import Callable

from klondike.config.settings import get_settings
from klondike.engine.base import RuleSet
from klondike.engine.commands import (
    Command,
    DrawFromStock,
    MoveTableauToTableau,
    MoveToFoundation,
    PileRef,
)
from klondike.engine.deal import deal_new_game
from klondike.engine.moves import KlondikeEngine, MoveResult
from klondike.engine.state import GameState
from klondike.session.events import EventPayload, GameEvent, classify_move

logger = logging.getLogger(__name__)

Subscriber = Callable[[EventPayload], None]


def _fresh_deal(seed: int | None, rng: random.Random | None) -> GameState:
    if seed is None and rng is None:
        seed = get_settings().seed
    state = deal_new_game(seed, rng)
    logger.info("New game dealt (seed=%s)", seed)
    return state


class GameSession:
    """Single-owner container for a game's state.

    The state is never mutated in place: each accepted command swaps in
    the new snapshot returned by the engine. Rejected commands leave the
    snapshot untouched.
    """

    def __init__(self, state: GameState, rules: RuleSet | None = None) -> None:
        self._state = state
        self._rules = rules if rules is not None else get_settings().rules()
        self._subscribers: list[Subscriber] = []

    @classmethod
    def new(
        cls,
        seed: int | None = None,
        rules: RuleSet | None = None,
        *,
        rng: random.Random | None = None,
    ) -> GameSession:
        """Create a session with a freshly shuffled and dealt game.

        Args:
            seed: Shuffle seed, for replayable deals (defaults to the configured seed).
            rules: Rule options (defaults to the configured rules).
            rng: Random generator to shuffle with; overrides seed.
        """
        return cls(_fresh_deal(seed, rng), rules)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def rules(self) -> RuleSet:
        return self._rules

    # -- Subscriptions ---------------------------------------------------

    def subscribe(self, on_event: Subscriber) -> Callable[[], None]:
        """Register a callback for game events.

        Returns:
            A callable that removes the subscription.
        """
        self._subscribers.append(on_event)

        def unsubscribe() -> None:
            if on_event in self._subscribers:
                self._subscribers.remove(on_event)

        return unsubscribe

    def _notify(self, payload: EventPayload) -> None:
        for callback in list(self._subscribers):
            try:
                callback(payload)
            except Exception:
                logger.exception("Error in subscriber for event %s", payload.event.name)

    # -- Game lifecycle --------------------------------------------------

    def new_game(self, seed: int | None = None, *, rng: random.Random | None = None) -> GameState:
        """Replace the current game with a new deal and announce it."""
        self._state = _fresh_deal(seed, rng)
        self._notify(EventPayload(event=GameEvent.GAME_STARTED, state=self._state))
        return self._state

    # -- Commands --------------------------------------------------------

    def dispatch(self, command: Command) -> MoveResult:
        """Apply a command to the current state.

        On acceptance the snapshot is replaced before subscribers are told.

        Raises:
            TypeError: If the command is not a known move kind.
        """
        before = self._state
        result = KlondikeEngine.apply(before, command, self._rules)
        event = classify_move(before, command, result)

        if result.accepted:
            self._state = result.state
            logger.debug("Applied %s (%s)", command, event.name)
        else:
            logger.debug("Rejected %s: %s", command, result.reason.value)

        self._notify(EventPayload(
            event=event,
            state=self._state,
            command=command,
            reason=result.reason,
        ))
        return result

    def draw_from_stock(self) -> MoveResult:
        return self.dispatch(DrawFromStock())

    def move_to_foundation(self, source: PileRef) -> MoveResult:
        return self.dispatch(MoveToFoundation(source))

    def move_tableau_to_tableau(self, from_index: int, to_index: int) -> MoveResult:
        return self.dispatch(MoveTableauToTableau(from_index, to_index))
