"""
Klondike - Move Engine

Validates and applies the three legal move kinds:
- Draw: stock to waste, or recycle the waste once the stock is empty
- Foundation: top of the waste or a tableau pile onto its suit's foundation,
  building up from Ace
- Tableau: top of one tableau pile onto another, building down in
  alternating colors

Only the single top card ever moves. Illegal moves are not errors: they
come back as a rejected MoveResult carrying the unchanged input state.

All methods are stateless class methods operating on immutable data.
"""

from dataclasses import dataclass
from enum import Enum

from klondike.engine.base import (
    Card,
    EmptyTableauRule,
    Rank,
    RecycleOrder,
    RuleSet,
)
from klondike.engine.commands import (
    WASTE,
    Command,
    DrawFromStock,
    MoveTableauToTableau,
    MoveToFoundation,
    PileRef,
)
from klondike.engine.state import GameState, top_of
from klondike.engine.validators import is_valid_tableau_index


class RejectReason(Enum):
    """Why a move was turned down."""
    INVALID_INDEX = "invalid_index"
    SAME_PILE = "same_pile"
    EMPTY_SOURCE = "empty_source"
    ILLEGAL_PLACEMENT = "illegal_placement"


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a move.

    Attributes:
        state: The new state if accepted, otherwise the input state itself
        accepted: Whether the move was legal and applied
        reason: Why the move was rejected (None when accepted)
    """
    state: GameState
    accepted: bool
    reason: RejectReason | None = None

    @classmethod
    def ok(cls, state: GameState) -> "MoveResult":
        return cls(state=state, accepted=True)

    @classmethod
    def rejected(cls, state: GameState, reason: RejectReason) -> "MoveResult":
        return cls(state=state, accepted=False, reason=reason)


class KlondikeEngine:
    """
    Stateless engine for Klondike move legality.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    DEFAULT_RULES = RuleSet()

    # -- Legality checks -------------------------------------------------

    @classmethod
    def can_move_to_foundation(cls, card: Card, foundation_top: Card | None) -> bool:
        """
        Check whether a card may go onto a foundation.

        An empty foundation takes only an Ace; otherwise the card must be the
        next rank up. The caller picks the foundation by the card's suit.
        """
        if foundation_top is None:
            return card.rank is Rank.ACE
        return foundation_top.rank.successor is card.rank

    @classmethod
    def can_stack_on_tableau(
        cls,
        card: Card,
        target_top: Card | None,
        rules: RuleSet = DEFAULT_RULES,
    ) -> bool:
        """
        Check whether a card may go onto a tableau pile.

        Args:
            card: Card being moved
            target_top: Top card of the destination pile (None if empty)
            rules: Rule options (empty pile policy)

        Returns:
            True if the placement is legal
        """
        if target_top is None:
            if rules.empty_tableau_rule is EmptyTableauRule.KING_ONLY:
                return card.rank is Rank.KING
            return True
        if not target_top.face_up:
            return False
        return card.rank.successor is target_top.rank and card.color != target_top.color

    # -- Moves -----------------------------------------------------------

    @classmethod
    def draw_from_stock(cls, state: GameState, rules: RuleSet = DEFAULT_RULES) -> MoveResult:
        """
        Draw the next stock card onto the waste, face-up.

        With an empty stock the whole waste is recycled into the stock face
        down, in the order chosen by rules.recycle_order. Always accepted.
        """
        if state.stock:
            card = state.stock[0].face_up_copy()
            return MoveResult.ok(GameState(
                stock=state.stock[1:],
                waste=state.waste + (card,),
                tableau=state.tableau,
                foundations=state.foundations,
            ))

        if not state.waste:
            return MoveResult.ok(state)

        recycled = state.waste
        if rules.recycle_order is RecycleOrder.REVERSE:
            recycled = recycled[::-1]

        return MoveResult.ok(GameState(
            stock=tuple(card.face_down_copy() for card in recycled),
            waste=(),
            tableau=state.tableau,
            foundations=state.foundations,
        ))

    @classmethod
    def move_to_foundation(cls, state: GameState, source: PileRef) -> MoveResult:
        """
        Move the top card of the waste or a tableau pile to its foundation.

        Args:
            state: Current game state
            source: WASTE or a tableau pile index (0-6)

        Returns:
            MoveResult; on success the source's new top is turned face-up
        """
        if source is WASTE:
            pile = state.waste
        elif is_valid_tableau_index(source):
            pile = state.tableau[source]
        else:
            return MoveResult.rejected(state, RejectReason.INVALID_INDEX)

        card = top_of(pile)
        if card is None:
            return MoveResult.rejected(state, RejectReason.EMPTY_SOURCE)

        if not cls.can_move_to_foundation(card, state.foundation_top(card.suit)):
            return MoveResult.rejected(state, RejectReason.ILLEGAL_PLACEMENT)

        new_state = state.with_foundation(
            card.suit, state.foundation(card.suit) + (card.face_up_copy(),)
        )
        if source is WASTE:
            new_state = GameState(
                stock=new_state.stock,
                waste=pile[:-1],
                tableau=new_state.tableau,
                foundations=new_state.foundations,
            )
        else:
            new_state = new_state.with_tableau_pile(source, pile[:-1], expose_top=True)

        return MoveResult.ok(new_state)

    @classmethod
    def move_tableau_to_tableau(
        cls,
        state: GameState,
        from_index: int,
        to_index: int,
        rules: RuleSet = DEFAULT_RULES,
    ) -> MoveResult:
        """
        Move the top card of one tableau pile onto another.

        Args:
            state: Current game state
            from_index: Source pile (0-6)
            to_index: Destination pile (0-6)
            rules: Rule options (empty pile policy)

        Returns:
            MoveResult; on success the source's new top is turned face-up
        """
        if not (is_valid_tableau_index(from_index) and is_valid_tableau_index(to_index)):
            return MoveResult.rejected(state, RejectReason.INVALID_INDEX)
        if from_index == to_index:
            return MoveResult.rejected(state, RejectReason.SAME_PILE)

        from_pile = state.tableau[from_index]
        to_pile = state.tableau[to_index]

        card = top_of(from_pile)
        if card is None:
            return MoveResult.rejected(state, RejectReason.EMPTY_SOURCE)

        if not cls.can_stack_on_tableau(card, top_of(to_pile), rules):
            return MoveResult.rejected(state, RejectReason.ILLEGAL_PLACEMENT)

        new_state = state.with_tableau_pile(to_index, to_pile + (card,))
        new_state = new_state.with_tableau_pile(from_index, from_pile[:-1], expose_top=True)
        return MoveResult.ok(new_state)

    # -- Dispatch --------------------------------------------------------

    @classmethod
    def apply(cls, state: GameState, command: Command, rules: RuleSet = DEFAULT_RULES) -> MoveResult:
        """
        Apply a typed command to a state.

        Raises:
            TypeError: If the command is not one of the known move kinds
        """
        if isinstance(command, DrawFromStock):
            return cls.draw_from_stock(state, rules)
        if isinstance(command, MoveToFoundation):
            return cls.move_to_foundation(state, command.source)
        if isinstance(command, MoveTableauToTableau):
            return cls.move_tableau_to_tableau(state, command.from_index, command.to_index, rules)
        raise TypeError(f"Unknown command type {type(command).__name__}.")
