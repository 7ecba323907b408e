"""
Klondike - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so a game
state can be shared between snapshots without aliasing.
"""

from dataclasses import dataclass, replace
from enum import Enum
from functools import total_ordering


class Color(Enum):
    """Suit color, used for alternating-color tableau building."""
    BLACK = "black"
    RED = "red"


class Suit(Enum):
    """Card suits in canonical (deck and foundation) order."""
    SPADE = "spade"
    HEART = "heart"
    DIAMOND = "diamond"
    CLUB = "club"

    @property
    def glyph(self) -> str:
        return _SUIT_GLYPHS[self]

    @property
    def color(self) -> Color:
        if self in (Suit.HEART, Suit.DIAMOND):
            return Color.RED
        return Color.BLACK


_SUIT_GLYPHS: dict[Suit, str] = {
    Suit.SPADE: "♠",
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
}


@total_ordering
class Rank(Enum):
    """Card ranks, Ace low."""
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __lt__(self, other: "Rank") -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value

    @property
    def label(self) -> str:
        return _RANK_LABELS.get(self, str(self.value))

    @property
    def successor(self) -> "Rank | None":
        """The next rank up, or None for a King."""
        if self is Rank.KING:
            return None
        return Rank(self.value + 1)

    @property
    def predecessor(self) -> "Rank | None":
        """The next rank down, or None for an Ace."""
        if self is Rank.ACE:
            return None
        return Rank(self.value - 1)


_RANK_LABELS: dict[Rank, str] = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


class RecycleOrder(Enum):
    """How the waste is returned to the stock once the stock runs out.

    Recycled cards are turned face-down in either order.
    """
    PRESERVE = "preserve"  # same order, draw sequence repeats
    REVERSE = "reverse"    # turned over as a whole


class EmptyTableauRule(Enum):
    """Which cards may start an empty tableau pile."""
    ANY_CARD = "any_card"
    KING_ONLY = "king_only"


@dataclass(frozen=True)
class Card:
    """
    Immutable playing card.

    Attributes:
        suit: The card's suit
        rank: The card's rank
        face_up: Orientation; not part of the card's identity
    """
    suit: Suit
    rank: Rank
    face_up: bool = False

    def __post_init__(self) -> None:
        """Validate suit and rank types."""
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit {self.suit!r}. Must be a Suit.")
        if not isinstance(self.rank, Rank):
            raise ValueError(f"Invalid rank {self.rank!r}. Must be a Rank.")

    @property
    def identity(self) -> tuple[Suit, Rank]:
        """The (suit, rank) pair that is unique within a deck."""
        return (self.suit, self.rank)

    @property
    def color(self) -> Color:
        return self.suit.color

    def face_up_copy(self) -> "Card":
        """Return this card turned face-up."""
        if self.face_up:
            return self
        return replace(self, face_up=True)

    def face_down_copy(self) -> "Card":
        """Return this card turned face-down."""
        if not self.face_up:
            return self
        return replace(self, face_up=False)

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.glyph}"


@dataclass(frozen=True)
class RuleSet:
    """
    Rule options for the move engine.

    Attributes:
        recycle_order: Order of the stock after recycling the waste
        empty_tableau_rule: Which cards may start an empty tableau pile
    """
    recycle_order: RecycleOrder = RecycleOrder.PRESERVE
    empty_tableau_rule: EmptyTableauRule = EmptyTableauRule.ANY_CARD

    def __post_init__(self) -> None:
        """Validate rule option types."""
        if not isinstance(self.recycle_order, RecycleOrder):
            raise ValueError(f"Invalid recycle order {self.recycle_order!r}.")
        if not isinstance(self.empty_tableau_rule, EmptyTableauRule):
            raise ValueError(f"Invalid empty tableau rule {self.empty_tableau_rule!r}.")


DECK_SIZE = 52
TABLEAU_PILES = 7
FOUNDATION_SUITS: tuple[Suit, ...] = tuple(Suit)
