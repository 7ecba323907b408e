"""
Klondike - Game State

Immutable snapshot of the four pile groups. Every accepted move produces a
new GameState; nothing in this module mutates an existing one.
"""

from dataclasses import dataclass, field, replace

from klondike.engine.base import FOUNDATION_SUITS, TABLEAU_PILES, Card, Suit

Pile = tuple[Card, ...]


def top_of(pile: Pile) -> Card | None:
    """Return the top (last) card of a pile, or None if it is empty."""
    return pile[-1] if pile else None


def _expose_top(pile: Pile) -> Pile:
    """Turn the top card of a pile face-up, leaving the rest alone."""
    if not pile or pile[-1].face_up:
        return pile
    return pile[:-1] + (pile[-1].face_up_copy(),)


@dataclass(frozen=True)
class GameState:
    """
    Complete state of a Klondike game.

    Attributes:
        stock: Face-down reserve; index 0 is the next card drawn
        waste: Face-up cards drawn from the stock; last is the top
        tableau: The seven playing piles, bottom-to-top
        foundations: Four piles, index i fixed to FOUNDATION_SUITS[i]
    """
    stock: Pile = field(default_factory=tuple)
    waste: Pile = field(default_factory=tuple)
    tableau: tuple[Pile, ...] = field(
        default_factory=lambda: tuple(() for _ in range(TABLEAU_PILES))
    )
    foundations: tuple[Pile, ...] = field(
        default_factory=lambda: tuple(() for _ in FOUNDATION_SUITS)
    )

    def __post_init__(self) -> None:
        """Validate pile group structure."""
        if len(self.tableau) != TABLEAU_PILES:
            raise ValueError(
                f"Tableau must have exactly {TABLEAU_PILES} piles, got {len(self.tableau)}"
            )
        if len(self.foundations) != len(FOUNDATION_SUITS):
            raise ValueError(
                f"Foundations must have exactly {len(FOUNDATION_SUITS)} piles, "
                f"got {len(self.foundations)}"
            )

    @classmethod
    def from_piles(
        cls,
        stock=(),
        waste=(),
        tableau=None,
        foundations=None,
    ) -> "GameState":
        """Create a GameState from any sequence types (lists are converted)."""
        tableau = tableau if tableau is not None else [()] * TABLEAU_PILES
        foundations = foundations if foundations is not None else [()] * len(FOUNDATION_SUITS)
        return cls(
            stock=tuple(stock),
            waste=tuple(waste),
            tableau=tuple(tuple(pile) for pile in tableau),
            foundations=tuple(tuple(pile) for pile in foundations),
        )

    # -- Read accessors --------------------------------------------------

    @property
    def stock_size(self) -> int:
        return len(self.stock)

    @property
    def waste_top(self) -> Card | None:
        return top_of(self.waste)

    def tableau_pile(self, index: int) -> Pile:
        return self.tableau[index]

    def tableau_top(self, index: int) -> Card | None:
        return top_of(self.tableau[index])

    def foundation(self, suit: Suit) -> Pile:
        return self.foundations[FOUNDATION_SUITS.index(suit)]

    def foundation_top(self, suit: Suit) -> Card | None:
        return top_of(self.foundation(suit))

    def pile_sizes(self) -> dict[str, object]:
        """Sizes of every pile, for telling empty piles from non-empty ones."""
        return {
            "stock": len(self.stock),
            "waste": len(self.waste),
            "tableau": tuple(len(pile) for pile in self.tableau),
            "foundations": tuple(len(pile) for pile in self.foundations),
        }

    def all_cards(self) -> tuple[Card, ...]:
        """Every card in the game, in stock, waste, tableau, foundation order."""
        cards: list[Card] = [*self.stock, *self.waste]
        for pile in self.tableau:
            cards.extend(pile)
        for pile in self.foundations:
            cards.extend(pile)
        return tuple(cards)

    # -- Transitions -----------------------------------------------------

    def with_tableau_pile(self, index: int, pile: Pile, *, expose_top: bool = False) -> "GameState":
        """Return a new state with one tableau pile replaced."""
        if expose_top:
            pile = _expose_top(pile)
        piles = list(self.tableau)
        piles[index] = pile
        return replace(self, tableau=tuple(piles))

    def with_foundation(self, suit: Suit, pile: Pile) -> "GameState":
        """Return a new state with one foundation pile replaced."""
        piles = list(self.foundations)
        piles[FOUNDATION_SUITS.index(suit)] = pile
        return replace(self, foundations=tuple(piles))
