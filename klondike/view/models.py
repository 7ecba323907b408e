"""
Klondike - View Models

Pydantic models the view layer renders from. A face-down card is sent
with its suit and rank withheld, and the stock is reported by size only.
"""

from pydantic import BaseModel, Field

from klondike.engine.base import FOUNDATION_SUITS, Card
from klondike.engine.state import GameState, Pile


class CardView(BaseModel):
    """A card as shown on the table."""

    face_up: bool
    suit: str | None = None
    rank: str | None = None
    label: str | None = None
    color: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_card(cls, card: Card) -> "CardView":
        if not card.face_up:
            return cls(face_up=False)
        return cls(
            face_up=True,
            suit=card.suit.value,
            rank=card.rank.label,
            label=str(card),
            color=card.color.value,
        )


class PileView(BaseModel):
    """A pile with every card's visible side."""

    cards: list[CardView] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def size(self) -> int:
        return len(self.cards)

    @property
    def top(self) -> CardView | None:
        return self.cards[-1] if self.cards else None

    @classmethod
    def from_pile(cls, pile: Pile) -> "PileView":
        return cls(cards=[CardView.from_card(card) for card in pile])


class TableView(BaseModel):
    """Everything the view layer needs to draw the table."""

    stock_size: int = Field(ge=0)
    waste_size: int = Field(ge=0)
    waste_top: CardView | None = None
    foundations: dict[str, CardView | None]
    foundation_sizes: dict[str, int]
    tableau: list[PileView]

    model_config = {"frozen": True}


def render_table(state: GameState) -> TableView:
    """Build the read-only table view for a game state."""
    foundations: dict[str, CardView | None] = {}
    foundation_sizes: dict[str, int] = {}
    for suit in FOUNDATION_SUITS:
        top = state.foundation_top(suit)
        foundations[suit.value] = CardView.from_card(top) if top is not None else None
        foundation_sizes[suit.value] = len(state.foundation(suit))

    waste_top = state.waste_top

    return TableView(
        stock_size=state.stock_size,
        waste_size=len(state.waste),
        waste_top=CardView.from_card(waste_top) if waste_top is not None else None,
        foundations=foundations,
        foundation_sizes=foundation_sizes,
        tableau=[PileView.from_pile(pile) for pile in state.tableau],
    )
