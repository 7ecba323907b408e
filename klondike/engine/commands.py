"""
Klondike - Move Commands

Typed messages a view layer sends to the move engine. Each command names
one of the three legal move kinds and its parameters.
"""

from dataclasses import dataclass
from enum import Enum


class Source(Enum):
    """Non-tableau source of a foundation move."""
    WASTE = "waste"


WASTE = Source.WASTE

# Either the waste or a tableau pile index (0-6)
PileRef = Source | int


@dataclass(frozen=True)
class DrawFromStock:
    """Turn the next stock card onto the waste, or recycle an empty stock."""

    def __str__(self) -> str:
        return "draw"


@dataclass(frozen=True)
class MoveToFoundation:
    """
    Move the top card of the waste or a tableau pile to its foundation.

    Attributes:
        source: WASTE or a tableau pile index
    """
    source: PileRef

    def __str__(self) -> str:
        if self.source is WASTE:
            return "waste -> foundation"
        return f"tableau[{self.source}] -> foundation"


@dataclass(frozen=True)
class MoveTableauToTableau:
    """
    Move the top card of one tableau pile onto another.

    Attributes:
        from_index: Source tableau pile
        to_index: Destination tableau pile
    """
    from_index: int
    to_index: int

    def __str__(self) -> str:
        return f"tableau[{self.from_index}] -> tableau[{self.to_index}]"


Command = DrawFromStock | MoveToFoundation | MoveTableauToTableau
