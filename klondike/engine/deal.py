"""
Klondike - Deal Engine

Lays a shuffled deck out into the opening position: seven tableau piles of
one to seven cards with only the last card of each turned up, and the
remaining 24 cards face-down in the stock.
"""

import random
from typing import Sequence

from klondike.engine.base import TABLEAU_PILES, Card
from klondike.engine.deck import build_deck, shuffle
from klondike.engine.state import GameState
from klondike.engine.validators import validate_deck


def deal(shuffled_deck: Sequence[Card]) -> GameState:
    """
    Deal the opening layout from a complete deck.

    Cards are consumed in deck order: pile 0 takes the first card, pile 1
    the next two, and so on up to pile 6 with seven.

    Args:
        shuffled_deck: A complete, duplicate-free 52-card deck

    Returns:
        The opening GameState (waste and foundations empty)

    Raises:
        InvalidDeckError: If the deck is not a complete 52-card set
    """
    cards = validate_deck(shuffled_deck)

    tableau: list[tuple[Card, ...]] = []
    position = 0
    for pile_index in range(TABLEAU_PILES):
        size = pile_index + 1
        dealt = cards[position:position + size]
        position += size
        tableau.append(
            tuple(card.face_down_copy() for card in dealt[:-1]) + (dealt[-1].face_up_copy(),)
        )

    stock = tuple(card.face_down_copy() for card in cards[position:])

    return GameState(stock=stock, tableau=tuple(tableau))


def deal_new_game(seed: int | None = None, rng: random.Random | None = None) -> GameState:
    """Shuffle a fresh deck and deal it. An explicit rng takes precedence over seed."""
    if rng is None:
        rng = random.Random(seed)
    return deal(shuffle(build_deck(), rng))
