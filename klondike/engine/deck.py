"""
Klondike - Deck Builder

Builds the canonical 52-card deck and shuffles it with an injectable
random generator so games can be replayed from a seed.
"""

import random
from typing import Sequence

from klondike.engine.base import Card, Rank, Suit


def build_deck() -> tuple[Card, ...]:
    """
    Build the 52-card deck in canonical order.

    Suit-major (spade, heart, diamond, club), rank-minor (Ace to King).
    All cards face-down.
    """
    return tuple(Card(suit=suit, rank=rank) for suit in Suit for rank in Rank)


def shuffle(cards: Sequence[Card], rng: random.Random | None = None) -> tuple[Card, ...]:
    """
    Return a uniformly shuffled copy of a card sequence.

    Fisher-Yates: walking i from the last index down to 1, swap position i
    with a uniformly chosen position in [0, i].

    Args:
        cards: Cards to shuffle (left untouched)
        rng: Random generator to draw from (a fresh unseeded one if omitted)

    Returns:
        A new tuple holding the same cards in random order
    """
    if rng is None:
        rng = random.Random()

    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return tuple(shuffled)


def shuffled_deck(seed: int | None = None) -> tuple[Card, ...]:
    """Build a fresh deck and shuffle it, reproducibly when a seed is given."""
    return shuffle(build_deck(), random.Random(seed))
