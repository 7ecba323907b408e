"""
Klondike - Input Validation Utilities

Provides validation functions for game engine inputs. Deck validation raises
InvalidDeckError because a bad deck is a caller bug. Index checks return a
bool because an out-of-range pile index is ordinary player input that the
move engine rejects as a no-op.
"""

from collections import Counter
from typing import Sequence

from klondike.engine.base import DECK_SIZE, TABLEAU_PILES, Card


class InvalidDeckError(ValueError):
    """Raised when a deck is not a complete, duplicate-free 52-card set."""


def validate_deck(cards: Sequence[Card]) -> tuple[Card, ...]:
    """
    Validate that a deck is a complete 52-card set.

    Args:
        cards: Sequence of cards to validate

    Returns:
        Validated cards as a tuple

    Raises:
        InvalidDeckError: If the deck has the wrong size, a non-Card
            element or a duplicated card
    """
    cards_tuple = tuple(cards)

    if len(cards_tuple) != DECK_SIZE:
        raise InvalidDeckError(
            f"Deck must contain exactly {DECK_SIZE} cards, got {len(cards_tuple)}."
        )

    for i, card in enumerate(cards_tuple):
        if not isinstance(card, Card):
            raise InvalidDeckError(
                f"Deck element at index {i} must be a Card, got {type(card).__name__}."
            )

    counts = Counter(card.identity for card in cards_tuple)
    duplicates = sorted(
        f"{rank.label}{suit.glyph}"
        for (suit, rank), count in counts.items()
        if count > 1
    )
    if duplicates:
        raise InvalidDeckError(f"Deck contains duplicate cards: {', '.join(duplicates)}.")

    return cards_tuple


def is_valid_tableau_index(index: object) -> bool:
    """
    Check whether a value addresses one of the tableau piles.

    Args:
        index: Candidate pile index

    Returns:
        True for an int in 0-6 (bools are rejected)
    """
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < TABLEAU_PILES
