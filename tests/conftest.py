"""
Klondike - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import os
import random
from typing import Callable

import pytest

from klondike.config.settings import get_settings
from klondike.engine.base import FOUNDATION_SUITS, Card, Rank, Suit
from klondike.engine.deal import deal
from klondike.engine.deck import shuffled_deck
from klondike.engine.state import GameState


# =============================================================================
# SETTINGS ISOLATION
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Drop KLONDIKE_* variables and the cached Settings around every test."""
    for key in list(os.environ):
        if key.startswith("KLONDIKE_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# CARD FACTORIES
# =============================================================================

@pytest.fixture
def up() -> Callable[[Suit, Rank], Card]:
    """Factory for face-up cards."""
    def make(suit: Suit, rank: Rank) -> Card:
        return Card(suit=suit, rank=rank, face_up=True)
    return make


@pytest.fixture
def down() -> Callable[[Suit, Rank], Card]:
    """Factory for face-down cards."""
    def make(suit: Suit, rank: Rank) -> Card:
        return Card(suit=suit, rank=rank, face_up=False)
    return make


@pytest.fixture
def table() -> Callable[..., GameState]:
    """
    Build a GameState from partial pile lists.

    Tableau piles may be given as a short list (padded to seven) or as a
    dict of index -> pile. Foundations may be a dict of Suit -> pile.
    """
    def make(stock=(), waste=(), tableau=None, foundations=None) -> GameState:
        piles = [()] * 7
        if isinstance(tableau, dict):
            for index, pile in tableau.items():
                piles[index] = pile
        elif tableau is not None:
            for index, pile in enumerate(tableau):
                piles[index] = pile

        founds = [()] * 4
        for suit, pile in (foundations or {}).items():
            founds[FOUNDATION_SUITS.index(suit)] = pile

        return GameState.from_piles(stock=stock, waste=waste, tableau=piles, foundations=founds)
    return make


# =============================================================================
# GAME STATE FIXTURES
# =============================================================================

@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def fresh_state() -> GameState:
    """A freshly dealt game from a fixed seed."""
    return deal(shuffled_deck(seed=42))
