"""
Tests for the render-ready table views.
"""

import pytest
from pydantic import ValidationError

from klondike.engine.base import Rank, Suit
from klondike.view.models import CardView, PileView, TableView, render_table


class TestCardView:
    """Tests for CardView."""

    def test_face_up_card_shown(self, up):
        view = CardView.from_card(up(Suit.HEART, Rank.TEN))
        assert view.face_up
        assert view.suit == "heart"
        assert view.rank == "10"
        assert view.label == "10♥"
        assert view.color == "red"

    def test_face_down_card_hidden(self, down):
        view = CardView.from_card(down(Suit.SPADE, Rank.KING))
        assert view == CardView(face_up=False)
        assert view.model_dump() == {
            "face_up": False, "suit": None, "rank": None, "label": None, "color": None,
        }

    def test_frozen(self, up):
        view = CardView.from_card(up(Suit.HEART, Rank.TEN))
        with pytest.raises(ValidationError):
            view.face_up = False


class TestPileView:
    def test_size_and_top(self, up, down):
        view = PileView.from_pile((down(Suit.CLUB, Rank.SIX), up(Suit.DIAMOND, Rank.ACE)))
        assert view.size == 2
        assert view.top.label == "A♦"
        assert view.cards[0].suit is None

    def test_empty(self):
        view = PileView.from_pile(())
        assert view.size == 0
        assert view.top is None


class TestRenderTable:
    """Tests for render_table."""

    def test_fresh_deal(self, fresh_state):
        view = render_table(fresh_state)

        assert isinstance(view, TableView)
        assert view.stock_size == 24
        assert view.waste_size == 0
        assert view.waste_top is None
        assert [pile.size for pile in view.tableau] == [1, 2, 3, 4, 5, 6, 7]
        assert view.foundations == {"spade": None, "heart": None, "diamond": None, "club": None}
        assert view.foundation_sizes == {"spade": 0, "heart": 0, "diamond": 0, "club": 0}

    def test_face_down_tableau_cards_do_not_leak(self, fresh_state):
        view = render_table(fresh_state)
        for pile_view, pile in zip(view.tableau, fresh_state.tableau):
            assert pile_view.top.label == str(pile[-1])
            for hidden in pile_view.cards[:-1]:
                assert hidden == CardView(face_up=False)

    def test_stock_not_exposed(self, fresh_state):
        dumped = render_table(fresh_state).model_dump()
        assert "stock" not in dumped
        hidden_labels = {str(card) for card in fresh_state.stock}
        shown_labels = {
            card["label"] for pile in dumped["tableau"] for card in pile["cards"] if card["label"]
        }
        assert hidden_labels.isdisjoint(shown_labels)

    def test_waste_and_foundations(self, table, up):
        state = table(
            waste=(up(Suit.CLUB, Rank.NINE), up(Suit.HEART, Rank.FOUR)),
            foundations={Suit.SPADE: (up(Suit.SPADE, Rank.ACE), up(Suit.SPADE, Rank.TWO))},
        )
        view = render_table(state)

        assert view.waste_size == 2
        assert view.waste_top.label == "4♥"
        assert view.foundations["spade"].label == "2♠"
        assert view.foundation_sizes["spade"] == 2
        assert view.foundations["heart"] is None

    def test_json_round_trip_shape(self, fresh_state):
        payload = render_table(fresh_state).model_dump_json()
        assert TableView.model_validate_json(payload) == render_table(fresh_state)
