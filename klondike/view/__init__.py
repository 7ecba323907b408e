"""
Klondike Read Surface.

Render-ready pydantic models that never expose face-down cards.
"""

from klondike.view.models import CardView, PileView, TableView, render_table

__all__ = ["CardView", "PileView", "TableView", "render_table"]
