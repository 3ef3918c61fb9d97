"""Cart line model."""

from __future__ import annotations

from pydantic import Field

from pycart.models._base import CartBaseModel


class CartItem(CartBaseModel):
    """Server-confirmed cart line.

    ``id`` matches the id of the inventory item the line was drawn from.
    """

    id: int
    content: str
    amount: int = Field(gt=0)
    """Committed quantity."""
