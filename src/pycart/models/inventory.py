"""Inventory item model and its staging state."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from pycart.models._base import CartBaseModel


class Staged(BaseModel):
    """A positive quantity staged locally and not yet committed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["staged"] = "staged"
    amount: int = Field(gt=0)


class Unstaged(BaseModel):
    """Nothing staged for the item."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unstaged"] = "unstaged"


Staging = Staged | Unstaged


class InventoryItem(CartBaseModel):
    """Catalog entry with a locally staged quantity.

    ``amount`` is UI-local state.  The store never sees it until the item
    is committed to the cart.
    """

    id: int
    """Server-assigned identifier."""
    content: str
    """Display label."""
    amount: int = Field(default=0, ge=0)
    """Staged, uncommitted quantity."""

    @property
    def staging(self) -> Staging:
        if self.amount > 0:
            return Staged(amount=self.amount)
        return Unstaged()

    def with_amount(self, amount: int) -> InventoryItem:
        """Return a copy with the staged amount set (clamped at 0)."""
        return self.model_copy(update={"amount": max(0, int(amount))})
