"""Data models for the collection store."""

from pycart.models._base import CartBaseModel
from pycart.models.cart import CartItem
from pycart.models.inventory import InventoryItem, Staged, Staging, Unstaged
from pycart.models.requests import CreateCartItemRequest, UpdateCartItemRequest

__all__ = [
    "CartBaseModel",
    "CartItem",
    "CreateCartItemRequest",
    "InventoryItem",
    "Staged",
    "Staging",
    "Unstaged",
    "UpdateCartItemRequest",
]
