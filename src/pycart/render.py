"""Renderers turning collections into display markup."""

from __future__ import annotations

from collections.abc import Sequence
from html import escape
from typing import Protocol

from pycart.models.cart import CartItem
from pycart.models.inventory import InventoryItem


class Renderer(Protocol):
    """Receives the full collection on every change and redraws it wholesale."""

    def render_inventory(self, items: Sequence[InventoryItem]) -> None: ...

    def render_cart(self, items: Sequence[CartItem]) -> None: ...


def inventory_markup(items: Sequence[InventoryItem]) -> str:
    parts: list[str] = []
    for item in items:
        parts.append(
            "<li>"
            f"<span>{escape(item.content)}</span>"
            '<div class="amount-controls">'
            f'<button class="decrease-btn" data-id="{item.id}">-</button>'
            f"<span>{item.amount}</span>"
            f'<button class="increase-btn" data-id="{item.id}">+</button>'
            f'<button class="add-to-cart-btn" data-id="{item.id}">add to cart</button>'
            "</div>"
            "</li>"
        )
    return "".join(parts)


def cart_markup(items: Sequence[CartItem]) -> str:
    parts: list[str] = []
    for item in items:
        parts.append(
            "<li>"
            f"<span>{escape(item.content)}</span>"
            f"<span>x {item.amount}</span>"
            f'<button class="delete-btn" data-id="{item.id}">Delete</button>'
            "</li>"
        )
    return "".join(parts)


class HtmlRenderer:
    """Renders both lists as HTML and keeps the latest markup."""

    def __init__(self) -> None:
        self.inventory_markup = ""
        self.cart_markup = ""

    def render_inventory(self, items: Sequence[InventoryItem]) -> None:
        self.inventory_markup = inventory_markup(items)

    def render_cart(self, items: Sequence[CartItem]) -> None:
        self.cart_markup = cart_markup(items)
