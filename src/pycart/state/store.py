"""Observable in-memory application state.

Collections are only ever replaced as a whole, so the change callback
always observes a fully consistent snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from pycart.models.cart import CartItem
from pycart.models.inventory import InventoryItem

_logger = logging.getLogger(__name__)

ChangeCallback = Callable[[], None]


class StateContainer:
    """Holds the inventory and cart snapshots.

    A single change callback can be registered.  Registering another one
    replaces it.  Every write invokes the callback exactly once,
    synchronously, after the new snapshot is in place.
    """

    def __init__(self) -> None:
        self._inventory: tuple[InventoryItem, ...] = ()
        self._cart: tuple[CartItem, ...] = ()
        self._on_change: ChangeCallback | None = None

    @property
    def inventory(self) -> tuple[InventoryItem, ...]:
        return self._inventory

    @inventory.setter
    def inventory(self, items: Iterable[InventoryItem]) -> None:
        self._inventory = tuple(items)
        self._notify()

    @property
    def cart(self) -> tuple[CartItem, ...]:
        return self._cart

    @cart.setter
    def cart(self, items: Iterable[CartItem]) -> None:
        self._cart = tuple(items)
        self._notify()

    def replace(
        self,
        *,
        inventory: Iterable[InventoryItem] | None = None,
        cart: Iterable[CartItem] | None = None,
    ) -> None:
        """Replace one or both collections with a single notification."""
        if inventory is None and cart is None:
            return
        if inventory is not None:
            self._inventory = tuple(inventory)
        if cart is not None:
            self._cart = tuple(cart)
        self._notify()

    def subscribe(self, callback: ChangeCallback) -> ChangeCallback | None:
        """Register the change callback, returning the one it replaces."""
        previous = self._on_change
        self._on_change = callback
        return previous

    def unsubscribe(self) -> None:
        self._on_change = None

    def _notify(self) -> None:
        callback = self._on_change
        if callback is None:
            return
        _logger.debug("State changed inventory=%d cart=%d", len(self._inventory), len(self._cart))
        callback()
