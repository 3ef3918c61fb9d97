"""Pure reducers for staging and cart synchronization.

Nothing here performs I/O.  Each function takes the current snapshot and
returns the next one (or a plan describing the store call to make), which
keeps the controller down to "plan, call, apply".
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, TypeVar

from pycart.exceptions import CartPreconditionError, UnknownItemError
from pycart.models.cart import CartItem
from pycart.models.inventory import InventoryItem, Staged
from pycart.models.requests import CreateCartItemRequest


class _Identified(Protocol):
    @property
    def id(self) -> int: ...


ItemT = TypeVar("ItemT", bound=_Identified)


@dataclass(frozen=True, slots=True)
class NoOp:
    """Nothing is staged; no store call is needed."""

    item_id: int


@dataclass(frozen=True, slots=True)
class CreateLine:
    """The item is not in the cart yet: create a line."""

    request: CreateCartItemRequest

    @property
    def item_id(self) -> int:
        return self.request.id

    @property
    def staged(self) -> int:
        return self.request.amount


@dataclass(frozen=True, slots=True)
class UpdateLine:
    """The item is already in the cart: raise its committed amount."""

    item_id: int
    amount: int
    staged: int
    """Part of ``amount`` taken from the staged quantity."""


CommitPlan = NoOp | CreateLine | UpdateLine


def find_item(items: Iterable[ItemT], item_id: int) -> ItemT | None:
    for item in items:
        if item.id == item_id:
            return item
    return None


def _require_inventory_item(inventory: tuple[InventoryItem, ...], item_id: int) -> InventoryItem:
    item = find_item(inventory, item_id)
    if item is None:
        raise UnknownItemError(item_id)
    return item


def stage(inventory: tuple[InventoryItem, ...], item_id: int, delta: int) -> tuple[InventoryItem, ...]:
    """Adjust the staged amount of one item by *delta*, clamped at 0."""
    current = _require_inventory_item(inventory, item_id)
    updated = current.with_amount(current.amount + delta)
    return tuple(updated if item.id == item_id else item for item in inventory)


def release_staged(inventory: tuple[InventoryItem, ...], item_id: int, committed: int) -> tuple[InventoryItem, ...]:
    """Take a committed quantity off the staged amount of one item.

    Clicks staged while the commit was in flight are kept.
    """
    if find_item(inventory, item_id) is None:
        return inventory
    return stage(inventory, item_id, -committed)


def plan_commit(
    inventory: tuple[InventoryItem, ...],
    cart: tuple[CartItem, ...],
    item_id: int,
) -> CommitPlan:
    """Decide how to commit the staged amount of *item_id*.

    The staged amount is added to an existing line, never substituted
    for it.
    """
    item = _require_inventory_item(inventory, item_id)
    staging = item.staging
    if not isinstance(staging, Staged):
        return NoOp(item_id)

    line = find_item(cart, item_id)
    if line is not None:
        return UpdateLine(item_id=item_id, amount=line.amount + staging.amount, staged=staging.amount)
    return CreateLine(CreateCartItemRequest(id=item.id, content=item.content, amount=staging.amount))


def apply_created(cart: tuple[CartItem, ...], created: CartItem) -> tuple[CartItem, ...]:
    """Append a newly created line.

    If a line with the same id arrived in the meantime it is replaced in
    place, so the cart never holds two lines for one id.
    """
    if find_item(cart, created.id) is not None:
        return tuple(created if line.id == created.id else line for line in cart)
    return (*cart, created)


def apply_updated(cart: tuple[CartItem, ...], updated: CartItem) -> tuple[CartItem, ...]:
    """Swap in the store's record for an existing line, leaving the others untouched."""
    if find_item(cart, updated.id) is None:
        raise CartPreconditionError(f"cart line id={updated.id} is absent; it must be created, not updated")
    return tuple(updated if line.id == updated.id else line for line in cart)


def apply_deleted(cart: tuple[CartItem, ...], item_id: int) -> tuple[CartItem, ...]:
    return tuple(line for line in cart if line.id != item_id)


def apply_checkout(cart: tuple[CartItem, ...], removed_ids: Iterable[int]) -> tuple[CartItem, ...]:
    """Drop every line the store confirmed as removed."""
    removed = set(removed_ids)
    return tuple(line for line in cart if line.id not in removed)
