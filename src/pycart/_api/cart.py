"""Cart endpoints.

Endpoints:
  - GET    /cart
  - POST   /cart
  - PATCH  /cart/{id}
  - DELETE /cart/{id}
"""

from __future__ import annotations

import asyncio
import logging

from pycart._api._common import parse_collection, parse_record
from pycart._constants import CART_PATH, cart_item_path
from pycart._transport import JsonTransport
from pycart.exceptions import NotFoundError, PartialCheckoutError
from pycart.models.cart import CartItem
from pycart.models.requests import CreateCartItemRequest, UpdateCartItemRequest

_logger = logging.getLogger(__name__)


async def fetch_cart(transport: JsonTransport) -> list[CartItem]:
    payload = await transport.request("GET", CART_PATH)
    items = parse_collection(CartItem, payload, endpoint=CART_PATH)
    _logger.debug("Cart fetched count=%d", len(items))
    return items


async def create_cart_item(transport: JsonTransport, request: CreateCartItemRequest) -> CartItem:
    """Create a cart line and return the store's canonical record."""
    payload = await transport.request("POST", CART_PATH, request.model_dump())
    return parse_record(CartItem, payload, endpoint=CART_PATH)


async def update_cart_item(transport: JsonTransport, item_id: int, request: UpdateCartItemRequest) -> CartItem:
    """Patch the committed amount of an existing line.

    Raises :class:`NotFoundError` when the line does not exist.
    """
    path = cart_item_path(item_id)
    payload = await transport.request("PATCH", path, request.model_dump())
    return parse_record(CartItem, payload, endpoint=path)


async def delete_cart_item(transport: JsonTransport, item_id: int) -> None:
    """Delete a cart line.  Deleting a line that is already gone succeeds."""
    path = cart_item_path(item_id)
    try:
        await transport.request("DELETE", path)
    except NotFoundError:
        _logger.debug("Cart line id=%s already absent", item_id)


async def checkout(transport: JsonTransport) -> list[int]:
    """Delete every line of the store's current cart concurrently.

    Returns the ids that were removed.  When any delete fails a
    :class:`PartialCheckoutError` is raised once all deletes have settled;
    lines that were removed stay removed.
    """
    lines = await fetch_cart(transport)
    ids = [line.id for line in lines]
    results = await asyncio.gather(
        *(delete_cart_item(transport, item_id) for item_id in ids),
        return_exceptions=True,
    )

    removed: list[int] = []
    failed: dict[int, BaseException] = {}
    for item_id, result in zip(ids, results, strict=True):
        if isinstance(result, BaseException):
            failed[item_id] = result
        else:
            removed.append(item_id)

    if failed:
        _logger.warning("Checkout incomplete failed=%s removed=%s", sorted(failed), removed)
        raise PartialCheckoutError(failed, removed)
    _logger.debug("Checkout removed=%s", removed)
    return removed
