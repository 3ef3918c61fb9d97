"""High-level async client for the collection store."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import aiohttp

from pycart._api import cart as _cart_api
from pycart._api import inventory as _inventory_api
from pycart._transport import HttpTransport, JsonTransport
from pycart.config import CartConfig
from pycart.exceptions import CartError
from pycart.models.cart import CartItem
from pycart.models.inventory import InventoryItem
from pycart.models.requests import CreateCartItemRequest, UpdateCartItemRequest

_logger = logging.getLogger(__name__)


class RemoteStore(Protocol):
    """Operations the controller needs from the remote store."""

    async def fetch_inventory(self) -> list[InventoryItem]: ...

    async def fetch_cart(self) -> list[CartItem]: ...

    async def create_cart_item(self, item: CreateCartItemRequest) -> CartItem: ...

    async def update_cart_item(self, item_id: int, amount: int) -> CartItem: ...

    async def delete_cart_item(self, item_id: int) -> None: ...

    async def checkout(self) -> list[int]: ...


class CartStoreClient:
    """Async client for the ``inventory`` / ``cart`` collection store.

    Usage::

        async with CartStoreClient(config) as client:
            inventory = await client.fetch_inventory()
            cart = await client.fetch_cart()
    """

    def __init__(
        self,
        config: CartConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: JsonTransport | None = None,
    ) -> None:
        self._config = config or CartConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: JsonTransport | None = transport
        self._external_transport = transport is not None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> CartStoreClient:
        if self._external_transport:
            return self
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if self._external_transport:
            return
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    @property
    def config(self) -> CartConfig:
        return self._config

    def _require_transport(self) -> JsonTransport:
        if self._transport is None:
            raise CartError("Client not initialized. Use 'async with CartStoreClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def fetch_inventory(self) -> list[InventoryItem]:
        """Fetch the catalog; staged amounts start at 0."""
        return await _inventory_api.fetch_inventory(self._require_transport())

    async def fetch_cart(self) -> list[CartItem]:
        """Fetch the committed cart lines."""
        return await _cart_api.fetch_cart(self._require_transport())

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create_cart_item(self, item: CreateCartItemRequest | InventoryItem) -> CartItem:
        """Create a cart line from a request or a staged inventory item."""
        if isinstance(item, InventoryItem):
            item = CreateCartItemRequest(id=item.id, content=item.content, amount=item.amount)
        _logger.debug("Creating cart line id=%s amount=%s", item.id, item.amount)
        return await _cart_api.create_cart_item(self._require_transport(), item)

    async def update_cart_item(self, item_id: int, amount: int) -> CartItem:
        """Set the committed amount of an existing cart line."""
        request = UpdateCartItemRequest(amount=amount)
        _logger.debug("Updating cart line id=%s amount=%s", item_id, amount)
        return await _cart_api.update_cart_item(self._require_transport(), item_id, request)

    async def delete_cart_item(self, item_id: int) -> None:
        """Delete a cart line (idempotent)."""
        _logger.debug("Deleting cart line id=%s", item_id)
        await _cart_api.delete_cart_item(self._require_transport(), item_id)

    async def checkout(self) -> list[int]:
        """Delete every line of the store's cart; returns the removed ids."""
        return await _cart_api.checkout(self._require_transport())
