"""Inventory endpoint: GET /inventory."""

from __future__ import annotations

import logging
from typing import Any

from pycart._api._common import parse_collection
from pycart._constants import INVENTORY_PATH
from pycart._transport import JsonTransport
from pycart.models.inventory import InventoryItem

_logger = logging.getLogger(__name__)


def _unstaged(records: list[Any]) -> list[Any]:
    # Staged amounts are client-side only; whatever the store sends is dropped.
    return [{**record, "amount": 0, "raw": record} if isinstance(record, dict) else record for record in records]


async def fetch_inventory(transport: JsonTransport) -> list[InventoryItem]:
    """Fetch the catalog with every staged amount set to 0."""
    payload = await transport.request("GET", INVENTORY_PATH)
    if isinstance(payload, list):
        payload = _unstaged(payload)
    items = parse_collection(InventoryItem, payload, endpoint=INVENTORY_PATH)
    _logger.debug("Inventory fetched count=%d", len(items))
    return items
