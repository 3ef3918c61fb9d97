"""Controller binding UI events to the state container and the store.

Every handler follows the same shape: read the current snapshot, check
preconditions, issue at most one store call, and on success publish one
new snapshot.  A failed call leaves the cart untouched, keeps the staged
amounts so the user can adjust them, and is reported and re-raised.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from pycart.client import RemoteStore
from pycart.config import CartConfig
from pycart.exceptions import PartialCheckoutError
from pycart.models.cart import CartItem
from pycart.render import Renderer
from pycart.state.inflight import InFlightGuard
from pycart.state.reconcile import (
    CreateLine,
    NoOp,
    apply_checkout,
    apply_created,
    apply_deleted,
    apply_updated,
    plan_commit,
    release_staged,
    stage,
)
from pycart.state.store import StateContainer

_logger = logging.getLogger(__name__)

ErrorCallback = Callable[[str, int | None, BaseException], None]


class UiAction(StrEnum):
    """UI controls, named after the class of the element that fires them."""

    DECREASE = "decrease-btn"
    INCREASE = "increase-btn"
    ADD_TO_CART = "add-to-cart-btn"
    DELETE = "delete-btn"
    CHECKOUT = "checkout-btn"


_ITEM_ACTIONS = frozenset({UiAction.DECREASE, UiAction.INCREASE, UiAction.ADD_TO_CART, UiAction.DELETE})


class UiEvent(BaseModel):
    """A click on one of the UI controls."""

    model_config = ConfigDict(frozen=True)

    action: UiAction
    item_id: int | None = None

    @classmethod
    def from_control(cls, css_class: str, data_id: str | None = None) -> UiEvent:
        """Build an event from the clicked element's class and ``data-id``."""
        item_id = int(data_id) if data_id not in (None, "") else None
        return cls(action=UiAction(css_class), item_id=item_id)


class CartController:
    """Owns the application state and keeps it in sync with the store.

    Usage::

        async with CartStoreClient(config) as client:
            controller = await CartController(client, renderer=HtmlRenderer()).bootstrap()
            await controller.dispatch(UiEvent(action=UiAction.INCREASE, item_id=1))
    """

    def __init__(
        self,
        client: RemoteStore,
        *,
        renderer: Renderer | None = None,
        state: StateContainer | None = None,
        config: CartConfig | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self._client = client
        self._renderer = renderer
        self._state = state if state is not None else StateContainer()
        self._config = config or getattr(client, "config", None) or CartConfig()
        self._on_error = on_error
        self._inflight = InFlightGuard()
        self._render_count = 0

    @property
    def state(self) -> StateContainer:
        return self._state

    @property
    def pending(self) -> frozenset[int]:
        """Item ids with a store request in flight."""
        return self._inflight.pending

    @property
    def render_count(self) -> int:
        """Number of full redraws handed to the renderer."""
        return self._render_count

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def init(self) -> None:
        """Subscribe the renderer and load both collections concurrently.

        Nothing is published unless both fetches succeed.  When one fails
        the other is cancelled and the first failure is re-raised.
        """
        self._state.subscribe(self.render)

        inventory_task = asyncio.create_task(self._client.fetch_inventory())
        cart_task = asyncio.create_task(self._client.fetch_cart())
        tasks = (inventory_task, cart_task)
        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

        errors = [task.exception() for task in tasks if not task.cancelled() and task.exception() is not None]
        if errors:
            exc = errors[0]
            self._report("init", None, exc)
            raise exc

        self._state.replace(inventory=inventory_task.result(), cart=cart_task.result())

    async def bootstrap(self) -> CartController:
        await self.init()
        return self

    def render(self) -> None:
        if self._renderer is None:
            return
        self._renderer.render_inventory(self._state.inventory)
        self._renderer.render_cart(self._state.cart)
        self._render_count += 1

    # ------------------------------------------------------------------
    # Staging (local only)
    # ------------------------------------------------------------------

    def increase(self, item_id: int) -> None:
        self._state.inventory = stage(self._state.inventory, item_id, 1)

    def decrease(self, item_id: int) -> None:
        inventory = stage(self._state.inventory, item_id, -1)
        if inventory == self._state.inventory:
            return
        self._state.inventory = inventory

    # ------------------------------------------------------------------
    # Store-backed handlers
    # ------------------------------------------------------------------

    async def add_to_cart(self, item_id: int) -> CartItem | None:
        """Commit the staged amount of *item_id* to the cart.

        Returns the store's record, or ``None`` when nothing was staged.
        """
        with self._inflight.hold(item_id):
            plan = plan_commit(self._state.inventory, self._state.cart, item_id)
            if isinstance(plan, NoOp):
                _logger.debug("Nothing staged for id=%s", item_id)
                return None

            try:
                if isinstance(plan, CreateLine):
                    record = await self._client.create_cart_item(plan.request)
                else:
                    record = await self._client.update_cart_item(plan.item_id, plan.amount)
            except Exception as exc:
                self._report("add_to_cart", item_id, exc)
                raise

            if isinstance(plan, CreateLine):
                cart = apply_created(self._state.cart, record)
            else:
                cart = apply_updated(self._state.cart, record)

            if self._config.reset_staged_on_commit:
                inventory = release_staged(self._state.inventory, item_id, plan.staged)
                self._state.replace(inventory=inventory, cart=cart)
            else:
                self._state.cart = cart
            return record

    async def delete(self, item_id: int) -> None:
        """Remove a cart line, publishing only once the store confirmed it."""
        with self._inflight.hold(item_id):
            try:
                await self._client.delete_cart_item(item_id)
            except Exception as exc:
                self._report("delete", item_id, exc)
                raise
            self._state.cart = apply_deleted(self._state.cart, item_id)

    async def checkout(self) -> None:
        """Empty the cart.

        On a partial failure the lines the store did remove are dropped
        from the cart before the error is re-raised.
        """
        try:
            await self._client.checkout()
        except PartialCheckoutError as exc:
            if exc.removed:
                self._state.cart = apply_checkout(self._state.cart, exc.removed)
            self._report("checkout", None, exc)
            raise
        except Exception as exc:
            self._report("checkout", None, exc)
            raise
        self._state.cart = ()

    # ------------------------------------------------------------------
    # Event routing
    # ------------------------------------------------------------------

    async def dispatch(self, event: UiEvent) -> CartItem | None:
        """Route a UI event to its handler."""
        if event.action in _ITEM_ACTIONS and event.item_id is None:
            raise ValueError(f"{event.action.value} requires an item id")

        if event.action is UiAction.CHECKOUT:
            await self.checkout()
            return None

        assert event.item_id is not None  # noqa: S101
        if event.action is UiAction.INCREASE:
            self.increase(event.item_id)
        elif event.action is UiAction.DECREASE:
            self.decrease(event.item_id)
        elif event.action is UiAction.ADD_TO_CART:
            return await self.add_to_cart(event.item_id)
        elif event.action is UiAction.DELETE:
            await self.delete(event.item_id)
        return None

    def _report(self, operation: str, item_id: int | None, exc: BaseException) -> None:
        _logger.warning("%s failed for id=%s: %s", operation, item_id, exc)
        if self._on_error is None:
            return
        try:
            self._on_error(operation, item_id, exc)
        except Exception:
            _logger.debug("on_error callback failed", exc_info=True)
