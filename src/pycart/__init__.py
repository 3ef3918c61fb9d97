"""pycart - Async Python client and state sync for a collection-store shopping cart."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycart")
except PackageNotFoundError:
    __version__ = "0+local"
from pycart.client import CartStoreClient, RemoteStore
from pycart.config import CartConfig
from pycart.controller import CartController, UiAction, UiEvent
from pycart.exceptions import (
    CartConfigError,
    CartError,
    CartPreconditionError,
    CartResponseError,
    CommitInProgressError,
    NetworkError,
    NotFoundError,
    PartialCheckoutError,
    UnknownItemError,
)
from pycart.models import (
    CartItem,
    CreateCartItemRequest,
    InventoryItem,
    Staged,
    Unstaged,
    UpdateCartItemRequest,
)
from pycart.render import HtmlRenderer, Renderer
from pycart.state.store import StateContainer

__all__ = [
    "__version__",
    "CartConfig",
    "CartConfigError",
    "CartController",
    "CartError",
    "CartItem",
    "CartPreconditionError",
    "CartResponseError",
    "CartStoreClient",
    "CommitInProgressError",
    "CreateCartItemRequest",
    "HtmlRenderer",
    "InventoryItem",
    "NetworkError",
    "NotFoundError",
    "PartialCheckoutError",
    "RemoteStore",
    "Renderer",
    "Staged",
    "StateContainer",
    "UiAction",
    "UiEvent",
    "UnknownItemError",
    "Unstaged",
    "UpdateCartItemRequest",
]
