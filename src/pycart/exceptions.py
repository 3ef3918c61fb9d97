"""Custom exception hierarchy for pycart."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


class CartError(Exception):
    """Base exception for all pycart errors."""


class CartConfigError(CartError):
    """Invalid or missing configuration."""


class NetworkError(CartError):
    """HTTP-level failure (transport error, non-2xx status, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        method: str = "",
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.method = method
        self.endpoint = endpoint
        super().__init__(message)


class NotFoundError(NetworkError):
    """The store has no record at the requested path (HTTP 404)."""


class CartResponseError(CartError):
    """The store answered with a payload that does not match the expected shape."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class PartialCheckoutError(CartError):
    """Some cart lines could not be deleted during checkout.

    Lines listed in ``removed`` are gone from the store; lines listed in
    ``failed`` are still there.  Nothing is rolled back.
    """

    def __init__(
        self,
        failed: Mapping[int, BaseException],
        removed: Iterable[int] = (),
    ) -> None:
        self.failed: dict[int, BaseException] = dict(failed)
        self.removed: tuple[int, ...] = tuple(removed)
        ids = ", ".join(str(item_id) for item_id in sorted(self.failed))
        super().__init__(
            f"checkout failed for cart item(s) {ids}; {len(self.removed)} line(s) removed"
        )

    @property
    def failed_ids(self) -> tuple[int, ...]:
        return tuple(sorted(self.failed))


class UnknownItemError(CartError):
    """No inventory item with the given id is loaded."""

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"unknown inventory item id={item_id}")


class CartPreconditionError(CartError):
    """A cart transition was requested from a state that does not allow it.

    Raised for instance when updating a line that is not in the cart; new
    lines must be created first.
    """


class CommitInProgressError(CartError):
    """A request for this item is still pending.

    Raised instead of issuing a second concurrent request for the same id.
    """

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"a request for item id={item_id} is already in flight")
