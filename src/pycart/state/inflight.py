"""Per-item guard against concurrent store requests."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from pycart.exceptions import CommitInProgressError


class InFlightGuard:
    """Tracks item ids with a pending store request.

    A second request for an id that is still pending is rejected with
    :class:`CommitInProgressError` instead of racing the first one.
    """

    def __init__(self) -> None:
        self._pending: set[int] = set()

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._pending

    @property
    def pending(self) -> frozenset[int]:
        return frozenset(self._pending)

    @contextmanager
    def hold(self, item_id: int) -> Iterator[None]:
        if item_id in self._pending:
            raise CommitInProgressError(item_id)
        self._pending.add(item_id)
        try:
            yield
        finally:
            self._pending.discard(item_id)
