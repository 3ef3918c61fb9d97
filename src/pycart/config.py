"""Client configuration for pycart."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pycart._constants import BASE_URL, USER_AGENT
from pycart.exceptions import CartConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_timeout(value: str) -> float | None:
    normalized = value.strip().lower()
    if normalized in {"", "none", "off", "0"}:
        return None
    try:
        return float(normalized)
    except ValueError as exc:
        raise CartConfigError(f"CART_REQUEST_TIMEOUT must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class CartConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Root URL of the collection store serving ``/inventory`` and ``/cart``.
    request_timeout : float or None
        Total per-request timeout in seconds.  ``None`` waits indefinitely.
    user_agent : str
        User-Agent header sent with every request.
    reset_staged_on_commit : bool
        Take the committed quantity off an inventory item's staged amount
        once the store confirmed the commit.  The reset is published in the
        same notification as the cart change.
    """

    base_url: str = BASE_URL
    request_timeout: float | None = 30.0
    user_agent: str = USER_AGENT
    reset_staged_on_commit: bool = True

    def __post_init__(self) -> None:
        base_url = self.base_url.strip().rstrip("/")
        if not base_url:
            raise CartConfigError("base_url must be non-empty")
        if self.request_timeout is not None and self.request_timeout < 0:
            raise CartConfigError(f"request_timeout must be >= 0, got {self.request_timeout}")
        object.__setattr__(self, "base_url", base_url)

    @classmethod
    def from_env(cls, **overrides: Any) -> CartConfig:
        """Create configuration from environment variables.

        Reads ``CART_BASE_URL``, ``CART_REQUEST_TIMEOUT``, ``CART_USER_AGENT``
        and ``CART_RESET_STAGED_ON_COMMIT``.  Explicit keyword arguments
        override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("CART_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url

        user_agent = env.get("CART_USER_AGENT")
        if user_agent is not None:
            config_kwargs["user_agent"] = user_agent

        timeout_env = env.get("CART_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_timeout(timeout_env)

        if "reset_staged_on_commit" not in overrides:
            config_kwargs["reset_staged_on_commit"] = _env_bool(
                env.get("CART_RESET_STAGED_ON_COMMIT"),
                True,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
