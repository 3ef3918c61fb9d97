"""JSON-over-HTTP transport for the collection store."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from pycart.config import CartConfig
from pycart.exceptions import NetworkError, NotFoundError

_logger = logging.getLogger(__name__)


class JsonTransport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def request(self, method: str, path: str, payload: Any = None) -> Any:
        ...


class HttpTransport:
    """HTTP transport that sends and decodes JSON bodies."""

    def __init__(self, config: CartConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def request(self, method: str, path: str, payload: Any = None) -> Any:
        """Send one request and return the decoded JSON body.

        Returns ``None`` when the store answers with an empty body.
        Non-2xx statuses raise :class:`NetworkError` (404 raises
        :class:`NotFoundError`).
        """
        method = method.upper()
        url = f"{self._config.base_url}{path}"
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        body: str | None = None
        if payload is not None:
            headers["content-type"] = "application/json"
            body = json.dumps(payload, separators=(",", ":"))

        _logger.debug("%s %s", method, url)

        try:
            async with self._http.request(method, url, data=body, headers=headers, timeout=self._timeout) as resp:
                raw_body = await resp.read()
                status = resp.status
                charset = resp.charset or "utf-8"
        except aiohttp.ClientError as exc:
            raise NetworkError(
                f"{method} {path} failed: {exc}",
                method=method,
                endpoint=path,
            ) from exc
        except TimeoutError as exc:
            raise NetworkError(
                f"{method} {path} timed out",
                method=method,
                endpoint=path,
            ) from exc

        if status == 404:
            raise NotFoundError(
                f"HTTP 404 from {method} {path}",
                status_code=status,
                method=method,
                endpoint=path,
            )
        if not 200 <= status < 300:
            raise NetworkError(
                f"HTTP {status} from {method} {path}: {raw_body[:200].decode('utf-8', errors='replace')}",
                status_code=status,
                method=method,
                endpoint=path,
            )

        try:
            text = raw_body.decode(charset)
        except (UnicodeDecodeError, LookupError) as exc:
            raise NetworkError(
                f"Undecodable body from {method} {path} (charset={charset})",
                status_code=status,
                method=method,
                endpoint=path,
            ) from exc

        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise NetworkError(
                f"Invalid JSON from {method} {path}: {text[:200]}",
                status_code=status,
                method=method,
                endpoint=path,
            ) from exc
