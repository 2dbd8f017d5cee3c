"""JSON-RPC over HTTP(S) transport."""
from __future__ import annotations

import asyncio
import itertools
import logging
import ssl
from typing import Any, Mapping

import aiohttp
import certifi

from ..errors import RemoteError, TransportError

logger = logging.getLogger(__name__)


class HttpTransport:
    """Single-endpoint JSON-RPC 2.0 transport built on aiohttp.

    Each call opens its own session, so one instance can serve any number
    of concurrent calls. Failures are raised immediately; nothing is retried.
    """

    def __init__(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        timeout: int = 30,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._headers = dict(headers or {})
        self._ids = itertools.count(1)

    async def call(self, method: str, params: list[Any]) -> Any:
        """POST one JSON-RPC request and return its ``result``."""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }

        ssl_context = ssl.create_default_context(cafile=certifi.where())

        logger.debug("POST %s method=%s id=%s", self.url, method, payload["id"])
        try:
            connector = aiohttp.TCPConnector(ssl=ssl_context)
            try:
                session = aiohttp.ClientSession(
                    connector=connector, headers=self._headers
                )
            except Exception:
                # the session owns the connector only once it exists
                await connector.close()
                raise
            async with session:
                async with session.post(
                    self.url,
                    json=payload,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    try:
                        envelope = await response.json(content_type=None)
                    except ValueError as e:
                        raise TransportError(
                            f"{method}: HTTP {response.status} response is not JSON"
                        ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{method}: request to {self.url} failed: {e}") from e

        return _unwrap(method, envelope)


def _unwrap(method: str, envelope: Any) -> Any:
    """Extract ``result`` from a response envelope or raise its error."""
    if not isinstance(envelope, dict):
        raise TransportError(f"{method}: response envelope is not a JSON object")

    error = envelope.get("error")
    if error is not None:
        if not isinstance(error, dict) or not isinstance(error.get("code"), int):
            raise TransportError(f"{method}: malformed error object {error!r}")
        raise RemoteError(error["code"], str(error.get("message", "")), error.get("data"))

    if "result" not in envelope:
        raise TransportError(f"{method}: response has neither result nor error")
    return envelope["result"]
