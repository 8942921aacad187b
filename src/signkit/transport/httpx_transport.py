"""Transport backed by a synchronous httpx client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from signkit.errors.exceptions import TransportError
from signkit.transport.base import Transport, TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport(Transport):
    """Sends requests through a pooled ``httpx.Client``.

    A custom ``client`` can be passed in, e.g. one built on
    ``httpx.MockTransport`` for tests.
    """

    def __init__(self, timeout: float = 30.0, client: httpx.Client | None = None) -> None:
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)

    def request(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None,
        headers: dict[str, str],
    ) -> TransportResponse:
        logger.debug("Sending %s %s", method, url)
        try:
            response = self._client.request(
                method,
                url,
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(f"{method} {url} failed: {exc}") from exc

        return TransportResponse(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
