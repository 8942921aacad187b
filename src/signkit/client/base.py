"""API client: URL building, headers, configuration checks and response parsing."""

from __future__ import annotations

import json
import logging
from functools import cached_property
from typing import Any

from signkit.client.resources import (
    DocumentResource,
    EnvelopeResource,
    NotificationResource,
    RequirementResource,
    SignerResource,
)
from signkit.config import Settings
from signkit.errors.exceptions import ConfigurationError, TransportError
from signkit.transport.base import Transport, TransportResponse
from signkit.transport.httpx_transport import HttpxTransport

logger = logging.getLogger(__name__)

JSON_API_MEDIA_TYPE = "application/vnd.api+json"


class ApiClient:
    """Synchronous client for the signing API.

    The client never holds global state: it is built from an explicit
    :class:`~signkit.config.Settings` and an optional transport.
    Resource wrappers hang off it as attributes::

        client = ApiClient(Settings(base_url=..., access_token=...))
        client.envelopes.create(envelope)
    """

    def __init__(self, settings: Settings, transport: Transport | None = None) -> None:
        self.settings = settings
        self._transport = transport

    @property
    def transport(self) -> Transport:
        if self._transport is None:
            self._transport = HttpxTransport(timeout=self.settings.timeout)
        return self._transport

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    @cached_property
    def envelopes(self) -> EnvelopeResource:
        return EnvelopeResource(self)

    @cached_property
    def documents(self) -> DocumentResource:
        return DocumentResource(self)

    @cached_property
    def signers(self) -> SignerResource:
        return SignerResource(self)

    @cached_property
    def requirements(self) -> RequirementResource:
        return RequirementResource(self)

    @cached_property
    def notifications(self) -> NotificationResource:
        return NotificationResource(self)

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def request(self, method: str, url: str, payload: dict[str, Any] | None = None) -> Any:
        """Send a request and return the parsed body.

        Raises:
            ConfigurationError: base_url or access_token is not set.
            TransportError: no reply, or a non-2xx status.
        """
        self.ensure_configured()
        method = method.upper()
        logger.debug("API request %s %s", method, url)
        response = self.transport.request(method, url, payload, self.headers())
        if not response.is_success:
            logger.warning("API request %s %s returned %s", method, url, response.status_code)
            raise TransportError(
                f"{method} {url} returned {response.status_code}",
                status_code=response.status_code,
                response_body=response.body,
            )
        return self.parse(response)

    def api_url(self, *parts: str) -> str:
        """Join ``base_url``, ``api_version`` and the given path segments."""
        self.ensure_configured()
        segments = [self.settings.base_url.rstrip("/"), self.settings.api_version]
        return "/".join(segments + [str(part) for part in parts])

    @staticmethod
    def parse(response: TransportResponse) -> Any:
        """Decode a reply body: ``{}`` when empty, JSON where possible, raw text otherwise."""
        if not response.body or not response.body.strip():
            return {}
        try:
            return json.loads(response.body)
        except ValueError:
            return response.body

    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": JSON_API_MEDIA_TYPE,
            "Accept": JSON_API_MEDIA_TYPE,
            "Authorization": self.settings.access_token or "",
        }

    def ensure_configured(self) -> None:
        try:
            self.settings.validate_ready()
        except ConfigurationError as exc:
            raise ConfigurationError(f"signkit not configured: {exc.message}") from exc

    def close(self) -> None:
        if self._transport is not None:
            self._transport.close()
