"""Abstract transport used by the API client."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TransportResponse:
    """Raw reply from the signing API."""

    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(ABC):
    """Sends one HTTP request and hands back the raw reply.

    Implementations raise :class:`~signkit.errors.exceptions.TransportError`
    only when no reply was received; status handling is left to the caller.
    """

    @abstractmethod
    def request(
        self,
        method: str,
        url: str,
        payload: dict[str, Any] | None,
        headers: dict[str, str],
    ) -> TransportResponse:
        """Send ``payload`` (JSON-encoded, if any) to ``url``.

        Args:
            method: HTTP verb, upper case.
            url: Absolute request URL.
            payload: JSON body, or None for body-less requests.
            headers: Request headers, including authorization.

        Returns:
            The status code and decoded body text.
        """
        ...

    def close(self) -> None:
        """Release pooled connections, if any."""
