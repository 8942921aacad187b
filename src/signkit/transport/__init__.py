"""HTTP transports for the signing API client."""

from signkit.transport.base import Transport, TransportResponse
from signkit.transport.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport", "Transport", "TransportResponse"]
