"""Signing API client and resource wrappers."""

from signkit.client.base import ApiClient
from signkit.client.resources import (
    DocumentResource,
    EnvelopeResource,
    NotificationResource,
    RequirementResource,
    SignerResource,
)

__all__ = [
    "ApiClient",
    "DocumentResource",
    "EnvelopeResource",
    "NotificationResource",
    "RequirementResource",
    "SignerResource",
]
