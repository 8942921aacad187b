"""signkit: validated models and a thin client for an electronic-signature API."""

from signkit.client.base import ApiClient
from signkit.config import Settings
from signkit.contracts.result import FieldError, Invalid, Valid
from signkit.errors.exceptions import (
    ConfigurationError,
    ContractNotImplementedError,
    SignkitError,
    TransportError,
    ValidationError,
)
from signkit.models.communicate_events import CommunicateEvents
from signkit.models.document import Document
from signkit.models.envelope import Envelope
from signkit.models.notification import Notification
from signkit.models.qualification import Qualification
from signkit.models.requirement import Requirement
from signkit.models.signer import Signer

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "CommunicateEvents",
    "ConfigurationError",
    "ContractNotImplementedError",
    "Document",
    "Envelope",
    "FieldError",
    "Invalid",
    "Notification",
    "Qualification",
    "Requirement",
    "Settings",
    "Signer",
    "SignkitError",
    "TransportError",
    "Valid",
    "ValidationError",
]
