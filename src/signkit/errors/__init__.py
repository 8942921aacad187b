"""Exception hierarchy for signkit."""

from signkit.errors.exceptions import (
    ConfigurationError,
    ContractNotImplementedError,
    SignkitError,
    TransportError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "ContractNotImplementedError",
    "SignkitError",
    "TransportError",
    "ValidationError",
]
