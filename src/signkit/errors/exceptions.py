"""Custom exception classes for signkit."""

from collections.abc import Iterable

from signkit.contracts.result import FieldError, format_errors, group_errors


class SignkitError(Exception):
    """Base exception for signkit."""

    def __init__(self, code: str, message: str, details=None):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "details": self.details}


class ValidationError(SignkitError):
    """Aggregate of every field failure found in one validation pass."""

    def __init__(self, message: str, errors: Iterable[FieldError] | None = None):
        self.errors: list[FieldError] = list(errors or [])
        super().__init__(
            "VALIDATION_ERROR",
            message,
            details=[error.to_dict() for error in self.errors],
        )

    @classmethod
    def from_errors(cls, errors: Iterable[FieldError]) -> "ValidationError":
        errors = list(errors)
        return cls(format_errors(errors), errors)

    @property
    def errors_hash(self) -> dict[str, list[str]]:
        return group_errors(self.errors)


class ConfigurationError(SignkitError):
    """Client settings are missing or unusable."""

    def __init__(self, message: str):
        super().__init__("CONFIGURATION_ERROR", message)


class ContractNotImplementedError(SignkitError):
    """A model class was used without a bound contract."""

    def __init__(self, model_name: str):
        super().__init__(
            "CONTRACT_NOT_IMPLEMENTED",
            f"{model_name} has no contract bound; set the `contract` class attribute",
        )


class TransportError(SignkitError):
    """The transport could not complete a request or got a non-2xx reply."""

    def __init__(self, message: str, status_code: int | None = None, response_body: str | None = None):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(
            "TRANSPORT_ERROR",
            message,
            details={"status_code": status_code, "response_body": response_body},
        )
