"""String enums for the closed value sets accepted by the signing API."""

from enum import StrEnum


class Locale(StrEnum):
    PT_BR = "pt-BR"
    EN_US = "en-US"


class EnvelopeStatus(StrEnum):
    DRAFT = "draft"
    RUNNING = "running"
    CANCELED = "canceled"
    CLOSED = "closed"


class QualificationAction(StrEnum):
    SIGN = "sign"
    AGREE = "agree"


class QualificationRole(StrEnum):
    SIGNER = "signer"
    INTERVENING = "intervening"
    WITNESS = "witness"


class RequirementAction(StrEnum):
    PROVIDE_EVIDENCE = "provide_evidence"


class RequirementAuth(StrEnum):
    EMAIL = "email"
    SMS = "sms"


class CommunicationChannel(StrEnum):
    """Delivery channels a signer can be reached through."""

    EMAIL = "email"
    SMS = "sms"
    WHATSAPP = "whatsapp"
    NONE = "none"


class ResourceType(StrEnum):
    """JSON:API resource type strings."""

    ENVELOPES = "envelopes"
    SIGNERS = "signers"
    DOCUMENTS = "documents"
    REQUIREMENTS = "requirements"
    QUALIFICATIONS = "qualifications"
    NOTIFICATIONS = "notifications"


class ErrorKind(StrEnum):
    """Category of a single field-level validation failure."""

    SCHEMA = "schema"
    FORMAT = "format"
    RANGE = "range"
    ENUM = "enum"
    DEPENDENCY = "dependency"
