"""Limits, value sets, patterns and messages shared by the entity contracts."""

import re

from signkit.models.enums import (
    CommunicationChannel,
    EnvelopeStatus,
    Locale,
    QualificationAction,
    QualificationRole,
    RequirementAction,
    RequirementAuth,
)

# ---------------------------------------------------------------------------
# Common
# ---------------------------------------------------------------------------

UUID_REGEX = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE | re.ASCII
)
VALID_UUID_MESSAGE = "must be a valid UUID"


def max_length_message(limit: int) -> str:
    return f"maximum {limit} characters"


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------

VALID_LOCALES = frozenset(Locale)
VALID_STATUSES = frozenset(EnvelopeStatus)
# None means "no reminders"
VALID_REMIND_INTERVALS = frozenset({None, 1, 2, 3, 7, 14})

VALID_LOCALES_MESSAGE = "must be one of: " + ", ".join(Locale)
VALID_STATUSES_MESSAGE = "must be one of: " + ", ".join(EnvelopeStatus)
VALID_REMIND_INTERVALS_MESSAGE = "must be one of: 1, 2, 3, 7, 14"

MAX_ENVELOPE_NAME_LENGTH = 255
MAX_EXTERNAL_ID_LENGTH = 255
MAX_SUBJECT_LENGTH = 100
MAX_DEADLINE_DAYS = 90

FUTURE_DATE_MESSAGE = "must be a future date"
MAX_DEADLINE_MESSAGE = f"maximum {MAX_DEADLINE_DAYS} days from now"

# ---------------------------------------------------------------------------
# Signer
# ---------------------------------------------------------------------------

MAX_SIGNER_NAME_LENGTH = 255
MAX_EMAIL_LENGTH = 255
MIN_AGE = 18
MAX_AGE = 120
MIN_PHONE_DIGITS = 10
MAX_PHONE_DIGITS = 15

EMAIL_REGEX = re.compile(
    r"^[\w+\-.]+@[a-z\d\-]+(\.[a-z\d\-]+)*\.[a-z]+$", re.IGNORECASE | re.ASCII
)
PHONE_REGEX = re.compile(r"^\+?[\d \-()]+$", re.ASCII)
DOCUMENTATION_REGEX = re.compile(r"^\d{3}\.\d{3}\.\d{3}-\d{2}$", re.ASCII)
DIGIT_REGEX = re.compile(r"\d")

EMPTY_NAME_MESSAGE = "cannot be empty"
NAME_FORMAT_MESSAGE = "must contain first and last name"
NAME_NO_NUMBERS_MESSAGE = "cannot contain numbers"
EMAIL_FORMAT_MESSAGE = "invalid email format"
PHONE_FORMAT_MESSAGE = "invalid phone format"
DOCUMENTATION_FORMAT_MESSAGE = "CPF must be in format xxx.xxx.xxx-xx"
POSITIVE_GROUP_MESSAGE = "must be a positive integer"
LEGAL_AGE_MESSAGE = "signer must be of legal age"
INVALID_BIRTH_MESSAGE = "invalid birth date"
DOCUMENTATION_DEPENDENCY_MESSAGE = "cannot be sent when has_documentation is false"
EMAIL_REQUIRED_MESSAGE = "is required when communicate_events contains 'email'"
PHONE_REQUIRED_MESSAGE = "is required when communicate_events contains 'sms' or 'whatsapp'"

# ---------------------------------------------------------------------------
# Communicate events
# ---------------------------------------------------------------------------

DEFAULT_CHANNEL = CommunicationChannel.EMAIL
PHONE_CHANNELS = frozenset({CommunicationChannel.SMS, CommunicationChannel.WHATSAPP})

VALID_SIGNATURE_REQUEST = (
    CommunicationChannel.EMAIL,
    CommunicationChannel.SMS,
    CommunicationChannel.WHATSAPP,
    CommunicationChannel.NONE,
)
VALID_SIGNATURE_REMINDER = (CommunicationChannel.NONE, CommunicationChannel.EMAIL)
VALID_DOCUMENT_SIGNED = (CommunicationChannel.EMAIL, CommunicationChannel.WHATSAPP)


def one_of_message(values) -> str:
    return "must be one of: " + ", ".join(values)


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

VALID_MIME_TYPES = {
    "pdf": "application/pdf",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "txt": "text/plain",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
}
VALID_FORMATS = tuple(VALID_MIME_TYPES)

MAX_FILENAME_LENGTH = 255
MIN_FILE_SIZE = 1024
MAX_FILE_SIZE = 25 * 1024 * 1024

INVALID_FILENAME_CHARS_REGEX = re.compile(r'[<>:"|?*\\/]')
DATA_URI_REGEX = re.compile(r"^data:([^;]+);base64,(.+)$", re.DOTALL)

EMPTY_FILENAME_MESSAGE = "cannot be empty"
INVALID_CHARS_MESSAGE = "contains invalid characters"
NO_EXTENSION_MESSAGE = "must have file extension"
INVALID_EXTENSION_MESSAGE = "extension must be: " + ", ".join(VALID_FORMATS)
INVALID_BASE64_MESSAGE = "invalid Base64"
FILE_TOO_SMALL_MESSAGE = f"file too small, minimum {MIN_FILE_SIZE // 1024}KB"
FILE_TOO_LARGE_MESSAGE = f"file too large, maximum {MAX_FILE_SIZE // (1024 * 1024)}MB"
MIME_MISMATCH_MESSAGE = "MIME type does not match extension"

# ---------------------------------------------------------------------------
# Qualification
# ---------------------------------------------------------------------------

VALID_QUALIFICATION_ACTIONS = frozenset(QualificationAction)
VALID_ROLES = frozenset(QualificationRole)

VALID_QUALIFICATION_ACTIONS_MESSAGE = "must be 'sign' or 'agree'"
VALID_ROLES_MESSAGE = "must be 'signer', 'intervening' or 'witness'"
ACTION_ROLE_COMPATIBILITY_MESSAGE = "when action is 'sign', role must be 'signer'"

# ---------------------------------------------------------------------------
# Requirement
# ---------------------------------------------------------------------------

VALID_REQUIREMENT_ACTIONS = frozenset(RequirementAction)
# Only email and sms are accepted by the enumeration, even though older
# API docs also mention selfie and pix.
VALID_AUTHS = frozenset(RequirementAuth)

VALID_REQUIREMENT_ACTIONS_MESSAGE = "must be 'provide_evidence'"
VALID_AUTHS_MESSAGE = "must be 'email' or 'sms'"

# ---------------------------------------------------------------------------
# Notification
# ---------------------------------------------------------------------------

EMPTY_MESSAGE_MESSAGE = "must not be empty"
