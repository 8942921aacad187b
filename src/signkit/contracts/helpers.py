"""Reusable field checks shared by the entity contracts.

Each ``check_*`` helper reports through the rule context and returns
``True`` when the value passed, so callers can stop a field's chain after
a structural failure.
"""

import base64
import binascii
import os
from collections.abc import Collection, Iterable
from datetime import date, datetime, timedelta, timezone

from signkit.contracts import constants as c
from signkit.contracts.base import RuleContext
from signkit.models.enums import CommunicationChannel, ErrorKind


def check_max_length(ctx: RuleContext, field: str, value: str, limit: int) -> bool:
    if len(value) > limit:
        ctx.failure(field, c.max_length_message(limit), ErrorKind.RANGE)
        return False
    return True


def check_enum(ctx: RuleContext, field: str, value, allowed: Collection, message: str) -> bool:
    if value not in allowed:
        ctx.failure(field, message, ErrorKind.ENUM)
        return False
    return True


def check_uuid(ctx: RuleContext, field: str, value: str) -> bool:
    if not c.UUID_REGEX.fullmatch(value):
        ctx.failure(field, c.VALID_UUID_MESSAGE)
        return False
    return True


def check_email(ctx: RuleContext, field: str, value: str) -> bool:
    format_ok = bool(c.EMAIL_REGEX.fullmatch(value))
    if not format_ok:
        ctx.failure(field, c.EMAIL_FORMAT_MESSAGE)
    return check_max_length(ctx, field, value, c.MAX_EMAIL_LENGTH) and format_ok


def check_phone(ctx: RuleContext, field: str, value: str) -> bool:
    digits = sum(ch.isdigit() for ch in value)
    if not c.PHONE_REGEX.fullmatch(value) or not c.MIN_PHONE_DIGITS <= digits <= c.MAX_PHONE_DIGITS:
        ctx.failure(field, c.PHONE_FORMAT_MESSAGE)
        return False
    return True


def check_documentation(ctx: RuleContext, field: str, value: str) -> bool:
    if not c.DOCUMENTATION_REGEX.fullmatch(value):
        ctx.failure(field, c.DOCUMENTATION_FORMAT_MESSAGE)
        return False
    return True


def check_positive(ctx: RuleContext, field: str, value: int) -> bool:
    if value < 1:
        ctx.failure(field, c.POSITIVE_GROUP_MESSAGE, ErrorKind.RANGE)
        return False
    return True


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def age_on(birthday: date, today: date) -> int:
    """Whole years elapsed, counting a year only once its anniversary has passed."""
    return today.year - birthday.year - ((today.month, today.day) < (birthday.month, birthday.day))


def check_age(ctx: RuleContext, field: str, birthday: date) -> bool:
    age = age_on(birthday, ctx.today)
    if age < c.MIN_AGE:
        ctx.failure(field, c.LEGAL_AGE_MESSAGE, ErrorKind.RANGE)
        return False
    if age > c.MAX_AGE:
        ctx.failure(field, c.INVALID_BIRTH_MESSAGE, ErrorKind.RANGE)
        return False
    return True


def check_deadline(ctx: RuleContext, field: str, deadline: datetime) -> bool:
    if deadline.tzinfo is None:
        deadline = deadline.replace(tzinfo=timezone.utc)
    if deadline <= ctx.now:
        ctx.failure(field, c.FUTURE_DATE_MESSAGE, ErrorKind.RANGE)
        return False
    if deadline > ctx.now + timedelta(days=c.MAX_DEADLINE_DAYS):
        ctx.failure(field, c.MAX_DEADLINE_MESSAGE, ErrorKind.RANGE)
        return False
    return True


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


def file_extension(filename: str) -> str:
    """Lower-cased extension without the dot, ``""`` if there is none."""
    return os.path.splitext(filename)[1].lower().lstrip(".")


def check_filename(ctx: RuleContext, field: str, value: str) -> bool:
    if not value.strip():
        ctx.failure(field, c.EMPTY_FILENAME_MESSAGE, ErrorKind.RANGE)
        return False
    if len(value) > c.MAX_FILENAME_LENGTH:
        ctx.failure(field, c.max_length_message(c.MAX_FILENAME_LENGTH), ErrorKind.RANGE)
        return False
    if c.INVALID_FILENAME_CHARS_REGEX.search(value):
        ctx.failure(field, c.INVALID_CHARS_MESSAGE)
        return False

    extension = file_extension(value)
    if not extension:
        ctx.failure(field, c.NO_EXTENSION_MESSAGE)
        return False
    return check_enum(ctx, field, extension, c.VALID_FORMATS, c.INVALID_EXTENSION_MESSAGE)


def split_data_uri(value: str) -> tuple[str | None, str]:
    """Split ``data:<mime>;base64,<payload>`` into ``(mime, payload)``.

    Plain base64 comes back as ``(None, value)``.
    """
    match = c.DATA_URI_REGEX.match(value)
    if match:
        return match.group(1), match.group(2)
    return None, value


def decode_base64(payload: str) -> bytes | None:
    """Strict decode: padding required, no characters outside the alphabet."""
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        return None


def check_content(ctx: RuleContext, field: str, value: str, filename: str | None) -> bool:
    mime_type, payload = split_data_uri(value)
    decoded = decode_base64(payload)
    if decoded is None:
        ctx.failure(field, c.INVALID_BASE64_MESSAGE)
        return False

    ok = True
    if len(decoded) < c.MIN_FILE_SIZE:
        ctx.failure(field, c.FILE_TOO_SMALL_MESSAGE, ErrorKind.RANGE)
        ok = False
    elif len(decoded) > c.MAX_FILE_SIZE:
        ctx.failure(field, c.FILE_TOO_LARGE_MESSAGE, ErrorKind.RANGE)
        ok = False

    if filename and mime_type:
        expected = c.VALID_MIME_TYPES.get(file_extension(filename))
        if expected and mime_type != expected:
            ctx.failure(field, c.MIME_MISMATCH_MESSAGE, ErrorKind.DEPENDENCY)
            ok = False
    return ok


# ---------------------------------------------------------------------------
# Communication preferences
# ---------------------------------------------------------------------------


def needs_email(channels: Iterable) -> bool:
    return CommunicationChannel.EMAIL in set(channels)


def needs_phone(channels: Iterable) -> bool:
    return not c.PHONE_CHANNELS.isdisjoint(channels)
