"""Outcome types returned by a contract validation pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from signkit.models.enums import ErrorKind


@dataclass(frozen=True)
class FieldError:
    """One failure, tagged with the dot-joined path of the offending field."""

    field: str
    message: str
    kind: ErrorKind = ErrorKind.SCHEMA

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass(frozen=True)
class Valid:
    """Successful pass: the normalized attribute mapping."""

    attributes: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """Failed pass: every violation found, in rule order."""

    errors: tuple[FieldError, ...]

    @property
    def ok(self) -> bool:
        return False


ContractResult = Valid | Invalid


def group_errors(errors: Iterable[FieldError]) -> dict[str, list[str]]:
    """Group messages by field, keeping first-seen field order."""
    grouped: dict[str, list[str]] = {}
    for error in errors:
        grouped.setdefault(error.field, []).append(error.message)
    return grouped


def format_errors(errors: Iterable[FieldError]) -> str:
    """Render errors as ``"field1: msg1, field2: msg2"``."""
    return ", ".join(str(error) for error in errors)
