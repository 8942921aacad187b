"""Contract machinery: a typed params schema followed by ordered business rules.

A contract runs in two stages, the same way for every entity:

1. Params. Each field declared on the contract's pydantic ``schema`` is
   checked for presence and coerced to its declared type. Failures here
   are reported as ``schema`` errors.
2. Rules. Methods decorated with :func:`rule` run in definition order
   against the coerced values. A rule is skipped when any of its keys
   failed stage 1, and (unless ``allow_missing``) when any of them is
   absent. Rules never raise; they report through :class:`RuleContext`.

Every failure from both stages is collected, so one pass reports all
problems with the input.
"""

from __future__ import annotations

import logging
import types
import typing
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, ClassVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from signkit.contracts.result import ContractResult, FieldError, Invalid, Valid
from signkit.models.enums import ErrorKind

logger = logging.getLogger(__name__)

MISSING_MESSAGE = "is missing"
FILLED_MESSAGE = "must be filled"

_TYPE_MESSAGES: dict[type, str] = {
    bool: "must be boolean",
    int: "must be an integer",
    str: "must be a string",
    datetime: "must be a date time",
    date: "must be a date",
    dict: "must be a hash",
}


def normalize_keys(attributes: Any) -> dict[str, Any]:
    """Return a plain dict with string keys; anything but a mapping becomes ``{}``."""
    if not isinstance(attributes, Mapping):
        return {}
    return {str(key): value for key, value in attributes.items()}


def _base_type(annotation: Any) -> Any:
    """Strip ``| None`` and generic parameters from a field annotation."""
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        annotation = members[0] if members else annotation
    return typing.get_origin(annotation) or annotation


@dataclass(frozen=True)
class _FieldInfo:
    name: str
    required: bool
    adapter: TypeAdapter
    type_message: str


@dataclass(frozen=True)
class _RuleInfo:
    keys: tuple[str, ...]
    allow_missing: bool


def rule(*keys: str, allow_missing: bool = False) -> Callable:
    """Mark a contract method as a business rule over ``keys``.

    The method is called as ``method(ctx, *values)`` with the coerced
    values of ``keys`` in order.
    """

    def decorator(method: Callable) -> Callable:
        method.__contract_rule__ = _RuleInfo(tuple(keys), allow_missing)
        return method

    return decorator


class RuleContext:
    """State for a single validation pass.

    ``now`` is captured once so every time-dependent rule in the pass
    compares against the same instant.
    """

    def __init__(self, values: dict[str, Any], failed: set[str], now: datetime):
        self.values = values
        self.failed = failed
        self.now = now
        self.errors: list[FieldError] = []

    @property
    def today(self) -> date:
        return self.now.date()

    def failure(self, field: str, message: str, kind: ErrorKind = ErrorKind.FORMAT) -> None:
        self.errors.append(FieldError(field, message, kind))

    def supplied(self, field: str) -> bool:
        """True if ``field`` holds a value or was given but failed its type check."""
        return self.values.get(field) is not None or field in self.failed


class Contract:
    """Validation rule bundle for one entity kind.

    Subclasses set ``schema`` to a pydantic model describing the accepted
    fields and add :func:`rule` methods. Contracts hold no per-call state,
    so one instance can be shared by every model of its kind.
    """

    schema: ClassVar[type[BaseModel]]
    entity: ClassVar[str] = "entity"

    _fields: ClassVar[tuple[_FieldInfo, ...]] = ()
    _rules: ClassVar[tuple[tuple[str, _RuleInfo], ...]] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        schema = getattr(cls, "schema", None)
        if schema is not None:
            cls._fields = tuple(
                _FieldInfo(
                    name=name,
                    required=info.is_required(),
                    adapter=TypeAdapter(info.annotation),
                    type_message=_TYPE_MESSAGES.get(_base_type(info.annotation), "is invalid"),
                )
                for name, info in schema.model_fields.items()
            )
        # Later definitions of the same method name replace earlier ones.
        rules: dict[str, _RuleInfo] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                entry = getattr(attr, "__contract_rule__", None)
                if entry is not None:
                    rules[name] = entry
        cls._rules = tuple(rules.items())

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self._fields)

    def __call__(self, raw: Any, *, now: datetime | None = None) -> ContractResult:
        return self.validate(raw, now=now)

    def validate(self, raw: Any, *, now: datetime | None = None) -> ContractResult:
        """Run the full contract over ``raw`` and return ``Valid`` or ``Invalid``."""
        values, errors = self._coerce(normalize_keys(raw))
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        ctx = RuleContext(values, {error.field for error in errors}, now)

        for name, entry in self._rules:
            if ctx.failed.intersection(entry.keys):
                continue
            args = [values.get(key) for key in entry.keys]
            if not entry.allow_missing and any(arg is None for arg in args):
                continue
            getattr(self, name)(ctx, *args)

        errors.extend(ctx.errors)
        if errors:
            logger.debug("%s validation failed with %d error(s)", self.entity, len(errors))
            return Invalid(tuple(errors))
        return Valid(values)

    def _coerce(self, raw: dict[str, Any]) -> tuple[dict[str, Any], list[FieldError]]:
        values: dict[str, Any] = {}
        errors: list[FieldError] = []
        for entry in self._fields:
            if entry.name not in raw:
                if entry.required:
                    errors.append(FieldError(entry.name, MISSING_MESSAGE))
                continue

            value = raw[entry.name]
            if value is None or value == "":
                if entry.required:
                    errors.append(FieldError(entry.name, FILLED_MESSAGE))
                else:
                    values[entry.name] = None
                continue

            try:
                values[entry.name] = entry.adapter.validate_python(value)
            except PydanticValidationError:
                errors.append(FieldError(entry.name, entry.type_message))
        return values, errors
