"""Self-validating model base class.

Every entity model is bound to one contract instance through the
``contract`` class attribute. The contract is stateless and built once at
class definition, so instances share it.

Three ways in:

* ``Model(raw)`` / ``Model(**raw)`` validates and raises
  :class:`~signkit.errors.exceptions.ValidationError` on failure.
* ``Model.build(raw)`` validates and always returns an instance; check
  ``is_valid`` before use. An invalid instance holds the supplied input.
* ``model.update(delta)`` re-validates the merged attributes. On failure
  the previous attributes are kept and only the error list changes.

An instance is either valid (no errors, attributes are the contract's
normalized output) or invalid (errors present, attributes as supplied).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from signkit.contracts.base import Contract, normalize_keys
from signkit.contracts.result import ContractResult, FieldError, format_errors, group_errors
from signkit.errors.exceptions import ContractNotImplementedError, ValidationError
from signkit.models import json_api
from signkit.models.enums import ResourceType


class Attribute:
    """Read-only accessor for one validated attribute."""

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance._attributes.get(self.name)


class SigningModel:
    contract: ClassVar[Contract | None] = None
    resource_type: ClassVar[ResourceType | None] = None

    _attributes: dict[str, Any]
    _errors: list[FieldError]

    def __init__(self, attributes: Mapping[str, Any] | None = None, /, **kwargs: Any):
        self._apply(self.validate(_merge_input(attributes, kwargs)))
        if self._errors:
            raise ValidationError.from_errors(self._errors)

    @classmethod
    def build(cls, attributes: Mapping[str, Any] | None = None, /, **kwargs: Any):
        """Validate without raising; the returned instance carries any errors.

        An invalid instance keeps the supplied attributes, so re-validating
        its ``to_h()`` reaches the same verdict.
        """
        raw = _merge_input(attributes, kwargs)
        instance = cls.__new__(cls)
        instance._apply(cls.validate(raw))
        if instance._errors:
            instance._attributes = raw
        return instance

    @classmethod
    def validate(cls, attributes: Mapping[str, Any] | None) -> ContractResult:
        """Run the bound contract over ``attributes`` without creating an instance."""
        if cls.contract is None:
            raise ContractNotImplementedError(cls.__name__)
        return cls.contract.validate(normalize_keys(attributes))

    def update(self, attributes: Mapping[str, Any] | None = None, /, **kwargs: Any) -> bool:
        """Merge ``attributes`` over the current ones and re-validate.

        Returns:
            True if the merged attributes are valid and now in effect,
            False if they were rejected (current attributes untouched).
        """
        result = self.validate({**self._attributes, **_merge_input(attributes, kwargs)})
        if result.ok:
            self._attributes = dict(result.attributes)
            self._errors = []
            return True
        self._errors = list(result.errors)
        return False

    def _apply(self, result: ContractResult) -> None:
        if result.ok:
            self._attributes = dict(result.attributes)
            self._errors = []
        else:
            self._attributes = {}
            self._errors = list(result.errors)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    @property
    def errors(self) -> list[FieldError]:
        return list(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def is_invalid(self) -> bool:
        return not self.is_valid

    @property
    def errors_hash(self) -> dict[str, list[str]]:
        return group_errors(self._errors)

    @property
    def error_messages(self) -> str:
        return format_errors(self._errors)

    def to_h(self) -> dict[str, Any]:
        return dict(self._attributes)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_json_api(self) -> dict[str, Any]:
        """Build the wire resource document. Raises ValidationError if invalid."""
        self.ensure_valid()
        return json_api.resource_document(
            self.resource_type, self._json_attributes(), self._json_relationships()
        )

    def ensure_valid(self) -> None:
        if self._errors:
            raise ValidationError.from_errors(self._errors)

    def _json_attributes(self) -> dict[str, Any]:
        return self._attributes

    def _json_relationships(self) -> dict[str, Any] | None:
        return None

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._attributes == other._attributes and self._errors == other._errors

    __hash__ = None

    def __repr__(self) -> str:
        if self._errors:
            return f"<{type(self).__name__} invalid: {self.error_messages}>"
        return f"<{type(self).__name__} {self._attributes!r}>"


class LinkedModel(SigningModel):
    """Model referencing a document and a signer by id.

    The ids travel as JSON:API relationships instead of attributes.
    """

    document_id = Attribute()
    signer_id = Attribute()

    def _json_attributes(self) -> dict[str, Any]:
        return {
            key: value
            for key, value in self._attributes.items()
            if key not in ("document_id", "signer_id")
        }

    def _json_relationships(self) -> dict[str, Any]:
        return {
            "document": json_api.relationship(ResourceType.DOCUMENTS, self.document_id),
            "signer": json_api.relationship(ResourceType.SIGNERS, self.signer_id),
        }


def _merge_input(attributes: Any, kwargs: dict[str, Any]) -> dict[str, Any]:
    return {**normalize_keys(attributes), **kwargs}
