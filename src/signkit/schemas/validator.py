"""Schema validation service using the jsonschema library."""

from functools import lru_cache

import jsonschema

from signkit.schemas.registry import SCHEMA_REGISTRY


class SchemaValidator:
    """Validates JSON instances against the registered wire schemas."""

    def __init__(self, registry: dict[str, dict] | None = None):
        self.registry = registry if registry is not None else SCHEMA_REGISTRY
        self._validators: dict = {}

    def _validator_for(self, schema_name: str):
        """Build (once) a format-checking validator for a registered schema."""
        if schema_name not in self._validators:
            schema = self.registry[schema_name]
            validator_cls = jsonschema.validators.validator_for(schema)
            validator_cls.check_schema(schema)
            self._validators[schema_name] = validator_cls(
                schema, format_checker=validator_cls.FORMAT_CHECKER
            )
        return self._validators[schema_name]

    def validate(self, instance: dict, schema_name: str) -> None:
        """Validate an instance against a named schema.

        Args:
            instance: The JSON object to validate.
            schema_name: Logical name from SCHEMA_REGISTRY (e.g., "resource-document").

        Raises:
            KeyError: If schema_name not in registry.
            jsonschema.ValidationError: If validation fails.
        """
        validator = self._validator_for(schema_name)
        error = jsonschema.exceptions.best_match(validator.iter_errors(instance))
        if error is not None:
            raise error


@lru_cache(maxsize=1)
def default_validator() -> SchemaValidator:
    return SchemaValidator()


def validate_resource_document(document: dict) -> None:
    """Check a serialized model against the resource document schema."""
    default_validator().validate(document, "resource-document")
