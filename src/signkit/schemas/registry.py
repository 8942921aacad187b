"""Schema registry mapping logical names to JSON Schemas for wire payloads."""

from signkit.models.enums import ResourceType

_RESOURCE_TYPES = [str(resource_type) for resource_type in ResourceType]

RELATIONSHIP_SCHEMA: dict = {
    "type": "object",
    "required": ["data"],
    "additionalProperties": False,
    "properties": {
        "data": {
            "type": "object",
            "required": ["type", "id"],
            "additionalProperties": False,
            "properties": {
                "type": {"enum": ["documents", "signers"]},
                "id": {"type": "string", "format": "uuid"},
            },
        }
    },
}

RESOURCE_DOCUMENT_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Resource document",
    "type": "object",
    "required": ["data"],
    "additionalProperties": False,
    "properties": {
        "data": {
            "type": "object",
            "required": ["type", "attributes"],
            "additionalProperties": False,
            "properties": {
                "type": {"enum": _RESOURCE_TYPES},
                "attributes": {
                    "type": "object",
                    # null values are omitted, never sent
                    "additionalProperties": {"not": {"type": "null"}},
                },
                "relationships": {
                    "type": "object",
                    "additionalProperties": False,
                    "properties": {
                        "document": RELATIONSHIP_SCHEMA,
                        "signer": RELATIONSHIP_SCHEMA,
                    },
                },
            },
        }
    },
}

SCHEMA_REGISTRY: dict[str, dict] = {
    "resource-document": RESOURCE_DOCUMENT_SCHEMA,
    "relationship": RELATIONSHIP_SCHEMA,
}
