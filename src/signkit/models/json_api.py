"""Helpers for building JSON:API resource documents."""

from collections.abc import Mapping
from datetime import date
from typing import Any


def _wire_value(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        return compact(value)
    return value


def compact(attributes: Mapping[str, Any]) -> dict[str, Any]:
    """Drop ``None`` values and render dates as ISO 8601 strings."""
    return {key: _wire_value(value) for key, value in attributes.items() if value is not None}


def relationship(resource_type: str, resource_id: str) -> dict[str, Any]:
    return {"data": {"type": str(resource_type), "id": resource_id}}


def resource_document(
    resource_type: str,
    attributes: Mapping[str, Any],
    relationships: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Wrap attributes (and optional relationships) in a ``{"data": ...}`` document."""
    data: dict[str, Any] = {"type": str(resource_type), "attributes": compact(attributes)}
    if relationships:
        data["relationships"] = dict(relationships)
    return {"data": data}
