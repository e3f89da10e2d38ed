"""Encode JSON:API documents to JSON text.

Envelope members are emitted in a fixed order with fixed names. Attribute
values are converted recursively: containers become JSON objects and arrays,
nested records become objects keyed through the naming policy, and scalars
are left to ``pydantic_core`` which renders them in pydantic's JSON mode.
"""

from __future__ import annotations

from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any, Mapping
from uuid import UUID

from pydantic_core import to_json

from jsonapi_serializer.config import SerializerConfig
from jsonapi_serializer.core.errors import MaxDepthExceededError
from jsonapi_serializer.schemas.resource import JSONAPIDocument, ResourceObject
from jsonapi_serializer.utils.fields import discover_fields, is_collection, read_field

_SCALAR_TYPES = (
    str,
    int,
    float,
    bool,
    bytes,
    bytearray,
    Decimal,
    UUID,
    date,
    time,
    timedelta,
    Enum,
    PurePath,
)


class JSONAPIEncoder:
    """Turn a document into JSON text in a single pass."""

    def __init__(self, config: SerializerConfig | None = None) -> None:
        self.config = config or SerializerConfig()

    def encode(self, document: JSONAPIDocument) -> str:
        """Return the JSON text for ``document``."""
        payload = {
            "jsonapi": {"version": document.jsonapi.version},
            "data": self._encode_data(document.data),
        }
        return to_json(payload, indent=self.config.indent, bytes_mode="base64").decode("utf-8")

    def _encode_data(self, data: Any) -> Any:
        if data is None:
            return None
        if isinstance(data, list):
            return [self.encode_resource(resource) for resource in data]
        return self.encode_resource(data)

    def encode_resource(self, resource: ResourceObject) -> dict[str, Any]:
        """Return the JSON-ready form of one resource object."""
        return {
            "id": resource.id,
            "type": resource.type,
            "attributes": {
                key: self.to_jsonable(value) for key, value in resource.attributes.items()
            },
        }

    def to_jsonable(self, value: Any, depth: int = 0) -> Any:
        """Convert an attribute value into JSON-ready containers and scalars."""
        if value is None or isinstance(value, _SCALAR_TYPES):
            return value
        if depth >= self.config.max_depth:
            raise MaxDepthExceededError(self.config.max_depth)
        if isinstance(value, Mapping):
            return {key: self.to_jsonable(item, depth + 1) for key, item in value.items()}
        if is_collection(value):
            return [self.to_jsonable(item, depth + 1) for item in value]
        return self._encode_object(value, depth)

    def _encode_object(self, value: Any, depth: int) -> dict[str, Any]:
        naming_policy = self.config.naming_policy
        return {
            naming_policy(str(name)): self.to_jsonable(read_field(value, name), depth + 1)
            for name in discover_fields(value, self.config.resource_fields)
        }
