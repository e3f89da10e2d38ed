"""Map arbitrary objects to JSON:API resource objects."""

from __future__ import annotations

import logging
from typing import Any

from jsonapi_serializer.config import SerializerConfig
from jsonapi_serializer.core.errors import AttributeCollisionError
from jsonapi_serializer.schemas.resource import ResourceObject
from jsonapi_serializer.utils.fields import discover_fields, read_field

logger = logging.getLogger(__name__)


class ResourceMapper:
    """Build ``{id, type, attributes}`` resource objects from instances."""

    def __init__(self, config: SerializerConfig | None = None) -> None:
        self.config = config or SerializerConfig()

    def to_resource(self, instance: Any, type_: str | None = None) -> ResourceObject:
        """Map a non-null instance into a resource object."""
        field_names = discover_fields(instance, self.config.resource_fields)
        return ResourceObject(
            id=self.get_id(instance, field_names),
            type=self.get_type(instance, type_),
            attributes=self.get_attributes(instance, field_names),
        )

    def get_id(self, instance: Any, field_names: list[Any]) -> str | None:
        """Return the string form of the id field's value, or None."""
        for name in field_names:
            if self.config.is_id_field(name):
                value = read_field(instance, name)
                return None if value is None else str(value)
        return None

    def get_type(self, instance: Any, type_: str | None = None) -> str:
        """Return the explicit type or the lower-cased class name."""
        if type_ is not None:
            return type_
        return type(instance).__name__.lower()

    def get_attributes(self, instance: Any, field_names: list[Any]) -> dict[str, Any]:
        """Return attribute values keyed by their serialized names."""
        naming_policy = self.config.naming_policy
        attributes: dict[str, Any] = {}
        sources: dict[str, Any] = {}
        for name in field_names:
            if self.config.is_id_field(name):
                continue
            key = naming_policy(str(name))
            if key in attributes:
                if self.config.strict_attributes:
                    raise AttributeCollisionError(key, str(sources[key]), str(name))
                logger.debug(
                    "Attribute %r from field %r overwrites field %r on %s",
                    key,
                    name,
                    sources[key],
                    type(instance).__name__,
                )
            attributes[key] = read_field(instance, name)
            sources[key] = name
        return attributes
