"""Serialize arbitrary Python objects into JSON:API v1.1 documents."""

from .config import SerializerConfig, SerializerSettings
from .core.document import JSONAPIDocumentBuilder
from .core.encoder import JSONAPIEncoder
from .core.errors import AttributeCollisionError, MaxDepthExceededError, SerializationError
from .core.mapper import ResourceMapper
from .serializers.base import JSONAPISerializer

__all__ = [
    "AttributeCollisionError",
    "JSONAPIDocumentBuilder",
    "JSONAPIEncoder",
    "JSONAPISerializer",
    "MaxDepthExceededError",
    "ResourceMapper",
    "SerializationError",
    "SerializerConfig",
    "SerializerSettings",
]
