"""Core JSON:API mapping, document and encoding helpers."""

from .document import JSONAPIDocumentBuilder
from .encoder import JSONAPIEncoder
from .errors import AttributeCollisionError, MaxDepthExceededError, SerializationError
from .mapper import ResourceMapper

__all__ = [
    "AttributeCollisionError",
    "JSONAPIDocumentBuilder",
    "JSONAPIEncoder",
    "MaxDepthExceededError",
    "ResourceMapper",
    "SerializationError",
]
