"""Serializer producing JSON:API text from arbitrary objects."""

from __future__ import annotations

from typing import Any, Iterable

from jsonapi_serializer.config import DEFAULT_VERSION, SerializerConfig, SerializerSettings
from jsonapi_serializer.core.document import JSONAPIDocumentBuilder
from jsonapi_serializer.core.encoder import JSONAPIEncoder
from jsonapi_serializer.core.mapper import ResourceMapper
from jsonapi_serializer.schemas.resource import JSONAPIDocument


class JSONAPISerializer:
    """Serialize objects and collections into JSON:API documents.

    The configuration is fixed at construction; instances hold no per-call
    state and can be shared between threads.
    """

    def __init__(
        self, version: str = DEFAULT_VERSION, config: SerializerConfig | None = None
    ) -> None:
        self.version = version
        self.config = config or SerializerConfig()
        self.mapper = ResourceMapper(self.config)
        self.document_builder = JSONAPIDocumentBuilder(self.mapper, version=version)
        self.encoder = JSONAPIEncoder(self.config)

    @classmethod
    def from_settings(cls, settings: SerializerSettings | None = None) -> JSONAPISerializer:
        """Create a serializer from environment-driven settings."""
        settings = settings or SerializerSettings()
        return cls(version=settings.version, config=settings.to_config())

    def serialize(self, obj: Any, type_: str | None = None) -> str:
        """Return the JSON:API text for a single object (or ``None``)."""
        return self.encoder.encode(self.build_single(obj, type_))

    def serialize_collection(self, objs: Iterable[Any], type_: str | None = None) -> str:
        """Return the JSON:API text for a collection of objects."""
        return self.encoder.encode(self.build_collection(objs, type_))

    def build_single(self, obj: Any, type_: str | None = None) -> JSONAPIDocument:
        return self.document_builder.build_single(obj, type_)

    def build_collection(
        self, objs: Iterable[Any], type_: str | None = None
    ) -> JSONAPIDocument:
        return self.document_builder.build_collection(objs, type_)
