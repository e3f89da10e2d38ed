"""JSON:API document construction."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from jsonapi_serializer.config import DEFAULT_VERSION
from jsonapi_serializer.core.mapper import ResourceMapper
from jsonapi_serializer.schemas.resource import JSONAPIDocument, JSONAPIObject

logger = logging.getLogger(__name__)


class JSONAPIDocumentBuilder:
    """Build JSON:API v1.1 documents around mapped resource objects."""

    def __init__(
        self,
        mapper: ResourceMapper | None = None,
        *,
        version: str = DEFAULT_VERSION,
    ) -> None:
        self.mapper = mapper or ResourceMapper()
        self.version = version

    def build_single(self, instance: Any, type_: str | None = None) -> JSONAPIDocument:
        """Return a document for one object; ``None`` yields ``data: null``."""
        if instance is None:
            logger.debug("Built JSON:API %s document with null data", self.version)
            return self._document(None)
        return self._document(self.mapper.to_resource(instance, type_))

    def build_collection(
        self, instances: Iterable[Any], type_: str | None = None
    ) -> JSONAPIDocument:
        """Return a document for a collection, preserving input order."""
        items = list(instances)
        resources = [self.mapper.to_resource(item, type_) for item in items]
        logger.debug(
            "Built JSON:API %s document with %d resources", self.version, len(resources)
        )
        return self._document(resources)

    def _document(self, data: Any) -> JSONAPIDocument:
        return JSONAPIDocument(jsonapi=JSONAPIObject(version=self.version), data=data)
