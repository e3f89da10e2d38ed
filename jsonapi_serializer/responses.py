"""Starlette response rendering JSON:API documents."""

from __future__ import annotations

from typing import Any, Mapping

from starlette.background import BackgroundTask
from starlette.responses import Response

from jsonapi_serializer.schemas.resource import JSONAPIDocument
from jsonapi_serializer.serializers.base import JSONAPISerializer
from jsonapi_serializer.utils.fields import is_collection

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class JSONAPIResponse(Response):
    """Render an object, a collection or a prebuilt document as JSON:API."""

    media_type = JSONAPI_MEDIA_TYPE

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        *,
        type_: str | None = None,
        serializer: JSONAPISerializer | None = None,
        background: BackgroundTask | None = None,
    ) -> None:
        self.type_ = type_
        self.serializer = serializer or JSONAPISerializer()
        super().__init__(content, status_code, headers, background=background)

    def render(self, content: Any) -> bytes:
        """Serialize the content through the configured serializer."""
        if isinstance(content, JSONAPIDocument):
            text = self.serializer.encoder.encode(content)
        elif is_collection(content):
            text = self.serializer.serialize_collection(content, self.type_)
        else:
            text = self.serializer.serialize(content, self.type_)
        return text.encode("utf-8")
