"""Pydantic models for JSON:API v1.1 documents."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class JSONAPIObject(BaseModel):
    """The top-level ``jsonapi`` member."""

    version: str


class ResourceObject(BaseModel):
    """Resource object: id, type and raw attribute values."""

    id: Optional[str] = None
    type: str
    attributes: Dict[str, Any] = Field(default_factory=dict)


class JSONAPIDocument(BaseModel):
    """Top-level JSON:API document."""

    jsonapi: JSONAPIObject
    data: Union[ResourceObject, List[ResourceObject], None] = None
