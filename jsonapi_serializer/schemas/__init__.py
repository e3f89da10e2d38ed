"""Pydantic schemas for JSON:API."""

from .resource import JSONAPIDocument, JSONAPIObject, ResourceObject

__all__ = ["JSONAPIDocument", "JSONAPIObject", "ResourceObject"]
