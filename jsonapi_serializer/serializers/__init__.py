"""JSON:API serializers."""

from .base import JSONAPISerializer

__all__ = ["JSONAPISerializer"]
