"""Naming policy and field discovery helpers."""

from .fields import discover_fields, is_collection, read_field
from .naming import NAMING_POLICIES, camel_case, get_naming_policy

__all__ = [
    "NAMING_POLICIES",
    "camel_case",
    "discover_fields",
    "get_naming_policy",
    "is_collection",
    "read_field",
]
