"""Field discovery for resource objects.

Each supported object kind exposes its public fields in its own natural
order. Field lists declared explicitly per class take precedence over
introspection.
"""

from __future__ import annotations

import dataclasses
from functools import cached_property
from typing import Any, Iterable, Mapping, Sequence

from pydantic import BaseModel
from sqlalchemy.inspection import inspect

FieldRegistry = Mapping[type, Sequence[str]]


def _is_public(name: Any) -> bool:
    return not str(name).startswith("_")


def registered_fields(instance: Any, registry: FieldRegistry | None) -> list[str] | None:
    """Return the declared field names for the instance's class, if any."""
    if not registry:
        return None
    for klass in type(instance).__mro__:
        declared = registry.get(klass)
        if declared is not None:
            return list(declared)
    return None


def property_names(klass: type) -> list[str]:
    """Return public property names of a class, most derived class first."""
    names: list[str] = []
    for base in klass.__mro__:
        for name, member in vars(base).items():
            if not isinstance(member, (property, cached_property)):
                continue
            if _is_public(name) and name not in names:
                names.append(name)
    return names


def _slot_names(klass: type) -> list[str]:
    names: list[str] = []
    for base in reversed(klass.__mro__):
        slots = vars(base).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(name for name in slots if _is_public(name) and name not in names)
    return names


def _sqlalchemy_fields(instance: Any) -> list[str] | None:
    state = inspect(instance, raiseerr=False)
    mapper = getattr(state, "mapper", None)
    if mapper is None:
        return None
    return [attr.key for attr in mapper.column_attrs]


def _object_fields(instance: Any) -> list[str]:
    properties = property_names(type(instance))
    names = [
        name
        for name in getattr(instance, "__dict__", {})
        if _is_public(name) and name not in properties
    ]
    for name in _slot_names(type(instance)) + properties:
        if name not in names:
            names.append(name)
    return names


def _class_member(instance: Any, name: str) -> Any:
    for base in type(instance).__mro__:
        if name in vars(base):
            return vars(base)[name]
    return None


def is_collection(value: Any) -> bool:
    """Return True for iterables encoded as JSON arrays."""
    if isinstance(value, (str, bytes, bytearray, Mapping, BaseModel)):
        return False
    if hasattr(value, "_fields"):
        return False
    return isinstance(value, Iterable)


def discover_fields(instance: Any, registry: FieldRegistry | None = None) -> list[str]:
    """Return the public field names of ``instance`` in discovery order."""
    declared = registered_fields(instance, registry)
    if declared is not None:
        return declared
    if isinstance(instance, Mapping):
        return list(instance)
    if dataclasses.is_dataclass(instance) and not isinstance(instance, type):
        names = [field.name for field in dataclasses.fields(instance) if _is_public(field.name)]
        return names + [name for name in property_names(type(instance)) if name not in names]
    if isinstance(instance, BaseModel):
        model = type(instance)
        return [
            name
            for name in [*model.model_fields, *model.model_computed_fields]
            if _is_public(name)
        ]
    if isinstance(instance, tuple) and hasattr(instance, "_fields"):
        return list(instance._fields)
    mapped = _sqlalchemy_fields(instance)
    if mapped is not None:
        return mapped
    return _object_fields(instance)


def read_field(instance: Any, name: str) -> Any:
    """Return the value of a discovered field; access errors propagate."""
    if isinstance(instance, Mapping):
        return instance[name]
    member = _class_member(instance, name)
    if isinstance(member, cached_property) and name not in getattr(instance, "__dict__", {}):
        # computed without populating the instance cache
        return member.func(instance)
    return getattr(instance, name)
