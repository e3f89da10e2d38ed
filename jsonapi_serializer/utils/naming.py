"""Naming policies applied to attribute keys."""

from __future__ import annotations

from typing import Callable

from pydantic.alias_generators import to_snake

NamingPolicy = Callable[[str], str]


def _lower_leading(word: str) -> str:
    # "URLValue" -> "urlValue", "ID" -> "id", "Name" -> "name"
    if not word or not word[0].isupper():
        return word
    chars = list(word)
    for index, char in enumerate(chars):
        if index == 1 and not char.isupper():
            break
        has_next = index + 1 < len(chars)
        if index > 0 and has_next and not chars[index + 1].isupper():
            break
        chars[index] = char.lower()
    return "".join(chars)


def camel_case(name: str) -> str:
    """Convert a field name to camelCase (``UserId``/``user_id`` -> ``userId``)."""
    parts = [part for part in name.split("_") if part]
    if not parts:
        return name
    head, *rest = parts
    return _lower_leading(head) + "".join(part[:1].upper() + part[1:] for part in rest)


def pascal_case(name: str) -> str:
    """Convert a field name to PascalCase."""
    converted = camel_case(name)
    return converted[:1].upper() + converted[1:]


def snake_case(name: str) -> str:
    """Convert a field name to snake_case."""
    return to_snake(name)


def kebab_case(name: str) -> str:
    """Convert a field name to kebab-case."""
    return to_snake(name).replace("_", "-")


def identity(name: str) -> str:
    return name


NAMING_POLICIES: dict[str, NamingPolicy] = {
    "camel": camel_case,
    "pascal": pascal_case,
    "snake": snake_case,
    "kebab": kebab_case,
    "identity": identity,
}


def get_naming_policy(name: str) -> NamingPolicy:
    """Return the naming policy registered under ``name``."""
    try:
        return NAMING_POLICIES[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(NAMING_POLICIES))
        raise ValueError(f"Unknown naming policy {name!r}; expected one of: {known}.") from None
