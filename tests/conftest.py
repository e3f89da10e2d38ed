"""Shared test fixtures."""

import json
from typing import Any, Callable

import pytest

from jsonapi_serializer import JSONAPISerializer, SerializerConfig


@pytest.fixture
def serializer() -> JSONAPISerializer:
    return JSONAPISerializer()


@pytest.fixture
def make_serializer() -> Callable[..., JSONAPISerializer]:
    """Build a serializer with the given config overrides."""

    def _make(version: str = "1.1", **config: Any) -> JSONAPISerializer:
        return JSONAPISerializer(version=version, config=SerializerConfig(**config))

    return _make


@pytest.fixture
def loads() -> Callable[[str], Any]:
    return json.loads
