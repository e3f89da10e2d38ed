"""Tests for encoding documents to JSON text."""

from __future__ import annotations

import base64
import json
from collections import deque
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

import pytest

from jsonapi_serializer import (
    JSONAPIDocumentBuilder,
    JSONAPIEncoder,
    MaxDepthExceededError,
    ResourceMapper,
    SerializerConfig,
)
from jsonapi_serializer.config import MAX_DEPTH_LIMIT
from tests.resources import Color, Coordinates, Dimensions, Node, Point, Widget


def _encode(obj: object, **config: object) -> str:
    settings = SerializerConfig(**config)
    document = JSONAPIDocumentBuilder(ResourceMapper(settings)).build_single(obj)
    return JSONAPIEncoder(settings).encode(document)


class TestEnvelope:
    def test_member_order_is_fixed(self) -> None:
        text = _encode({"Id": "X1", "Name": "Widget"})
        assert text == (
            '{"jsonapi":{"version":"1.1"},'
            '"data":{"id":"X1","type":"dict","attributes":{"name":"Widget"}}}'
        )

    def test_envelope_keys_ignore_naming_policy(self) -> None:
        text = _encode({"Id": "X1"}, naming_policy="pascal")
        assert list(json.loads(text)) == ["jsonapi", "data"]
        assert list(json.loads(text)["data"]) == ["id", "type", "attributes"]

    def test_indent(self) -> None:
        text = _encode({"Id": "X1"}, indent=2)
        assert "\n" in text
        assert json.loads(text)["data"]["id"] == "X1"

    def test_non_ascii_is_not_escaped(self) -> None:
        assert "café" in _encode({"Id": 1, "Name": "café"})


class TestAttributeValues:
    def test_nested_objects_use_naming_policy(self) -> None:
        widget = Widget("w1", "Gear", Dimensions(2, 3), Tags=["a", "b"])
        attributes = json.loads(_encode(widget))["data"]["attributes"]
        assert attributes["size"] == {"width": 2, "height": 3}
        assert attributes["tags"] == ["a", "b"]
        assert attributes["label"] == "Gear (2x3)"

    def test_nested_objects_keep_their_id(self) -> None:
        parent = Node("a")
        parent.Next = Node("b")
        attributes = json.loads(_encode(parent))["data"]["attributes"]
        assert attributes["next"] == {"id": "b", "name": "b", "next": None}

    def test_mapping_keys_are_unchanged(self) -> None:
        widget = Widget("w1", "Gear", Dimensions(1, 1), Extra={"Made_In": "NL"})
        attributes = json.loads(_encode(widget))["data"]["attributes"]
        assert attributes["extra"] == {"Made_In": "NL"}

    def test_scalars(self) -> None:
        value = {
            "Id": 1,
            "Price": Decimal("9.99"),
            "Created": datetime(2024, 1, 2, 3, 4, 5),
            "Day": date(2024, 1, 2),
            "Key": UUID("12345678-1234-5678-1234-567812345678"),
            "Color": Color.RED,
        }
        attributes = json.loads(_encode(value))["data"]["attributes"]
        assert attributes == {
            "price": "9.99",
            "created": "2024-01-02T03:04:05",
            "day": "2024-01-02",
            "key": "12345678-1234-5678-1234-567812345678",
            "color": "red",
        }

    def test_named_tuples_and_slots_become_objects(self) -> None:
        value = {"Id": 1, "Where": Coordinates(1.5, 2.5), "At": Point(1, 2)}
        attributes = json.loads(_encode(value))["data"]["attributes"]
        assert attributes["where"] == {"latitude": 1.5, "longitude": 2.5}
        assert attributes["at"] == {"x": 1, "y": 2}

    def test_sets_become_arrays(self) -> None:
        attributes = json.loads(_encode({"Id": 1, "Tags": {"x"}}))["data"]["attributes"]
        assert attributes["tags"] == ["x"]


class TestDepth:
    def test_cycle_raises(self) -> None:
        node = Node("a")
        node.Next = node
        with pytest.raises(MaxDepthExceededError) as exc_info:
            _encode(node)
        assert exc_info.value.max_depth == 64

    def test_custom_max_depth(self) -> None:
        with pytest.raises(MaxDepthExceededError, match="depth of 1"):
            _encode({"Id": 1, "Deep": {"a": {"b": 1}}}, max_depth=1)

    def test_within_max_depth(self) -> None:
        text = _encode({"Id": 1, "Deep": {"a": 1}}, max_depth=1)
        assert json.loads(text)["data"]["attributes"]["deep"] == {"a": 1}


class TestIterables:
    def test_any_iterable_becomes_array(self) -> None:
        value = {
            "Id": 1,
            "Queue": deque([1, 2]),
            "Span": range(3),
            "Keys": {"a": 1, "b": 2}.keys(),
            "Stream": (n * 2 for n in range(2)),
        }
        attributes = json.loads(_encode(value))["data"]["attributes"]
        assert attributes == {
            "queue": [1, 2],
            "span": [0, 1, 2],
            "keys": ["a", "b"],
            "stream": [0, 2],
        }

    def test_nested_iterables_of_records(self) -> None:
        value = {"Id": 1, "Sizes": deque([Dimensions(1, 2)])}
        attributes = json.loads(_encode(value))["data"]["attributes"]
        assert attributes["sizes"] == [{"width": 1, "height": 2}]


class TestBytes:
    def test_bytes_are_base64(self) -> None:
        attributes = json.loads(_encode({"Id": 1, "Blob": b"\xff\x00"}))["data"]["attributes"]
        blob = attributes["blob"]
        assert base64.urlsafe_b64decode(blob + "=" * (-len(blob) % 4)) == b"\xff\x00"

    def test_text_bytes_are_base64_too(self) -> None:
        attributes = json.loads(_encode({"Id": 1, "Blob": b"hi"}))["data"]["attributes"]
        assert attributes["blob"].rstrip("=") == "aGk"


class TestDepthLimit:
    def test_cycle_at_largest_depth_raises_cleanly(self) -> None:
        node = Node("a")
        node.Next = node
        with pytest.raises(MaxDepthExceededError):
            _encode(node, max_depth=MAX_DEPTH_LIMIT)
