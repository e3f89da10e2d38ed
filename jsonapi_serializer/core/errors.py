"""Exceptions raised while mapping or encoding JSON:API documents."""


class SerializationError(ValueError):
    """Base class for JSON:API serialization failures."""


class AttributeCollisionError(SerializationError):
    """Two fields map to the same attribute key under the naming policy."""

    def __init__(self, key: str, first_field: str, second_field: str) -> None:
        self.key = key
        self.first_field = first_field
        self.second_field = second_field
        super().__init__(
            f"Fields {first_field!r} and {second_field!r} both serialize to attribute {key!r}."
        )


class MaxDepthExceededError(SerializationError):
    """Attribute values nest deeper than the configured maximum."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(
            f"Attribute values exceed the maximum nesting depth of {max_depth}; "
            "the object graph may contain a cycle."
        )
