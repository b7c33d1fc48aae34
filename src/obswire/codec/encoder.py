"""Entity encoder.

This module provides the encode() function that turns an entity into
MessagePack bytes, and to_wire() which stops at the wire value tree.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..exceptions import EncodeError
from ..wire import WireMap, WireValue
from .registry import schema_for


def encode(entity: BaseModel) -> bytes:
    """Encode an entity to MessagePack bytes.

    Args:
        entity: Entity instance to encode

    Returns:
        MessagePack map keyed by the entity's wire keys

    Raises:
        SchemaError: If the entity class is not a valid entity
        EncodeError: If a field value cannot be encoded

    Example:
        ```python
        from obswire import Scene, encode

        data = encode(Scene(name="Main", index=0))
        ```
    """
    return to_wire(entity).to_bytes()


def to_wire(entity: BaseModel) -> WireMap:
    """Encode an entity to a wire map.

    Keys are emitted in declaration order. Optional fields that were never set
    (absent on decode, or left at their default in-process) are omitted;
    required fields are always emitted.
    """
    schema = schema_for(type(entity))
    fields_set = entity.model_fields_set

    entries: list[tuple[str, WireValue]] = []
    for field_schema in schema.fields:
        if field_schema.optional and field_schema.name not in fields_set:
            continue

        try:
            value = getattr(entity, field_schema.name)
        except AttributeError as e:
            raise EncodeError(
                f"Field {field_schema.name} is required but not set on "
                f"{type(entity).__name__}"
            ) from e

        try:
            entries.append((field_schema.wire_key, field_schema.strategy.encode(value)))
        except EncodeError as e:
            raise EncodeError(f"Field {field_schema.name}: {e}") from e

    return WireMap(tuple(entries))
