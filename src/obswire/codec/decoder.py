"""Entity decoder.

This module provides the decode() function that turns MessagePack bytes into a
typed, immutable entity, and from_wire() for callers that already hold a
decoded wire value (e.g. the ``d`` field of a request response).
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import DecodeError, MissingField, TypeMismatch
from ..wire import WireMap, WireValue
from .registry import schema_for

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def decode(entity_class: type[T], data: bytes) -> T:
    """Decode MessagePack bytes to an entity.

    Args:
        entity_class: Entity class to decode to
        data: Raw bytes holding exactly one MessagePack map

    Returns:
        Decoded entity instance

    Raises:
        MalformedWireData: If the bytes do not parse
        MissingField: If a required wire key is absent
        UnknownEnumSymbol: If an enum field carries an unknown symbol
        TypeMismatch: If a wire value has the wrong kind for its field
        DecodeError: If the entity cannot be constructed from the decoded values

    Example:
        ```python
        from obswire import Scene, decode

        scene = decode(Scene, payload)
        print(scene.name, scene.index)
        ```
    """
    return from_wire(entity_class, WireValue.from_bytes(data))


def from_wire(entity_class: type[T], wire: WireValue) -> T:
    """Decode an already-parsed wire value to an entity.

    Fields are visited in declaration order. Absent optional fields are left
    unset, so they are missing from ``model_fields_set``; an explicit nil on a
    nullable field is recorded as a present ``None``.
    """
    schema = schema_for(entity_class)
    entity_name = entity_class.__name__

    if not isinstance(wire, WireMap):
        raise TypeMismatch("map", wire.kind, field=entity_name)

    field_values: dict[str, Any] = {}
    for field_schema in schema.fields:
        item = wire.get(field_schema.wire_key)
        if item is None:
            if field_schema.optional:
                continue
            raise MissingField(field_schema.name, field_schema.wire_key, entity_name)

        try:
            field_values[field_schema.name] = field_schema.strategy.decode(item)
        except TypeMismatch as e:
            # Errors from flag maps and nested entities keep their inner path
            path = f"{entity_name}.{field_schema.name}"
            if e.field is not None:
                path = f"{path}.{e.field}"
            raise TypeMismatch(e.expected, e.actual, field=path) from e

    unknown = [key for key in wire.keys() if key not in schema.by_wire_key]
    if unknown:
        if not getattr(entity_class, "obswire_ignore_unknown", True):
            raise DecodeError(f"{entity_name}: unknown wire keys {unknown}")
        logger.debug("Ignoring unknown %s wire keys %s", entity_name, unknown)

    try:
        return entity_class(**field_values)
    except ValidationError as e:
        raise DecodeError(f"Failed to construct {entity_name}: {e}") from e
