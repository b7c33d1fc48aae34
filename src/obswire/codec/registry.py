"""Process-wide codec registry.

Maps every entity class to its field table. Entries are added while entity
classes are being defined (module import time) and never change afterwards,
so concurrent decode/encode calls read the registry without locking.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel

from ..exceptions import SchemaError
from .schema import MessageSchema

logger = logging.getLogger(__name__)

_SCHEMAS: dict[type[BaseModel], MessageSchema] = {}

# Read-only view for callers that want to audit what is registered
SCHEMA_REGISTRY: Mapping[type[BaseModel], MessageSchema] = MappingProxyType(_SCHEMAS)


def register_entity(entity_class: type[BaseModel]) -> MessageSchema:
    """Build and store the field table of an entity class.

    Called automatically for every BaseMessage subclass. Registering the same
    class again is a no-op.

    Args:
        entity_class: Fully defined BaseMessage subclass

    Returns:
        The class's field table

    Raises:
        SchemaError: If the class has an unsupported or conflicting field
    """
    existing = _SCHEMAS.get(entity_class)
    if existing is not None:
        return existing

    schema = MessageSchema.from_model(entity_class)
    _SCHEMAS[entity_class] = schema
    logger.debug(
        "Registered %s with wire keys %s",
        entity_class.__name__,
        [field.wire_key for field in schema.fields],
    )
    return schema


def schema_for(entity_class: type[BaseModel]) -> MessageSchema:
    """Look up the field table of an entity class.

    Classes whose definition was deferred by forward references are completed
    and registered on first use.

    Raises:
        SchemaError: If the class is not an entity
    """
    schema = _SCHEMAS.get(entity_class)
    if schema is not None:
        return schema

    # Import here to avoid circular dependency
    from ..models.base import BaseMessage

    if not (isinstance(entity_class, type) and issubclass(entity_class, BaseMessage)):
        raise SchemaError(f"{entity_class!r} is not a BaseMessage subclass")
    if entity_class is BaseMessage:
        raise SchemaError("BaseMessage itself has no fields to encode")

    entity_class.model_rebuild()
    return register_entity(entity_class)
