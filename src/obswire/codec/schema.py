"""Schema introspection for entity models.

This module turns a BaseMessage subclass into an ordered, immutable field
table: one FieldSchema per declared field, carrying its wire key and the
strategy that encodes it. Tables are built once per class by the registry.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Type

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import SchemaError
from ..models.fields import REJECT_EMPTY, field_option
from .strategies import FieldStrategy, NullableStrategy, strategy_for


@dataclass(frozen=True)
class FieldSchema:
    """Schema information for a single field.

    Attributes:
        name: Python field name
        wire_key: Key of the field in the wire map
        strategy: Codec strategy for the field's declared type
        optional: Whether the key may be absent from the wire map
    """

    name: str
    wire_key: str
    strategy: FieldStrategy
    optional: bool

    @property
    def nullable(self) -> bool:
        """Whether an explicit nil is accepted."""
        return isinstance(self.strategy, NullableStrategy)


class MessageSchema:
    """Field table for an entire entity.

    Example:
        >>> schema = MessageSchema.from_model(Output)
        >>> [(f.wire_key, f.strategy.describe()) for f in schema.fields][:2]
        [('outputName', 'str'), ('outputKind', 'str')]
    """

    def __init__(self, model_class: Type[BaseModel]) -> None:
        """Initialize schema from a Pydantic model.

        Args:
            model_class: Pydantic model class to introspect

        Raises:
            SchemaError: If a field type is unsupported or two fields share a wire key
        """
        self.model_class = model_class
        self.fields: tuple[FieldSchema, ...] = ()
        self.by_wire_key: Mapping[str, FieldSchema] = MappingProxyType({})
        self._introspect()

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> MessageSchema:
        return cls(model_class)

    def _introspect(self) -> None:
        """Introspect the model and populate field schemas."""
        fields: list[FieldSchema] = []
        by_key: dict[str, FieldSchema] = {}

        # Pydantic keeps inherited fields first, in declaration order
        for field_name, field_info in self.model_class.model_fields.items():
            field_schema = self._extract_field_schema(field_name, field_info)
            if field_schema.wire_key in by_key:
                raise SchemaError(
                    f"{self.model_class.__name__}: fields {by_key[field_schema.wire_key].name} "
                    f"and {field_name} share wire key {field_schema.wire_key!r}"
                )
            fields.append(field_schema)
            by_key[field_schema.wire_key] = field_schema

        self.fields = tuple(fields)
        self.by_wire_key = MappingProxyType(by_key)

    def _extract_field_schema(self, name: str, field_info: FieldInfo) -> FieldSchema:
        annotation: Any = field_info.annotation
        if annotation is None:
            raise SchemaError(f"Field {name} has no type annotation")

        try:
            strategy = strategy_for(
                annotation, reject_empty=bool(field_option(field_info, REJECT_EMPTY, False))
            )
        except SchemaError as e:
            raise SchemaError(f"{self.model_class.__name__}.{name}: {e}") from e

        return FieldSchema(
            name=name,
            wire_key=field_info.alias or name,
            strategy=strategy,
            optional=not field_info.is_required(),
        )

    def describe(self) -> list[tuple[str, str, str, bool]]:
        """Return ``(name, wire_key, type, optional)`` rows, in wire order."""
        return [
            (field.name, field.wire_key, field.strategy.describe(), field.optional)
            for field in self.fields
        ]
