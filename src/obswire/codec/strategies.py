"""Per-type field codec strategies.

Each declared field type maps to exactly one strategy object. Strategies are
frozen and stateless; they are built once when an entity class is registered
and shared by every decode/encode call afterwards.

    str, int, float, bool, bytes     -> ScalarStrategy
    list[T]                          -> SequenceStrategy(strategy for T)
    Optional[T]                      -> NullableStrategy(strategy for T)
    BaseMessage subclass             -> EntityStrategy
    @wire_symbols IntFlag / Flag     -> FlagsStrategy
    @wire_symbols Enum               -> EnumStrategy
    DynamicValue / dict[str, DynamicValue] -> DynamicStrategy
"""

from __future__ import annotations

import enum
import types
from dataclasses import dataclass
from typing import Any, Dict, List, Union, get_args, get_origin

from ..exceptions import EncodeError, SchemaError, TypeMismatch
from ..models.base import BaseMessage
from ..models.dynamic import DynamicValue
from ..models.symbols import symbols_of
from ..wire import (
    NIL,
    WireBool,
    WireBytes,
    WireFloat,
    WireInt,
    WireMap,
    WireNil,
    WireSeq,
    WireStr,
    WireValue,
)
from .dynamic import decode_dynamic, encode_dynamic
from .enums import decode_enum, encode_enum
from .flags import decode_flags, encode_flags


class FieldStrategy:
    """Interface shared by all strategies."""

    def decode(self, wire: WireValue) -> Any:
        raise NotImplementedError

    def encode(self, value: Any) -> WireValue:
        raise NotImplementedError

    def describe(self) -> str:
        """Short human-readable name of the handled type."""
        raise NotImplementedError


# Wire kinds accepted per scalar type. float also takes integers, since
# producers write whole-number floats as ints.
_SCALAR_WIRE_TYPES: dict[type, tuple[type[WireValue], ...]] = {
    bool: (WireBool,),
    int: (WireInt,),
    float: (WireFloat, WireInt),
    str: (WireStr,),
    bytes: (WireBytes,),
}

_SCALAR_WRAPPERS: dict[type, type[WireValue]] = {
    bool: WireBool,
    int: WireInt,
    float: WireFloat,
    str: WireStr,
    bytes: WireBytes,
}


@dataclass(frozen=True)
class ScalarStrategy(FieldStrategy):
    python_type: type

    def decode(self, wire: WireValue) -> Any:
        if not isinstance(wire, _SCALAR_WIRE_TYPES[self.python_type]):
            raise TypeMismatch(self.python_type.__name__, wire.kind)
        if self.python_type is float:
            return float(wire.value)  # type: ignore[attr-defined]
        return wire.value  # type: ignore[attr-defined]

    def encode(self, value: Any) -> WireValue:
        accepted: tuple[type, ...] = (self.python_type,)
        if self.python_type is float:
            accepted = (float, int)
        if not isinstance(value, accepted) or (
            isinstance(value, bool) and self.python_type is not bool
        ):
            raise EncodeError(
                f"expected {self.python_type.__name__}, got {type(value).__name__}"
            )
        return _SCALAR_WRAPPERS[self.python_type](self.python_type(value))

    def describe(self) -> str:
        return self.python_type.__name__


@dataclass(frozen=True)
class NullableStrategy(FieldStrategy):
    inner: FieldStrategy

    def decode(self, wire: WireValue) -> Any:
        if isinstance(wire, WireNil):
            return None
        return self.inner.decode(wire)

    def encode(self, value: Any) -> WireValue:
        if value is None:
            return NIL
        return self.inner.encode(value)

    def describe(self) -> str:
        return f"Optional[{self.inner.describe()}]"


@dataclass(frozen=True)
class SequenceStrategy(FieldStrategy):
    item: FieldStrategy

    def decode(self, wire: WireValue) -> list[Any]:
        if not isinstance(wire, WireSeq):
            raise TypeMismatch("sequence", wire.kind)
        return [self.item.decode(element) for element in wire]

    def encode(self, value: Any) -> WireValue:
        if not isinstance(value, (list, tuple)):
            raise EncodeError(f"expected list, got {type(value).__name__}")
        return WireSeq(tuple(self.item.encode(element) for element in value))

    def describe(self) -> str:
        return f"list[{self.item.describe()}]"


@dataclass(frozen=True)
class EntityStrategy(FieldStrategy):
    entity_class: type

    def decode(self, wire: WireValue) -> Any:
        # Import here to avoid circular dependency
        from .decoder import from_wire

        return from_wire(self.entity_class, wire)

    def encode(self, value: Any) -> WireValue:
        from .encoder import to_wire

        if not isinstance(value, self.entity_class):
            raise EncodeError(
                f"expected {self.entity_class.__name__}, got {type(value).__name__}"
            )
        return to_wire(value)

    def describe(self) -> str:
        return self.entity_class.__name__


@dataclass(frozen=True)
class FlagsStrategy(FieldStrategy):
    flag_type: type[enum.Flag]
    reject_empty: bool = False

    def decode(self, wire: WireValue) -> Any:
        mask = decode_flags(wire, self.flag_type)
        if self.reject_empty and not mask:
            raise TypeMismatch(f"non-empty {self.flag_type.__name__}", "empty flag map")
        return mask

    def encode(self, value: Any) -> WireValue:
        if self.reject_empty and isinstance(value, (int, enum.Flag)) and not value:
            raise EncodeError(f"{self.flag_type.__name__} must have at least one flag set")
        return encode_flags(value, self.flag_type)

    def describe(self) -> str:
        return f"flags {self.flag_type.__name__}"


@dataclass(frozen=True)
class EnumStrategy(FieldStrategy):
    enum_type: type[enum.Enum]

    def decode(self, wire: WireValue) -> Any:
        return decode_enum(wire, self.enum_type)

    def encode(self, value: Any) -> WireValue:
        return encode_enum(value, self.enum_type)

    def describe(self) -> str:
        return f"enum {self.enum_type.__name__}"


@dataclass(frozen=True)
class DynamicStrategy(FieldStrategy):
    """Schema-free value; ``map_only`` requires a map at the top level."""

    map_only: bool = False

    def decode(self, wire: WireValue) -> Any:
        if self.map_only and not isinstance(wire, WireMap):
            raise TypeMismatch("map", wire.kind)
        return decode_dynamic(wire)

    def encode(self, value: Any) -> WireValue:
        wire = encode_dynamic(value)
        if self.map_only and not isinstance(wire, WireMap):
            raise EncodeError(f"expected dict, got {type(value).__name__}")
        return wire

    def describe(self) -> str:
        return "dynamic map" if self.map_only else "dynamic"


def _is_union(origin: Any) -> bool:
    return origin is Union or origin is types.UnionType


def strategy_for(annotation: Any, *, reject_empty: bool = False) -> FieldStrategy:
    """Resolve the strategy for a declared field type.

    Args:
        annotation: Evaluated type annotation of the field
        reject_empty: Forwarded to flags fields (see ``FlagsField``)

    Raises:
        SchemaError: If the annotation is not supported
    """
    if annotation is DynamicValue:
        return DynamicStrategy()

    origin = get_origin(annotation)
    args = get_args(annotation)

    if _is_union(origin):
        non_none = [arg for arg in args if arg is not type(None)]
        if len(non_none) == 1 and len(args) == 2:
            return NullableStrategy(strategy_for(non_none[0], reject_empty=reject_empty))
        raise SchemaError(f"complex Union types not supported: {annotation!r}")

    if origin in (dict, Dict):
        if len(args) == 2 and args[0] is str and args[1] is DynamicValue:
            return DynamicStrategy(map_only=True)
        raise SchemaError(f"only dict[str, DynamicValue] maps are supported, got {annotation!r}")

    if origin in (list, List):
        if not args:
            raise SchemaError("list fields need an item type")
        return SequenceStrategy(strategy_for(args[0]))

    if not isinstance(annotation, type):
        raise SchemaError(f"unsupported field type {annotation!r}")

    if issubclass(annotation, enum.Flag):
        symbols_of(annotation)
        return FlagsStrategy(annotation, reject_empty=reject_empty)

    if issubclass(annotation, enum.Enum):
        symbols_of(annotation)
        return EnumStrategy(annotation)

    if issubclass(annotation, BaseMessage):
        return EntityStrategy(annotation)

    if annotation in _SCALAR_WIRE_TYPES:
        return ScalarStrategy(annotation)

    raise SchemaError(
        f"unsupported field type {annotation.__name__}. "
        f"Supported: bool, int, float, str, bytes, list, entity, flags, enum, dynamic."
    )
