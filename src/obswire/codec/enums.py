"""Enum-as-symbolic-string codec."""

from __future__ import annotations

import enum
from typing import TypeVar

from ..exceptions import EncodeError, TypeMismatch, UnknownEnumSymbol
from ..models.symbols import symbols_of
from ..wire import WireStr, WireValue

E = TypeVar("E", bound=enum.Enum)


def decode_enum(wire: WireValue, enum_type: type[E]) -> E:
    """Decode a symbolic string to its enum member.

    Raises:
        TypeMismatch: If ``wire`` is not a string
        UnknownEnumSymbol: If the string is not one of ``enum_type``'s symbols
    """
    if not isinstance(wire, WireStr):
        raise TypeMismatch("str", wire.kind)

    member = symbols_of(enum_type).by_symbol.get(wire.value)
    if member is None:
        raise UnknownEnumSymbol(wire.value, enum_type.__name__)
    return member  # type: ignore[return-value]


def encode_enum(value: E, enum_type: type[E]) -> WireStr:
    """Encode an enum member as its symbolic string.

    Raises:
        EncodeError: If ``value`` is not a member of ``enum_type``
    """
    if not isinstance(value, enum_type):
        raise EncodeError(f"expected {enum_type.__name__}, got {type(value).__name__}")
    return WireStr(symbols_of(enum_type).by_member[value])
