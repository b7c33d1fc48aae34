"""Open-shape dynamic value codec.

Settings blobs and scene item transforms have no fixed schema. They are copied
between the wire value tree and plain Python containers without coercion: a
wire integer is always decoded to ``int`` and a wire float to ``float``, even
where the two compare equal. Map order is kept in both directions so
unchanged settings re-encode to identical bytes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..exceptions import EncodeError
from ..models.dynamic import DynamicValue
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


def decode_dynamic(wire: WireValue) -> DynamicValue:
    """Copy a wire value tree into plain Python values.

    Never fails: every wire kind has a dynamic counterpart.
    """
    if isinstance(wire, WireMap):
        return {key: decode_dynamic(item) for key, item in wire.items()}
    if isinstance(wire, WireSeq):
        return [decode_dynamic(item) for item in wire]
    if isinstance(wire, WireNil):
        return None
    if isinstance(wire, (WireBool, WireInt, WireFloat, WireStr, WireBytes)):
        return wire.value
    raise TypeError(f"unknown wire value {wire!r}")


def encode_dynamic(value: Any, path: str = "$") -> WireValue:
    """Copy plain Python values into a wire value tree.

    Args:
        value: None, bool, int, float, str, bytes, list/tuple or str-keyed mapping
        path: Location of ``value`` inside the enclosing field, for error messages

    Raises:
        EncodeError: If anything in the tree has no wire representation
    """
    if value is None:
        return NIL
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return WireBool(value)
    if isinstance(value, int):
        try:
            return WireInt(int(value))
        except EncodeError as e:
            raise EncodeError(f"{path}: {e}") from e
    if isinstance(value, float):
        return WireFloat(float(value))
    if isinstance(value, str):
        return WireStr(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return WireBytes(bytes(value))
    if isinstance(value, (list, tuple)):
        return WireSeq(tuple(encode_dynamic(item, f"{path}[{i}]") for i, item in enumerate(value)))
    if isinstance(value, Mapping):
        entries = []
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodeError(f"{path}: map keys must be str, got {type(key).__name__}")
            entries.append((key, encode_dynamic(item, f"{path}.{key}")))
        return WireMap(tuple(entries))
    raise EncodeError(f"{path}: {type(value).__name__} has no wire representation")
