"""Bitmask-as-map codec.

On the wire a flag set is a map from every known flag symbol to a boolean:

    {"OBS_OUTPUT_VIDEO": true, "OBS_OUTPUT_AUDIO": true, "OBS_OUTPUT_ENCODED": false, ...}

In-process it is an ``enum.IntFlag`` decorated with ``wire_symbols``.
"""

from __future__ import annotations

import enum
import logging
from typing import TypeVar

from ..exceptions import EncodeError, TypeMismatch
from ..models.symbols import symbols_of
from ..wire import WireBool, WireMap, WireValue

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=enum.Flag)


def decode_flags(wire: WireValue, flag_type: type[F]) -> F:
    """Decode a flags map to a bitmask.

    A bit is set iff its symbol is present with value ``true``. Known symbols
    missing from the map are unset. Unknown symbols are skipped so newer
    producers can add flags before the schema catches up.

    Args:
        wire: Wire value expected to be a map of symbol -> bool
        flag_type: Target flag class

    Returns:
        The combined flag value (``flag_type(0)`` if nothing is set)

    Raises:
        TypeMismatch: If ``wire`` is not a map, or a known symbol maps to a
            non-boolean
    """
    if not isinstance(wire, WireMap):
        raise TypeMismatch("map", wire.kind)

    table = symbols_of(flag_type)
    mask = flag_type(0)
    for symbol, item in wire.items():
        member = table.by_symbol.get(symbol)
        if member is None:
            logger.debug("Ignoring unknown %s flag %r", flag_type.__name__, symbol)
            continue
        if not isinstance(item, WireBool):
            raise TypeMismatch("bool", item.kind, field=symbol)
        if item.value:
            mask |= member
    return mask


def encode_flags(value: F | int, flag_type: type[F]) -> WireMap:
    """Encode a bitmask as a complete flags map.

    Every known symbol is emitted, including the unset ones, in bit order.
    Bits without a symbol are dropped.

    Raises:
        EncodeError: If ``value`` is not an integer or flag member
    """
    if isinstance(value, flag_type):
        bits = int(value.value)
    elif isinstance(value, int) and not isinstance(value, bool):
        bits = value
    else:
        raise EncodeError(f"expected {flag_type.__name__}, got {type(value).__name__}")

    table = symbols_of(flag_type)
    return WireMap(
        tuple((symbol, WireBool(bits & int(member.value) != 0)) for member, symbol in table)
    )
