"""MessagePack entity codec for obswire.

This module provides encoding and decoding between MessagePack bytes and
typed entities, plus the three irregular field codecs (flags, enum symbols,
dynamic values) and the registry that dispatches among them.
"""

from __future__ import annotations

from .decoder import decode, from_wire
from .dynamic import decode_dynamic, encode_dynamic
from .encoder import encode, to_wire
from .enums import decode_enum, encode_enum
from .flags import decode_flags, encode_flags
from .registry import SCHEMA_REGISTRY, register_entity, schema_for
from .schema import FieldSchema, MessageSchema

__all__ = [
    "encode",
    "decode",
    "to_wire",
    "from_wire",
    "decode_flags",
    "encode_flags",
    "decode_enum",
    "encode_enum",
    "decode_dynamic",
    "encode_dynamic",
    "MessageSchema",
    "FieldSchema",
    "SCHEMA_REGISTRY",
    "register_entity",
    "schema_for",
]
