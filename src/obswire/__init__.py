"""obswire: typed MessagePack codec for OBS WebSocket state

A Python library that translates between the MessagePack wire format of the
OBS WebSocket protocol and typed, immutable Pydantic entities.

Key Features:
- Pydantic-based entity modeling with wire keys as field aliases
- Bitmask fields encoded as maps of flag symbols
- Enum fields encoded as symbolic strings
- Open-shape settings and transforms round-tripped without type coercion

Quick Start:
    >>> from obswire import Output, OutputFlags, decode, encode
    >>>
    >>> output = Output(
    ...     name="simple_stream", kind="rtmp_output", width=1920, height=1080,
    ...     active=True, flags=OutputFlags.VIDEO | OutputFlags.AUDIO,
    ... )
    >>> data = encode(output)
    >>> decode(Output, data) == output
    True
"""

from __future__ import annotations

from .codec import (
    SCHEMA_REGISTRY,
    decode,
    decode_dynamic,
    decode_enum,
    decode_flags,
    encode,
    encode_dynamic,
    encode_enum,
    encode_flags,
    from_wire,
    schema_for,
    to_wire,
)
from .entities import (
    AvailableTransition,
    BasicSceneItem,
    BlendingType,
    Input,
    InputVolumeMeter,
    Output,
    OutputFlags,
    Scene,
    SceneItem,
    SourceFilter,
    SourceType,
)
from .exceptions import (
    DecodeError,
    EncodeError,
    MalformedWireData,
    MissingField,
    ObswireError,
    SchemaError,
    TypeMismatch,
    UnknownEnumSymbol,
)
from .models import BaseMessage, DynamicMap, DynamicValue, FlagsField, WireField, wire_symbols
from .wire import WireMap, WireValue

__version__ = "0.1.0"

__all__ = [
    # Core API
    "BaseMessage",
    "encode",
    "decode",
    "to_wire",
    "from_wire",
    "schema_for",
    "SCHEMA_REGISTRY",
    # Field helpers
    "WireField",
    "FlagsField",
    "wire_symbols",
    "DynamicValue",
    "DynamicMap",
    # Irregular field codecs
    "decode_flags",
    "encode_flags",
    "decode_enum",
    "encode_enum",
    "decode_dynamic",
    "encode_dynamic",
    # Wire values
    "WireValue",
    "WireMap",
    # Exceptions
    "ObswireError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "MalformedWireData",
    "MissingField",
    "UnknownEnumSymbol",
    "TypeMismatch",
    # Entities
    "Output",
    "OutputFlags",
    "Scene",
    "InputVolumeMeter",
    "Input",
    "BasicSceneItem",
    "SceneItem",
    "SourceFilter",
    "AvailableTransition",
    "BlendingType",
    "SourceType",
    # Version
    "__version__",
]
