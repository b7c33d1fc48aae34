"""Wire value union and MessagePack boundary."""

from __future__ import annotations

from .value import (
    INT64_MAX,
    INT64_MIN,
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

__all__ = [
    "WireValue",
    "WireNil",
    "WireBool",
    "WireInt",
    "WireFloat",
    "WireStr",
    "WireBytes",
    "WireSeq",
    "WireMap",
    "NIL",
    "INT64_MIN",
    "INT64_MAX",
]
