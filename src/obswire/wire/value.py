"""Wire value tagged union.

Every codec in obswire reads and writes through these types, never through the
raw MessagePack byte stream. ``WireValue.from_bytes`` and ``WireValue.to_bytes``
are the only places that touch ``msgpack``.

Example:
    >>> value = WireValue.from_bytes(b"\\x81\\xa9sceneName\\xa5Scene")
    >>> value
    WireMap(entries=(('sceneName', WireStr(value='Scene')),))
    >>> value.to_bytes()
    b'\\x81\\xa9sceneName\\xa5Scene'
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar

import msgpack

from ..exceptions import EncodeError, MalformedWireData

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class WireValue:
    """Base class of the wire value union.

    Subclasses are frozen dataclasses, one per wire kind. ``kind`` is the
    human-readable tag used in error messages.
    """

    kind: ClassVar[str] = "value"

    __slots__ = ()

    @classmethod
    def from_bytes(cls, data: bytes) -> WireValue:
        """Parse exactly one MessagePack object from ``data``.

        Args:
            data: Raw bytes received from the transport

        Returns:
            The decoded wire value tree

        Raises:
            MalformedWireData: If the bytes are truncated, carry trailing data,
                or contain something the union cannot represent
        """
        # Buffer sized to the input: large payloads fit, and declared
        # container lengths can never exceed what the input could hold
        unpacker = msgpack.Unpacker(
            raw=False,
            max_buffer_size=len(data),
            strict_map_key=False,
            timestamp=0,
            list_hook=_sequence_hook,
            object_pairs_hook=_map_hook,
        )
        try:
            unpacker.feed(data)
            obj = unpacker.unpack()
            value = _from_reader(obj)
        except msgpack.OutOfData as e:
            raise MalformedWireData("truncated data", len(data)) from e
        except (msgpack.UnpackException, ValueError, TypeError) as e:
            raise MalformedWireData(str(e) or type(e).__name__, unpacker.tell()) from e

        consumed = unpacker.tell()
        if consumed != len(data):
            raise MalformedWireData(
                f"trailing data: {len(data) - consumed} bytes after the first object", consumed
            )
        return value

    def to_bytes(self) -> bytes:
        """Serialize this value to MessagePack.

        Raises:
            EncodeError: If msgpack refuses the value (e.g. unencodable string)
        """
        try:
            return msgpack.packb(self.unwrap(), use_bin_type=True)
        except (ValueError, TypeError, OverflowError) as e:
            raise EncodeError(f"Failed to pack wire value: {e}") from e

    def unwrap(self) -> Any:
        """Return the plain Python equivalent of this value."""
        raise NotImplementedError


@dataclass(frozen=True)
class WireNil(WireValue):
    kind: ClassVar[str] = "nil"

    def unwrap(self) -> None:
        return None


NIL = WireNil()


@dataclass(frozen=True)
class WireBool(WireValue):
    kind: ClassVar[str] = "bool"

    value: bool

    def unwrap(self) -> bool:
        return self.value


@dataclass(frozen=True)
class WireInt(WireValue):
    """Signed 64-bit integer."""

    kind: ClassVar[str] = "int"

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise EncodeError(f"WireInt requires int, got {type(self.value).__name__}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise EncodeError(f"integer {self.value} does not fit in signed 64 bits")

    def unwrap(self) -> int:
        return self.value


@dataclass(frozen=True)
class WireFloat(WireValue):
    """64-bit IEEE 754 float."""

    kind: ClassVar[str] = "float"

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise EncodeError(f"WireFloat requires float, got {type(self.value).__name__}")
        object.__setattr__(self, "value", float(self.value))

    def unwrap(self) -> float:
        return self.value


@dataclass(frozen=True)
class WireStr(WireValue):
    kind: ClassVar[str] = "str"

    value: str

    def unwrap(self) -> str:
        return self.value


@dataclass(frozen=True)
class WireBytes(WireValue):
    kind: ClassVar[str] = "bytes"

    value: bytes

    def unwrap(self) -> bytes:
        return self.value


@dataclass(frozen=True)
class WireSeq(WireValue):
    """Ordered sequence of wire values."""

    kind: ClassVar[str] = "sequence"

    items: tuple[WireValue, ...] = ()

    def __iter__(self) -> Iterator[WireValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> WireValue:
        return self.items[index]

    def unwrap(self) -> list[Any]:
        return [item.unwrap() for item in self.items]


@dataclass(frozen=True, eq=False)
class WireMap(WireValue):
    """String-keyed map of wire values.

    Keys are unique. Insertion order is kept so re-encoding is deterministic,
    but equality ignores it.
    """

    kind: ClassVar[str] = "map"

    entries: tuple[tuple[str, WireValue], ...] = ()
    _index: dict[str, WireValue] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, WireValue] = {}
        for key, value in self.entries:
            if not isinstance(key, str):
                raise ValueError(f"map keys must be str, got {type(key).__name__}")
            if key in index:
                raise ValueError(f"duplicate map key {key!r}")
            index[key] = value
        object.__setattr__(self, "_index", index)

    @classmethod
    def of(cls, mapping: Mapping[str, WireValue]) -> WireMap:
        """Build a map from an ordered mapping of already-wrapped values."""
        return cls(tuple(mapping.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WireMap):
            return NotImplemented
        return self._index == other._index

    def __hash__(self) -> int:
        return hash(frozenset(self.entries))

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __getitem__(self, key: str) -> WireValue:
        return self._index[key]

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str, default: WireValue | None = None) -> WireValue | None:
        return self._index.get(key, default)

    def keys(self) -> list[str]:
        return [key for key, _ in self.entries]

    def items(self) -> tuple[tuple[str, WireValue], ...]:
        return self.entries

    def unwrap(self) -> dict[str, Any]:
        return {key: value.unwrap() for key, value in self.entries}


def _from_reader(obj: Any) -> WireValue:
    """Wrap a value produced by the msgpack reader.

    Containers were already wrapped by the hooks; anything else the reader can
    produce (ext types, timestamps, out-of-range integers) is rejected.
    """
    if isinstance(obj, WireValue):
        return obj
    if obj is None:
        return NIL
    if isinstance(obj, bool):
        return WireBool(obj)
    if isinstance(obj, int):
        if not INT64_MIN <= obj <= INT64_MAX:
            raise ValueError(f"integer {obj} does not fit in signed 64 bits")
        return WireInt(obj)
    if isinstance(obj, float):
        return WireFloat(obj)
    if isinstance(obj, str):
        return WireStr(obj)
    if isinstance(obj, bytes):
        return WireBytes(obj)
    raise ValueError(f"unsupported wire type {type(obj).__name__}")


def _sequence_hook(items: list[Any]) -> WireSeq:
    return WireSeq(tuple(_from_reader(item) for item in items))


def _map_hook(pairs: list[tuple[Any, Any]]) -> WireMap:
    return WireMap(tuple((key, _from_reader(value)) for key, value in pairs))
