"""Exception hierarchy for obswire.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from ObswireError for easy catching of any obswire-specific error.
"""

from __future__ import annotations


class ObswireError(Exception):
    """Base exception for all obswire errors."""

    pass


class SchemaError(ObswireError):
    """Raised when an entity or symbol table definition is invalid.

    Examples:
        - Flag or enum member without a wire symbol
        - Two members sharing the same wire symbol
        - Two fields sharing the same wire key
        - Unsupported field annotation
    """

    pass


class EncodeError(ObswireError):
    """Raised when encoding an entity fails.

    Examples:
        - Field value of the wrong Python type
        - Value outside the dynamic value space (sets, arbitrary objects)
        - Integer outside the signed 64-bit range
    """

    pass


class DecodeError(ObswireError):
    """Raised when decoding wire data fails.

    Examples:
        - Malformed MessagePack bytes
        - Required field missing from a wire map
        - Unknown enum symbol (protocol version skew)
        - Wire value of the wrong kind for a field
    """

    pass


class MalformedWireData(DecodeError):
    """Raised when a byte stream does not parse into a wire value tree.

    Attributes:
        offset: Byte offset where the inconsistency was detected
    """

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} (at byte offset {offset})")
        self.offset = offset


class MissingField(DecodeError):
    """Raised when a required field is absent from a decoded wire map.

    Attributes:
        field: Python field name
        wire_key: Wire key that was looked up
        entity: Name of the entity being decoded
    """

    def __init__(self, field: str, wire_key: str, entity: str) -> None:
        super().__init__(f"{entity}.{field}: required wire key {wire_key!r} is missing")
        self.field = field
        self.wire_key = wire_key
        self.entity = entity


class UnknownEnumSymbol(DecodeError):
    """Raised when a symbolic string is not in the closed set of an enum type.

    This usually means the remote tool speaks a newer protocol version.

    Attributes:
        symbol: The offending string
        enum_name: Name of the target enumeration type
    """

    def __init__(self, symbol: str, enum_name: str) -> None:
        super().__init__(f"unknown {enum_name} symbol {symbol!r}")
        self.symbol = symbol
        self.enum_name = enum_name


class TypeMismatch(DecodeError):
    """Raised when a wire value has the wrong kind for its declared field.

    Attributes:
        field: Field (or wire key) being decoded, if known
        expected: Expected wire kind
        actual: Wire kind actually found
    """

    def __init__(self, expected: str, actual: str, field: str | None = None) -> None:
        where = f"{field}: " if field else ""
        super().__init__(f"{where}expected {expected}, got {actual}")
        self.field = field
        self.expected = expected
        self.actual = actual
