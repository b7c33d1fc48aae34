"""Closed symbol tables for flag and enum types.

The wire format names flag bits and enum values by symbolic strings
(``OBS_OUTPUT_VIDEO``, ``OBS_BLEND_NORMAL``). The ``wire_symbols`` decorator
binds each member of an ``enum.Enum`` or ``enum.IntFlag`` to exactly one such
string when the class is defined, so a missing or duplicated symbol fails at
import time instead of on the wire.

Example:
    >>> @wire_symbols(prefix="OBS_OUTPUT_")
    ... class OutputFlags(enum.IntFlag):
    ...     VIDEO = 1 << 0
    ...     AUDIO = 1 << 1
    >>> symbols_of(OutputFlags).by_member[OutputFlags.AUDIO]
    'OBS_OUTPUT_AUDIO'
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeVar

from ..exceptions import SchemaError

E = TypeVar("E", bound=type[enum.Enum])

_ATTR = "__wire_symbols__"


@dataclass(frozen=True)
class SymbolTable:
    """Bidirectional member <-> symbol mapping for one enum type.

    Attributes:
        enum_type: The enum or flag class
        by_member: Member -> wire symbol, in definition (bit) order
        by_symbol: Wire symbol -> member
    """

    enum_type: type[enum.Enum]
    by_member: Mapping[enum.Enum, str]
    by_symbol: Mapping[str, enum.Enum]

    @property
    def is_flag(self) -> bool:
        return issubclass(self.enum_type, enum.Flag)

    def __iter__(self) -> Iterator[tuple[enum.Enum, str]]:
        return iter(self.by_member.items())

    def __len__(self) -> int:
        return len(self.by_member)


def _is_single_bit(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


def _canonical_members(enum_type: type[enum.Enum]) -> list[enum.Enum]:
    if issubclass(enum_type, enum.Flag):
        seen: dict[int, enum.Enum] = {}
        for member in enum_type.__members__.values():
            value = int(member.value)
            if _is_single_bit(value) and value not in seen:
                seen[value] = member
        return [seen[bit] for bit in sorted(seen)]
    return list(enum_type)


def build_symbol_table(
    enum_type: type[enum.Enum], names: Mapping[str, str], prefix: str
) -> SymbolTable:
    """Build and validate the symbol table for ``enum_type``.

    Each member's symbol is ``names[member.name]`` if given, otherwise
    ``prefix + member.name``. For flag types only single-bit members get a
    symbol; composite aliases are derived from them.

    Raises:
        SchemaError: If the class is not an enum, ``names`` refers to an unknown
            or composite member, or two members end up with the same symbol
    """
    if not (isinstance(enum_type, type) and issubclass(enum_type, enum.Enum)):
        raise SchemaError(f"wire_symbols requires an Enum or Flag class, got {enum_type!r}")

    members = _canonical_members(enum_type)
    if not members:
        raise SchemaError(f"{enum_type.__name__} has no members to name")

    known = {member.name for member in members}
    for name in names:
        if name not in known:
            raise SchemaError(
                f"{enum_type.__name__}: symbol given for {name!r}, which is not a "
                f"{'single-bit ' if issubclass(enum_type, enum.Flag) else ''}member"
            )

    by_member: dict[enum.Enum, str] = {}
    by_symbol: dict[str, enum.Enum] = {}
    for member in members:
        symbol = names.get(member.name, prefix + member.name)
        if not symbol:
            raise SchemaError(f"{enum_type.__name__}.{member.name}: empty wire symbol")
        if symbol in by_symbol:
            raise SchemaError(
                f"{enum_type.__name__}: symbol {symbol!r} used by both "
                f"{by_symbol[symbol].name} and {member.name}"
            )
        by_member[member] = symbol
        by_symbol[symbol] = member

    return SymbolTable(
        enum_type=enum_type,
        by_member=MappingProxyType(by_member),
        by_symbol=MappingProxyType(by_symbol),
    )


def wire_symbols(
    names: Mapping[str, str] | None = None, *, prefix: str = ""
) -> Callable[[E], E]:
    """Class decorator attaching wire symbols to an enum or flag type.

    Args:
        names: Explicit member name -> symbol overrides
        prefix: Prefix prepended to the member name when no override is given

    Returns:
        Decorator returning the class unchanged apart from its symbol table
    """

    def decorate(enum_type: E) -> E:
        table = build_symbol_table(enum_type, names or {}, prefix)
        setattr(enum_type, _ATTR, table)
        return enum_type

    return decorate


def symbols_of(enum_type: type[enum.Enum]) -> SymbolTable:
    """Return the symbol table attached by ``wire_symbols``.

    Raises:
        SchemaError: If the class was never decorated
    """
    table = enum_type.__dict__.get(_ATTR)
    if not isinstance(table, SymbolTable):
        raise SchemaError(
            f"{enum_type.__name__} has no wire symbols; decorate it with @wire_symbols"
        )
    return table
