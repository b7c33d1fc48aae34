"""Pydantic entity modeling for obswire.

This module provides the BaseMessage class, field helpers, the dynamic value
type and the symbol tables used by flag and enum fields.
"""

from __future__ import annotations

from .base import BaseMessage
from .dynamic import DynamicMap, DynamicValue
from .fields import FlagsField, WireField
from .symbols import SymbolTable, symbols_of, wire_symbols

__all__ = [
    "BaseMessage",
    "WireField",
    "FlagsField",
    "DynamicValue",
    "DynamicMap",
    "SymbolTable",
    "symbols_of",
    "wire_symbols",
]
