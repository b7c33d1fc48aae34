"""Open-shape value type for settings blobs and transforms.

``DynamicValue`` is a named recursive alias so pydantic can validate it without
falling back to ``Any``. Union members are ordered so that a value keeps its
exact scalar type: ``True`` stays ``bool``, ``1`` stays ``int`` and ``2.5``
stays ``float``.
"""

from __future__ import annotations

from typing import Dict, List, Union  # noqa: F401  (referenced by the alias string)

from typing_extensions import TypeAliasType

DynamicValue = TypeAliasType(
    "DynamicValue",
    "Union[None, bool, int, float, str, bytes, List[DynamicValue], Dict[str, DynamicValue]]",
)

# Settings objects and scene item transforms are always maps at the top level.
DynamicMap = Dict[str, DynamicValue]

__all__ = ["DynamicValue", "DynamicMap"]
