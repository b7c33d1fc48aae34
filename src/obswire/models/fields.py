"""Field helpers binding entity fields to wire keys.

These are thin wrappers around Pydantic's Field() that make the wire key the
first, mandatory argument and store obswire options as field metadata.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

REJECT_EMPTY = "obswire_reject_empty"


def WireField(key: str, **kwargs: Any) -> FieldInfo:
    """Create a field bound to the wire key ``key``.

    Args:
        key: Lower-camel-case wire key, exactly as the remote tool publishes it
        **kwargs: Additional Field() arguments (default, description, etc.)

    Example:
        >>> class Scene(BaseMessage):
        ...     name: str = WireField("sceneName")
        ...     index: int = WireField("sceneIndex")
    """
    return cast(FieldInfo, Field(alias=key, **kwargs))


def FlagsField(key: str, *, reject_empty: bool = False, **kwargs: Any) -> FieldInfo:
    """Create a bitmask field encoded as a map of flag symbols.

    Args:
        key: Wire key of the flags map
        reject_empty: Treat a mask with no bit set as invalid on decode and encode
        **kwargs: Additional Field() arguments

    Example:
        >>> class Output(BaseMessage):
        ...     flags: OutputFlags = FlagsField("outputFlags", reject_empty=True)
    """
    return cast(
        FieldInfo,
        Field(alias=key, json_schema_extra={REJECT_EMPTY: reject_empty}, **kwargs),
    )


def field_option(field_info: FieldInfo, name: str, default: Any = None) -> Any:
    """Read an obswire option stored by one of the helpers above."""
    extra = field_info.json_schema_extra
    if isinstance(extra, dict):
        return extra.get(name, default)
    return default
