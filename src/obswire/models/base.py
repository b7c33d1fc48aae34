"""Base entity class and obswire-specific Pydantic configuration.

This module provides the BaseMessage class that all wire entities inherit from.
Every subclass is registered with the codec registry as soon as pydantic has
finished building it, so its field table exists before the first decode.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class BaseMessage(BaseModel):
    """Base class for all obswire entities.

    Entities declare their fields with Pydantic annotations and bind each one
    to its lower-camel-case wire key through an alias:

    Example:
        >>> from pydantic import Field
        >>> class Scene(BaseMessage):
        ...     name: str = Field(alias="sceneName")
        ...     index: int = Field(alias="sceneIndex")
        >>> Scene(name="Main", index=0).name
        'Main'

    A field with a default may be absent from the wire map; one annotated
    ``Optional[...]`` may carry an explicit nil.

    Freezing is shallow: fields cannot be reassigned, but list fields and
    dynamic maps (settings, transforms) are plain ``list``/``dict`` objects.
    Each decode builds fresh containers, so nothing is shared between
    entities; treat them as read-only and use ``model_copy(update=...)`` to
    derive a changed entity.

    Attributes:
        obswire_ignore_unknown: If True (the default), wire keys that no field
            declares are skipped when decoding. Set to False to reject them.
    """

    model_config = ConfigDict(
        # Decoded entities are never modified in place
        frozen=True,
        # Build by Python name in-process, by wire key (alias) on the wire
        populate_by_name=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
        # Flag and enum members are kept as members, not raw values
        use_enum_values=False,
    )

    obswire_ignore_unknown: ClassVar[bool] = True

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        """Register the finished subclass with the codec registry."""
        super().__pydantic_init_subclass__(**kwargs)

        if not cls.__pydantic_complete__:
            # Forward references pending; registered on first use instead
            return

        # Import here to avoid circular dependency
        from ..codec.registry import register_entity

        register_entity(cls)
