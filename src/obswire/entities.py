"""OBS WebSocket entities that need more than a one-to-one field mapping.

Wire keys follow the obs-websocket v5 protocol exactly. Each class notes the
place in obs-websocket that produces it.
"""

from __future__ import annotations

import enum
from typing import List, Optional

from .models import BaseMessage, DynamicMap, FlagsField, WireField, wire_symbols


@wire_symbols(prefix="OBS_OUTPUT_")
class OutputFlags(enum.IntFlag):
    """Output capability flags (``obs_output_get_flags``)."""

    VIDEO = 1 << 0
    AUDIO = 1 << 1
    ENCODED = 1 << 2
    SERVICE = 1 << 3
    MULTI_TRACK = 1 << 4
    CAN_PAUSE = 1 << 5


@wire_symbols(prefix="OBS_BLEND_")
class BlendingType(enum.Enum):
    """Scene item blending mode (``obs_blending_type``)."""

    NORMAL = 0
    ADDITIVE = 1
    SUBTRACT = 2
    SCREEN = 3
    MULTIPLY = 4
    LIGHTEN = 5
    DARKEN = 6


@wire_symbols(prefix="OBS_SOURCE_TYPE_")
class SourceType(enum.Enum):
    """Kind of source behind a scene item (``obs_source_type``)."""

    INPUT = 0
    FILTER = 1
    TRANSITION = 2
    SCENE = 3


class Output(BaseMessage):
    """An output: streaming, recording, virtual camera and the like.

    Outputs may receive raw or encoded data; ``flags`` says which.
    """

    name: str = WireField("outputName")
    # e.g. ffmpeg_muxer, virtualcam_output
    kind: str = WireField("outputKind")
    width: int = WireField("outputWidth")
    height: int = WireField("outputHeight")
    active: bool = WireField("outputActive")
    flags: OutputFlags = FlagsField("outputFlags")


class Scene(BaseMessage):
    """Entry of a scene list."""

    name: str = WireField("sceneName")
    index: int = WireField("sceneIndex")


class InputVolumeMeter(BaseMessage):
    """Per-channel levels of one input, as sent by the InputVolumeMeters event."""

    name: str = WireField("inputName")
    uuid: str = WireField("inputUuid")
    # One [magnitude, peak, input_peak] triple per audio channel
    level: List[List[float]] = WireField("inputLevelsMul")


class Input(BaseMessage):
    name: str = WireField("inputName")
    # e.g. color_source_v3
    kind: str = WireField("inputKind")
    # e.g. color_source
    unversioned_kind: str = WireField("unversionedInputKind")


class BasicSceneItem(BaseMessage):
    """Scene item as returned after reindexing: id and position only."""

    id: int = WireField("sceneItemId")
    index: int = WireField("sceneItemIndex")


class SceneItem(BasicSceneItem):
    """Scene item with its optional details.

    Every detail may be missing depending on the request that produced it.
    ``transform`` is an open-shape map (positionX, scaleY, cropLeft, ...).
    """

    enabled: Optional[bool] = WireField("sceneItemEnabled", default=None)
    locked: Optional[bool] = WireField("sceneItemLocked", default=None)
    transform: Optional[DynamicMap] = WireField("sceneItemTransform", default=None)
    blend_mode: Optional[BlendingType] = WireField("sceneItemBlendMode", default=None)
    source_name: Optional[str] = WireField("sourceName", default=None)
    source_type: Optional[SourceType] = WireField("sourceType", default=None)
    input_kind: Optional[str] = WireField("inputKind", default=None)
    is_group: Optional[bool] = WireField("isGroup", default=None)


class SourceFilter(BaseMessage):
    name: str = WireField("filterName")
    index: int = WireField("filterIndex")
    kind: str = WireField("filterKind")
    enabled: bool = WireField("filterEnabled")
    settings: DynamicMap = WireField("filterSettings")


class AvailableTransition(BaseMessage):
    """Entry of the scene transition list."""

    name: str = WireField("transitionName")
    kind: str = WireField("transitionKind")
    # Duration cannot be configured
    fixed: bool = WireField("transitionFixed")
    configurable: bool = WireField("transitionConfigurable")


__all__ = [
    "OutputFlags",
    "BlendingType",
    "SourceType",
    "Output",
    "Scene",
    "InputVolumeMeter",
    "Input",
    "BasicSceneItem",
    "SceneItem",
    "SourceFilter",
    "AvailableTransition",
]
