"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def output_map() -> dict[str, Any]:
    """GetOutputList entry for a running stream output."""
    return {
        "outputName": "adv_stream",
        "outputKind": "rtmp_output",
        "outputWidth": 1920,
        "outputHeight": 1080,
        "outputActive": True,
        "outputFlags": {
            "OBS_OUTPUT_VIDEO": True,
            "OBS_OUTPUT_AUDIO": True,
            "OBS_OUTPUT_ENCODED": True,
            "OBS_OUTPUT_SERVICE": True,
            "OBS_OUTPUT_MULTI_TRACK": False,
            "OBS_OUTPUT_CAN_PAUSE": False,
        },
    }


@pytest.fixture
def scene_item_map() -> dict[str, Any]:
    """GetSceneItemList entry for a browser source."""
    return {
        "sceneItemId": 3,
        "sceneItemIndex": 1,
        "sceneItemEnabled": True,
        "sceneItemLocked": False,
        "sceneItemTransform": {
            "alignment": 5,
            "boundsType": "OBS_BOUNDS_NONE",
            "cropLeft": 0,
            "positionX": 12.5,
            "rotation": 0.0,
            "scaleX": 1.0,
        },
        "sceneItemBlendMode": "OBS_BLEND_NORMAL",
        "sourceName": "Browser",
        "sourceType": "OBS_SOURCE_TYPE_INPUT",
        "inputKind": "browser_source",
        "isGroup": None,
    }


@pytest.fixture
def filter_map() -> dict[str, Any]:
    """GetSourceFilterList entry for a color correction filter."""
    return {
        "filterName": "Color Correction",
        "filterIndex": 0,
        "filterKind": "color_filter_v2",
        "filterEnabled": True,
        "filterSettings": {"gamma": 0.25, "contrast": 1, "saturation": -0.5},
    }
