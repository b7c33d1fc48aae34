"""End-to-end integration tests."""

from __future__ import annotations

from typing import Any, List, Optional

import msgpack
import pytest

from obswire import (
    AvailableTransition,
    BaseMessage,
    BasicSceneItem,
    BlendingType,
    Input,
    InputVolumeMeter,
    Output,
    OutputFlags,
    SceneItem,
    SourceFilter,
    SourceType,
    UnknownEnumSymbol,
    WireField,
    WireMap,
    WireValue,
    decode,
    encode,
    from_wire,
    to_wire,
)
from obswire.wire import WireSeq


class OutputList(BaseMessage):
    """Response data of GetOutputList."""

    outputs: List[Output] = WireField("outputs")


class SceneItemList(BaseMessage):
    """Response data of GetSceneItemList."""

    items: List[SceneItem] = WireField("sceneItems")


class SceneTransitionList(BaseMessage):
    """Response data of GetSceneTransitionList."""

    current_name: Optional[str] = WireField("currentSceneTransitionName", default=None)
    current_kind: Optional[str] = WireField("currentSceneTransitionKind", default=None)
    transitions: List[AvailableTransition] = WireField("transitions")


class InputVolumeMeters(BaseMessage):
    """Data of the InputVolumeMeters event."""

    inputs: List[InputVolumeMeter] = WireField("inputs")


def response(request_type: str, data: dict[str, Any]) -> bytes:
    """Build a RequestResponse (op 7) message around ``data``."""
    return msgpack.packb(
        {
            "op": 7,
            "d": {
                "requestType": request_type,
                "requestId": "f819dcf0-89cc-11eb-8f0e-382c4ac93b9c",
                "requestStatus": {"result": True, "code": 100},
                "responseData": data,
            },
        },
        use_bin_type=True,
    )


def response_data(message: bytes) -> WireValue:
    """Pull responseData out of a response envelope."""
    envelope = WireValue.from_bytes(message)
    assert isinstance(envelope, WireMap)
    inner = envelope["d"]
    assert isinstance(inner, WireMap)
    return inner["responseData"]


class TestRequestResponses:
    """Test decoding entities out of full protocol messages."""

    def test_output_list(self, output_map: dict[str, Any]) -> None:
        """Test GetOutputList with a stream and a virtual camera."""
        virtualcam = {
            "outputName": "virtualcam_output",
            "outputKind": "virtualcam_output",
            "outputWidth": 0,
            "outputHeight": 0,
            "outputActive": False,
            "outputFlags": {"OBS_OUTPUT_VIDEO": True},
        }
        message = response("GetOutputList", {"outputs": [output_map, virtualcam]})
        outputs = from_wire(OutputList, response_data(message)).outputs

        assert [o.name for o in outputs] == ["adv_stream", "virtualcam_output"]
        assert OutputFlags.SERVICE in outputs[0].flags
        assert outputs[1].flags == OutputFlags.VIDEO
        assert not outputs[1].active

    def test_scene_item_list(self, scene_item_map: dict[str, Any]) -> None:
        """Test GetSceneItemList with a detailed and a sparse item."""
        sparse = {"sceneItemId": 9, "sceneItemIndex": 0, "sourceName": "Scene 2"}
        message = response("GetSceneItemList", {"sceneItems": [sparse, scene_item_map]})
        items = from_wire(SceneItemList, response_data(message)).items

        assert items[0].source_name == "Scene 2"
        assert items[0].transform is None
        assert "transform" not in items[0].model_fields_set
        assert items[1].blend_mode is BlendingType.NORMAL
        assert items[1].source_type is SourceType.INPUT
        assert items[1].transform is not None
        assert items[1].transform["positionX"] == 12.5

    def test_transition_list(self) -> None:
        """Test GetSceneTransitionList."""
        data = {
            "currentSceneTransitionName": "Fade",
            "currentSceneTransitionKind": "fade_transition",
            "transitions": [
                {
                    "transitionName": "Cut",
                    "transitionKind": "cut_transition",
                    "transitionFixed": True,
                    "transitionConfigurable": False,
                },
                {
                    "transitionName": "Fade",
                    "transitionKind": "fade_transition",
                    "transitionFixed": False,
                    "transitionConfigurable": False,
                },
            ],
        }
        transitions = from_wire(SceneTransitionList, response_data(response("x", data)))

        assert transitions.current_name == "Fade"
        assert [t.fixed for t in transitions.transitions] == [True, False]

    def test_filter_list(self, filter_map: dict[str, Any]) -> None:
        """Test filter settings keep their numeric types."""
        filter_map["filterSettings"]["lut_file"] = "/tmp/lut.png"
        message = response("GetSourceFilterList", {"filters": [filter_map]})
        raw_filters = response_data(message)
        assert isinstance(raw_filters, WireMap)

        filters = raw_filters["filters"]
        assert isinstance(filters, WireSeq)
        source_filter = from_wire(SourceFilter, filters[0])

        assert source_filter.settings == {
            "gamma": 0.25,
            "contrast": 1,
            "saturation": -0.5,
            "lut_file": "/tmp/lut.png",
        }
        assert type(source_filter.settings["contrast"]) is int

    def test_input(self) -> None:
        """Test GetInputList entries."""
        data = {
            "inputName": "Mic/Aux",
            "inputKind": "pulse_input_capture",
            "unversionedInputKind": "pulse_input_capture",
            "inputUuid": "0f0e...",
        }
        entity = decode(Input, msgpack.packb(data))

        assert entity.unversioned_kind == "pulse_input_capture"
        assert "inputUuid" not in to_wire(entity)


class TestEvents:
    """Test decoding high-volume events."""

    def test_volume_meters(self) -> None:
        """Test InputVolumeMeters with mixed integer and float levels."""
        event = {
            "inputs": [
                {
                    "inputName": "Desktop Audio",
                    "inputUuid": "a1",
                    "inputLevelsMul": [[0.25, 0.5, 0.5], [0, 0, 0]],
                },
                {"inputName": "Mic", "inputUuid": "b2", "inputLevelsMul": []},
            ]
        }
        meters = decode(InputVolumeMeters, msgpack.packb(event)).inputs

        assert meters[0].level[1] == [0.0, 0.0, 0.0]
        assert meters[1].level == []


class TestStateSync:
    """Test the read-modify-write cycle a client performs."""

    def test_modified_item_reencodes_only_what_was_received(
        self, scene_item_map: dict[str, Any]
    ) -> None:
        """Test changing one field leaves the others byte-identical."""
        item = decode(SceneItem, msgpack.packb(scene_item_map))
        moved = item.model_copy(update={"index": 4})

        reencoded = msgpack.unpackb(encode(moved))
        assert reencoded == {**scene_item_map, "sceneItemIndex": 4}

    def test_reindex_result(self) -> None:
        """Test the basic scene item shape used after reordering."""
        item = BasicSceneItem(id=3, index=2)
        assert decode(BasicSceneItem, encode(item)) == item

    def test_version_skew(self, scene_item_map: dict[str, Any]) -> None:
        """Test a newer enum symbol fails loudly while new keys are tolerated."""
        scene_item_map["sceneItemUuid"] = "c0ffee"
        assert decode(SceneItem, msgpack.packb(scene_item_map)).source_name == "Browser"

        scene_item_map["sourceType"] = "OBS_SOURCE_TYPE_AUDIO_GROUP"
        with pytest.raises(UnknownEnumSymbol):
            decode(SceneItem, msgpack.packb(scene_item_map))
