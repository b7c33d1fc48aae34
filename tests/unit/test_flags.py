"""Unit tests for the bitmask-as-map codec."""

from __future__ import annotations

import enum
import logging

import pytest

from obswire import OutputFlags, decode_flags, encode_flags
from obswire.exceptions import EncodeError, TypeMismatch
from obswire.wire import NIL, WireBool, WireInt, WireMap, WireStr

ALL_SYMBOLS = [
    "OBS_OUTPUT_VIDEO",
    "OBS_OUTPUT_AUDIO",
    "OBS_OUTPUT_ENCODED",
    "OBS_OUTPUT_SERVICE",
    "OBS_OUTPUT_MULTI_TRACK",
    "OBS_OUTPUT_CAN_PAUSE",
]


def flag_map(**values: bool) -> WireMap:
    return WireMap(tuple((f"OBS_OUTPUT_{name}", WireBool(value)) for name, value in values.items()))


class TestDecodeFlags:
    """Test decoding flag maps."""

    def test_set_bits(self) -> None:
        """Test true entries set their bits."""
        wire = flag_map(VIDEO=True, AUDIO=True, ENCODED=False)
        assert decode_flags(wire, OutputFlags) == OutputFlags.VIDEO | OutputFlags.AUDIO

    def test_absent_known_flags_are_unset(self) -> None:
        """Test a partial map only sets what it names."""
        assert decode_flags(flag_map(CAN_PAUSE=True), OutputFlags) == OutputFlags.CAN_PAUSE

    def test_empty_map(self) -> None:
        """Test an empty map decodes to no flags."""
        mask = decode_flags(WireMap(), OutputFlags)
        assert mask == OutputFlags(0)
        assert isinstance(mask, OutputFlags)

    def test_unknown_flag_is_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test an unknown symbol does not change the result."""
        known = flag_map(VIDEO=True, SERVICE=True)
        with_unknown = WireMap(known.entries + (("OBS_OUTPUT_FUTURE", WireBool(True)),))

        with caplog.at_level(logging.DEBUG, logger="obswire.codec.flags"):
            assert decode_flags(with_unknown, OutputFlags) == decode_flags(known, OutputFlags)
        assert "OBS_OUTPUT_FUTURE" in caplog.text

    def test_unknown_flag_value_is_not_checked(self) -> None:
        """Test unknown symbols are skipped before their value is looked at."""
        wire = WireMap((("OBS_OUTPUT_FUTURE", WireStr("yes")),))
        assert decode_flags(wire, OutputFlags) == OutputFlags(0)

    def test_not_a_map(self) -> None:
        """Test a non-map wire value."""
        with pytest.raises(TypeMismatch) as exc_info:
            decode_flags(WireInt(3), OutputFlags)
        assert exc_info.value.expected == "map"
        assert exc_info.value.actual == "int"

    def test_non_bool_value(self) -> None:
        """Test a known symbol with a non-boolean value."""
        wire = WireMap((("OBS_OUTPUT_VIDEO", WireInt(1)),))
        with pytest.raises(TypeMismatch) as exc_info:
            decode_flags(wire, OutputFlags)
        assert exc_info.value.field == "OBS_OUTPUT_VIDEO"

    def test_nil_value(self) -> None:
        """Test a known symbol set to nil."""
        with pytest.raises(TypeMismatch):
            decode_flags(WireMap((("OBS_OUTPUT_AUDIO", NIL),)), OutputFlags)


class TestEncodeFlags:
    """Test encoding bitmasks."""

    def test_all_symbols_emitted(self) -> None:
        """Test unset flags are emitted as false, in bit order."""
        wire = encode_flags(OutputFlags.AUDIO, OutputFlags)

        assert wire.keys() == ALL_SYMBOLS
        assert wire["OBS_OUTPUT_AUDIO"] == WireBool(True)
        assert all(wire[s] == WireBool(False) for s in ALL_SYMBOLS if s != "OBS_OUTPUT_AUDIO")

    def test_zero(self) -> None:
        """Test an empty mask still produces the full map."""
        wire = encode_flags(OutputFlags(0), OutputFlags)
        assert len(wire) == len(ALL_SYMBOLS)
        assert all(value == WireBool(False) for _, value in wire.items())

    def test_plain_int(self) -> None:
        """Test a plain integer is accepted as a mask."""
        assert encode_flags(0b11, OutputFlags) == encode_flags(
            OutputFlags.VIDEO | OutputFlags.AUDIO, OutputFlags
        )

    def test_unnamed_bits_dropped(self) -> None:
        """Test bits without a symbol are not emitted."""
        assert encode_flags((1 << 10) | 1, OutputFlags) == encode_flags(1, OutputFlags)

    def test_wrong_type(self) -> None:
        """Test non-integer values."""
        with pytest.raises(EncodeError):
            encode_flags("VIDEO", OutputFlags)  # type: ignore[arg-type]
        with pytest.raises(EncodeError):
            encode_flags(True, OutputFlags)

    def test_roundtrip_reproduces_full_map(self) -> None:
        """Test decode then encode fills in the implied false entries."""
        wire = flag_map(VIDEO=True, ENCODED=True)
        encoded = encode_flags(decode_flags(wire, OutputFlags), OutputFlags)

        assert encoded.keys() == ALL_SYMBOLS
        assert encoded["OBS_OUTPUT_VIDEO"] == WireBool(True)
        assert encoded["OBS_OUTPUT_ENCODED"] == WireBool(True)
        assert encoded["OBS_OUTPUT_AUDIO"] == WireBool(False)


class TestPlainFlag:
    """Test flag classes that are not IntFlag."""

    def test_enum_flag(self) -> None:
        """Test an enum.Flag subclass with explicit symbols."""
        from obswire import wire_symbols

        @wire_symbols({"READ": "CAN_READ", "WRITE": "CAN_WRITE"})
        class Access(enum.Flag):
            READ = enum.auto()
            WRITE = enum.auto()

        wire = encode_flags(Access.WRITE, Access)
        assert wire == WireMap((("CAN_READ", WireBool(False)), ("CAN_WRITE", WireBool(True))))
        assert decode_flags(wire, Access) == Access.WRITE
