#!/usr/bin/env python3
"""Basic usage example for obswire.

This example demonstrates:
1. Building an entity in Python
2. Encoding it to MessagePack
3. Decoding a payload as the remote tool sends it
4. Keeping absent and explicit-nil fields apart
"""

from __future__ import annotations

import msgpack

from obswire import (
    BlendingType,
    Output,
    OutputFlags,
    SceneItem,
    UnknownEnumSymbol,
    decode,
    encode,
    schema_for,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("obswire Basic Usage Example")
    print("=" * 60)
    print()

    # Create an entity
    print("1. Creating an output...")
    output = Output(
        name="adv_stream",
        kind="rtmp_output",
        width=1920,
        height=1080,
        active=True,
        flags=OutputFlags.VIDEO | OutputFlags.AUDIO | OutputFlags.ENCODED,
    )
    print(f"   {output.name} ({output.kind}) {output.width}x{output.height}")
    print()

    # Inspect the field table
    print("2. Wire layout...")
    for name, wire_key, type_name, optional in schema_for(Output).describe():
        print(f"   {name:<8} -> {wire_key:<14} {type_name}{' (optional)' if optional else ''}")
    print()

    # Encode
    print("3. Encoding to MessagePack...")
    data = encode(output)
    print(f"   Encoded size: {len(data)} bytes")
    print(f"   Flags map: {msgpack.unpackb(data)['outputFlags']}")
    print()

    # Decode and verify
    print("4. Verifying round-trip...")
    if decode(Output, data) == output:
        print("   ✓ Round-trip successful! Entities match.")
    else:
        print("   ✗ Round-trip failed! Entities don't match.")
    print()

    # Optional fields
    print("5. Decoding a sparse scene item...")
    payload = msgpack.packb(
        {
            "sceneItemId": 3,
            "sceneItemIndex": 1,
            "sceneItemBlendMode": "OBS_BLEND_SCREEN",
            "isGroup": None,
            "sceneItemUuid": "ignored",
        }
    )
    item = decode(SceneItem, payload)
    print(f"   Blend mode: {item.blend_mode}")
    print(f"   Fields present: {sorted(item.model_fields_set)}")
    print(f"   Re-encoded keys: {list(msgpack.unpackb(encode(item)))}")
    assert item.blend_mode is BlendingType.SCREEN
    print()

    # Version skew
    print("6. Decoding an unknown blend mode...")
    try:
        newer = {**msgpack.unpackb(payload), "sceneItemBlendMode": "OBS_BLEND_OVERLAY"}
        decode(SceneItem, msgpack.packb(newer))
    except UnknownEnumSymbol as e:
        print(f"   Rejected: {e}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
