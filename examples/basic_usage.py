#!/usr/bin/env python3
"""Basic usage example for spos.

This example demonstrates:
1. Describing a payload with a block schema
2. Encoding a record to a bit-string
3. Decoding it back to a record
4. Calculating message sizes
"""

from __future__ import annotations

import json

from spos import bits_to_hex, build_block, decode, encode, field_sizes

STATUS_SCHEMA = {
    "key": "status",
    "type": "object",
    "items": [
        {"key": "version", "type": "integer", "bits": 3, "value": 1},
        {"key": "vehicle_id", "type": "integer", "bits": 8},
        {"key": "depth", "type": "float", "bits": 12, "lower": 0, "upper": 100},
        {
            "key": "battery",
            "type": "steps",
            "steps": [10, 50, 90],
            "steps_names": ["critical", "low", "ok", "full"],
        },
        {"key": "mode", "type": "categories", "categories": ["idle", "transit", "survey"]},
        {"key": "active", "type": "boolean"},
        {"key": "position.lat", "type": "float", "bits": 16, "lower": -90, "upper": 90},
        {"key": "position.lon", "type": "float", "bits": 16, "lower": -180, "upper": 180},
    ],
}


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("spos Basic Usage Example")
    print("=" * 60)
    print()

    record = {
        "vehicle_id": 42,
        "depth": 25.3,
        "battery": 87,
        "mode": "survey",
        "active": True,
        "position": {"lat": 43.71, "lon": 10.40},
    }

    print("1. Building the status block...")
    block = build_block(STATUS_SCHEMA)
    print(f"   Fixed size: {block.bits} bits")
    print()

    print("2. Encoding to a bit-string...")
    message = encode(record, block)
    print(f"   Bits: {message}")
    print(f"   Hex: {bits_to_hex(message)}")
    print()

    print("3. Analyzing field sizes...")
    for key, bits in field_sizes(message, block).items():
        print(f"   {key}: {bits} bits")
    print()

    print("4. Decoding from bits...")
    decoded = decode(message, block)
    print(f"   {decoded}")
    print()

    print("5. Comparing to naive JSON encoding...")
    json_bytes = len(json.dumps(record).encode("utf-8"))
    message_bytes = (len(message) + 7) // 8
    print(f"   spos size: {message_bytes} bytes")
    print(f"   JSON size: {json_bytes} bytes")
    print(f"   Compression ratio: {json_bytes / message_bytes:.1f}x")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
