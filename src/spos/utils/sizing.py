"""Message size calculation utilities.

This module provides functions to find out how many bits a schema, a value
or a message takes, without decoding it by hand.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..blocks import Block, ObjectBlock, build_block
from ..exceptions import SchemaError


def fixed_bits(schema: Mapping[str, Any] | Block) -> int | None:
    """Return the width of a schema whose size does not depend on the data.

    Args:
        schema: Raw schema node or built block

    Returns:
        Width in bits, or None when the schema contains an array

    Example:
        >>> fixed_bits({"key": "id", "type": "integer", "bits": 8})
        8
        >>> fixed_bits({"key": "xs", "type": "array", "bits": 4,
        ...             "blocks": {"key": "x", "type": "boolean"}}) is None
        True
    """
    return build_block(schema).bits


def encoded_bits(value: Any, schema: Mapping[str, Any] | Block) -> int:
    """Calculate how many bits ``value`` takes when encoded with ``schema``.

    Args:
        value: Value to measure
        schema: Raw schema node or built block

    Returns:
        Size in bits

    Raises:
        SchemaError: If the schema is invalid
        EncodeError: If the value cannot be encoded
    """
    block = build_block(schema)
    if block.bits is not None:
        return block.bits
    return len(block.encode(value))


def field_sizes(message: str, schema: Mapping[str, Any] | Block) -> dict[str, int]:
    """Get the size in bits of each top-level field in an encoded message.

    Args:
        message: Bit-string encoded with ``schema``
        schema: Raw object schema node or built object block

    Returns:
        Dictionary mapping field keys to their size in bits, in schema order

    Raises:
        SchemaError: If the schema is not an object schema

    Example:
        >>> field_sizes("001010101", status_schema)
        {'vehicle_id': 8, 'active': 1}
    """
    block = build_block(schema)
    if not isinstance(block, ObjectBlock):
        raise SchemaError(f"field_sizes needs an object schema, got '{block.spec.type}'")

    sizes: dict[str, int] = {}
    for field_block in block.blocklist:
        bits = field_block.bit_length(message)
        sizes[field_block.key] = bits
        message = message[bits:]
    return sizes
