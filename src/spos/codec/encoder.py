"""Top-level encoder.

This module provides the encode() function that turns a value into a
bit-string using a block schema.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..blocks import Block, build_block

logger = logging.getLogger(__name__)


def encode(value: Any, schema: Mapping[str, Any] | Block) -> str:
    """Encode a value to a bit-string.

    Fields are encoded in schema order and concatenated with no delimiters,
    header or padding.

    Args:
        value: Value described by the schema (a record for object schemas)
        schema: Raw schema node, or a block built once with ``build_block``
            and reused across calls

    Returns:
        Bit-string of '0'/'1' characters

    Raises:
        SchemaError: If the schema is invalid
        EncodeError: If the value cannot be encoded

    Examples:
        ```python
        from spos import encode

        schema = {
            "key": "status",
            "type": "object",
            "items": [
                {"key": "vehicle_id", "type": "integer", "bits": 8},
                {"key": "active", "type": "boolean"},
            ],
        }
        encode({"vehicle_id": 42, "active": True}, schema)
        # '001010101'
        ```
    """
    block = build_block(schema)
    message = block.encode(value)
    logger.debug("Encoded '%s' into %d bits", block.key, len(message))
    return message
