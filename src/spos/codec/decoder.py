"""Top-level decoder.

This module provides the decode() function that turns a bit-string back into
a value using a block schema.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..blocks import Block, build_block
from ..exceptions import MalformedBitstring
from ..utils.predicates import is_bin

logger = logging.getLogger(__name__)


def decode(message: str, schema: Mapping[str, Any] | Block) -> Any:
    """Decode a bit-string to a value.

    The schema must be the one the message was encoded with; nothing in the
    message identifies it. Bits left over after the schema is fully decoded
    are ignored.

    Args:
        message: Bit-string of '0'/'1' characters
        schema: Raw schema node, or a prebuilt block

    Returns:
        Decoded value

    Raises:
        SchemaError: If the schema is invalid
        MalformedBitstring: If the message has characters other than '0'/'1'
        TruncatedBitstring: If the message ends before the schema does
    """
    if message and not is_bin(message):
        raise MalformedBitstring(f"Message {message!r} is not a bit-string")

    block = build_block(schema)
    value, remainder = block.consume(message)
    if remainder:
        logger.debug("Ignoring %d trailing bits after '%s'", len(remainder), block.key)
    return value
