"""Block factory: turns a raw schema tree into a tree of blocks.

The factory checks the two fields every node needs (``key`` and ``type``),
picks the block class registered for the type tag, resolves the node into an
immutable spec and instantiates the block. Composite blocks call back into
:func:`build_block` for their children, so a whole schema tree is validated
before the first encode or decode.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..exceptions import InvalidType, MissingKey
from .base import Block
from .composite import ArrayBlock, ObjectBlock
from .enums import CategoriesBlock, StepsBlock
from .scalars import BinaryBlock, BooleanBlock, FloatBlock, IntegerBlock, PadBlock
from .spec import resolve_spec
from .string import StringBlock

logger = logging.getLogger(__name__)

BLOCK_TYPES: dict[str, type[Block]] = {
    "boolean": BooleanBlock,
    "binary": BinaryBlock,
    "integer": IntegerBlock,
    "float": FloatBlock,
    "pad": PadBlock,
    "array": ArrayBlock,
    "object": ObjectBlock,
    "string": StringBlock,
    "steps": StepsBlock,
    "categories": CategoriesBlock,
}


def build_block(schema: Mapping[str, Any] | Block) -> Block:
    """Validate a schema node and build its block.

    Args:
        schema: Raw schema node (a mapping), or an already built block which is
            returned unchanged

    Returns:
        Block instance for the node, children included

    Raises:
        MissingKey: ``key``, ``type`` or a required field is absent
        InvalidType: ``key`` is not a string, ``type`` is unknown, or a field
            has the wrong type
        UnexpectedKey: The node has a field its type does not declare
        UnsortedSteps: Steps thresholds are not strictly ascending
        BadNamesLength: Steps names do not match the thresholds

    Example:
        >>> block = build_block({"key": "depth", "type": "integer", "bits": 8})
        >>> block.encode(42)
        '00101010'
    """
    if isinstance(schema, Block):
        return schema
    if not isinstance(schema, Mapping):
        raise InvalidType(f"Block {schema!r} must be a mapping")

    if "key" not in schema:
        raise MissingKey(f"Block {dict(schema)!r} must have 'key'.")
    key = schema["key"]
    if not isinstance(key, str):
        raise InvalidType(f"Block {key!r} 'key' must be a string.")
    if "type" not in schema:
        raise MissingKey(f"Block '{key}' must have 'type'.")

    block_type = schema["type"]
    block_class = BLOCK_TYPES.get(block_type) if isinstance(block_type, str) else None
    if block_class is None:
        raise InvalidType(
            f"Block '{key}' has type: {block_type!r}, should be one of: "
            f"{', '.join(BLOCK_TYPES)}."
        )

    spec = resolve_spec(block_class.spec_model, schema)
    block = block_class(spec)
    logger.debug("Built %r (%s bits)", block, "variable" if block.bits is None else block.bits)
    return block
