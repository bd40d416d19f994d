"""Block types for spos.

Every schema node is turned into a block by :func:`build_block`. Blocks encode
values to bit-strings and decode bit-strings back to values.
"""

from __future__ import annotations

from .base import Block
from .composite import ArrayBlock, ObjectBlock
from .enums import CategoriesBlock, StepsBlock
from .factory import BLOCK_TYPES, build_block
from .scalars import BinaryBlock, BooleanBlock, FloatBlock, IntegerBlock, PadBlock
from .spec import BlockSpec
from .string import StringBlock

__all__ = [
    "Block",
    "BlockSpec",
    "BLOCK_TYPES",
    "build_block",
    "BooleanBlock",
    "BinaryBlock",
    "IntegerBlock",
    "FloatBlock",
    "PadBlock",
    "StepsBlock",
    "CategoriesBlock",
    "StringBlock",
    "ArrayBlock",
    "ObjectBlock",
]
